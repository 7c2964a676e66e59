"""Factory wiring settings and the renderer registry into new paginators.

``PaginatorFactory`` is the place where environment-driven defaults
(``PaginationSettings``) meet per-call options, so request handlers only
pass what is specific to the listing they are paging.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from pagewindow.domain.models.paginator import Paginator, PaginatorConfig
from pagewindow.infrastructure.settings import PaginationSettings, get_settings
from pagewindow.presentation.renderers.registry import RendererRegistry, get_default_registry

logger = logging.getLogger(__name__)


def parse_page_number(raw: Any) -> int:
    """Coerce a query-string page value; anything unusable becomes page 1."""
    if isinstance(raw, (list, tuple)):
        raw = raw[0] if raw else None
    try:
        page = int(str(raw).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


class PaginatorFactory:
    """Creates paginators pre-configured from settings."""

    def __init__(
        self,
        settings: PaginationSettings | None = None,
        registry: RendererRegistry | None = None,
    ) -> None:
        self._settings = settings if settings is not None else get_settings()
        self._registry = registry if registry is not None else get_default_registry()

    @property
    def settings(self) -> PaginationSettings:
        return self._settings

    @property
    def registry(self) -> RendererRegistry:
        return self._registry

    def default_config(self, **overrides: Any) -> PaginatorConfig:
        values: dict[str, Any] = {
            "page_param_name": self._settings.page_param_name,
            "range": self._settings.range,
            "renderer_name": self._settings.renderer,
        }
        values.update(overrides)
        return PaginatorConfig.from_mapping(values)

    def create(
        self,
        current_page: int,
        per_page: Optional[int] = None,
        total_records: Optional[int] = None,
        **config: Any,
    ) -> Paginator:
        return Paginator(
            current_page,
            per_page if per_page is not None else self._settings.per_page,
            total_records,
            self.default_config(**config),
            registry=self._registry,
        )

    def from_query(
        self,
        query: Mapping[str, Any],
        total_records: Optional[int] = None,
        per_page: Optional[int] = None,
        **config: Any,
    ) -> Paginator:
        """
        Build a paginator from an incoming query mapping.

        The page parameter selects the current page; every other entry is
        carried over as an extra URL parameter so generated links keep the
        listing's filters.
        """

        page_param = config.get("page_param_name", self._settings.page_param_name)
        current_page = parse_page_number(query.get(page_param))

        extra_params = {k: v for k, v in query.items() if k != page_param}
        extra_params.update(config.pop("extra_params", {}) or {})

        logger.debug("Building paginator from query: page=%s params=%s", current_page, sorted(extra_params))
        return self.create(
            current_page,
            per_page,
            total_records,
            extra_params=extra_params,
            **config,
        )


# Module-level singleton
_factory: PaginatorFactory | None = None


def get_factory() -> PaginatorFactory:
    """Return the global factory singleton."""
    global _factory
    if _factory is None:
        _factory = PaginatorFactory()
    return _factory


def reset_factory() -> None:
    """Reset the global factory (for testing)."""
    global _factory
    _factory = None
