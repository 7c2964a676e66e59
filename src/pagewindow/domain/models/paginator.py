"""
Pagination state and page-window derivation.

``Paginator`` holds the current page, page size and optional total record
count of a paged listing, and answers the questions a renderer asks before
drawing navigation: which pages form the visible window, and whether the
first / prev / main / next / last blocks should be shown at all.

Derived values (total pages, window start and end) are computed lazily and
memoized for the lifetime of the instance. Changing ``per_page``, ``range``
or the current page after one of them has been read does not recompute
them; build a new ``Paginator`` instead.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any, Optional, Union

from pagewindow.domain.exceptions import InvalidCurrentPageError
from pagewindow.domain.models.summary import PageSummary
from pagewindow.domain.services.url_builder import build_page_url, replace_page_token

if TYPE_CHECKING:
    from pagewindow.presentation.renderers.base import Renderer
    from pagewindow.presentation.renderers.registry import RendererRegistry

logger = logging.getLogger(__name__)

# ======================================================================
# Defaults
# ======================================================================

DEFAULT_PER_PAGE: int = 15
DEFAULT_RANGE: int = 2
DEFAULT_RENDERER: str = "render"
DEFAULT_PAGE_PARAM: str = "page"

# Total record count meaning "treat as unbounded" while still being known.
MACRO_TOTAL: int = 999999999


# ======================================================================
# Configuration
# ======================================================================


@dataclass
class PaginatorConfig:
    """Recognised paginator options and their defaults."""

    page_param_name: str = DEFAULT_PAGE_PARAM
    range: Optional[int] = DEFAULT_RANGE
    renderer_name: Optional[str] = DEFAULT_RENDERER
    renderer_options: dict[str, Any] = field(default_factory=dict)
    url_template: Optional[str] = None
    extra_params: dict[str, Any] = field(default_factory=dict)
    fragment: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> PaginatorConfig:
        """Merge *values* over the defaults; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        accepted = {k: v for k, v in values.items() if k in known}
        ignored = sorted(set(values) - known)
        if ignored:
            logger.debug("Ignoring unknown paginator options: %s", ", ".join(ignored))
        return cls(**accepted).copy()

    def copy(self) -> PaginatorConfig:
        return replace(
            self,
            renderer_options=dict(self.renderer_options),
            extra_params=dict(self.extra_params),
        )


# ======================================================================
# Paginator
# ======================================================================


class Paginator:
    """Pagination state plus the derived queries renderers rely on."""

    def __init__(
        self,
        current_page: int,
        per_page: Optional[int] = None,
        total_records: Optional[int] = None,
        config: Union[PaginatorConfig, Mapping[str, Any], None] = None,
        *,
        registry: Optional[RendererRegistry] = None,
    ) -> None:
        if current_page < 1:
            raise InvalidCurrentPageError(current_page)

        self._current_page = current_page
        self._per_page = per_page
        self._total_records = total_records

        if config is None:
            self._config = PaginatorConfig()
        elif isinstance(config, PaginatorConfig):
            self._config = config.copy()
        else:
            self._config = PaginatorConfig.from_mapping(config)

        self._registry = registry

        self._total_pages: Optional[int] = None
        self._page_window_start: Optional[int] = None
        self._page_window_end: Optional[int] = None
        self._cached_url: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"Paginator(current_page={self._current_page}, "
            f"per_page={self._per_page}, total_records={self._total_records})"
        )

    # ------------------------------------------------------------------
    # Configuration (fluent)
    # ------------------------------------------------------------------

    def append_param(self, key: str, value: Any) -> Paginator:
        self._config.extra_params[key] = value
        return self

    def append_params(self, values: Mapping[str, Any]) -> Paginator:
        for key, value in values.items():
            self.append_param(key, value)
        return self

    def set_params(self, values: Mapping[str, Any]) -> Paginator:
        self._config.extra_params = dict(values)
        return self

    def set_render_config(self, key: str, value: Any) -> Paginator:
        self._config.renderer_options[key] = value
        return self

    def set_render_configs(self, values: Mapping[str, Any]) -> Paginator:
        for key, value in values.items():
            self.set_render_config(key, value)
        return self

    def set_url(self, url: Optional[str] = None) -> Paginator:
        self._config.url_template = url
        return self

    def set_renderer(self, name: Optional[str] = None) -> Paginator:
        self._config.renderer_name = name
        return self

    def set_range(self, page_range: Optional[int] = None) -> Paginator:
        self._config.range = page_range
        return self

    def set_fragment(self, fragment: Optional[str] = None) -> Paginator:
        self._config.fragment = fragment
        return self

    def set_per_page(self, per_page: int) -> Paginator:
        self._per_page = per_page
        return self

    def set_page_param_name(self, name: str) -> Paginator:
        self._config.page_param_name = name
        return self

    def set_current_page(self, page: int) -> Paginator:
        # Not re-validated against the >= 1 rule applied at construction.
        self._current_page = page
        return self

    # ------------------------------------------------------------------
    # Plain accessors
    # ------------------------------------------------------------------

    def get_current_page(self) -> int:
        return self._current_page

    def get_total_records(self) -> Optional[int]:
        return self._total_records

    def get_per_page(self) -> int:
        if self._per_page is None:
            self._per_page = DEFAULT_PER_PAGE
        return self._per_page

    def get_range(self) -> int:
        return self._config.range if self._config.range is not None else DEFAULT_RANGE

    def get_renderer_name(self) -> str:
        return self._config.renderer_name or DEFAULT_RENDERER

    def get_fragment(self) -> Optional[str]:
        return self._config.fragment

    def get_page_param_name(self) -> str:
        return self._config.page_param_name

    def get_url_template(self) -> Optional[str]:
        return self._config.url_template

    def get_params(self) -> dict[str, Any]:
        return dict(self._config.extra_params)

    def get_render_config(self) -> dict[str, Any]:
        return dict(self._config.renderer_options)

    # ------------------------------------------------------------------
    # Record and page counters
    # ------------------------------------------------------------------

    def is_total_macro(self) -> bool:
        return self._total_records == MACRO_TOTAL

    def can_render_total(self) -> bool:
        return self._total_records is not None and not self.is_total_macro()

    def get_from_record(self) -> int:
        return (self._current_page - 1) * self.get_per_page()

    def get_to_record(self) -> Optional[int]:
        if not self.can_render_total():
            return None
        return min(self.get_from_record() + self.get_per_page(), self._total_records)

    def get_total_pages(self) -> Optional[int]:
        if self._total_pages is not None:
            return self._total_pages
        if self._total_records is None:
            return None
        self._total_pages = math.ceil(self._total_records / self.get_per_page())
        return self._total_pages

    def _total_pages_exceed(self, value: int) -> bool:
        """``total_pages > value``, false while the total is unknown."""
        total = self.get_total_pages()
        return total is not None and total > value

    # ------------------------------------------------------------------
    # Page window
    # ------------------------------------------------------------------

    def get_page_window_start(self) -> int:
        """
        First page number of the visible window.

        The candidate ``current - range`` is compared against ``range * 2``
        rather than 1, so the window stays anchored at page 1 until the
        current page is past ``range * 3``.
        """
        if self._page_window_start is not None:
            return self._page_window_start

        page_range = self.get_range()
        start = self._current_page - page_range
        if start < page_range * 2:
            start = 1

        self._page_window_start = start
        return start

    def get_page_window_end(self) -> int:
        """Last page number of the visible window, clamped to the total."""
        if self._page_window_end is not None:
            return self._page_window_end

        page_range = self.get_range()
        end = self._current_page + page_range
        if self.get_page_window_start() == 1:
            end = page_range * 2 + 2

        total = self.get_total_pages()
        if total and end > total:
            end = total

        self._page_window_end = end
        return end

    # ------------------------------------------------------------------
    # Navigation blocks
    # ------------------------------------------------------------------

    def can_render_first(self) -> bool:
        return (
            self._total_pages_exceed(1)
            and self._current_page >= self.get_range() * 2 + 2
        )

    def first_render_prev_target(self) -> int:
        return self._current_page - (self.get_range() * 2 + 1)

    def can_render_prev(self) -> bool:
        total = self.get_total_pages()
        return (total is None or total > 1) and self._current_page != 1

    def prev_render_target(self) -> int:
        return self._current_page - 1

    def can_render_main(self) -> bool:
        return self._total_pages_exceed(1)

    def can_render_next(self) -> bool:
        total = self.get_total_pages()
        return total is None or (total > 1 and self._current_page != total)

    def next_render_target(self) -> int:
        return self._current_page + 1

    def can_render_last(self) -> bool:
        total = self.get_total_pages()
        return (
            total is not None
            and total > 1
            and self._current_page != total
            and total > self.get_page_window_end()
        )

    def can_render_last_next(self) -> bool:
        return self._total_pages_exceed(self.get_page_window_end() + 1)

    def last_render_next_target(self) -> int:
        target = self._current_page + self.get_range() * 2 + 1
        total = self.get_total_pages()
        if not self.is_total_macro() and total is not None and target > total:
            target = total
        return target

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    def page_replace(self, page: int | str) -> str:
        """Return the page URL with the ``{page}`` placeholder filled in."""
        return replace_page_token(self._get_url(), page)

    def _get_url(self) -> str:
        if self._cached_url is None:
            self._cached_url = build_page_url(
                self._config.url_template,
                self._config.extra_params,
                self._config.page_param_name,
                self._config.fragment,
            )
        return self._cached_url

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(
        self,
        renderer: Union[Renderer, str, None] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """
        Render the paginator through a renderer.

        Parameters
        ----------
        renderer:
            A renderer instance, a registered renderer name, or ``None`` for
            the configured renderer name.
        options:
            Render options merged over the stored render config.
        """

        merged = {**self._config.renderer_options, **(options or {})}

        if renderer is None or isinstance(renderer, str):
            name = renderer or self.get_renderer_name()
            renderer = self._get_registry().create(name, self)
            logger.debug("Resolved renderer %r to %s", name, type(renderer).__name__)

        result = renderer.render(merged)
        self._cached_url = None
        return result

    def to_html(self) -> str:
        return self.render()

    def to_display_string(self) -> str:
        return self.render()

    def _get_registry(self) -> RendererRegistry:
        if self._registry is None:
            from pagewindow.presentation.renderers.registry import get_default_registry

            self._registry = get_default_registry()
        return self._registry

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def summary(self) -> PageSummary:
        return PageSummary(
            per_page=self.get_per_page(),
            current_page=self._current_page,
            total_pages=self.get_total_pages(),
            total_records=self._total_records,
            total_is_macro=self.is_total_macro(),
            from_record=self.get_from_record(),
            to_record=self.get_to_record(),
        )

    def to_array(self) -> dict[str, Any]:
        return self.summary().as_dict()

    def to_json(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """JSON encoding of :meth:`to_array`; *options* go to ``json.dumps``."""
        dump_options: dict[str, Any] = {"ensure_ascii": False}
        dump_options.update(options or {})
        return json.dumps(self.to_array(), **dump_options)
