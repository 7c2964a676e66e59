"""
Name -> factory lookup for renderers.

``Paginator.render("bootstrap")`` resolves the name here. Names are
case-insensitive. The process-wide registry returned by
:func:`get_default_registry` starts out with the built-in renderers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Optional

from pagewindow.domain.exceptions import RendererAlreadyRegisteredError, RendererNotFoundError

if TYPE_CHECKING:
    from pagewindow.domain.models.paginator import Paginator
    from pagewindow.presentation.renderers.base import Renderer

logger = logging.getLogger(__name__)

RendererFactory = Callable[["Paginator"], "Renderer"]


class RendererRegistry:
    """Maps renderer names to factories taking the bound ``Paginator``."""

    def __init__(self) -> None:
        self._factories: dict[str, RendererFactory] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def register(
        self,
        name: str,
        factory: RendererFactory,
        *,
        replace: bool = False,
    ) -> None:
        key = self._key(name)
        if key in self._factories and not replace:
            raise RendererAlreadyRegisteredError(key)
        self._factories[key] = factory
        logger.debug("Registered renderer %r", key)

    def unregister(self, name: str) -> None:
        key = self._key(name)
        if self._factories.pop(key, None) is None:
            raise RendererNotFoundError(key, self._factories)
        logger.debug("Unregistered renderer %r", key)

    def create(self, name: str, paginator: Paginator) -> Renderer:
        factory = self._factories.get(self._key(name))
        if factory is None:
            raise RendererNotFoundError(name, self._factories)
        return factory(paginator)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._factories

    def __len__(self) -> int:
        return len(self._factories)


def register_builtin_renderers(registry: RendererRegistry) -> RendererRegistry:
    from pagewindow.presentation.renderers.bootstrap import (
        BootstrapRenderer,
        BootstrapSimpleRenderer,
    )
    from pagewindow.presentation.renderers.default import DefaultRenderer
    from pagewindow.presentation.renderers.json_renderer import JsonRenderer

    for renderer_cls in (DefaultRenderer, BootstrapRenderer, BootstrapSimpleRenderer, JsonRenderer):
        registry.register(renderer_cls.name, renderer_cls, replace=True)
    return registry


_default_registry: Optional[RendererRegistry] = None


def get_default_registry() -> RendererRegistry:
    """Return the shared registry, populating the built-ins on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = register_builtin_renderers(RendererRegistry())
    return _default_registry
