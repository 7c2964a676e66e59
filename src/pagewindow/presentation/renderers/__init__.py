from pagewindow.presentation.renderers.base import Renderer, TemplateRenderer
from pagewindow.presentation.renderers.bootstrap import BootstrapRenderer, BootstrapSimpleRenderer
from pagewindow.presentation.renderers.default import DefaultRenderer
from pagewindow.presentation.renderers.json_renderer import JsonRenderer
from pagewindow.presentation.renderers.registry import (
    RendererFactory,
    RendererRegistry,
    get_default_registry,
    register_builtin_renderers,
)

__all__ = [
    "BootstrapRenderer",
    "BootstrapSimpleRenderer",
    "DefaultRenderer",
    "JsonRenderer",
    "Renderer",
    "RendererFactory",
    "RendererRegistry",
    "TemplateRenderer",
    "get_default_registry",
    "register_builtin_renderers",
]
