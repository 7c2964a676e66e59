"""Pagination state, page-window derivation and pluggable pager renderers."""

from pagewindow.domain.exceptions import (
    InvalidCurrentPageError,
    PaginationError,
    RendererAlreadyRegisteredError,
    RendererNotFoundError,
    TemplateTokenError,
)
from pagewindow.domain.models import MACRO_TOTAL, PageSummary, Paginator, PaginatorConfig
from pagewindow.presentation.renderers import (
    BootstrapRenderer,
    BootstrapSimpleRenderer,
    DefaultRenderer,
    JsonRenderer,
    Renderer,
    RendererRegistry,
    get_default_registry,
)

__all__ = [
    "MACRO_TOTAL",
    "BootstrapRenderer",
    "BootstrapSimpleRenderer",
    "DefaultRenderer",
    "InvalidCurrentPageError",
    "JsonRenderer",
    "PageSummary",
    "PaginationError",
    "Paginator",
    "PaginatorConfig",
    "Renderer",
    "RendererAlreadyRegisteredError",
    "RendererNotFoundError",
    "RendererRegistry",
    "TemplateTokenError",
    "get_default_registry",
]
