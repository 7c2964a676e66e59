from pagewindow.domain.models.paginator import (
    DEFAULT_PAGE_PARAM,
    DEFAULT_PER_PAGE,
    DEFAULT_RANGE,
    DEFAULT_RENDERER,
    MACRO_TOTAL,
    Paginator,
    PaginatorConfig,
)
from pagewindow.domain.models.summary import PageSummary

__all__ = [
    "DEFAULT_PAGE_PARAM",
    "DEFAULT_PER_PAGE",
    "DEFAULT_RANGE",
    "DEFAULT_RENDERER",
    "MACRO_TOTAL",
    "PageSummary",
    "Paginator",
    "PaginatorConfig",
]
