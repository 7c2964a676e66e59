from pagewindow.domain.exceptions.pagination_exceptions import (
    InvalidCurrentPageError,
    PaginationError,
    RendererAlreadyRegisteredError,
    RendererNotFoundError,
    TemplateTokenError,
)

__all__ = [
    "InvalidCurrentPageError",
    "PaginationError",
    "RendererAlreadyRegisteredError",
    "RendererNotFoundError",
    "TemplateTokenError",
]
