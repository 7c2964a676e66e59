from __future__ import annotations

from collections.abc import Iterable


class PaginationError(Exception):
    """Base class for all pagination exceptions.

    Carries a human-readable ``title`` next to the ``detail`` message so
    callers can surface the failure without inspecting exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Pagination Error",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title


class InvalidCurrentPageError(PaginationError, ValueError):
    def __init__(self, current_page: int = 0) -> None:
        self.current_page = current_page
        super().__init__(
            detail=f"Current page must be greater than 0, got {current_page}",
            title="Invalid Current Page",
        )


class RendererNotFoundError(PaginationError, LookupError):
    def __init__(self, name: str = "", available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(
            detail=(
                f"Renderer not found: {name!r} "
                f"(available: {', '.join(self.available) or 'none'})"
            ),
            title="Renderer Not Found",
        )


class RendererAlreadyRegisteredError(PaginationError):
    def __init__(self, name: str = "") -> None:
        self.name = name
        super().__init__(
            detail=f"Renderer already registered: {name!r}",
            title="Renderer Conflict",
        )


class TemplateTokenError(PaginationError):
    def __init__(self, token: str = "", renderer: str = "") -> None:
        self.token = token
        self.renderer = renderer
        super().__init__(
            detail=f"Unknown template token '{{{token}}}' for renderer {renderer!r}",
            title="Unknown Template Token",
        )
