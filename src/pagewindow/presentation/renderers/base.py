"""
Renderer contract and the template-driven base shared by the built-ins.

A renderer is bound to one ``Paginator`` and turns its state into a display
string. ``TemplateRenderer`` expands a ``template`` option made of
``{token}`` placeholders, replacing each with the output of the matching
``_render_<token>`` method.
"""

from __future__ import annotations

import html
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Protocol

from pagewindow.domain.exceptions import TemplateTokenError

if TYPE_CHECKING:
    from pagewindow.domain.models.paginator import Paginator

_TOKEN_PATTERN = re.compile(r"\{(\w+)\}")


# ======================================================================
# Contract
# ======================================================================


class Renderer(Protocol):
    """Port: converts pagination state into a display string."""

    def set_option(self, name: str, value: Any) -> Renderer: ...

    def render(self, options: Optional[Mapping[str, Any]] = None) -> str: ...


# ======================================================================
# Template renderer
# ======================================================================


class TemplateRenderer:
    """Base class for renderers that expand a ``{token}`` template."""

    name: ClassVar[str] = ""
    default_options: ClassVar[dict[str, Any]] = {"template": ""}

    def __init__(self, paginator: Paginator) -> None:
        self.paginator = paginator
        self._options: dict[str, Any] = dict(self.default_options)

    def set_option(self, name: str, value: Any) -> TemplateRenderer:
        self._options[name] = value
        return self

    def get_option(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)

    def render(self, options: Optional[Mapping[str, Any]] = None) -> str:
        for key, value in (options or {}).items():
            self.set_option(key, value)
        return _TOKEN_PATTERN.sub(self._expand_token, self._options["template"])

    def _expand_token(self, match: re.Match[str]) -> str:
        token = match.group(1)
        part = getattr(self, f"_render_{token}", None)
        if part is None:
            raise TemplateTokenError(token, self.name or type(self).__name__)
        return part()

    # -- helpers ----------------------------------------------------------

    def url(self, page: int | str) -> str:
        """Escaped URL for *page*, ready to drop into an attribute."""
        return html.escape(self.paginator.page_replace(page), quote=True)

    @staticmethod
    def escape(text: Any) -> str:
        return html.escape(str(text), quote=True)
