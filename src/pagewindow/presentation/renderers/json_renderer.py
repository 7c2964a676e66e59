from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from pagewindow.domain.models.paginator import Paginator


class JsonRenderer:
    """Emits the paginator summary as JSON, registered as ``json``."""

    name = "json"

    def __init__(self, paginator: Paginator) -> None:
        self.paginator = paginator
        self._options: dict[str, Any] = {"indent": None}

    def set_option(self, name: str, value: Any) -> JsonRenderer:
        self._options[name] = value
        return self

    def render(self, options: Optional[Mapping[str, Any]] = None) -> str:
        for key, value in (options or {}).items():
            self.set_option(key, value)
        return self.paginator.to_json({"indent": self._options["indent"]})
