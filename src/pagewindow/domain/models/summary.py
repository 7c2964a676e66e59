from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class PageSummary:
    """Serializable snapshot of a paginator's record and page counters."""

    per_page: int
    current_page: int
    total_pages: Optional[int]
    total_records: Optional[int]
    total_is_macro: bool
    from_record: int
    to_record: Optional[int]

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)
