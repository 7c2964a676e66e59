"""Pagination defaults loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class PaginationSettings(BaseSettings):
    """Process-wide defaults applied by ``PaginatorFactory``."""

    model_config = {"env_prefix": "PAGINATION_", "case_sensitive": False}

    # Paging
    per_page: int = Field(default=15, gt=0)
    range: int = Field(default=2, ge=0)
    page_param_name: str = "page"

    # Rendering
    renderer: str = "render"

    # Logging
    log_level: str = "INFO"


def get_settings() -> PaginationSettings:
    """Return a settings instance read from the current environment."""
    return PaginationSettings()
