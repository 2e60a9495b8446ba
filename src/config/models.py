"""Configuration models and data structures."""

from dataclasses import dataclass

from config import config as cfg
from config.config import (
    API_BASE_URL,
    REQUEST_TIMEOUT_S,
    FETCH_MAX_WORKERS,
    SHOW_FETCH_ERRORS,
)


@dataclass
class ApiSettings:
    """Settings for talking to the Registration Statistics Service."""
    base_url: str = API_BASE_URL
    timeout_s: float = REQUEST_TIMEOUT_S
    max_workers: int = FETCH_MAX_WORKERS

    @classmethod
    def from_config(cls) -> "ApiSettings":
        """Build from the current values in ``config.config``."""
        return cls(
            base_url=cfg.API_BASE_URL,
            timeout_s=cfg.REQUEST_TIMEOUT_S,
            max_workers=cfg.FETCH_MAX_WORKERS,
        )


@dataclass
class ViewSettings:
    """Configuration for the dashboard view."""
    show_fetch_errors: bool = SHOW_FETCH_ERRORS

    @classmethod
    def from_config(cls) -> "ViewSettings":
        return cls(show_fetch_errors=cfg.SHOW_FETCH_ERRORS)
