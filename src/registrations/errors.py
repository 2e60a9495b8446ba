"""Errors raised while talking to the Registration Statistics Service."""

from typing import Optional


class RegistrationApiError(Exception):
    """A single request failed (network error, non-2xx status or malformed body)."""

    def __init__(self, endpoint: str, message: str, *, status_code: Optional[int] = None):
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(f"[{endpoint}] {message}")
