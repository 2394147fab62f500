from __future__ import annotations

from typing import Optional


class GameTipsError(Exception):
    """Base error for the game tips pipeline."""


class ConfigurationError(GameTipsError):
    """Raised when a required credential or endpoint is not configured."""


class UpstreamFetchError(GameTipsError):
    """Raised when the game metadata service cannot be reached or answers badly."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
