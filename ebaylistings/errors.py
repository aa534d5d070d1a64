"""Exceptions raised by ebaylistings."""

from __future__ import annotations


class ListingsError(Exception):
    """Base class for all ebaylistings errors."""


class ConfigError(ListingsError):
    """Required configuration is missing or malformed."""


class ListingsAPIError(ListingsError):
    """The Finding API request failed or reported a failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
