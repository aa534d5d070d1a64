"""Configuration management for ebaylistings."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ebaylistings.errors import ConfigError

DEFAULT_SELLER = "kareanna65"
DEFAULT_MAX_ITEMS = 24
DEFAULT_OUTPUT = "assets/ebay-listings.json"


@dataclass(frozen=True)
class Config:
    """Run configuration, resolved once at startup."""

    app_id: str
    seller: str = DEFAULT_SELLER
    max_items: int = DEFAULT_MAX_ITEMS
    output_path: str = DEFAULT_OUTPUT
    http_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> Config:
        app_id = os.getenv("EBAY_APP_ID")
        if not app_id:
            raise ConfigError("Missing EBAY_APP_ID (set it in the environment or CI secrets).")
        return cls(
            app_id=app_id,
            seller=os.getenv("EBAY_SELLER") or DEFAULT_SELLER,
            max_items=parse_max_items(os.getenv("MAX_ITEMS") or str(DEFAULT_MAX_ITEMS)),
            output_path=os.getenv("EBAY_OUTPUT") or DEFAULT_OUTPUT,
            http_timeout=parse_timeout(os.getenv("EBAY_TIMEOUT") or "30"),
        )


def parse_max_items(raw: str) -> int:
    """Parse a positive item count, raising ConfigError otherwise."""
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"MAX_ITEMS must be an integer, got {raw!r}") from None
    if value < 1:
        raise ConfigError(f"MAX_ITEMS must be positive, got {value}")
    return value


def parse_timeout(raw: str) -> float:
    """Parse a positive timeout in seconds, raising ConfigError otherwise."""
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"EBAY_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"EBAY_TIMEOUT must be positive, got {value}")
    return value
