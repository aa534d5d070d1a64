"""ebaylistings — eBay seller listings snapshot generator."""

from ebaylistings.config import Config
from ebaylistings.errors import ConfigError, ListingsAPIError, ListingsError
from ebaylistings.models import ListingRecord, Snapshot

__all__ = [
    "Config",
    "ConfigError",
    "ListingRecord",
    "ListingsAPIError",
    "ListingsError",
    "Snapshot",
]
