"""Core data models for ebaylistings."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. ``2024-05-01T12:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ListingRecord(BaseModel, frozen=True):
    """A single listing, reduced to what the site renders."""

    title: str = ""
    url: str = ""
    price: str = ""
    image: str = ""


class Snapshot(BaseModel, frozen=True, populate_by_name=True):
    """The persisted listings artifact."""

    seller: str
    updated_at: str = Field(default_factory=utc_timestamp, alias="updatedAt")
    items: list[ListingRecord] = Field(default_factory=list)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
