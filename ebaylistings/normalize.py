"""Map raw Finding API items onto ListingRecord."""

from __future__ import annotations

from typing import Any

from ebaylistings.models import ListingRecord

URL_PLACEHOLDER = "#"

# Highest resolution first.
_IMAGE_FIELDS = ("pictureURLSuperSize", "pictureURLLarge", "galleryURL")


def unwrap(value: Any) -> Any:
    """Unwrap the one-element lists the Finding API uses for every field."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _dig(item: Any, *path: str) -> Any:
    node = item
    for key in path:
        node = unwrap(node)
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return unwrap(node)


def _format_amount(amount: Any) -> str:
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def normalize_item(item: dict[str, Any]) -> ListingRecord:
    """Build a ListingRecord from a raw item. Missing fields become empty strings."""
    title = _dig(item, "title")
    url = _dig(item, "viewItemURL")
    amount = _dig(item, "sellingStatus", "currentPrice", "__value__")
    currency = _dig(item, "sellingStatus", "currentPrice", "@currencyId")

    price = ""
    if amount:
        price = f"{_format_amount(amount)} {currency if currency is not None else ''}".strip()

    image = next((img for img in (_dig(item, f) for f in _IMAGE_FIELDS) if img), "")

    return ListingRecord(
        title=str(title) if title is not None else "",
        url=str(url) if url is not None else URL_PLACEHOLDER,
        price=price,
        image=str(image),
    )


def is_displayable(record: ListingRecord) -> bool:
    """True when the record has both a link and an image.

    The ``"#"`` placeholder counts as a link.
    """
    return bool(record.url) and bool(record.image)


def normalize_items(items: list[dict[str, Any]]) -> list[ListingRecord]:
    """Normalize a page of raw items, dropping the ones that cannot be displayed."""
    records = (normalize_item(item) for item in items)
    return [record for record in records if is_displayable(record)]
