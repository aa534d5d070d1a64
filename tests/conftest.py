"""Shared fixtures: Finding API payload builders."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from ebaylistings.config import Config


def raw_item(
    n: int,
    *,
    url: str | None = "default",
    image: str | None = "default",
    price: str | None = "10.0",
    currency: str = "USD",
) -> dict[str, Any]:
    item: dict[str, Any] = {"itemId": [str(n)], "title": [f"Item {n}"]}
    if url is not None:
        item["viewItemURL"] = [f"https://www.ebay.com/itm/{n}" if url == "default" else url]
    if image is not None:
        item["galleryURL"] = [f"https://i.ebayimg.com/{n}.jpg" if image == "default" else image]
    if price is not None:
        item["sellingStatus"] = [
            {"currentPrice": [{"@currencyId": currency, "__value__": price}]}
        ]
    return item


def result_page(items: list[dict[str, Any]], ack: str = "Success") -> dict[str, Any]:
    return {
        "findItemsAdvancedResponse": [
            {
                "ack": [ack],
                "searchResult": [{"@count": str(len(items)), "item": items}],
            }
        ]
    }


@pytest.fixture
def make_item() -> Callable[..., dict[str, Any]]:
    return raw_item


@pytest.fixture
def make_page() -> Callable[..., dict[str, Any]]:
    return result_page


@pytest.fixture
def config() -> Config:
    return Config(app_id="test-app-id", seller="someseller", max_items=24)
