"""Tests for Finding API URL construction."""

from __future__ import annotations

import httpx

from ebaylistings.query import ENDPOINT, build_search_params, build_search_url


def test_params_contents() -> None:
    params = build_search_params("my-app", "kareanna65", 3)
    assert params["OPERATION-NAME"] == "findItemsAdvanced"
    assert params["SERVICE-VERSION"] == "1.13.0"
    assert params["SECURITY-APPNAME"] == "my-app"
    assert params["RESPONSE-DATA-FORMAT"] == "JSON"
    assert params["itemFilter(0).name"] == "Seller"
    assert params["itemFilter(0).value"] == "kareanna65"
    assert params["itemFilter(1).name"] == "LocatedIn"
    assert params["itemFilter(1).value"] == "WorldWide"
    assert params["paginationInput.entriesPerPage"] == "50"
    assert params["paginationInput.pageNumber"] == "3"
    assert params["outputSelector(0)"] == "PictureURLLarge"
    assert params["outputSelector(1)"] == "PictureURLSuperSize"


def test_url_round_trips_through_httpx() -> None:
    url = httpx.URL(build_search_url("my app&id", "seller name", 2))
    assert str(url).startswith(ENDPOINT + "?")
    assert url.params["SECURITY-APPNAME"] == "my app&id"
    assert url.params["itemFilter(0).value"] == "seller name"
    assert url.params["paginationInput.pageNumber"] == "2"


def test_default_page_is_one() -> None:
    assert build_search_params("a", "b")["paginationInput.pageNumber"] == "1"
