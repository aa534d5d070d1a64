"""Sequential pagination over the Finding API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ebaylistings.config import Config
from ebaylistings.errors import ListingsAPIError
from ebaylistings.models import ListingRecord
from ebaylistings.normalize import normalize_items, unwrap
from ebaylistings.query import OPERATION_NAME, build_search_url
from ebaylistings.utils.http import fetch_json

logger = logging.getLogger(__name__)

MAX_PAGES = 5

_RESPONSE_KEY = f"{OPERATION_NAME}Response"


async def fetch_page(config: Config, page: int) -> dict[str, Any]:
    """Fetch one result page. Raises ListingsAPIError on any failure."""
    url = build_search_url(config.app_id, config.seller, page)
    logger.debug("Fetching page %d for seller %s", page, config.seller)
    try:
        data = await fetch_json(url, timeout=config.http_timeout)
    except httpx.HTTPStatusError as exc:
        resp = exc.response
        raise ListingsAPIError(
            f"eBay API error: {resp.status_code} {resp.reason_phrase}",
            status_code=resp.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise ListingsAPIError(f"eBay API request failed: {exc}") from exc
    except ValueError as exc:
        raise ListingsAPIError(f"eBay API returned invalid JSON: {exc}") from exc

    _check_ack(data)
    return data


def _check_ack(data: Any) -> None:
    response = _response_body(data)
    ack = unwrap(response.get("ack"))
    if ack != "Failure":
        return
    message = "unknown error"
    errors = unwrap(response.get("errorMessage"))
    if isinstance(errors, dict):
        error = unwrap(errors.get("error"))
        if isinstance(error, dict) and error.get("message"):
            message = unwrap(error["message"])
    raise ListingsAPIError(f"eBay API error: {message}")


def _response_body(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        return {}
    body = unwrap(data.get(_RESPONSE_KEY))
    return body if isinstance(body, dict) else {}


def extract_items(data: Any) -> list[dict[str, Any]]:
    """Return the raw item list of a result page, or an empty list."""
    result = unwrap(_response_body(data).get("searchResult"))
    if not isinstance(result, dict):
        return []
    items = result.get("item")
    return items if isinstance(items, list) else []


async def collect_listings(config: Config) -> list[ListingRecord]:
    """Page through the seller's listings until enough displayable ones are collected.

    Stops when ``config.max_items`` records are collected, after ``MAX_PAGES``
    requests, or on the first empty page. Any request error propagates and
    aborts the whole collection.
    """
    records: list[ListingRecord] = []
    page = 1

    while len(records) < config.max_items and page <= MAX_PAGES:
        raw_items = extract_items(await fetch_page(config, page))
        kept = normalize_items(raw_items)
        logger.debug(
            "Page %d: %d raw items, kept %d", page, len(raw_items), len(kept)
        )
        records.extend(kept)
        page += 1
        if not raw_items:
            break

    return records[: config.max_items]
