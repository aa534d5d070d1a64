"""HTTP utilities for the Finding API client."""

from __future__ import annotations

from typing import Any

import httpx

_DEFAULT_HEADERS = {
    "User-Agent": "ebaylistings/0.1.0",
    "Accept": "application/json",
}


async def fetch_json(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    timeout: float = 30.0,
) -> Any:
    """GET *url* and decode its JSON body.

    Raises ``httpx.HTTPStatusError`` for non-2xx responses and ``ValueError``
    when a 2xx body is not JSON (e.g. a gateway maintenance page).
    """
    merged = {**_DEFAULT_HEADERS, **(headers or {})}
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        resp = await client.get(url, headers=merged)
    resp.raise_for_status()
    try:
        return resp.json()
    except ValueError as exc:
        content_type = resp.headers.get("content-type", "unknown content type")
        raise ValueError(f"expected JSON, got {content_type}: {exc}") from exc
