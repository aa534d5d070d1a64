"""Finding API request construction."""

from __future__ import annotations

import httpx

ENDPOINT = "https://svcs.ebay.com/services/search/FindingService/v1"
OPERATION_NAME = "findItemsAdvanced"
SERVICE_VERSION = "1.13.0"
ENTRIES_PER_PAGE = 50


def build_search_params(app_id: str, seller: str, page: int = 1) -> dict[str, str]:
    """Return the ordered query parameters for one page of a seller search."""
    return {
        "OPERATION-NAME": OPERATION_NAME,
        "SERVICE-VERSION": SERVICE_VERSION,
        "SECURITY-APPNAME": app_id,
        "RESPONSE-DATA-FORMAT": "JSON",
        "REST-PAYLOAD": "true",
        # Seller filter plus the WorldWide location facet, which makes the
        # search return every active listing regardless of where it is located.
        "itemFilter(0).name": "Seller",
        "itemFilter(0).value": seller,
        "itemFilter(1).name": "LocatedIn",
        "itemFilter(1).value": "WorldWide",
        "paginationInput.entriesPerPage": str(ENTRIES_PER_PAGE),
        "paginationInput.pageNumber": str(page),
        "outputSelector(0)": "PictureURLLarge",
        "outputSelector(1)": "PictureURLSuperSize",
    }


def build_search_url(app_id: str, seller: str, page: int = 1) -> str:
    return str(httpx.URL(ENDPOINT, params=build_search_params(app_id, seller, page)))
