from __future__ import annotations

import logging
from typing import Any

import httpx

from flatsearch.common.config import Settings, settings as default_settings
from flatsearch.common.errors import AuthExpiredError, SearchError
from flatsearch.common.flatten import dropped_fields, flatten_listings
from flatsearch.common.search_url import build_search_url, parse_search_url
from flatsearch.common.secrets import bearer_authorization
from flatsearch.common.types import BearerToken, Credentials, ListingTable, SearchFilters, SearchResult
from flatsearch.search.auth import acquire_token
from flatsearch.search.http import client_scope, is_success, json_object


logger = logging.getLogger("search")

TOKEN_REJECTED_STATUS = (401, 403)


def execute_search(
    token: BearerToken,
    url: str,
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    cfg = settings or default_settings
    headers = {"Authorization": bearer_authorization(token)}

    with client_scope(client, cfg) as http:
        try:
            response = http.post(url, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("Search request failed error=%s", exc)
            raise SearchError(f"search request failed: {exc}") from exc

    status = response.status_code
    if status in TOKEN_REJECTED_STATUS:
        logger.warning("Search token rejected status=%s", status)
        raise AuthExpiredError(status_code=status)
    if not is_success(response):
        logger.warning("Search request rejected status=%s", status)
        raise SearchError(f"search endpoint returned {status}", status_code=status)

    body = json_object(response)
    if body is None:
        logger.warning("Search response is not a JSON object status=%s", status)
        raise SearchError("search response is not valid JSON", status_code=status)

    elements = body.get("elementList")
    logger.info(
        "Search done total=%s page=%s/%s items=%s",
        body.get("total"),
        body.get("actualPage"),
        body.get("totalPages"),
        len(elements) if isinstance(elements, list) else None,
    )
    return body


def search_listings(
    credentials: Credentials,
    filters: SearchFilters,
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> ListingTable:
    """Token, one search, flatten: the whole flow against a single client."""
    cfg = settings or default_settings
    with client_scope(client, cfg) as http:
        token = acquire_token(credentials.api_key, credentials.secret, client=http, settings=cfg)
        url = build_search_url(filters, base_url=cfg.search_url)
        logger.info("Search params=%s", parse_search_url(url))
        body = execute_search(token, url, client=http, settings=cfg)

    elements = body.get("elementList")
    if not isinstance(elements, list):
        raise SearchError("search response has no elementList")
    for index, element in enumerate(elements):
        if not isinstance(element, dict):
            logger.warning("Search listing is not an object index=%s type=%s", index, type(element).__name__)
            raise SearchError(f"search listing at index {index} is not an object")
    result = SearchResult.from_body(body)
    if result.summary:
        logger.info("Search summary: %s", "; ".join(result.summary))
    table = flatten_listings(result.element_list)

    dropped = dropped_fields(result.element_list, table)
    if dropped:
        logger.info("Dropped fields missing from some listings: %s", ", ".join(sorted(dropped)))
    return table
