from __future__ import annotations

from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from flatsearch.common.config import settings
from flatsearch.common.types import SearchFilters


def build_search_url(filters: SearchFilters, *, base_url: str | None = None) -> str:
    """Append ``filters`` to the search endpoint as a percent-encoded query.

    Parameters keep the mapping's order and every supplied key is sent, even
    with an empty value. An empty mapping yields the bare endpoint.
    """
    base = base_url or settings.search_url
    if not filters:
        return base
    query = urlencode([(str(key), str(value)) for key, value in filters.items()])
    parts = urlparse(base)
    if parts.query:
        query = f"{parts.query}&{query}"
    return urlunparse((parts.scheme, parts.netloc, parts.path, parts.params, query, parts.fragment))


def parse_search_url(url: str) -> dict[str, str]:
    params: dict[str, str] = {}
    for key, value in parse_qsl(urlparse(url).query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


def describe_filters(filters: SearchFilters) -> str:
    parts = [f"{key}={value}" for key, value in filters.items() if value not in (None, "")]
    return "; ".join(parts) if parts else "no filters"
