from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import httpx

from flatsearch.common.config import Settings


@contextmanager
def client_scope(client: httpx.Client | None, settings: Settings) -> Iterator[httpx.Client]:
    """Yield the caller's client untouched, or a fresh one that is closed afterwards."""
    if client is not None:
        yield client
        return
    owned = httpx.Client(timeout=httpx.Timeout(settings.request_timeout_sec))
    try:
        yield owned
    finally:
        owned.close()


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def json_object(response: httpx.Response) -> dict[str, Any] | None:
    try:
        parsed = response.json()
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None
