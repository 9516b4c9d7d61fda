from __future__ import annotations

import base64


def encode_credentials(api_key: str, secret: str) -> str:
    raw = f"{api_key}:{secret}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def basic_authorization(api_key: str, secret: str) -> str:
    return f"Basic {encode_credentials(api_key, secret)}"


def bearer_authorization(token: str) -> str:
    return f"Bearer {token}"


def mask_secret(value: str | None, visible: int = 4) -> str:
    if not value:
        return "<empty>"
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "*" * (len(value) - visible)
