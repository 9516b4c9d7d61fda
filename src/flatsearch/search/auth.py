from __future__ import annotations

import logging

import httpx

from flatsearch.common.config import Settings, settings as default_settings
from flatsearch.common.errors import AuthError
from flatsearch.common.secrets import basic_authorization, mask_secret
from flatsearch.common.types import BearerToken
from flatsearch.search.http import client_scope, is_success, json_object


logger = logging.getLogger("auth")

TOKEN_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"
TOKEN_FORM = {"grant_type": "client_credentials", "scope": "read"}


def acquire_token(
    api_key: str,
    secret: str,
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> BearerToken:
    """Exchange an API key and secret for a bearer token.

    A single POST with HTTP Basic auth against the OAuth endpoint. Any failure
    raises :class:`AuthError` straight away; there is no retry.
    """
    cfg = settings or default_settings
    headers = {
        "Authorization": basic_authorization(api_key, secret),
        "Content-Type": TOKEN_CONTENT_TYPE,
    }
    logger.info("Requesting token url=%s api_key=%s", cfg.oauth_url, mask_secret(api_key))

    with client_scope(client, cfg) as http:
        try:
            response = http.post(cfg.oauth_url, headers=headers, data=TOKEN_FORM)
        except httpx.HTTPError as exc:
            logger.warning("Token request failed error=%s", exc)
            raise AuthError(f"token request failed: {exc}") from exc

    if not is_success(response):
        logger.warning("Token request rejected status=%s", response.status_code)
        raise AuthError(f"token endpoint returned {response.status_code}", status_code=response.status_code)

    body = json_object(response)
    if body is None:
        logger.warning("Token response is not a JSON object status=%s", response.status_code)
        raise AuthError("token response is not valid JSON", status_code=response.status_code)

    token = body.get("access_token")
    if not isinstance(token, str) or not token:
        logger.warning("Token response has no access_token keys=%s", sorted(body))
        raise AuthError("token response has no access_token", status_code=response.status_code)

    logger.info("Token acquired expires_in=%s", body.get("expires_in"))
    return token
