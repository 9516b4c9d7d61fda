import json

import httpx
import pytest

from flatsearch.common.config import Settings


OAUTH_URL = "https://api.test/oauth/token"
SEARCH_URL = "https://api.test/3.5/es/search"


@pytest.fixture
def test_settings():
    return Settings(
        api_key="key",
        api_secret="secret",
        oauth_url=OAUTH_URL,
        search_url=SEARCH_URL,
        request_timeout_sec=5,
    )


class Recorder:
    """MockTransport handler that answers from a queue and keeps every request."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        return self.responses.pop(0)


def json_response(status_code: int, payload) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"),
                          headers={"content-type": "application/json"})


@pytest.fixture
def make_client():
    clients = []

    def _make(*responses: httpx.Response):
        recorder = Recorder(*responses)
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        clients.append(client)
        return client, recorder

    yield _make
    for client in clients:
        client.close()


@pytest.fixture(name="json_response")
def json_response_fixture():
    return json_response
