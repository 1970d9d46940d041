from __future__ import annotations

from typing import Any

import httpx
import pytest

API_KEY = "rms_test_key"
DEFAULT_ROOT = "https://www.ramaris.app/api/v1"

RATE_HEADERS = {
    "x-ratelimit-limit": "1000",
    "x-ratelimit-remaining": "999",
    "x-ratelimit-reset": "1700000000",
}

PAGINATION = {"page": 1, "pageSize": 20, "totalItems": 100, "totalPages": 5}


def json_response(
    body: Any,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
    *,
    rate_headers: bool = True,
) -> httpx.Response:
    hdrs = dict(RATE_HEADERS) if rate_headers else {}
    if headers:
        hdrs.update(headers)
    return httpx.Response(status_code, json=body, headers=hdrs)


class Recorder:
    """MockTransport handler that records requests and replays responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)

    @property
    def last_url(self) -> str:
        return str(self.requests[-1].url)


@pytest.fixture(autouse=True)
def _no_env_api_key(monkeypatch):
    """Keep a developer's RAMARIS_* environment out of the tests."""
    from ramaris import client as client_module

    monkeypatch.setattr(client_module.settings, "api_key", "")
    monkeypatch.setattr(client_module.settings, "base_url", DEFAULT_ROOT)
