"""Shared fixtures: a fake HTTP layer standing in for requests.

Tests never touch the network. ``FakeHTTP`` records every request the
transport makes and answers from canned per-endpoint responses.
"""

from __future__ import annotations

import json
import threading
from types import SimpleNamespace
from urllib.parse import parse_qs, urlsplit

import pytest

from accounting_gateway.integrations.merit.adapter import MeritProvider
from accounting_gateway.integrations.merit.client import ESTONIA_URL, MeritClient

API_PREFIX = "/api/"


class FakeResp:
    def __init__(self, status_code: int = 200, payload=None, text: str | None = None) -> None:
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text
        self.content = text.encode("utf-8")

    def json(self):
        return json.loads(self.text)


class FakeHTTP:
    def __init__(self) -> None:
        self.calls: list[SimpleNamespace] = []
        self._responses: dict[str, FakeResp] = {}
        self._lock = threading.Lock()
        # Optional callable(call) -> (status, payload); overrides canned responses.
        self.handler = None

    def respond(self, endpoint: str, payload=None, *, status: int = 200, text: str | None = None) -> None:
        self._responses[endpoint] = FakeResp(status, payload, text)

    def request(self, method, url, data=None, headers=None, timeout=None):
        parts = urlsplit(url)
        call = SimpleNamespace(
            method=method,
            url=url,
            endpoint=parts.path[len(API_PREFIX):],
            query={k: v[0] for k, v in parse_qs(parts.query).items()},
            raw=data,
            body=json.loads(data) if data else None,
            headers=headers,
            timeout=timeout,
        )
        with self._lock:
            self.calls.append(call)
        if self.handler is not None:
            status, payload = self.handler(call)
            return FakeResp(status, payload)
        return self._responses.get(call.endpoint, FakeResp(200))

    @property
    def last(self) -> SimpleNamespace:
        return self.calls[-1]


@pytest.fixture
def fake_http() -> FakeHTTP:
    return FakeHTTP()


@pytest.fixture
def merit_client(fake_http: FakeHTTP) -> MeritClient:
    return MeritClient(api_id="test-id", api_key="test-key", base_url=ESTONIA_URL, http=fake_http)


@pytest.fixture
def merit_provider(merit_client: MeritClient) -> MeritProvider:
    return MeritProvider(merit_client)
