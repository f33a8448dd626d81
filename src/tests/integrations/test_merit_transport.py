from __future__ import annotations

import base64
import hashlib
import hmac
import json
import time
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from accounting_gateway.common.context import CallContext
from accounting_gateway.integrations.merit.schema import TaxItem, UpdateCustomerRequest
from accounting_gateway.integrations.merit.transport import (
    APIError,
    DecodeError,
    MeritTransport,
    NetworkError,
    RequestCancelled,
    encode_payload,
    sign,
    utc_timestamp,
)


class _FakeResp:
    def __init__(self, status_code: int, payload=None, text: str | None = None) -> None:
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text
        self.content = text.encode("utf-8")

    def json(self):
        return json.loads(self.text)


def _transport(**kwargs) -> MeritTransport:
    return MeritTransport(
        api_id="my-api-id",
        api_key="my-secret",
        base_url="https://aktiva.merit.ee/api/",
        **kwargs,
    )


def test_sign_matches_reference_hmac() -> None:
    body = b'{"Id":"1"}'
    expected = base64.b64encode(
        hmac.new(b"key", b"id" + b"20250131120000" + body, hashlib.sha256).digest()
    ).decode()
    assert sign("id", "key", "20250131120000", body) == expected


def test_sign_is_deterministic_and_sensitive_to_every_input() -> None:
    args = ("id", "key", "20250131120000", b'{"a":1}')
    base = sign(*args)
    assert sign(*args) == base

    variants = [
        ("id2", "key", "20250131120000", b'{"a":1}'),
        ("id", "key2", "20250131120000", b'{"a":1}'),
        ("id", "key", "20250131120001", b'{"a":1}'),
        ("id", "key", "20250131120000", b'{"a":2}'),
    ]
    signatures = {sign(*v) for v in variants}
    assert base not in signatures
    assert len(signatures) == len(variants)


def test_sign_accepts_str_body_as_utf8() -> None:
    assert sign("id", "key", "20250131120000", '{"Name":"Õun"}') == sign(
        "id", "key", "20250131120000", '{"Name":"Õun"}'.encode("utf-8")
    )


def test_utc_timestamp_format() -> None:
    ts = utc_timestamp(datetime(2025, 1, 31, 9, 5, 7, tzinfo=timezone.utc))
    assert ts == "20250131090507"
    assert len(utc_timestamp()) == 14


def test_encode_payload_is_compact_and_keeps_non_ascii() -> None:
    assert encode_payload(None) == b"{}"
    assert encode_payload({"Name": "Õun OÜ", "Amount": Decimal("10.50")}) == (
        '{"Name":"Õun OÜ","Amount":"10.50"}'.encode("utf-8")
    )


def test_encode_payload_dumps_models_by_alias_without_nones() -> None:
    body = json.loads(encode_payload(UpdateCustomerRequest(id="c1", email="a@b.ee")))
    assert body == {"Id": "c1", "Email": "a@b.ee"}


def test_post_sends_signed_request(monkeypatch) -> None:
    seen = SimpleNamespace(method=None, url=None, data=None, headers=None, timeout=None)

    def fake_request(method, url, data=None, headers=None, timeout=None):
        seen.method, seen.url, seen.data = method, url, data
        seen.headers, seen.timeout = headers, timeout
        return _FakeResp(200, [{"Id": "t1", "Code": "22%", "Name": "VAT 22", "TaxPct": 22.0}])

    monkeypatch.setattr("requests.request", fake_request)

    result = _transport().post("v1/gettaxes", {"Foo": "bar"}, list[TaxItem])

    assert seen.method == "POST"
    assert seen.headers == {"Content-Type": "application/json"}
    assert seen.timeout == 30
    assert seen.data == b'{"Foo":"bar"}'

    parts = urlsplit(seen.url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://aktiva.merit.ee/api/v1/gettaxes"
    query = parse_qs(parts.query)
    assert query["ApiId"] == ["my-api-id"]
    ts = query["timestamp"][0]
    assert len(ts) == 14 and ts.isdigit()
    # The signature is over exactly the bytes that were sent.
    assert query["signature"] == [sign("my-api-id", "my-secret", ts, seen.data)]

    assert result[0].tax_id == "t1"
    assert result[0].tax_pct == Decimal("22.0")


def test_post_url_encodes_signature(monkeypatch) -> None:
    seen = SimpleNamespace(url=None)

    def fake_request(method, url, data=None, headers=None, timeout=None):
        seen.url = url
        return _FakeResp(200)

    monkeypatch.setattr("requests.request", fake_request)
    _transport().post("v1/gettaxes")

    raw_signature = seen.url.split("signature=", 1)[1]
    assert "+" not in raw_signature
    assert "/" not in raw_signature
    assert "=" not in raw_signature


def test_post_non_2xx_raises_api_error_with_status_and_body(monkeypatch) -> None:
    monkeypatch.setattr(
        "requests.request",
        lambda method, url, **kw: _FakeResp(401, text="api-wrongsignature"),
    )

    with pytest.raises(APIError) as exc_info:
        _transport().post("v1/gettaxes", None, list[TaxItem])
    assert exc_info.value.status_code == 401
    assert exc_info.value.body == "api-wrongsignature"


def test_post_empty_2xx_body_is_none(monkeypatch) -> None:
    monkeypatch.setattr("requests.request", lambda method, url, **kw: _FakeResp(200))
    assert _transport().post("v1/updatecustomer", {"Id": "1"}, list[TaxItem]) is None


def test_post_without_response_type_ignores_body(monkeypatch) -> None:
    monkeypatch.setattr("requests.request", lambda method, url, **kw: _FakeResp(200, {"x": 1}))
    assert _transport().post("v2/sendpayment", {}) is None


def test_post_malformed_json_raises_decode_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "requests.request", lambda method, url, **kw: _FakeResp(200, text="<html>oops")
    )
    with pytest.raises(DecodeError):
        _transport().post("v1/gettaxes", None, list[TaxItem])


def test_post_wrong_shape_raises_decode_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "requests.request", lambda method, url, **kw: _FakeResp(200, {"not": "a list"})
    )
    with pytest.raises(DecodeError):
        _transport().post("v1/gettaxes", None, list[TaxItem])


def test_post_network_failure_raises_network_error(monkeypatch) -> None:
    def fake_request(method, url, **kw):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr("requests.request", fake_request)
    with pytest.raises(NetworkError):
        _transport().post("v1/gettaxes")


def test_post_cancelled_context_never_sends(monkeypatch) -> None:
    calls = {"n": 0}

    def fake_request(method, url, **kw):
        calls["n"] += 1
        return _FakeResp(200)

    monkeypatch.setattr("requests.request", fake_request)

    ctx = CallContext()
    ctx.cancel()
    with pytest.raises(RequestCancelled):
        _transport().post("v2/sendinvoice", {}, ctx=ctx)

    with pytest.raises(RequestCancelled):
        _transport().post("v2/sendinvoice", {}, ctx=CallContext.with_timeout(-1))

    assert calls["n"] == 0


def test_post_cancelled_while_in_flight_raises(monkeypatch) -> None:
    ctx = CallContext()

    def fake_request(method, url, **kw):
        ctx.cancel()
        return _FakeResp(200, {"Id": "c-1", "Name": "Acme"})

    monkeypatch.setattr("requests.request", fake_request)

    with pytest.raises(RequestCancelled):
        _transport().post("v2/sendcustomer", {"Name": "Acme"}, dict, ctx=ctx)


def test_post_timeout_after_deadline_reports_cancellation(monkeypatch) -> None:
    ctx = CallContext.with_timeout(0.01)

    def fake_request(method, url, **kw):
        time.sleep(0.02)
        raise requests.Timeout("read timed out")

    monkeypatch.setattr("requests.request", fake_request)

    with pytest.raises(RequestCancelled):
        _transport().post("v1/gettaxes", ctx=ctx)


def test_post_caps_timeout_at_context_deadline(monkeypatch) -> None:
    seen = SimpleNamespace(timeout=None)

    def fake_request(method, url, data=None, headers=None, timeout=None):
        seen.timeout = timeout
        return _FakeResp(200)

    monkeypatch.setattr("requests.request", fake_request)
    _transport(timeout_seconds=30).post("v1/gettaxes", ctx=CallContext.with_timeout(2))
    assert 0 < seen.timeout <= 2


def test_post_uses_injected_session() -> None:
    class _Session:
        def __init__(self) -> None:
            self.calls = 0

        def request(self, method, url, **kw):
            self.calls += 1
            return _FakeResp(200, [])

    session = _Session()
    assert _transport(http=session).post("v1/gettaxes", None, list[TaxItem]) == []
    assert session.calls == 1
