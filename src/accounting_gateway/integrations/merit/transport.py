"""Signed HTTP transport for the Merit Aktiva API.

Every Merit endpoint is a POST with a JSON body. Authentication travels in the
query string:

- ApiId      the API identifier
- timestamp  UTC, YYYYMMDDHHmmss
- signature  base64(HMAC-SHA256(key=api_key, msg=ApiId + timestamp + body)),
             URL-encoded

The body that is signed must be byte-for-byte the body that is sent, so the
payload is serialized exactly once.

This module only knows HTTP: it reports *what* went wrong (status code, network
failure, cancelled context, undecodable body) and leaves classification to the
provider adapter.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import logging
import time
from datetime import datetime, timezone
from decimal import Decimal
from functools import lru_cache
from typing import Any
from urllib.parse import quote_plus

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from accounting_gateway.common.context import CallContext, ContextDone

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class TransportError(Exception):
    pass


class APIError(TransportError):
    """Non-2xx response. ``body`` is the raw response text."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"merit api: status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class NetworkError(TransportError):
    pass


class RequestCancelled(TransportError):
    pass


class DecodeError(TransportError):
    pass


def utc_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def sign(api_id: str, api_key: str, timestamp: str, body: bytes | str) -> str:
    if isinstance(body, str):
        body = body.encode("utf-8")
    message = (api_id + timestamp).encode("utf-8") + body
    digest = hmac.new(api_key.encode("utf-8"), message, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_payload(payload: Any) -> bytes:
    """Serialize a request payload to compact UTF-8 JSON."""

    if payload is None:
        payload = {}
    elif isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(
        payload,
        separators=(",", ":"),
        ensure_ascii=False,
        default=_json_default,
    ).encode("utf-8")


@lru_cache(maxsize=None)
def _type_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_response(content: bytes, response_type: Any) -> Any:
    try:
        raw = json.loads(content, parse_float=Decimal)
    except ValueError as e:
        raise DecodeError(f"merit: unmarshal response: {e}") from e

    try:
        return _type_adapter(response_type).validate_python(raw)
    except ValidationError as e:
        raise DecodeError(f"merit: unexpected response shape: {e}") from e


class MeritTransport:
    def __init__(
        self,
        *,
        api_id: str,
        api_key: str,
        base_url: str,
        http: Any | None = None,
        timeout_seconds: float = 30,
    ) -> None:
        self._api_id = api_id
        self._api_key = api_key
        self._base_url = base_url
        # Anything exposing requests' `.request(method, url, **kwargs)`.
        self._http = http if http is not None else requests
        self._timeout_seconds = timeout_seconds

    @property
    def base_url(self) -> str:
        return self._base_url

    def _build_url(self, endpoint: str, timestamp: str, signature: str) -> str:
        return (
            f"{self._base_url}{endpoint}"
            f"?ApiId={quote_plus(self._api_id)}"
            f"&timestamp={timestamp}"
            f"&signature={quote_plus(signature)}"
        )

    @staticmethod
    def _check_done(ctx: CallContext | None) -> None:
        if ctx is None:
            return
        try:
            ctx.raise_if_done()
        except ContextDone as e:
            raise RequestCancelled(f"merit: {e}") from e

    def _timeout(self, ctx: CallContext | None) -> float:
        self._check_done(ctx)
        if ctx is None:
            return self._timeout_seconds
        left = ctx.remaining()
        if left is None:
            return self._timeout_seconds
        return min(self._timeout_seconds, left)

    def post(
        self,
        endpoint: str,
        payload: Any = None,
        response_type: Any = None,
        *,
        ctx: CallContext | None = None,
    ) -> Any:
        """Send a signed POST to ``endpoint`` and decode the reply.

        ``response_type`` is a pydantic model or any type pydantic can validate
        (e.g. ``list[TaxItem]``). Returns None when no type is given or the
        2xx body is empty.
        """

        body = encode_payload(payload)
        timeout = self._timeout(ctx)

        ts = utc_timestamp()
        url = self._build_url(endpoint, ts, sign(self._api_id, self._api_key, ts, body))

        started = time.monotonic()
        try:
            resp = self._http.request(
                "POST",
                url,
                data=body,
                headers={"Content-Type": "application/json"},
                timeout=timeout,
            )
        except requests.RequestException as e:
            # A timeout capped at the deadline reports as cancellation.
            self._check_done(ctx)
            raise NetworkError(f"merit: send request: {e}") from e

        logger.debug(
            "merit POST %s -> %s in %.0f ms",
            endpoint,
            resp.status_code,
            (time.monotonic() - started) * 1000,
        )

        # requests cannot be interrupted mid-call; a context that finished while
        # the call was in flight still fails the call.
        self._check_done(ctx)

        if not 200 <= resp.status_code < 300:
            raise APIError(resp.status_code, resp.text)

        if response_type is None or not resp.content:
            return None
        return decode_response(resp.content, response_type)
