"""Gateway configuration.

Env vars:
- ACCOUNTING_PROVIDER          [default: merit]
- MERIT_API_ID
- MERIT_API_KEY
- MERIT_REGION (ee|pl)         [default: ee]
- MERIT_HTTP_TIMEOUT_SECONDS   [default: 30]
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

DEFAULT_PROVIDER = "merit"
DEFAULT_REGION = "ee"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class GatewayConfig:
    api_id: str
    api_key: str
    provider: str = DEFAULT_PROVIDER
    region: str = DEFAULT_REGION
    # Optional requests.Session (or anything with a compatible .request()).
    http: Any | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, *, http: Any | None = None) -> "GatewayConfig":
        load_dotenv(override=False)
        api_id = os.environ.get("MERIT_API_ID")
        api_key = os.environ.get("MERIT_API_KEY")
        if not api_id or not api_key:
            raise ValueError("Missing MERIT_API_ID or MERIT_API_KEY")

        return cls(
            api_id=api_id,
            api_key=api_key,
            provider=os.environ.get("ACCOUNTING_PROVIDER", DEFAULT_PROVIDER),
            region=os.environ.get("MERIT_REGION", DEFAULT_REGION),
            http=http,
            timeout_seconds=float(
                os.environ.get("MERIT_HTTP_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
            ),
        )
