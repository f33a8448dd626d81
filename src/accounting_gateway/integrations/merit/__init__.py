"""Merit Aktiva (Estonia) / 360 Księgowość (Poland) backend."""

from accounting_gateway.integrations.merit.adapter import MeritProvider
from accounting_gateway.integrations.merit.client import (
    ESTONIA_URL,
    POLAND_URL,
    MeritClient,
    base_url_for_region,
)
from accounting_gateway.integrations.merit.transport import MeritTransport

__all__ = [
    "ESTONIA_URL",
    "POLAND_URL",
    "MeritClient",
    "MeritProvider",
    "MeritTransport",
    "base_url_for_region",
]
