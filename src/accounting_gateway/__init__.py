"""Provider-neutral accounting gateway with a Merit Aktiva backend."""

from accounting_gateway.client import AccountingClient
from accounting_gateway.common.context import CallContext
from accounting_gateway.common.errors import (
    AccountingError,
    AuthFailedError,
    InvalidInputError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    UnsupportedProviderError,
)
from accounting_gateway.common.reference import generate_reference, validate_reference
from accounting_gateway.config.settings import GatewayConfig

__all__ = [
    "AccountingClient",
    "AccountingError",
    "AuthFailedError",
    "CallContext",
    "GatewayConfig",
    "InvalidInputError",
    "NotFoundError",
    "ProviderError",
    "RateLimitError",
    "UnsupportedProviderError",
    "generate_reference",
    "validate_reference",
]
