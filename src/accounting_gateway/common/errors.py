"""Error taxonomy shared by every provider.

Callers match on the exception class (``except NotFoundError``) or use the
``is_*`` helpers; message text is never part of the contract.
"""

from __future__ import annotations


class AccountingError(Exception):
    """Base class for all errors raised by the gateway."""


class InvalidInputError(AccountingError, ValueError):
    pass


class UnsupportedProviderError(AccountingError):
    def __init__(self, provider: str) -> None:
        super().__init__(f"unsupported provider: {provider!r}")
        self.provider = provider


class ProviderError(AccountingError):
    """A provider call failed.

    Carries the provider name and the operation that failed. The underlying
    error (transport failure, API error, decode failure) is chained as
    ``__cause__``.
    """

    default_message = "provider error"

    def __init__(self, provider: str, operation: str, message: str = "") -> None:
        self.provider = provider
        self.operation = operation
        self.message = message or self.default_message
        super().__init__(f"{provider}: {operation}: {self.message}")


class NotFoundError(ProviderError):
    default_message = "not found"


class AuthFailedError(ProviderError):
    default_message = "authentication failed"


class RateLimitError(ProviderError):
    default_message = "rate limit exceeded"


def is_not_found(err: BaseException | None) -> bool:
    return isinstance(err, NotFoundError)


def is_auth_failed(err: BaseException | None) -> bool:
    return isinstance(err, AuthFailedError)


def is_rate_limit(err: BaseException | None) -> bool:
    return isinstance(err, RateLimitError)
