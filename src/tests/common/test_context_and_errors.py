from __future__ import annotations

from decimal import Decimal

import pytest

from accounting_gateway.common.context import CallContext, ContextDone
from accounting_gateway.common.errors import (
    AccountingError,
    AuthFailedError,
    NotFoundError,
    ProviderError,
    RateLimitError,
    is_auth_failed,
    is_not_found,
    is_rate_limit,
)
from accounting_gateway.common.models import InvoiceStatus, derive_invoice_status


def test_fresh_context_is_not_done() -> None:
    ctx = CallContext()
    assert not ctx.cancelled
    assert ctx.remaining() is None
    ctx.raise_if_done()


def test_cancelled_context_raises() -> None:
    ctx = CallContext()
    ctx.cancel()
    assert ctx.cancelled
    with pytest.raises(ContextDone, match="cancelled"):
        ctx.raise_if_done()


def test_expired_deadline_raises() -> None:
    ctx = CallContext.with_timeout(-1)
    assert ctx.remaining() < 0
    with pytest.raises(ContextDone, match="deadline"):
        ctx.raise_if_done()


def test_with_timeout_sets_remaining() -> None:
    ctx = CallContext.with_timeout(30)
    assert 0 < ctx.remaining() <= 30


def test_provider_errors_carry_provider_and_operation() -> None:
    err = NotFoundError("merit", "get_invoice")
    assert err.provider == "merit"
    assert err.operation == "get_invoice"
    assert str(err) == "merit: get_invoice: not found"
    assert isinstance(err, ProviderError)
    assert isinstance(err, AccountingError)


def test_is_helpers_match_only_their_kind() -> None:
    not_found = NotFoundError("merit", "op")
    auth = AuthFailedError("merit", "op")
    rate = RateLimitError("merit", "op")
    opaque = ProviderError("merit", "op", "boom")

    assert is_not_found(not_found) and not is_not_found(opaque)
    assert is_auth_failed(auth) and not is_auth_failed(not_found)
    assert is_rate_limit(rate) and not is_rate_limit(auth)
    assert not any(f(opaque) for f in (is_not_found, is_auth_failed, is_rate_limit))
    assert not is_not_found(None)


@pytest.mark.parametrize(
    "paid, paid_amount, expected",
    [
        (True, Decimal("0"), InvoiceStatus.PAID),
        (True, Decimal("100.00"), InvoiceStatus.PAID),
        (False, Decimal("5.00"), InvoiceStatus.PARTIAL),
        (False, Decimal("0"), InvoiceStatus.UNPAID),
        (False, Decimal("-1.00"), InvoiceStatus.UNPAID),
    ],
)
def test_derive_invoice_status(paid: bool, paid_amount: Decimal, expected: InvoiceStatus) -> None:
    assert derive_invoice_status(paid, paid_amount) is expected
