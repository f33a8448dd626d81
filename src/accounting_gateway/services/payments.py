from __future__ import annotations

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.inputs import (
    CreatePaymentInput,
    CreatePurchasePaymentInput,
    ListPaymentsInput,
)
from accounting_gateway.common.models import Payment
from accounting_gateway.common.provider import Provider


class PaymentService:
    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    def create(self, data: CreatePaymentInput, *, ctx: CallContext | None = None) -> None:
        self._provider.create_payment(data, ctx=ctx)

    def create_purchase_payment(
        self, data: CreatePurchasePaymentInput, *, ctx: CallContext | None = None
    ) -> None:
        self._provider.create_purchase_payment(data, ctx=ctx)

    def list(self, data: ListPaymentsInput, *, ctx: CallContext | None = None) -> list[Payment]:
        return self._provider.list_payments(data, ctx=ctx)

    def delete(self, payment_id: str, *, ctx: CallContext | None = None) -> None:
        self._provider.delete_payment(payment_id, ctx=ctx)
