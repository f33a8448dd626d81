from __future__ import annotations

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.inputs import (
    CreatePurchaseInput,
    CreateVendorInput,
    ListPurchasesInput,
    ListVendorsInput,
    UpdateVendorInput,
)
from accounting_gateway.common.models import PurchaseInvoice, Vendor
from accounting_gateway.common.provider import Provider


class PurchaseService:
    """Purchase invoices (bills) and the vendors they are issued by."""

    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    def create(
        self, data: CreatePurchaseInput, *, ctx: CallContext | None = None
    ) -> PurchaseInvoice:
        return self._provider.create_purchase(data, ctx=ctx)

    def get(self, purchase_id: str, *, ctx: CallContext | None = None) -> PurchaseInvoice:
        return self._provider.get_purchase(purchase_id, ctx=ctx)

    def list(
        self, data: ListPurchasesInput, *, ctx: CallContext | None = None
    ) -> list[PurchaseInvoice]:
        return self._provider.list_purchases(data, ctx=ctx)

    def delete(self, purchase_id: str, *, ctx: CallContext | None = None) -> None:
        self._provider.delete_purchase(purchase_id, ctx=ctx)

    def list_vendors(
        self, data: ListVendorsInput | None = None, *, ctx: CallContext | None = None
    ) -> list[Vendor]:
        return self._provider.list_vendors(data or ListVendorsInput(), ctx=ctx)

    def create_vendor(
        self, data: CreateVendorInput, *, ctx: CallContext | None = None
    ) -> Vendor:
        return self._provider.create_vendor(data, ctx=ctx)

    def update_vendor(self, data: UpdateVendorInput, *, ctx: CallContext | None = None) -> None:
        self._provider.update_vendor(data, ctx=ctx)
