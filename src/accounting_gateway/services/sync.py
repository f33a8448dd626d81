"""Incremental sync: records changed within a window, by change date."""

from __future__ import annotations

from datetime import date

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.models import Invoice, Payment
from accounting_gateway.common.provider import Provider


class SyncService:
    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    def invoices_since(
        self, since: date, until: date, *, ctx: CallContext | None = None
    ) -> list[Invoice]:
        return self._provider.list_invoices_since(since, until, ctx=ctx)

    def payments_since(
        self, since: date, until: date, *, ctx: CallContext | None = None
    ) -> list[Payment]:
        return self._provider.list_payments_since(since, until, ctx=ctx)
