from __future__ import annotations

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.models import Account, Tax
from accounting_gateway.common.provider import Provider


class TaxService:
    """Reference data: VAT rates and the chart of accounts."""

    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    def list(self, *, ctx: CallContext | None = None) -> list[Tax]:
        return self._provider.list_taxes(ctx=ctx)

    def list_accounts(self, *, ctx: CallContext | None = None) -> list[Account]:
        return self._provider.list_accounts(ctx=ctx)
