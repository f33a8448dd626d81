from __future__ import annotations

from datetime import date

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.models import CustomerDebt, FinancialReport
from accounting_gateway.common.provider import Provider


class ReportService:
    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    def customer_debts(
        self,
        customer_name: str = "",
        overdue_days: int | None = None,
        *,
        ctx: CallContext | None = None,
    ) -> list[CustomerDebt]:
        return self._provider.customer_debts(customer_name, overdue_days, ctx=ctx)

    def profit_loss(
        self, end_date: date, periods: int = 1, *, ctx: CallContext | None = None
    ) -> FinancialReport:
        return self._provider.profit_loss(end_date, periods, ctx=ctx)

    def balance_sheet(
        self, end_date: date, periods: int = 1, *, ctx: CallContext | None = None
    ) -> FinancialReport:
        return self._provider.balance_sheet(end_date, periods, ctx=ctx)
