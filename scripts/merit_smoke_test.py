"""Smoke test: call a few read-only Merit Aktiva APIs with real credentials.

Env vars:
- MERIT_API_ID
- MERIT_API_KEY
- MERIT_REGION (ee|pl)       [default: ee]

Optional (for the invoice listing):
- MERIT_PERIOD_START=YYYY-MM-DD
- MERIT_PERIOD_END=YYYY-MM-DD

Run:
  python scripts/merit_smoke_test.py
"""

from __future__ import annotations

import logging
import os
from datetime import date

from dotenv import load_dotenv

from accounting_gateway import AccountingClient, CallContext
from accounting_gateway.common.inputs import ListInvoicesInput

load_dotenv()


def _require_env(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise SystemExit(
            f"Missing env var {name}. Put it in your .env and export it before running."
        )
    return value


def main() -> None:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    _require_env("MERIT_API_ID")
    _require_env("MERIT_API_KEY")

    client = AccountingClient.from_env()
    ctx = CallContext.with_timeout(60)

    print("Calling gettaxes...")
    client.test_connection(ctx=ctx)
    taxes = client.taxes.list(ctx=ctx)
    print(f"✅ {len(taxes)} tax rates")
    for tax in taxes[:5]:
        print(f"  {tax.code:<10} {tax.pct:>6}%  {tax.name}")

    accounts = client.taxes.list_accounts(ctx=ctx)
    active = sum(1 for a in accounts if a.active)
    print(f"✅ {len(accounts)} accounts ({active} active)")

    start = os.environ.get("MERIT_PERIOD_START")
    end = os.environ.get("MERIT_PERIOD_END")
    if start and end:
        print(f"\nCalling getinvoices for {start}..{end}...")
        invoices = client.invoices.list(
            ListInvoicesInput(
                period_start=date.fromisoformat(start),
                period_end=date.fromisoformat(end),
            ),
            ctx=ctx,
        )
        print(f"✅ {len(invoices)} invoices")
        for inv in invoices[:10]:
            print(f"  {inv.number:<12} {inv.customer_name:<30} {inv.total_amount:>12} {inv.status.value}")
    else:
        print(
            "\nSkipped invoice listing (set MERIT_PERIOD_START and MERIT_PERIOD_END to enable)."
        )


if __name__ == "__main__":
    main()
