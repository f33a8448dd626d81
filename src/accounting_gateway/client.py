"""Top-level entry point.

    client = AccountingClient.from_env()
    client.test_connection()
    invoices = client.invoices.list(ListInvoicesInput(...))
"""

from __future__ import annotations

import logging
from typing import Any

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.errors import UnsupportedProviderError
from accounting_gateway.common.provider import Provider
from accounting_gateway.config.settings import GatewayConfig
from accounting_gateway.integrations.merit.adapter import MeritProvider
from accounting_gateway.integrations.merit.client import MeritClient, base_url_for_region
from accounting_gateway.services import (
    CustomerService,
    InvoiceService,
    ItemService,
    PaymentService,
    PurchaseService,
    ReportService,
    SyncService,
    TaxService,
)

logger = logging.getLogger(__name__)


def build_provider(config: GatewayConfig) -> Provider:
    name = (config.provider or "").strip().lower()
    if name == "merit":
        base_url = base_url_for_region(config.region)
        logger.debug("Using merit provider at %s", base_url)
        return MeritProvider(
            MeritClient(
                api_id=config.api_id,
                api_key=config.api_key,
                base_url=base_url,
                http=config.http,
                timeout_seconds=config.timeout_seconds,
            )
        )
    raise UnsupportedProviderError(config.provider)


class AccountingClient:
    def __init__(self, config: GatewayConfig) -> None:
        self._provider = build_provider(config)
        self.invoices = InvoiceService(self._provider)
        self.customers = CustomerService(self._provider)
        self.payments = PaymentService(self._provider)
        self.items = ItemService(self._provider)
        self.purchases = PurchaseService(self._provider)
        self.taxes = TaxService(self._provider)
        self.reports = ReportService(self._provider)
        self.sync = SyncService(self._provider)

    @classmethod
    def from_env(cls, *, http: Any | None = None) -> "AccountingClient":
        return cls(GatewayConfig.from_env(http=http))

    @property
    def provider_name(self) -> str:
        return self._provider.name

    def test_connection(self, *, ctx: CallContext | None = None) -> None:
        """Verify the credentials with one cheap read call."""
        self._provider.test_connection(ctx=ctx)
