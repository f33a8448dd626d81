"""Invoice service, including bounded-concurrency batch creation."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.inputs import (
    CreateCreditNoteInput,
    CreateInvoiceInput,
    ListInvoicesInput,
)
from accounting_gateway.common.models import BatchResult, Invoice, InvoicePDF
from accounting_gateway.common.provider import Provider

logger = logging.getLogger(__name__)

# Upper bound on concurrent create calls issued by batch_create.
BATCH_CONCURRENCY = 5


class InvoiceService:
    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    def create(self, data: CreateInvoiceInput, *, ctx: CallContext | None = None) -> Invoice:
        return self._provider.create_invoice(data, ctx=ctx)

    def get(self, invoice_id: str, *, ctx: CallContext | None = None) -> Invoice:
        return self._provider.get_invoice(invoice_id, ctx=ctx)

    def get_pdf(
        self,
        invoice_id: str,
        delivery_note: bool = False,
        *,
        ctx: CallContext | None = None,
    ) -> InvoicePDF:
        return self._provider.get_invoice_pdf(invoice_id, delivery_note, ctx=ctx)

    def list(self, data: ListInvoicesInput, *, ctx: CallContext | None = None) -> list[Invoice]:
        return self._provider.list_invoices(data, ctx=ctx)

    def delete(self, invoice_id: str, *, ctx: CallContext | None = None) -> None:
        self._provider.delete_invoice(invoice_id, ctx=ctx)

    def create_credit_note(
        self, data: CreateCreditNoteInput, *, ctx: CallContext | None = None
    ) -> Invoice:
        return self._provider.create_credit_note(data, ctx=ctx)

    def batch_create(
        self,
        inputs: Sequence[CreateInvoiceInput],
        *,
        ctx: CallContext | None = None,
    ) -> list[BatchResult]:
        """Create many invoices, at most ``BATCH_CONCURRENCY`` at a time.

        ``result[i]`` always belongs to ``inputs[i]``. Every item runs to
        completion; a failure is recorded in that item's ``error`` and does
        not stop the others. Returns only after every create has finished.
        """

        if not inputs:
            return []

        # One slot per input; each worker writes only its own index.
        results = [BatchResult(index=i) for i in range(len(inputs))]

        def _create_one(index: int, data: CreateInvoiceInput) -> None:
            try:
                invoice = self._provider.create_invoice(data, ctx=ctx)
            except Exception as e:
                logger.warning("batch_create: item %d (%s) failed: %s", index, data.invoice_no, e)
                results[index] = BatchResult(index=index, error=e)
            else:
                results[index] = BatchResult(index=index, invoice=invoice)

        with ThreadPoolExecutor(
            max_workers=BATCH_CONCURRENCY, thread_name_prefix="batch-invoice"
        ) as pool:
            futures = [pool.submit(_create_one, i, data) for i, data in enumerate(inputs)]
            for future in futures:
                future.result()

        failed = sum(1 for r in results if not r.ok)
        logger.info("batch_create: %d invoices, %d failed", len(inputs), failed)
        return results
