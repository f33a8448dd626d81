"""Domain services, one per resource family.

Each service is a thin pass-through to a :class:`Provider`; only
``InvoiceService.batch_create`` adds behavior of its own.
"""

from accounting_gateway.services.customers import CustomerService
from accounting_gateway.services.invoices import InvoiceService
from accounting_gateway.services.items import ItemService
from accounting_gateway.services.payments import PaymentService
from accounting_gateway.services.purchases import PurchaseService
from accounting_gateway.services.reports import ReportService
from accounting_gateway.services.sync import SyncService
from accounting_gateway.services.taxes import TaxService

__all__ = [
    "CustomerService",
    "InvoiceService",
    "ItemService",
    "PaymentService",
    "PurchaseService",
    "ReportService",
    "SyncService",
    "TaxService",
]
