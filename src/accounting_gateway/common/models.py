"""Provider-neutral accounting entities.

Entities are built only by a provider adapter from a decoded response. They
are immutable; money is always ``Decimal``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class InvoiceStatus(str, Enum):
    UNPAID = "unpaid"
    PARTIAL = "partial"
    PAID = "paid"


class PaymentDirection(str, Enum):
    CUSTOMER = "customer"
    VENDOR = "vendor"
    OTHER_INCOME = "other_income"
    OTHER_EXPENSE = "other_expense"


class ItemType(str, Enum):
    STOCK = "stock"
    SERVICE = "service"
    ITEM = "item"


def derive_invoice_status(paid: bool, paid_amount: Decimal) -> InvoiceStatus:
    """The one place an invoice status is derived."""

    if paid:
        return InvoiceStatus.PAID
    if paid_amount > 0:
        return InvoiceStatus.PARTIAL
    return InvoiceStatus.UNPAID


@dataclass(frozen=True, slots=True)
class InvoiceLine:
    id: str
    description: str
    quantity: Decimal
    unit_price: Decimal
    tax_id: str = ""
    tax_name: str = ""
    tax_pct: Decimal = Decimal("0")
    amount_excl_vat: Decimal = Decimal("0")
    amount_incl_vat: Decimal = Decimal("0")
    vat_amount: Decimal = Decimal("0")
    account_code: str = ""


@dataclass(frozen=True, slots=True)
class InvoicePayment:
    date: date | None
    amount: Decimal
    method: str = ""
    payment_id: str = ""


@dataclass(frozen=True, slots=True)
class Invoice:
    id: str
    number: str
    customer_name: str = ""
    customer_id: str = ""
    doc_date: date | None = None
    due_date: date | None = None
    total_amount: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    paid_amount: Decimal = Decimal("0")
    currency: str = ""
    paid: bool = False
    status: InvoiceStatus = InvoiceStatus.UNPAID
    reference_no: str = ""
    lines: tuple[InvoiceLine, ...] = ()
    payments: tuple[InvoicePayment, ...] = ()


@dataclass(frozen=True, slots=True)
class InvoicePDF:
    file_name: str
    content: bytes = field(repr=False)


@dataclass(frozen=True, slots=True)
class Customer:
    id: str
    name: str
    reg_no: str = ""
    vat_reg_no: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    county: str = ""
    postal_code: str = ""
    country_code: str = ""
    currency: str = ""
    payment_days: int = 0
    contact: str = ""
    home_page: str = ""


@dataclass(frozen=True, slots=True)
class Vendor:
    id: str
    name: str
    reg_no: str = ""
    vat_reg_no: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country_code: str = ""
    currency: str = ""
    payment_days: int = 0
    bank_account: str = ""


@dataclass(frozen=True, slots=True)
class PaymentInvoiceLink:
    invoice_id: str
    invoice_no: str
    amount: Decimal


@dataclass(frozen=True, slots=True)
class Payment:
    id: str
    document_no: str
    document_date: date | None
    amount: Decimal
    currency: str = ""
    direction: PaymentDirection = PaymentDirection.CUSTOMER
    counter_part_id: str = ""
    counter_part_name: str = ""
    invoice_links: tuple[PaymentInvoiceLink, ...] = ()


@dataclass(frozen=True, slots=True)
class Tax:
    id: str
    code: str
    name: str
    pct: Decimal


@dataclass(frozen=True, slots=True)
class Account:
    id: str
    code: str
    name: str
    active: bool


@dataclass(frozen=True, slots=True)
class Item:
    id: str
    code: str
    name: str = ""
    description: str = ""
    type: ItemType = ItemType.ITEM
    unit_of_measure: str = ""
    sales_price: Decimal = Decimal("0")
    tax_id: str = ""


@dataclass(frozen=True, slots=True)
class PurchaseInvoice:
    id: str
    number: str
    vendor_name: str = ""
    vendor_id: str = ""
    doc_date: date | None = None
    due_date: date | None = None
    total_amount: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")
    paid_amount: Decimal = Decimal("0")
    currency: str = ""
    paid: bool = False
    status: InvoiceStatus = InvoiceStatus.UNPAID
    reference_no: str = ""


@dataclass(frozen=True, slots=True)
class CustomerDebt:
    customer_name: str
    customer_id: str
    doc_type: str
    doc_date: date | None
    doc_no: str
    due_date: date | None
    total_amount: Decimal
    paid_amount: Decimal
    unpaid_amount: Decimal
    currency: str = ""


@dataclass(frozen=True, slots=True)
class FinancialReportDetail:
    account_code: str
    account_name: str
    balances: tuple[Decimal, ...] = ()


@dataclass(frozen=True, slots=True)
class FinancialReportRow:
    description: str
    row_type: int
    balances: tuple[Decimal, ...] = ()
    details: tuple[FinancialReportDetail, ...] = ()


@dataclass(frozen=True, slots=True)
class FinancialReport:
    rows: tuple[FinancialReportRow, ...] = ()


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Outcome of one batch item; exactly one of invoice/error is set."""

    index: int
    invoice: Invoice | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
