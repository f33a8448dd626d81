"""Provider-neutral request inputs.

Create inputs carry no identity; ids are assigned by the backend. On update
inputs every field except ``id`` is optional and ``None`` means "leave the
remote value alone".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from accounting_gateway.common.models import ItemType


@dataclass(frozen=True, slots=True)
class CreateInvoiceLineInput:
    code: str
    description: str
    quantity: Decimal
    unit_price: Decimal
    tax_id: str
    account_code: str = ""
    item_type: ItemType | None = None
    uom_name: str = ""


@dataclass(frozen=True, slots=True)
class CreateInvoiceInput:
    customer_name: str
    invoice_no: str
    lines: list[CreateInvoiceLineInput] = field(default_factory=list)
    customer_id: str = ""
    customer_reg_no: str = ""
    customer_email: str = ""
    customer_address: str = ""
    customer_country_code: str = ""
    doc_date: date | None = None
    due_date: date | None = None
    ref_no: str = ""
    currency: str = ""
    comment: str = ""
    footer_comment: str = ""


@dataclass(frozen=True, slots=True)
class CreateCreditNoteInput:
    customer_name: str
    invoice_no: str
    lines: list[CreateInvoiceLineInput] = field(default_factory=list)
    customer_id: str = ""
    customer_reg_no: str = ""
    customer_email: str = ""
    customer_address: str = ""
    customer_country_code: str = ""
    doc_date: date | None = None
    due_date: date | None = None
    ref_no: str = ""
    currency: str = ""
    comment: str = ""
    footer_comment: str = ""


@dataclass(frozen=True, slots=True)
class CreatePurchaseInput:
    vendor_name: str
    bill_no: str
    lines: list[CreateInvoiceLineInput] = field(default_factory=list)
    vendor_id: str = ""
    vendor_reg_no: str = ""
    vendor_email: str = ""
    vendor_address: str = ""
    vendor_country_code: str = ""
    doc_date: date | None = None
    due_date: date | None = None
    ref_no: str = ""
    currency: str = ""
    comment: str = ""
    footer_comment: str = ""


@dataclass(frozen=True, slots=True)
class ListInvoicesInput:
    period_start: date
    period_end: date
    unpaid_only: bool = False


@dataclass(frozen=True, slots=True)
class ListPurchasesInput:
    period_start: date
    period_end: date


@dataclass(frozen=True, slots=True)
class ListPaymentsInput:
    period_start: date
    period_end: date
    bank_id: str = ""


@dataclass(frozen=True, slots=True)
class CreateCustomerInput:
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
    payment_days: int | None = None
    contact: str = ""


@dataclass(frozen=True, slots=True)
class UpdateCustomerInput:
    id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    reg_no: str | None = None
    vat_reg_no: str | None = None


@dataclass(frozen=True, slots=True)
class ListCustomersInput:
    name: str = ""
    reg_no: str = ""


@dataclass(frozen=True, slots=True)
class ListVendorsInput:
    name: str = ""
    reg_no: str = ""


@dataclass(frozen=True, slots=True)
class CreateVendorInput:
    name: str
    reg_no: str = ""
    vat_reg_no: str = ""
    vat_accountable: bool = False
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    county: str = ""
    postal_code: str = ""
    country_code: str = ""
    currency: str = ""
    payment_days: int | None = None
    bank_account: str = ""


@dataclass(frozen=True, slots=True)
class UpdateVendorInput:
    id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    reg_no: str | None = None
    vat_reg_no: str | None = None
    vat_accountable: bool | None = None
    bank_account: str | None = None
    payment_days: int | None = None


@dataclass(frozen=True, slots=True)
class CreatePaymentInput:
    customer_name: str
    invoice_no: str
    payment_date: date
    amount: Decimal
    currency: str = ""
    bank_id: str = ""


@dataclass(frozen=True, slots=True)
class CreatePurchasePaymentInput:
    vendor_name: str
    bill_no: str
    payment_date: date
    amount: Decimal
    currency: str = ""
    bank_id: str = ""


@dataclass(frozen=True, slots=True)
class CreateItemInput:
    code: str
    description: str
    type: ItemType = ItemType.ITEM
    unit_of_measure: str = ""
    sales_price: Decimal = Decimal("0")
    tax_id: str = ""
    sales_account_code: str = ""
    purchase_account_code: str = ""


@dataclass(frozen=True, slots=True)
class UpdateItemInput:
    id: str
    code: str | None = None
    description: str | None = None
    sales_price: Decimal | None = None
    tax_id: str | None = None


@dataclass(frozen=True, slots=True)
class ListItemsInput:
    code: str = ""
    description: str = ""
    type: ItemType | None = None
