"""Merit Aktiva wire schema.

Field names follow the Merit JSON contract. Most are plain PascalCase and come
from the alias generator; the irregular ones (``SIHId``, ``UOMName``,
``PuchaseAccCode`` ...) carry an explicit alias.

Request models: fields that Merit treats as optional default to None and are
dropped on serialization (``exclude_none``). Response models: Merit sends
``null`` freely, so every field tolerates it and falls back to an empty value.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_pascal

DATE_FORMAT = "%Y%m%d"

# Accounting document types.
DOC_INVOICE = 1
DOC_RECEIPT = 2
DOC_RECEIPT2 = 3
DOC_NO_DOC = 4
DOC_CREDIT = 5
DOC_PREP_INVOICE = 6
DOC_FIN_CHARGE = 7
DOC_DELIV_ORDER = 8
DOC_GROUP_INVOICE = 9

# Item types.
ITEM_TYPE_STOCK = 1
ITEM_TYPE_SERVICE = 2
ITEM_TYPE_ITEM = 3

# Item usage.
ITEM_USAGE_SALES = 1
ITEM_USAGE_PURCHASE = 2
ITEM_USAGE_BOTH = 3

# Payment directions.
DIRECTION_CUSTOMERS = 1
DIRECTION_VENDORS = 2
DIRECTION_OTHER_INCOME = 3
DIRECTION_OTHER_EXPENSES = 4

# Counter-part types.
COUNTER_PART_CUSTOMER = 2
COUNTER_PART_VENDOR = 3

# DateType filter on list endpoints.
DATE_TYPE_DOCUMENT = 0
DATE_TYPE_CHANGED = 1


def format_date(d: date | None) -> str | None:
    if d is None:
        return None
    return d.strftime(DATE_FORMAT)


def parse_date(s: str | None) -> date | None:
    """Parse a Merit date; unparseable values become None.

    List endpoints return ``YYYYMMDD``; some detail endpoints return ISO
    datetimes (``2025-01-31T00:00:00``).
    """

    s = (s or "").strip()
    if not s:
        return None
    if "T" in s:
        s = s[:19]  # drop fractional seconds / offset
    for fmt in (DATE_FORMAT, "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d"):
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


def _text(v: Any) -> Any:
    if v is None:
        return ""
    if isinstance(v, (int, Decimal)) and not isinstance(v, bool):
        return str(v)
    return v


def _amount(v: Any) -> Any:
    if v is None or v == "":
        return Decimal("0")
    return v


def _code(v: Any) -> Any:
    if v is None or v == "":
        return 0
    return v


def _flag(v: Any) -> Any:
    return False if v is None else v


def _items(v: Any) -> Any:
    return [] if v is None else v


Text = Annotated[str, BeforeValidator(_text)]
Amount = Annotated[Decimal, BeforeValidator(_amount)]
Code = Annotated[int, BeforeValidator(_code)]
Flag = Annotated[bool, BeforeValidator(_flag)]


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )


# --- Shared sub-types ---


class DimensionRef(WireModel):
    dim_id: int | None = None
    dim_value_id: str | None = None
    dim_code: str | None = None


Dimensions = Annotated[list[DimensionRef], BeforeValidator(_items)]


class CustomerRef(WireModel):
    id: str | None = None
    name: str | None = None
    reg_no: str | None = None
    not_td_customer: bool | None = Field(default=None, alias="NotTDCustomer")
    vat_reg_no: str | None = None
    currency_code: str | None = None
    payment_dead_line: int | None = None
    ref_no_base: str | None = None
    address: str | None = None
    country_code: str | None = None
    county: str | None = None
    city: str | None = None
    postal_code: str | None = None
    phone_no: str | None = None
    home_page: str | None = None
    email: str | None = None
    sales_inv_lang: str | None = None
    contact: str | None = None
    bank_account: str | None = None
    dimensions: list[DimensionRef] | None = None


class VendorRef(WireModel):
    id: str | None = None
    name: str | None = None
    reg_no: str | None = None
    vat_accountable: bool | None = None
    vat_reg_no: str | None = None
    currency_code: str | None = None
    payment_dead_line: int | None = None
    address: str | None = None
    city: str | None = None
    county: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    phone_no: str | None = None
    home_page: str | None = None
    email: str | None = None


class ItemRef(WireModel):
    code: str = ""
    description: str = ""
    type: int | None = None
    uom_name: str | None = Field(default=None, alias="UOMName")
    def_location_code: str | None = None
    sales_acc_code: str | None = None
    # Merit spells this one "Puchase".
    purchase_acc_code: str | None = Field(default=None, alias="PuchaseAccCode")


class InvoiceRow(WireModel):
    item: ItemRef
    quantity: Decimal | None = None
    price: Decimal | None = None
    discount_pct: Decimal | None = None
    discount_amount: Decimal | None = None
    tax_id: str = ""
    location_code: str | None = None
    department_code: str | None = None
    gl_account_code: str | None = Field(default=None, alias="GLAccountCode")
    dimensions: list[DimensionRef] | None = None
    project_code: str | None = None
    cost_center_code: str | None = None


class TaxAmountEntry(WireModel):
    tax_id: str
    amount: Decimal


class PaymentEntry(WireModel):
    payment_method: str | None = None
    paid_amount: Decimal | None = None
    paym_date: str | None = None


class Attachment(WireModel):
    file_name: Text = ""
    file_content: Text = ""


# --- Sales invoices ---


class ListInvoicesParams(WireModel):
    period_start: str
    period_end: str
    un_paid: bool | None = None
    date_type: int | None = None


class InvoiceListItem(WireModel):
    sih_id: Text = Field(default="", alias="SIHId")
    department_code: Text = ""
    department_name: Text = ""
    invoice_no: Text = ""
    document_date: Text = ""
    transaction_date: Text = ""
    customer_name: Text = ""
    customer_reg_no: Text = ""
    customer_id: Text = ""
    h_comment: Text = ""
    f_comment: Text = ""
    due_date: Text = ""
    currency_code: Text = ""
    currency_rate: Amount = Decimal("0")
    tax_amount: Amount = Decimal("0")
    rounding_amount: Amount = Decimal("0")
    total_amount: Amount = Decimal("0")
    profit_amount: Amount = Decimal("0")
    total_sum: Amount = Decimal("0")
    user_name: Text = ""
    reference_no: Text = ""
    price_incl_vat: Flag = False
    vat_reg_no: Text = ""
    paid_amount: Amount = Decimal("0")
    e_inv_sent: Flag = False
    email_sent: Text = ""
    paid: Flag = False
    changed_date: Text = ""
    accounting_doc: Code = 0
    batch_info: Text = ""


class GetInvoiceParams(WireModel):
    id: str
    add_attachment: bool | None = None


class InvoiceDetailRow(WireModel):
    sil_id: Text = Field(default="", alias="SILId")
    article_code: Text = ""
    location_code: Text = ""
    quantity: Amount = Decimal("0")
    price: Amount = Decimal("0")
    tax_id: Text = ""
    tax_name: Text = ""
    tax_pct: Amount = Decimal("0")
    amount_excl_vat: Amount = Decimal("0")
    amount_incl_vat: Amount = Decimal("0")
    vat_amount: Amount = Decimal("0")
    account_code: Text = ""
    department_code: Text = ""
    item_cost_amount: Amount = Decimal("0")
    discount_pct: Amount = Decimal("0")
    discount_amount: Amount = Decimal("0")
    description: Text = ""
    uom_name: Text = Field(default="", alias="UOMName")


class PaymentInfo(WireModel):
    paym_date: Text = ""
    amount: Amount = Decimal("0")
    payment_method: Text = ""
    payment_id: Text = ""


class InvoiceDetail(WireModel):
    """Shared by sales invoices and purchase invoices (``getpurchorder``)."""

    sih_id: Text = Field(default="", alias="SIHId")
    department_code: Text = ""
    project_code: Text = ""
    batch_info: Text = ""
    invoice_no: Text = ""
    document_date: Text = ""
    transaction_date: Text = ""
    customer_id: Text = ""
    customer_name: Text = ""
    customer_reg_no: Text = ""
    h_comment: Text = ""
    f_comment: Text = ""
    due_date: Text = ""
    currency_code: Text = ""
    currency_rate: Amount = Decimal("0")
    tax_amount: Amount = Decimal("0")
    rounding_amount: Amount = Decimal("0")
    total_amount: Amount = Decimal("0")
    total_sum: Amount = Decimal("0")
    reference_no: Text = ""
    price_incl_vat: Flag = False
    vat_reg_no: Text = ""
    paid_amount: Amount = Decimal("0")
    e_inv_operator: Code = 0
    contract_no: Text = ""
    paid: Flag = False
    contact: Text = ""
    dimensions: Dimensions = []
    lines: Annotated[list[InvoiceDetailRow], BeforeValidator(_items)] = []
    payments: Annotated[list[PaymentInfo], BeforeValidator(_items)] = []
    attachment: Attachment | None = None


class CreateInvoiceRequest(WireModel):
    customer: CustomerRef
    accounting_doc: int = DOC_INVOICE
    doc_date: str | None = None
    due_date: str | None = None
    transaction_date: str | None = None
    invoice_no: str = ""
    ref_no: str | None = None
    currency_code: str | None = None
    currency_rate: Decimal | None = None
    department_code: str | None = None
    dimensions: list[DimensionRef] | None = None
    invoice_row: list[InvoiceRow] = []
    tax_amount: list[TaxAmountEntry] = []
    rounding_amount: Decimal | None = None
    total_amount: Decimal | None = None
    payment: PaymentEntry | None = None
    hcomment: str | None = None
    fcomment: str | None = None
    contract_no: str | None = None
    pdf: str | None = Field(default=None, alias="PDF")
    file_name: str | None = None
    payer: CustomerRef | None = None
    reserve_items: bool | None = None


class CreateInvoiceResponse(WireModel):
    customer_id: Text = ""
    invoice_id: Text = ""
    invoice_no: Text = ""
    ref_no: Text = ""
    new_customer: Flag = False


class GetInvoicePDFParams(WireModel):
    id: str
    # True returns a delivery note (no prices).
    deliv_note: bool | None = None


class DeleteInvoiceParams(WireModel):
    id: str


# --- Purchase invoices ---


class ListPurchasesParams(WireModel):
    period_start: str
    period_end: str
    date_type: int | None = None


class PurchaseListItem(WireModel):
    pih_id: Text = Field(default="", alias="PIHId")
    department_code: Text = ""
    batch_info: Text = ""
    bill_no: Text = ""
    document_date: Text = ""
    transaction_date: Text = ""
    due_date: Text = ""
    vendor_id: Text = ""
    vendor_name: Text = ""
    vendor_reg_no: Text = ""
    reference_no: Text = ""
    currency_code: Text = ""
    currency_rate: Amount = Decimal("0")
    tax_amount: Amount = Decimal("0")
    rounding_amount: Amount = Decimal("0")
    total_amount: Amount = Decimal("0")
    total_sum: Amount = Decimal("0")
    price_incl_vat: Flag = False
    paid_amount: Amount = Decimal("0")
    file_exists: Flag = False
    paid: Flag = False
    changed_date: Text = ""


class CreatePurchaseRequest(WireModel):
    vendor: VendorRef
    expense_claim: bool | None = None
    doc_date: str | None = None
    due_date: str | None = None
    transaction_date: str | None = None
    bill_no: str = ""
    ref_no: str | None = None
    bank_account: str | None = None
    currency_code: str | None = None
    currency_rate: Decimal | None = None
    department_code: str | None = None
    dimensions: list[DimensionRef] | None = None
    invoice_row: list[InvoiceRow] = []
    tax_amount: list[TaxAmountEntry] = []
    rounding_amount: Decimal | None = None
    total_amount: Decimal | None = None
    payment: PaymentEntry | None = None
    hcomment: str | None = None
    fcomment: str | None = None
    attachment: Attachment | None = None


class CreatePurchaseResponse(WireModel):
    vendor_id: Text = ""
    bill_id: Text = ""
    bill_no: Text = ""
    ref_no: Text = ""
    # Merit's spelling.
    batch_info: Text = Field(default="", alias="BatcInfo")


class DeletePurchaseParams(WireModel):
    id: str


# --- Customers ---


class ListCustomersParams(WireModel):
    id: str | None = None
    reg_no: str | None = None
    vat_reg_no: str | None = None
    name: str | None = None
    with_comments: bool | None = None
    changed_date: str | None = None


class CustomerListItem(WireModel):
    customer_id: Text = ""
    name: Text = ""
    reg_no: Text = ""
    contact: Text = ""
    phone_no: Text = ""
    phone_no2: Text = Field(default="", alias="PhoneNo2")
    address: Text = ""
    city: Text = ""
    county: Text = ""
    postal_code: Text = ""
    country_name: Text = ""
    country_code: Text = ""
    email: Text = ""
    home_page: Text = ""
    currency_code: Text = ""
    customer_group_id: Text = ""
    customer_group_name: Text = ""
    payment_dead_line: Code = 0
    overdue_charge: Amount = Decimal("0")
    vat_reg_no: Text = ""
    not_td_customer: Flag = Field(default=False, alias="NotTDCustomer")
    bank_account: Text = ""
    sales_inv_lang: Text = ""
    ref_no_base: Text = ""
    dimensions: Dimensions = []
    changed_date: Text = ""


class CreateCustomerRequest(WireModel):
    id: str | None = None
    name: str
    reg_no: str | None = None
    not_td_customer: bool = Field(default=False, alias="NotTDCustomer")
    vat_reg_no: str | None = None
    currency_code: str | None = None
    payment_dead_line: int | None = None
    ref_no_base: str | None = None
    address: str | None = None
    country_code: str | None = None
    county: str | None = None
    city: str | None = None
    postal_code: str | None = None
    phone_no: str | None = None
    home_page: str | None = None
    email: str | None = None
    sales_inv_lang: str | None = None
    contact: str | None = None
    bank_account: str | None = None
    dimensions: list[DimensionRef] | None = None


class CreateCustomerResponse(WireModel):
    id: Text = ""
    name: Text = ""


class UpdateCustomerRequest(WireModel):
    id: str
    name: str | None = None
    country_code: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    phone_no: str | None = None
    email: str | None = None
    reg_no: str | None = None
    vat_reg_no: str | None = None
    sales_inv_lang: str | None = None
    ref_no_base: str | None = None
    bank_account: str | None = None
    contact: str | None = None
    payment_dead_line: int | None = None
    not_td_customer: bool | None = Field(default=None, alias="NotTDCustomer")


# --- Vendors ---


class ListVendorsParams(WireModel):
    id: str | None = None
    reg_no: str | None = None
    vat_reg_no: str | None = None
    name: str | None = None
    changed_date: str | None = None


class VendorListItem(WireModel):
    vendor_id: Text = ""
    vendor_type: Code = 0
    name: Text = ""
    reg_no: Text = ""
    contact: Text = ""
    phone_no: Text = ""
    address: Text = ""
    city: Text = ""
    county: Text = ""
    postal_code: Text = ""
    country_code: Text = ""
    email: Text = ""
    home_page: Text = ""
    currency_code: Text = ""
    payment_dead_line: Code = 0
    bank_account: Text = ""
    reference_no: Text = ""
    vat_reg_no: Text = ""
    vat_accountable: Flag = False
    dimensions: Dimensions = []
    changed_date: Text = ""


class CreateVendorRequest(WireModel):
    id: str | None = None
    name: str
    reg_no: str | None = None
    vat_accountable: bool = False
    vat_reg_no: str | None = None
    currency_code: str | None = None
    payment_dead_line: int | None = None
    address: str | None = None
    country_code: str | None = None
    county: str | None = None
    city: str | None = None
    postal_code: str | None = None
    phone_no: str | None = None
    email: str | None = None
    bank_account: str | None = None
    swift_bic: str | None = Field(default=None, alias="SWIFT_BIC")


class CreateVendorResponse(WireModel):
    id: Text = ""
    name: Text = ""


class UpdateVendorRequest(WireModel):
    id: str
    name: str | None = None
    country_code: str | None = None
    address: str | None = None
    city: str | None = None
    postal_code: str | None = None
    phone_no: str | None = None
    email: str | None = None
    reg_no: str | None = None
    vat_reg_no: str | None = None
    vat_accountable: bool | None = None
    bank_account: str | None = None
    payment_dead_line: int | None = None


# --- Items ---


class ListItemsParams(WireModel):
    id: str | None = None
    code: str | None = None
    description: str | None = None
    location_code: str | None = None
    usage: int | None = None
    type: int | None = None


class ItemListItem(WireModel):
    item_id: Text = ""
    code: Text = ""
    name: Text = ""
    unit_of_measure_name: Text = Field(default="", alias="UnitofMeasureName")
    type: Code = 0
    sales_price: Amount = Decimal("0")
    inventory_qty: Amount = Decimal("0")
    vat_tax_name: Text = ""
    usage: Code = 0
    sales_account_code: Text = ""
    purchase_account_code: Text = ""
    discount_pct: Amount = Decimal("0")
    last_purchase_price: Amount = Decimal("0")
    item_group_name: Text = ""
    ean_code: Text = Field(default="", alias="EANCode")


class CreateItemRequest(WireModel):
    type: int
    usage: int
    code: str
    description: str
    ean_code: str | None = Field(default=None, alias="EANCode")
    uom_name: str | None = Field(default=None, alias="UOMName")
    def_location_code: str | None = None
    tax_id: str | None = None
    item_gr_code: str | None = None
    sales_acc_code: str | None = None
    purchase_acc_code: str | None = None
    inventory_acc_code: str | None = None
    cost_acc_code: str | None = None


class CreateItemsWrapper(WireModel):
    items: list[CreateItemRequest]


class CreateItemResponse(WireModel):
    item_id: Text = ""
    code: Text = ""


class UpdateItemRequest(WireModel):
    id: str
    code: str | None = None
    description: str | None = None
    sales_price: Decimal | None = None
    item_gr_code: str | None = None
    discount_pct: Decimal | None = None
    ean_code: str | None = Field(default=None, alias="EANCode")
    sales_account_code: str | None = None
    tax_id: str | None = None


# --- Payments ---


class ListPaymentsParams(WireModel):
    period_start: str
    period_end: str
    payment_type: int | None = None
    bank_id: str | None = None
    date_type: int | None = None


class PaymAPIDetail(WireModel):
    paym_id: Text = ""
    doc_no: Text = ""
    doc_amount: Amount = Decimal("0")
    paid_amount: Amount = Decimal("0")
    currency_code: Text = ""
    currency_rate: Amount = Decimal("0")
    doc_id: Text = ""


class PaymentListItem(WireModel):
    pih_id: Text = Field(default="", alias="PIHId")
    bank_name: Text = ""
    counter_part_type: Code = 0
    counter_part_name: Text = ""
    currency_code: Text = ""
    currency_rate: Amount = Decimal("0")
    document_date: Text = ""
    document_no: Text = ""
    direction: Code = 0
    amount: Amount = Decimal("0")
    counter_part_id: Text = ""
    doc_id: Text = ""
    changed_date: Text = ""
    paym_api_details: Annotated[list[PaymAPIDetail], BeforeValidator(_items)] = Field(
        default=[], alias="PaymAPIDetails"
    )


class CreatePaymentRequest(WireModel):
    bank_id: str | None = None
    iban: str | None = Field(default=None, alias="IBAN")
    customer_name: str
    invoice_no: str
    payment_date: str
    ref_no: str | None = None
    amount: Decimal
    currency_code: str | None = None
    currency_rate: Decimal | None = None


class CreatePurchasePaymentRequest(WireModel):
    bank_id: str | None = None
    iban: str | None = Field(default=None, alias="IBAN")
    vendor_name: str
    payment_date: str
    bill_no: str
    ref_no: str | None = None
    amount: Decimal
    currency_code: str | None = None
    currency_rate: Decimal | None = None


class DeletePaymentParams(WireModel):
    id: str


# --- Reference data ---


class TaxItem(WireModel):
    tax_id: Text = Field(default="", alias="Id")
    code: Text = ""
    name: Text = ""
    tax_pct: Amount = Decimal("0")


class AccountItem(WireModel):
    account_id: Text = Field(default="", alias="AccountID")
    # "1" when the account is inactive.
    non_active: Text = ""
    code: Text = ""
    name: Text = ""
    tax_name: Text = ""
    is_parent: Text = ""


# --- Reports ---


class CustomerDebtsParams(WireModel):
    cust_name: str | None = None
    cust_id: str | None = None
    over_due_days: int | None = None
    debt_date: str | None = None


class CustomerDebtItem(WireModel):
    partner_name: Text = ""
    partner_id: Text = ""
    # SO=offer, MA=invoice, SBx=initial balance
    doc_type: Text = ""
    doc_date: Text = ""
    doc_no: Text = ""
    ref_no: Text = ""
    due_date: Text = ""
    total_amount: Amount = Decimal("0")
    paid_amount: Amount = Decimal("0")
    un_paid_amount: Amount = Decimal("0")
    currency_code: Text = ""
    currency_rate: Amount = Decimal("0")


class ProfitLossParams(WireModel):
    end_date: str
    per_count: int = 1
    dep_filter: str | None = None


class BalanceSheetParams(WireModel):
    end_date: str
    per_count: int = 1


Balances = Annotated[list[Amount], BeforeValidator(_items)]


class FinancialReportDetail(WireModel):
    account_id: Text = ""
    account_code: Text = ""
    account_name: Text = ""
    # 1=assets, 2=liabilities, 3=revenue, 4=expenses
    type_id: Code = 0
    balance: Balances = []


class FinancialReportRow(WireModel):
    r_did: Code = Field(default=0, alias="RDid")
    description: Text = ""
    # 1=description, 2=balance, 3=turnover, 4=formula
    row_type: Code = 0
    balance: Balances = []
    details: Annotated[list[FinancialReportDetail], BeforeValidator(_items)] = []


class FinancialReport(WireModel):
    error_msg: Text = ""
    data: Annotated[list[FinancialReportRow], BeforeValidator(_items)] = []
