"""Merit Aktiva implementation of :class:`Provider`.

This is the only module that knows both the neutral model and the Merit wire
schema. It builds wire requests from neutral inputs, calls
:class:`MeritClient`, and maps responses back to neutral entities.

Transport failures are translated here, and only here:

- 401/403 -> AuthFailedError
- 404     -> NotFoundError
- 429     -> RateLimitError
- other   -> ProviderError

Each translated error names the adapter method that failed and chains the
transport error as ``__cause__``.
"""

from __future__ import annotations

import base64
import binascii
import logging
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from typing import Iterator, Sequence

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.errors import (
    AuthFailedError,
    InvalidInputError,
    NotFoundError,
    ProviderError,
    RateLimitError,
)
from accounting_gateway.common.inputs import (
    CreateCreditNoteInput,
    CreateCustomerInput,
    CreateInvoiceInput,
    CreateInvoiceLineInput,
    CreateItemInput,
    CreatePaymentInput,
    CreatePurchaseInput,
    CreatePurchasePaymentInput,
    CreateVendorInput,
    ListCustomersInput,
    ListInvoicesInput,
    ListItemsInput,
    ListPaymentsInput,
    ListPurchasesInput,
    ListVendorsInput,
    UpdateCustomerInput,
    UpdateItemInput,
    UpdateVendorInput,
)
from accounting_gateway.common.models import (
    Account,
    Customer,
    CustomerDebt,
    FinancialReport,
    FinancialReportDetail,
    FinancialReportRow,
    Invoice,
    InvoiceLine,
    InvoicePayment,
    InvoicePDF,
    InvoiceStatus,
    Item,
    ItemType,
    Payment,
    PaymentDirection,
    PaymentInvoiceLink,
    PurchaseInvoice,
    Tax,
    Vendor,
    derive_invoice_status,
)
from accounting_gateway.common.provider import Provider
from accounting_gateway.integrations.merit import schema as wire
from accounting_gateway.integrations.merit.client import MeritClient
from accounting_gateway.integrations.merit.schema import format_date, parse_date
from accounting_gateway.integrations.merit.transport import (
    APIError,
    DecodeError,
    TransportError,
)

logger = logging.getLogger(__name__)

PROVIDER_NAME = "merit"

_STATUS_ERRORS: dict[int, type[ProviderError]] = {
    401: AuthFailedError,
    403: AuthFailedError,
    404: NotFoundError,
    429: RateLimitError,
}

_ITEM_TYPE_TO_WIRE = {
    ItemType.STOCK: wire.ITEM_TYPE_STOCK,
    ItemType.SERVICE: wire.ITEM_TYPE_SERVICE,
    ItemType.ITEM: wire.ITEM_TYPE_ITEM,
}
_ITEM_TYPE_FROM_WIRE = {v: k for k, v in _ITEM_TYPE_TO_WIRE.items()}

_DIRECTION_TO_WIRE = {
    PaymentDirection.CUSTOMER: wire.DIRECTION_CUSTOMERS,
    PaymentDirection.VENDOR: wire.DIRECTION_VENDORS,
    PaymentDirection.OTHER_INCOME: wire.DIRECTION_OTHER_INCOME,
    PaymentDirection.OTHER_EXPENSE: wire.DIRECTION_OTHER_EXPENSES,
}
_DIRECTION_FROM_WIRE = {v: k for k, v in _DIRECTION_TO_WIRE.items()}


# --- Code mappings ---


def item_type_to_wire(item_type: ItemType | None) -> int:
    return _ITEM_TYPE_TO_WIRE.get(item_type, wire.ITEM_TYPE_ITEM)


def item_type_from_wire(code: int) -> ItemType:
    item_type = _ITEM_TYPE_FROM_WIRE.get(code)
    if item_type is None:
        logger.warning("merit: unknown item type code %r, using %s", code, ItemType.ITEM.value)
        return ItemType.ITEM
    return item_type


def direction_to_wire(direction: PaymentDirection | None) -> int:
    return _DIRECTION_TO_WIRE.get(direction, wire.DIRECTION_CUSTOMERS)


def direction_from_wire(code: int) -> PaymentDirection:
    direction = _DIRECTION_FROM_WIRE.get(code)
    if direction is None:
        logger.warning(
            "merit: unknown payment direction code %r, using %s",
            code,
            PaymentDirection.CUSTOMER.value,
        )
        return PaymentDirection.CUSTOMER
    return direction


# --- Request builders ---


def _opt(value: str | None) -> str | None:
    """Empty strings are sent as absent fields."""
    return value or None


def build_rows_and_taxes(
    lines: Sequence[CreateInvoiceLineInput],
) -> tuple[list[wire.InvoiceRow], list[wire.TaxAmountEntry]]:
    """Build wire rows and the per-tax totals that accompany them.

    Totals are ``quantity * unit_price`` summed per tax id, in the order each
    tax id first appears. No rounding is applied.
    """

    rows: list[wire.InvoiceRow] = []
    totals: dict[str, Decimal] = {}

    for line in lines:
        rows.append(
            wire.InvoiceRow(
                item=wire.ItemRef(
                    code=line.code,
                    description=line.description,
                    type=item_type_to_wire(line.item_type) if line.item_type else None,
                    uom_name=_opt(line.uom_name),
                ),
                quantity=line.quantity,
                price=line.unit_price,
                tax_id=line.tax_id,
                gl_account_code=_opt(line.account_code),
            )
        )
        amount = line.quantity * line.unit_price
        totals[line.tax_id] = totals.get(line.tax_id, Decimal("0")) + amount

    taxes = [wire.TaxAmountEntry(tax_id=tax_id, amount=amount) for tax_id, amount in totals.items()]
    return rows, taxes


def _sales_request(
    data: CreateInvoiceInput | CreateCreditNoteInput, accounting_doc: int
) -> wire.CreateInvoiceRequest:
    rows, taxes = build_rows_and_taxes(data.lines)
    return wire.CreateInvoiceRequest(
        customer=wire.CustomerRef(
            id=_opt(data.customer_id),
            name=data.customer_name,
            reg_no=_opt(data.customer_reg_no),
            email=_opt(data.customer_email),
            address=_opt(data.customer_address),
            country_code=_opt(data.customer_country_code),
        ),
        accounting_doc=accounting_doc,
        doc_date=format_date(data.doc_date),
        due_date=format_date(data.due_date),
        invoice_no=data.invoice_no,
        ref_no=_opt(data.ref_no),
        currency_code=_opt(data.currency),
        invoice_row=rows,
        tax_amount=taxes,
        hcomment=_opt(data.comment),
        fcomment=_opt(data.footer_comment),
    )


def _update_customer_request(data: UpdateCustomerInput) -> wire.UpdateCustomerRequest:
    # None stays None and is dropped on serialization.
    return wire.UpdateCustomerRequest(
        id=data.id,
        name=data.name,
        email=data.email,
        phone_no=data.phone,
        address=data.address,
        city=data.city,
        postal_code=data.postal_code,
        country_code=data.country_code,
        reg_no=data.reg_no,
        vat_reg_no=data.vat_reg_no,
    )


def _update_vendor_request(data: UpdateVendorInput) -> wire.UpdateVendorRequest:
    return wire.UpdateVendorRequest(
        id=data.id,
        name=data.name,
        email=data.email,
        phone_no=data.phone,
        address=data.address,
        city=data.city,
        postal_code=data.postal_code,
        country_code=data.country_code,
        reg_no=data.reg_no,
        vat_reg_no=data.vat_reg_no,
        vat_accountable=data.vat_accountable,
        bank_account=data.bank_account,
        payment_dead_line=data.payment_days,
    )


def _update_item_request(data: UpdateItemInput) -> wire.UpdateItemRequest:
    return wire.UpdateItemRequest(
        id=data.id,
        code=data.code,
        description=data.description,
        sales_price=data.sales_price,
        tax_id=data.tax_id,
    )


def _decode_pdf(content: str) -> bytes:
    try:
        return base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"merit: decode pdf: {e}") from e


# --- Response mappers ---


def _invoice_from_list_item(item: wire.InvoiceListItem) -> Invoice:
    return Invoice(
        id=item.sih_id,
        number=item.invoice_no,
        customer_name=item.customer_name,
        customer_id=item.customer_id,
        doc_date=parse_date(item.document_date),
        due_date=parse_date(item.due_date),
        total_amount=item.total_amount,
        tax_amount=item.tax_amount,
        paid_amount=item.paid_amount,
        currency=item.currency_code,
        paid=item.paid,
        status=derive_invoice_status(item.paid, item.paid_amount),
        reference_no=item.reference_no,
    )


def _invoice_from_detail(d: wire.InvoiceDetail) -> Invoice:
    lines = tuple(
        InvoiceLine(
            id=row.sil_id,
            description=row.description,
            quantity=row.quantity,
            unit_price=row.price,
            tax_id=row.tax_id,
            tax_name=row.tax_name,
            tax_pct=row.tax_pct,
            amount_excl_vat=row.amount_excl_vat,
            amount_incl_vat=row.amount_incl_vat,
            vat_amount=row.vat_amount,
            account_code=row.account_code,
        )
        for row in d.lines
    )
    payments = tuple(
        InvoicePayment(
            date=parse_date(p.paym_date),
            amount=p.amount,
            method=p.payment_method,
            payment_id=p.payment_id,
        )
        for p in d.payments
    )
    return Invoice(
        id=d.sih_id,
        number=d.invoice_no,
        customer_name=d.customer_name,
        customer_id=d.customer_id,
        doc_date=parse_date(d.document_date),
        due_date=parse_date(d.due_date),
        total_amount=d.total_amount,
        tax_amount=d.tax_amount,
        paid_amount=d.paid_amount,
        currency=d.currency_code,
        paid=d.paid,
        status=derive_invoice_status(d.paid, d.paid_amount),
        reference_no=d.reference_no,
        lines=lines,
        payments=payments,
    )


def _customer_from_list_item(item: wire.CustomerListItem) -> Customer:
    return Customer(
        id=item.customer_id,
        name=item.name,
        reg_no=item.reg_no,
        vat_reg_no=item.vat_reg_no,
        email=item.email,
        phone=item.phone_no,
        address=item.address,
        city=item.city,
        county=item.county,
        postal_code=item.postal_code,
        country_code=item.country_code,
        currency=item.currency_code,
        payment_days=item.payment_dead_line,
        contact=item.contact,
        home_page=item.home_page,
    )


def _vendor_from_list_item(item: wire.VendorListItem) -> Vendor:
    return Vendor(
        id=item.vendor_id,
        name=item.name,
        reg_no=item.reg_no,
        vat_reg_no=item.vat_reg_no,
        email=item.email,
        phone=item.phone_no,
        address=item.address,
        city=item.city,
        postal_code=item.postal_code,
        country_code=item.country_code,
        currency=item.currency_code,
        payment_days=item.payment_dead_line,
        bank_account=item.bank_account,
    )


def _payment_from_list_item(item: wire.PaymentListItem) -> Payment:
    links = tuple(
        PaymentInvoiceLink(invoice_id=d.doc_id, invoice_no=d.doc_no, amount=d.paid_amount)
        for d in item.paym_api_details
    )
    return Payment(
        id=item.pih_id,
        document_no=item.document_no,
        document_date=parse_date(item.document_date),
        amount=item.amount,
        currency=item.currency_code,
        direction=direction_from_wire(item.direction),
        counter_part_id=item.counter_part_id,
        counter_part_name=item.counter_part_name,
        invoice_links=links,
    )


def _item_from_list_item(item: wire.ItemListItem) -> Item:
    # The list endpoint has no separate description; Name carries it.
    return Item(
        id=item.item_id,
        code=item.code,
        name=item.name,
        description=item.name,
        type=item_type_from_wire(item.type),
        unit_of_measure=item.unit_of_measure_name,
        sales_price=item.sales_price,
    )


def _purchase_from_list_item(item: wire.PurchaseListItem) -> PurchaseInvoice:
    return PurchaseInvoice(
        id=item.pih_id,
        number=item.bill_no,
        vendor_name=item.vendor_name,
        vendor_id=item.vendor_id,
        doc_date=parse_date(item.document_date),
        due_date=parse_date(item.due_date),
        total_amount=item.total_amount,
        tax_amount=item.tax_amount,
        paid_amount=item.paid_amount,
        currency=item.currency_code,
        paid=item.paid,
        status=derive_invoice_status(item.paid, item.paid_amount),
        reference_no=item.reference_no,
    )


def _purchase_from_detail(d: wire.InvoiceDetail) -> PurchaseInvoice:
    # getpurchorder reuses the sales invoice shape; "customer" is the vendor.
    return PurchaseInvoice(
        id=d.sih_id,
        number=d.invoice_no,
        vendor_name=d.customer_name,
        vendor_id=d.customer_id,
        doc_date=parse_date(d.document_date),
        due_date=parse_date(d.due_date),
        total_amount=d.total_amount,
        tax_amount=d.tax_amount,
        paid_amount=d.paid_amount,
        currency=d.currency_code,
        paid=d.paid,
        status=derive_invoice_status(d.paid, d.paid_amount),
        reference_no=d.reference_no,
    )


def _report_from_wire(report: wire.FinancialReport) -> FinancialReport:
    return FinancialReport(
        rows=tuple(
            FinancialReportRow(
                description=row.description,
                row_type=row.row_type,
                balances=tuple(row.balance),
                details=tuple(
                    FinancialReportDetail(
                        account_code=d.account_code,
                        account_name=d.account_name,
                        balances=tuple(d.balance),
                    )
                    for d in row.details
                ),
            )
            for row in report.data
        )
    )


class MeritProvider(Provider):
    def __init__(self, client: MeritClient) -> None:
        self._client = client

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    def _wrap(self, operation: str, exc: TransportError) -> ProviderError:
        if isinstance(exc, APIError):
            error_cls = _STATUS_ERRORS.get(exc.status_code)
            if error_cls is not None:
                return error_cls(PROVIDER_NAME, operation)
        return ProviderError(PROVIDER_NAME, operation, str(exc))

    @contextmanager
    def _translate(self, operation: str) -> Iterator[None]:
        try:
            yield
        except TransportError as e:
            raise self._wrap(operation, e) from e

    def test_connection(self, *, ctx: CallContext | None = None) -> None:
        with self._translate("test_connection"):
            self._client.list_taxes(ctx=ctx)

    # --- Invoices ---

    def create_invoice(
        self, data: CreateInvoiceInput, *, ctx: CallContext | None = None
    ) -> Invoice:
        req = _sales_request(data, wire.DOC_INVOICE)
        with self._translate("create_invoice"):
            resp = self._client.create_invoice(req, ctx=ctx)
        return self._created_invoice(data, resp)

    def create_credit_note(
        self, data: CreateCreditNoteInput, *, ctx: CallContext | None = None
    ) -> Invoice:
        req = _sales_request(data, wire.DOC_CREDIT)
        with self._translate("create_credit_note"):
            resp = self._client.create_invoice(req, ctx=ctx)
        return self._created_invoice(data, resp)

    @staticmethod
    def _created_invoice(
        data: CreateInvoiceInput | CreateCreditNoteInput, resp: wire.CreateInvoiceResponse
    ) -> Invoice:
        return Invoice(
            id=resp.invoice_id,
            number=resp.invoice_no or data.invoice_no,
            customer_name=data.customer_name,
            customer_id=resp.customer_id,
            doc_date=data.doc_date,
            due_date=data.due_date,
            currency=data.currency,
            reference_no=resp.ref_no,
            status=InvoiceStatus.UNPAID,
        )

    def get_invoice(self, invoice_id: str, *, ctx: CallContext | None = None) -> Invoice:
        with self._translate("get_invoice"):
            detail = self._client.get_invoice(wire.GetInvoiceParams(id=invoice_id), ctx=ctx)
        return _invoice_from_detail(detail)

    def get_invoice_pdf(
        self,
        invoice_id: str,
        delivery_note: bool = False,
        *,
        ctx: CallContext | None = None,
    ) -> InvoicePDF:
        params = wire.GetInvoicePDFParams(id=invoice_id, deliv_note=delivery_note or None)
        with self._translate("get_invoice_pdf"):
            attachment = self._client.get_invoice_pdf(params, ctx=ctx)
            content = _decode_pdf(attachment.file_content)
        return InvoicePDF(file_name=attachment.file_name, content=content)

    def list_invoices(
        self, data: ListInvoicesInput, *, ctx: CallContext | None = None
    ) -> list[Invoice]:
        params = wire.ListInvoicesParams(
            period_start=format_date(data.period_start),
            period_end=format_date(data.period_end),
            un_paid=True if data.unpaid_only else None,
        )
        with self._translate("list_invoices"):
            items = self._client.list_invoices(params, ctx=ctx)
        return [_invoice_from_list_item(item) for item in items]

    def delete_invoice(self, invoice_id: str, *, ctx: CallContext | None = None) -> None:
        with self._translate("delete_invoice"):
            self._client.delete_invoice(wire.DeleteInvoiceParams(id=invoice_id), ctx=ctx)

    # --- Customers ---

    def create_customer(
        self, data: CreateCustomerInput, *, ctx: CallContext | None = None
    ) -> Customer:
        req = wire.CreateCustomerRequest(
            name=data.name,
            reg_no=_opt(data.reg_no),
            vat_reg_no=_opt(data.vat_reg_no),
            email=_opt(data.email),
            phone_no=_opt(data.phone),
            address=_opt(data.address),
            city=_opt(data.city),
            county=_opt(data.county),
            postal_code=_opt(data.postal_code),
            country_code=_opt(data.country_code),
            currency_code=_opt(data.currency),
            payment_dead_line=data.payment_days,
            contact=_opt(data.contact),
        )
        with self._translate("create_customer"):
            resp = self._client.create_customer(req, ctx=ctx)
        return Customer(
            id=resp.id,
            name=resp.name or data.name,
            reg_no=data.reg_no,
            vat_reg_no=data.vat_reg_no,
            email=data.email,
            phone=data.phone,
            address=data.address,
            city=data.city,
            county=data.county,
            postal_code=data.postal_code,
            country_code=data.country_code,
            currency=data.currency,
            payment_days=data.payment_days or 0,
            contact=data.contact,
        )

    def update_customer(
        self, data: UpdateCustomerInput, *, ctx: CallContext | None = None
    ) -> None:
        with self._translate("update_customer"):
            self._client.update_customer(_update_customer_request(data), ctx=ctx)

    def list_customers(
        self, data: ListCustomersInput, *, ctx: CallContext | None = None
    ) -> list[Customer]:
        params = wire.ListCustomersParams(name=_opt(data.name), reg_no=_opt(data.reg_no))
        with self._translate("list_customers"):
            items = self._client.list_customers(params, ctx=ctx)
        return [_customer_from_list_item(item) for item in items]

    def find_customer_by_email(
        self, email: str, *, ctx: CallContext | None = None
    ) -> Customer:
        wanted = email.strip().casefold()
        if not wanted:
            raise InvalidInputError("email cannot be blank")
        # getcustomers has no email filter, so this pulls the whole customer
        # list on every call.
        with self._translate("find_customer_by_email"):
            items = self._client.list_customers(wire.ListCustomersParams(), ctx=ctx)

        for item in items:
            if item.email.strip().casefold() == wanted:
                return _customer_from_list_item(item)
        raise NotFoundError(PROVIDER_NAME, "find_customer_by_email")

    # --- Payments ---

    def create_payment(
        self, data: CreatePaymentInput, *, ctx: CallContext | None = None
    ) -> None:
        req = wire.CreatePaymentRequest(
            bank_id=_opt(data.bank_id),
            customer_name=data.customer_name,
            invoice_no=data.invoice_no,
            payment_date=format_date(data.payment_date),
            amount=data.amount,
            currency_code=_opt(data.currency),
        )
        with self._translate("create_payment"):
            self._client.create_payment(req, ctx=ctx)

    def create_purchase_payment(
        self, data: CreatePurchasePaymentInput, *, ctx: CallContext | None = None
    ) -> None:
        req = wire.CreatePurchasePaymentRequest(
            bank_id=_opt(data.bank_id),
            vendor_name=data.vendor_name,
            bill_no=data.bill_no,
            payment_date=format_date(data.payment_date),
            amount=data.amount,
            currency_code=_opt(data.currency),
        )
        with self._translate("create_purchase_payment"):
            self._client.create_purchase_payment(req, ctx=ctx)

    def list_payments(
        self, data: ListPaymentsInput, *, ctx: CallContext | None = None
    ) -> list[Payment]:
        params = wire.ListPaymentsParams(
            period_start=format_date(data.period_start),
            period_end=format_date(data.period_end),
            bank_id=_opt(data.bank_id),
        )
        with self._translate("list_payments"):
            items = self._client.list_payments(params, ctx=ctx)
        return [_payment_from_list_item(item) for item in items]

    def delete_payment(self, payment_id: str, *, ctx: CallContext | None = None) -> None:
        with self._translate("delete_payment"):
            self._client.delete_payment(wire.DeletePaymentParams(id=payment_id), ctx=ctx)

    # --- Items ---

    def create_item(self, data: CreateItemInput, *, ctx: CallContext | None = None) -> Item:
        req = wire.CreateItemRequest(
            type=item_type_to_wire(data.type),
            usage=wire.ITEM_USAGE_BOTH,
            code=data.code,
            description=data.description,
            uom_name=_opt(data.unit_of_measure),
            tax_id=_opt(data.tax_id),
            sales_acc_code=_opt(data.sales_account_code),
            purchase_acc_code=_opt(data.purchase_account_code),
        )
        with self._translate("create_item"):
            results = self._client.create_items([req], ctx=ctx)
        if not results:
            raise ProviderError(PROVIDER_NAME, "create_item", "empty response")

        created = results[0]
        return Item(
            id=created.item_id,
            code=created.code or data.code,
            description=data.description,
            type=data.type,
            unit_of_measure=data.unit_of_measure,
            sales_price=data.sales_price,
            tax_id=data.tax_id,
        )

    def list_items(
        self, data: ListItemsInput, *, ctx: CallContext | None = None
    ) -> list[Item]:
        params = wire.ListItemsParams(
            code=_opt(data.code),
            description=_opt(data.description),
            type=item_type_to_wire(data.type) if data.type else None,
        )
        with self._translate("list_items"):
            results = self._client.list_items(params, ctx=ctx)
        return [_item_from_list_item(r) for r in results]

    def update_item(self, data: UpdateItemInput, *, ctx: CallContext | None = None) -> None:
        with self._translate("update_item"):
            self._client.update_item(_update_item_request(data), ctx=ctx)

    # --- Purchases ---

    def create_purchase(
        self, data: CreatePurchaseInput, *, ctx: CallContext | None = None
    ) -> PurchaseInvoice:
        rows, taxes = build_rows_and_taxes(data.lines)
        req = wire.CreatePurchaseRequest(
            vendor=wire.VendorRef(
                id=_opt(data.vendor_id),
                name=data.vendor_name,
                reg_no=_opt(data.vendor_reg_no),
                email=_opt(data.vendor_email),
                address=_opt(data.vendor_address),
                country_code=_opt(data.vendor_country_code),
            ),
            doc_date=format_date(data.doc_date),
            due_date=format_date(data.due_date),
            bill_no=data.bill_no,
            ref_no=_opt(data.ref_no),
            currency_code=_opt(data.currency),
            invoice_row=rows,
            tax_amount=taxes,
            hcomment=_opt(data.comment),
            fcomment=_opt(data.footer_comment),
        )
        with self._translate("create_purchase"):
            resp = self._client.create_purchase(req, ctx=ctx)
        return PurchaseInvoice(
            id=resp.bill_id,
            number=resp.bill_no or data.bill_no,
            vendor_name=data.vendor_name,
            vendor_id=resp.vendor_id,
            doc_date=data.doc_date,
            due_date=data.due_date,
            currency=data.currency,
            reference_no=resp.ref_no,
            status=InvoiceStatus.UNPAID,
        )

    def get_purchase(
        self, purchase_id: str, *, ctx: CallContext | None = None
    ) -> PurchaseInvoice:
        with self._translate("get_purchase"):
            detail = self._client.get_purchase(wire.GetInvoiceParams(id=purchase_id), ctx=ctx)
        return _purchase_from_detail(detail)

    def list_purchases(
        self, data: ListPurchasesInput, *, ctx: CallContext | None = None
    ) -> list[PurchaseInvoice]:
        params = wire.ListPurchasesParams(
            period_start=format_date(data.period_start),
            period_end=format_date(data.period_end),
        )
        with self._translate("list_purchases"):
            items = self._client.list_purchases(params, ctx=ctx)
        return [_purchase_from_list_item(item) for item in items]

    def delete_purchase(self, purchase_id: str, *, ctx: CallContext | None = None) -> None:
        with self._translate("delete_purchase"):
            self._client.delete_purchase(wire.DeletePurchaseParams(id=purchase_id), ctx=ctx)

    def list_vendors(
        self, data: ListVendorsInput, *, ctx: CallContext | None = None
    ) -> list[Vendor]:
        params = wire.ListVendorsParams(name=_opt(data.name), reg_no=_opt(data.reg_no))
        with self._translate("list_vendors"):
            items = self._client.list_vendors(params, ctx=ctx)
        return [_vendor_from_list_item(item) for item in items]

    def create_vendor(
        self, data: CreateVendorInput, *, ctx: CallContext | None = None
    ) -> Vendor:
        req = wire.CreateVendorRequest(
            name=data.name,
            reg_no=_opt(data.reg_no),
            vat_reg_no=_opt(data.vat_reg_no),
            vat_accountable=data.vat_accountable,
            email=_opt(data.email),
            phone_no=_opt(data.phone),
            address=_opt(data.address),
            city=_opt(data.city),
            county=_opt(data.county),
            postal_code=_opt(data.postal_code),
            country_code=_opt(data.country_code),
            currency_code=_opt(data.currency),
            payment_dead_line=data.payment_days,
            bank_account=_opt(data.bank_account),
        )
        with self._translate("create_vendor"):
            resp = self._client.create_vendor(req, ctx=ctx)
        return Vendor(
            id=resp.id,
            name=resp.name or data.name,
            reg_no=data.reg_no,
            vat_reg_no=data.vat_reg_no,
            email=data.email,
            phone=data.phone,
            address=data.address,
            city=data.city,
            postal_code=data.postal_code,
            country_code=data.country_code,
            currency=data.currency,
            payment_days=data.payment_days or 0,
            bank_account=data.bank_account,
        )

    def update_vendor(
        self, data: UpdateVendorInput, *, ctx: CallContext | None = None
    ) -> None:
        with self._translate("update_vendor"):
            self._client.update_vendor(_update_vendor_request(data), ctx=ctx)

    # --- Reference data ---

    def list_taxes(self, *, ctx: CallContext | None = None) -> list[Tax]:
        with self._translate("list_taxes"):
            items = self._client.list_taxes(ctx=ctx)
        return [Tax(id=t.tax_id, code=t.code, name=t.name, pct=t.tax_pct) for t in items]

    def list_accounts(self, *, ctx: CallContext | None = None) -> list[Account]:
        with self._translate("list_accounts"):
            items = self._client.list_accounts(ctx=ctx)
        return [
            Account(id=a.account_id, code=a.code, name=a.name, active=a.non_active != "1")
            for a in items
        ]

    # --- Reports ---

    def customer_debts(
        self,
        customer_name: str = "",
        overdue_days: int | None = None,
        *,
        ctx: CallContext | None = None,
    ) -> list[CustomerDebt]:
        params = wire.CustomerDebtsParams(
            cust_name=_opt(customer_name), over_due_days=overdue_days
        )
        with self._translate("customer_debts"):
            items = self._client.customer_debts(params, ctx=ctx)
        return [
            CustomerDebt(
                customer_name=d.partner_name,
                customer_id=d.partner_id,
                doc_type=d.doc_type,
                doc_date=parse_date(d.doc_date),
                doc_no=d.doc_no,
                due_date=parse_date(d.due_date),
                total_amount=d.total_amount,
                paid_amount=d.paid_amount,
                unpaid_amount=d.un_paid_amount,
                currency=d.currency_code,
            )
            for d in items
        ]

    def profit_loss(
        self, end_date: date, periods: int = 1, *, ctx: CallContext | None = None
    ) -> FinancialReport:
        params = wire.ProfitLossParams(end_date=format_date(end_date), per_count=periods)
        with self._translate("profit_loss"):
            report = self._client.profit_loss(params, ctx=ctx)
        self._check_report("profit_loss", report)
        return _report_from_wire(report)

    def balance_sheet(
        self, end_date: date, periods: int = 1, *, ctx: CallContext | None = None
    ) -> FinancialReport:
        params = wire.BalanceSheetParams(end_date=format_date(end_date), per_count=periods)
        with self._translate("balance_sheet"):
            report = self._client.balance_sheet(params, ctx=ctx)
        self._check_report("balance_sheet", report)
        return _report_from_wire(report)

    @staticmethod
    def _check_report(operation: str, report: wire.FinancialReport) -> None:
        # Report endpoints answer 200 with ErrorMsg set on bad parameters.
        if report.error_msg:
            raise ProviderError(PROVIDER_NAME, operation, report.error_msg)

    # --- Sync ---

    def list_invoices_since(
        self, since: date, until: date, *, ctx: CallContext | None = None
    ) -> list[Invoice]:
        params = wire.ListInvoicesParams(
            period_start=format_date(since),
            period_end=format_date(until),
            date_type=wire.DATE_TYPE_CHANGED,
        )
        with self._translate("list_invoices_since"):
            items = self._client.list_invoices(params, ctx=ctx)
        return [_invoice_from_list_item(item) for item in items]

    def list_payments_since(
        self, since: date, until: date, *, ctx: CallContext | None = None
    ) -> list[Payment]:
        params = wire.ListPaymentsParams(
            period_start=format_date(since),
            period_end=format_date(until),
            date_type=wire.DATE_TYPE_CHANGED,
        )
        with self._translate("list_payments_since"):
            items = self._client.list_payments(params, ctx=ctx)
        return [_payment_from_list_item(item) for item in items]
