"""Merit Aktiva API client.

One method per endpoint; each is a single signed POST through
:class:`MeritTransport`. Wire models in, wire models out. Translation to the
neutral model lives in ``adapter.py``.

List endpoints that take a period accept at most three months per call.
"""

from __future__ import annotations

from typing import Any

from accounting_gateway.common.context import CallContext
from accounting_gateway.integrations.merit.schema import (
    AccountItem,
    Attachment,
    BalanceSheetParams,
    CreateCustomerRequest,
    CreateCustomerResponse,
    CreateInvoiceRequest,
    CreateInvoiceResponse,
    CreateItemRequest,
    CreateItemResponse,
    CreateItemsWrapper,
    CreatePaymentRequest,
    CreatePurchasePaymentRequest,
    CreatePurchaseRequest,
    CreatePurchaseResponse,
    CreateVendorRequest,
    CreateVendorResponse,
    CustomerDebtItem,
    CustomerDebtsParams,
    CustomerListItem,
    DeleteInvoiceParams,
    DeletePaymentParams,
    DeletePurchaseParams,
    FinancialReport,
    GetInvoiceParams,
    GetInvoicePDFParams,
    InvoiceDetail,
    InvoiceListItem,
    ItemListItem,
    ListCustomersParams,
    ListInvoicesParams,
    ListItemsParams,
    ListPaymentsParams,
    ListPurchasesParams,
    ListVendorsParams,
    PaymentListItem,
    ProfitLossParams,
    PurchaseListItem,
    TaxItem,
    UpdateCustomerRequest,
    UpdateItemRequest,
    UpdateVendorRequest,
    VendorListItem,
)
from accounting_gateway.integrations.merit.transport import MeritTransport

ESTONIA_URL = "https://aktiva.merit.ee/api/"
POLAND_URL = "https://program.360ksiegowosc.pl/api/"


def base_url_for_region(region: str | None) -> str:
    """Map a region name to the Merit API base URL (Estonia by default)."""

    if (region or "").strip().lower() in {"pl", "poland"}:
        return POLAND_URL
    return ESTONIA_URL


class MeritClient:
    def __init__(
        self,
        *,
        api_id: str,
        api_key: str,
        base_url: str = ESTONIA_URL,
        http: Any | None = None,
        timeout_seconds: float = 30,
        transport: MeritTransport | None = None,
    ) -> None:
        self._transport = transport or MeritTransport(
            api_id=api_id,
            api_key=api_key,
            base_url=base_url,
            http=http,
            timeout_seconds=timeout_seconds,
        )

    def _post(
        self,
        endpoint: str,
        payload: Any,
        response_type: Any = None,
        ctx: CallContext | None = None,
    ) -> Any:
        return self._transport.post(endpoint, payload, response_type, ctx=ctx)

    def _post_list(
        self,
        endpoint: str,
        payload: Any,
        item_type: Any,
        ctx: CallContext | None = None,
    ) -> list[Any]:
        return self._post(endpoint, payload, list[item_type], ctx) or []

    # --- Sales invoices ---

    def list_invoices(
        self, params: ListInvoicesParams, *, ctx: CallContext | None = None
    ) -> list[InvoiceListItem]:
        return self._post_list("v2/getinvoices", params, InvoiceListItem, ctx)

    def get_invoice(
        self, params: GetInvoiceParams, *, ctx: CallContext | None = None
    ) -> InvoiceDetail:
        return self._post("v2/getinvoice", params, InvoiceDetail, ctx) or InvoiceDetail()

    def create_invoice(
        self, req: CreateInvoiceRequest, *, ctx: CallContext | None = None
    ) -> CreateInvoiceResponse:
        return (
            self._post("v2/sendinvoice", req, CreateInvoiceResponse, ctx)
            or CreateInvoiceResponse()
        )

    def get_invoice_pdf(
        self, params: GetInvoicePDFParams, *, ctx: CallContext | None = None
    ) -> Attachment:
        return self._post("v2/getsalesinvpdf", params, Attachment, ctx) or Attachment()

    def delete_invoice(
        self, params: DeleteInvoiceParams, *, ctx: CallContext | None = None
    ) -> None:
        self._post("v1/deleteinvoice", params, ctx=ctx)

    # --- Purchase invoices ---

    def list_purchases(
        self, params: ListPurchasesParams, *, ctx: CallContext | None = None
    ) -> list[PurchaseListItem]:
        return self._post_list("v2/getpurchorders", params, PurchaseListItem, ctx)

    def get_purchase(
        self, params: GetInvoiceParams, *, ctx: CallContext | None = None
    ) -> InvoiceDetail:
        return self._post("v2/getpurchorder", params, InvoiceDetail, ctx) or InvoiceDetail()

    def create_purchase(
        self, req: CreatePurchaseRequest, *, ctx: CallContext | None = None
    ) -> CreatePurchaseResponse:
        return (
            self._post("v2/sendpurchinvoice", req, CreatePurchaseResponse, ctx)
            or CreatePurchaseResponse()
        )

    def delete_purchase(
        self, params: DeletePurchaseParams, *, ctx: CallContext | None = None
    ) -> None:
        self._post("v1/deletepurchinvoice", params, ctx=ctx)

    # --- Customers ---

    def list_customers(
        self, params: ListCustomersParams, *, ctx: CallContext | None = None
    ) -> list[CustomerListItem]:
        return self._post_list("v1/getcustomers", params, CustomerListItem, ctx)

    def create_customer(
        self, req: CreateCustomerRequest, *, ctx: CallContext | None = None
    ) -> CreateCustomerResponse:
        return (
            self._post("v2/sendcustomer", req, CreateCustomerResponse, ctx)
            or CreateCustomerResponse()
        )

    def update_customer(
        self, req: UpdateCustomerRequest, *, ctx: CallContext | None = None
    ) -> None:
        self._post("v1/updatecustomer", req, ctx=ctx)

    # --- Vendors ---

    def list_vendors(
        self, params: ListVendorsParams, *, ctx: CallContext | None = None
    ) -> list[VendorListItem]:
        return self._post_list("v1/getvendors", params, VendorListItem, ctx)

    def create_vendor(
        self, req: CreateVendorRequest, *, ctx: CallContext | None = None
    ) -> CreateVendorResponse:
        return (
            self._post("v2/sendvendor", req, CreateVendorResponse, ctx)
            or CreateVendorResponse()
        )

    def update_vendor(
        self, req: UpdateVendorRequest, *, ctx: CallContext | None = None
    ) -> None:
        self._post("v2/updatevendor", req, ctx=ctx)

    # --- Items ---

    def list_items(
        self, params: ListItemsParams, *, ctx: CallContext | None = None
    ) -> list[ItemListItem]:
        return self._post_list("v1/getitems", params, ItemListItem, ctx)

    def create_items(
        self, items: list[CreateItemRequest], *, ctx: CallContext | None = None
    ) -> list[CreateItemResponse]:
        return self._post_list(
            "v2/senditems", CreateItemsWrapper(items=items), CreateItemResponse, ctx
        )

    def update_item(self, req: UpdateItemRequest, *, ctx: CallContext | None = None) -> None:
        self._post("v1/updateitem", req, ctx=ctx)

    # --- Payments ---

    def list_payments(
        self, params: ListPaymentsParams, *, ctx: CallContext | None = None
    ) -> list[PaymentListItem]:
        return self._post_list("v2/getpayments", params, PaymentListItem, ctx)

    def create_payment(
        self, req: CreatePaymentRequest, *, ctx: CallContext | None = None
    ) -> None:
        self._post("v2/sendpayment", req, ctx=ctx)

    def create_purchase_payment(
        self, req: CreatePurchasePaymentRequest, *, ctx: CallContext | None = None
    ) -> None:
        self._post("v2/sendPaymentV", req, ctx=ctx)

    def delete_payment(
        self, params: DeletePaymentParams, *, ctx: CallContext | None = None
    ) -> None:
        self._post("v1/deletepayment", params, ctx=ctx)

    # --- Reference data ---

    def list_taxes(self, *, ctx: CallContext | None = None) -> list[TaxItem]:
        return self._post_list("v1/gettaxes", {}, TaxItem, ctx)

    def list_accounts(self, *, ctx: CallContext | None = None) -> list[AccountItem]:
        return self._post_list("v1/getaccounts", {}, AccountItem, ctx)

    # --- Reports ---

    def customer_debts(
        self, params: CustomerDebtsParams, *, ctx: CallContext | None = None
    ) -> list[CustomerDebtItem]:
        return self._post_list("v1/getcustdebtrep", params, CustomerDebtItem, ctx)

    def profit_loss(
        self, params: ProfitLossParams, *, ctx: CallContext | None = None
    ) -> FinancialReport:
        return self._post("v1/getprofitrep", params, FinancialReport, ctx) or FinancialReport()

    def balance_sheet(
        self, params: BalanceSheetParams, *, ctx: CallContext | None = None
    ) -> FinancialReport:
        return self._post("v1/getbalancerep", params, FinancialReport, ctx) or FinancialReport()
