"""Provider interface.

Every accounting backend implements :class:`Provider`. Services talk only to
this interface, so swapping the backend never touches business code.

All methods accept a keyword-only ``ctx`` (:class:`CallContext`) carrying the
caller's deadline and cancellation. Failures surface as
:class:`~accounting_gateway.common.errors.ProviderError` subclasses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.inputs import (
    CreateCreditNoteInput,
    CreateCustomerInput,
    CreateInvoiceInput,
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
    Invoice,
    InvoicePDF,
    Item,
    Payment,
    PurchaseInvoice,
    Tax,
    Vendor,
)


class Provider(ABC):
    """Abstract accounting backend."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short provider name used in error messages (e.g. ``"merit"``)."""

    @abstractmethod
    def test_connection(self, *, ctx: CallContext | None = None) -> None:
        """Make one cheap authenticated call; raise if it fails."""

    # --- Invoices ---

    @abstractmethod
    def create_invoice(
        self, data: CreateInvoiceInput, *, ctx: CallContext | None = None
    ) -> Invoice:
        """Create a sales invoice. Tax totals are computed from the lines."""

    @abstractmethod
    def get_invoice(self, invoice_id: str, *, ctx: CallContext | None = None) -> Invoice:
        """Fetch one invoice with its lines and payment history."""

    @abstractmethod
    def get_invoice_pdf(
        self,
        invoice_id: str,
        delivery_note: bool = False,
        *,
        ctx: CallContext | None = None,
    ) -> InvoicePDF:
        """Fetch the rendered invoice as raw PDF bytes.

        With ``delivery_note=True`` the backend renders a delivery note
        (no prices) instead.
        """

    @abstractmethod
    def list_invoices(
        self, data: ListInvoicesInput, *, ctx: CallContext | None = None
    ) -> list[Invoice]:
        """List invoices by document date. Lines are not populated."""

    @abstractmethod
    def delete_invoice(self, invoice_id: str, *, ctx: CallContext | None = None) -> None:
        pass

    @abstractmethod
    def create_credit_note(
        self, data: CreateCreditNoteInput, *, ctx: CallContext | None = None
    ) -> Invoice:
        """Create a credit invoice. Lines normally carry negative quantities."""

    # --- Customers ---

    @abstractmethod
    def create_customer(
        self, data: CreateCustomerInput, *, ctx: CallContext | None = None
    ) -> Customer:
        pass

    @abstractmethod
    def update_customer(
        self, data: UpdateCustomerInput, *, ctx: CallContext | None = None
    ) -> None:
        """Apply a partial update; ``None`` fields are left untouched."""

    @abstractmethod
    def list_customers(
        self, data: ListCustomersInput, *, ctx: CallContext | None = None
    ) -> list[Customer]:
        pass

    @abstractmethod
    def find_customer_by_email(
        self, email: str, *, ctx: CallContext | None = None
    ) -> Customer:
        """Return the first customer whose email matches.

        Matching trims whitespace and ignores case. Raises ``NotFoundError``
        when nothing matches and ``InvalidInputError`` for a blank email.
        """

    # --- Payments ---

    @abstractmethod
    def create_payment(
        self, data: CreatePaymentInput, *, ctx: CallContext | None = None
    ) -> None:
        """Record a customer payment against a sales invoice."""

    @abstractmethod
    def create_purchase_payment(
        self, data: CreatePurchasePaymentInput, *, ctx: CallContext | None = None
    ) -> None:
        """Record a payment to a vendor against a purchase invoice."""

    @abstractmethod
    def list_payments(
        self, data: ListPaymentsInput, *, ctx: CallContext | None = None
    ) -> list[Payment]:
        pass

    @abstractmethod
    def delete_payment(self, payment_id: str, *, ctx: CallContext | None = None) -> None:
        pass

    # --- Items ---

    @abstractmethod
    def create_item(self, data: CreateItemInput, *, ctx: CallContext | None = None) -> Item:
        pass

    @abstractmethod
    def list_items(
        self, data: ListItemsInput, *, ctx: CallContext | None = None
    ) -> list[Item]:
        pass

    @abstractmethod
    def update_item(self, data: UpdateItemInput, *, ctx: CallContext | None = None) -> None:
        """Apply a partial update; ``None`` fields are left untouched."""

    # --- Purchases ---

    @abstractmethod
    def create_purchase(
        self, data: CreatePurchaseInput, *, ctx: CallContext | None = None
    ) -> PurchaseInvoice:
        pass

    @abstractmethod
    def get_purchase(
        self, purchase_id: str, *, ctx: CallContext | None = None
    ) -> PurchaseInvoice:
        pass

    @abstractmethod
    def list_purchases(
        self, data: ListPurchasesInput, *, ctx: CallContext | None = None
    ) -> list[PurchaseInvoice]:
        pass

    @abstractmethod
    def delete_purchase(self, purchase_id: str, *, ctx: CallContext | None = None) -> None:
        pass

    @abstractmethod
    def list_vendors(
        self, data: ListVendorsInput, *, ctx: CallContext | None = None
    ) -> list[Vendor]:
        pass

    @abstractmethod
    def create_vendor(
        self, data: CreateVendorInput, *, ctx: CallContext | None = None
    ) -> Vendor:
        pass

    @abstractmethod
    def update_vendor(
        self, data: UpdateVendorInput, *, ctx: CallContext | None = None
    ) -> None:
        """Apply the non-None fields of ``data`` to vendor ``data.id``."""

    # --- Reference data ---

    @abstractmethod
    def list_taxes(self, *, ctx: CallContext | None = None) -> list[Tax]:
        pass

    @abstractmethod
    def list_accounts(self, *, ctx: CallContext | None = None) -> list[Account]:
        pass

    # --- Reports ---

    @abstractmethod
    def customer_debts(
        self,
        customer_name: str = "",
        overdue_days: int | None = None,
        *,
        ctx: CallContext | None = None,
    ) -> list[CustomerDebt]:
        """Open receivables, optionally for one customer or past a due-day threshold."""

    @abstractmethod
    def profit_loss(
        self, end_date: date, periods: int = 1, *, ctx: CallContext | None = None
    ) -> FinancialReport:
        pass

    @abstractmethod
    def balance_sheet(
        self, end_date: date, periods: int = 1, *, ctx: CallContext | None = None
    ) -> FinancialReport:
        pass

    # --- Sync ---

    @abstractmethod
    def list_invoices_since(
        self, since: date, until: date, *, ctx: CallContext | None = None
    ) -> list[Invoice]:
        """Invoices changed in ``[since, until]`` (by change date, not document date)."""

    @abstractmethod
    def list_payments_since(
        self, since: date, until: date, *, ctx: CallContext | None = None
    ) -> list[Payment]:
        """Payments changed in ``[since, until]``."""
