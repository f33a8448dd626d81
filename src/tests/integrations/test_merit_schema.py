from __future__ import annotations

from datetime import date
from decimal import Decimal

from accounting_gateway.integrations.merit.schema import (
    AccountItem,
    CreateInvoiceRequest,
    CustomerRef,
    InvoiceDetail,
    InvoiceListItem,
    InvoiceRow,
    ItemListItem,
    ItemRef,
    PaymentListItem,
    TaxAmountEntry,
    format_date,
    parse_date,
)


def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def test_create_invoice_request_uses_merit_field_names() -> None:
    req = CreateInvoiceRequest(
        customer=CustomerRef(name="Acme OÜ", not_td_customer=False),
        doc_date="20250131",
        invoice_no="INV-1",
        invoice_row=[
            InvoiceRow(
                item=ItemRef(code="SVC", description="Consulting", uom_name="h"),
                quantity=Decimal("2"),
                price=Decimal("10.00"),
                tax_id="tax-1",
                gl_account_code="3000",
            )
        ],
        tax_amount=[TaxAmountEntry(tax_id="tax-1", amount=Decimal("20.00"))],
        hcomment="Thanks",
    )

    body = _dump(req)
    assert body["Customer"] == {"Name": "Acme OÜ", "NotTDCustomer": False}
    assert body["AccountingDoc"] == 1
    assert body["DocDate"] == "20250131"
    assert body["Hcomment"] == "Thanks"
    assert "Fcomment" not in body
    row = body["InvoiceRow"][0]
    assert row["Item"] == {"Code": "SVC", "Description": "Consulting", "UOMName": "h"}
    assert row["GLAccountCode"] == "3000"
    assert row["TaxId"] == "tax-1"
    assert row["Quantity"] == "2"
    assert body["TaxAmount"] == [{"TaxId": "tax-1", "Amount": "20.00"}]


def test_item_ref_keeps_merit_spelling_of_purchase_account() -> None:
    body = _dump(ItemRef(code="X", description="x", purchase_acc_code="4000"))
    assert body["PuchaseAccCode"] == "4000"


def test_list_item_tolerates_nulls_and_unknown_fields() -> None:
    item = InvoiceListItem.model_validate(
        {
            "SIHId": "abc",
            "InvoiceNo": None,
            "TotalAmount": None,
            "Paid": None,
            "AccountingDoc": None,
            "SomethingNew": 42,
        }
    )
    assert item.sih_id == "abc"
    assert item.invoice_no == ""
    assert item.total_amount == Decimal("0")
    assert item.paid is False
    assert item.accounting_doc == 0


def test_detail_with_null_collections_is_empty() -> None:
    detail = InvoiceDetail.model_validate({"SIHId": "1", "Lines": None, "Payments": None})
    assert detail.lines == []
    assert detail.payments == []


def test_irregular_response_aliases() -> None:
    item = ItemListItem.model_validate({"ItemId": "i1", "UnitofMeasureName": "pcs", "EANCode": "123"})
    assert item.unit_of_measure_name == "pcs"
    assert item.ean_code == "123"

    account = AccountItem.model_validate({"AccountID": "a1", "NonActive": "1"})
    assert account.account_id == "a1"
    assert account.non_active == "1"

    payment = PaymentListItem.model_validate(
        {"PIHId": "p1", "PaymAPIDetails": [{"DocId": "d1", "DocNo": "1", "PaidAmount": "5.00"}]}
    )
    assert payment.pih_id == "p1"
    assert payment.paym_api_details[0].paid_amount == Decimal("5.00")


def test_numeric_ids_are_read_as_text() -> None:
    item = InvoiceListItem.model_validate({"SIHId": 123, "InvoiceNo": 1001})
    assert item.sih_id == "123"
    assert item.invoice_no == "1001"


def test_dates() -> None:
    assert format_date(date(2025, 1, 31)) == "20250131"
    assert format_date(None) is None
    assert parse_date("20250131") == date(2025, 1, 31)
    assert parse_date("2025-01-31T00:00:00") == date(2025, 1, 31)
    assert parse_date("2025-01-31T10:20:30.123+02:00") == date(2025, 1, 31)
    assert parse_date("2025-01-31") == date(2025, 1, 31)
    assert parse_date("") is None
    assert parse_date(None) is None
    assert parse_date("not a date") is None
