from __future__ import annotations

import pytest

from accounting_gateway.integrations.merit.client import (
    ESTONIA_URL,
    POLAND_URL,
    base_url_for_region,
)
from accounting_gateway.integrations.merit.schema import (
    BalanceSheetParams,
    CreateItemRequest,
    DeleteInvoiceParams,
    GetInvoiceParams,
    GetInvoicePDFParams,
    ListInvoicesParams,
    ProfitLossParams,
)


@pytest.mark.parametrize(
    "region, expected",
    [
        ("ee", ESTONIA_URL),
        ("estonia", ESTONIA_URL),
        ("pl", POLAND_URL),
        ("PL", POLAND_URL),
        ("Poland", POLAND_URL),
        ("", ESTONIA_URL),
        (None, ESTONIA_URL),
        ("fi", ESTONIA_URL),
    ],
)
def test_base_url_for_region(region, expected) -> None:
    assert base_url_for_region(region) == expected


def test_list_invoices_posts_to_v2_getinvoices(merit_client, fake_http) -> None:
    fake_http.respond("v2/getinvoices", [{"SIHId": "a"}, {"SIHId": "b"}])

    items = merit_client.list_invoices(
        ListInvoicesParams(period_start="20250101", period_end="20250131")
    )

    assert [i.sih_id for i in items] == ["a", "b"]
    assert fake_http.last.endpoint == "v2/getinvoices"
    assert fake_http.last.body == {"PeriodStart": "20250101", "PeriodEnd": "20250131"}


def test_list_endpoints_treat_empty_body_as_empty_list(merit_client, fake_http) -> None:
    assert merit_client.list_taxes() == []
    assert fake_http.last.endpoint == "v1/gettaxes"
    assert fake_http.last.body == {}


@pytest.mark.parametrize(
    "call, endpoint",
    [
        (lambda c: c.get_invoice(GetInvoiceParams(id="1")), "v2/getinvoice"),
        (lambda c: c.get_invoice_pdf(GetInvoicePDFParams(id="1")), "v2/getsalesinvpdf"),
        (lambda c: c.delete_invoice(DeleteInvoiceParams(id="1")), "v1/deleteinvoice"),
        (lambda c: c.get_purchase(GetInvoiceParams(id="1")), "v2/getpurchorder"),
        (lambda c: c.list_accounts(), "v1/getaccounts"),
        (lambda c: c.profit_loss(ProfitLossParams(end_date="20251231")), "v1/getprofitrep"),
        (lambda c: c.balance_sheet(BalanceSheetParams(end_date="20251231")), "v1/getbalancerep"),
    ],
)
def test_endpoint_paths(merit_client, fake_http, call, endpoint) -> None:
    call(merit_client)
    assert fake_http.last.endpoint == endpoint
    assert fake_http.last.method == "POST"


def test_create_items_wraps_items(merit_client, fake_http) -> None:
    fake_http.respond("v2/senditems", [{"ItemId": "i1", "Code": "SKU1"}])

    created = merit_client.create_items(
        [CreateItemRequest(type=3, usage=3, code="SKU1", description="Widget")]
    )

    assert created[0].item_id == "i1"
    assert fake_http.last.body == {
        "Items": [{"Type": 3, "Usage": 3, "Code": "SKU1", "Description": "Widget"}]
    }


def test_report_defaults_to_one_period(merit_client, fake_http) -> None:
    merit_client.balance_sheet(BalanceSheetParams(end_date="20251231"))
    assert fake_http.last.body == {"EndDate": "20251231", "PerCount": 1}
