from __future__ import annotations

import pytest

from accounting_gateway.common.errors import AuthFailedError, InvalidInputError, ProviderError
from accounting_gateway.common.inputs import CreateCustomerInput
from accounting_gateway.services.customers import CustomerService


def _endpoints(fake_http) -> list[str]:
    return [c.endpoint for c in fake_http.calls]


def test_find_or_create_returns_existing_customer(merit_provider, fake_http) -> None:
    fake_http.respond(
        "v1/getcustomers", [{"CustomerId": "c1", "Name": "Acme OÜ", "Email": "info@acme.ee"}]
    )

    customer = CustomerService(merit_provider).find_or_create(
        "INFO@acme.ee", CreateCustomerInput(name="Acme OÜ", email="info@acme.ee")
    )

    assert customer.id == "c1"
    assert _endpoints(fake_http) == ["v1/getcustomers"]


def test_find_or_create_creates_when_not_found(merit_provider, fake_http) -> None:
    fake_http.respond("v1/getcustomers", [{"CustomerId": "c1", "Email": "other@example.com"}])
    fake_http.respond("v2/sendcustomer", {"Id": "c2", "Name": "Acme OÜ"})

    customer = CustomerService(merit_provider).find_or_create(
        "info@acme.ee", CreateCustomerInput(name="Acme OÜ", email="info@acme.ee")
    )

    assert customer.id == "c2"
    assert _endpoints(fake_http) == ["v1/getcustomers", "v2/sendcustomer"]
    assert fake_http.last.body["Email"] == "info@acme.ee"


@pytest.mark.parametrize("status, error_cls", [(401, AuthFailedError), (500, ProviderError)])
def test_find_or_create_propagates_other_lookup_errors(
    merit_provider, fake_http, status, error_cls
) -> None:
    fake_http.respond("v1/getcustomers", status=status, text="error")

    with pytest.raises(error_cls):
        CustomerService(merit_provider).find_or_create(
            "info@acme.ee", CreateCustomerInput(name="Acme OÜ")
        )

    assert _endpoints(fake_http) == ["v1/getcustomers"]


def test_list_without_filter_sends_empty_params(merit_provider, fake_http) -> None:
    assert CustomerService(merit_provider).list() == []
    assert fake_http.last.body == {}


def test_find_or_create_rejects_blank_email(merit_provider, fake_http) -> None:
    fake_http.respond("v1/getcustomers", [{"CustomerId": "someone", "Name": "Unrelated", "Email": None}])

    with pytest.raises(InvalidInputError):
        CustomerService(merit_provider).find_or_create("  ", CreateCustomerInput(name="Acme OÜ"))
    assert fake_http.calls == []
