from __future__ import annotations

import logging

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.errors import NotFoundError
from accounting_gateway.common.inputs import (
    CreateCustomerInput,
    ListCustomersInput,
    UpdateCustomerInput,
)
from accounting_gateway.common.models import Customer
from accounting_gateway.common.provider import Provider

logger = logging.getLogger(__name__)


class CustomerService:
    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    def create(self, data: CreateCustomerInput, *, ctx: CallContext | None = None) -> Customer:
        return self._provider.create_customer(data, ctx=ctx)

    def update(self, data: UpdateCustomerInput, *, ctx: CallContext | None = None) -> None:
        self._provider.update_customer(data, ctx=ctx)

    def list(
        self, data: ListCustomersInput | None = None, *, ctx: CallContext | None = None
    ) -> list[Customer]:
        return self._provider.list_customers(data or ListCustomersInput(), ctx=ctx)

    def find_by_email(self, email: str, *, ctx: CallContext | None = None) -> Customer:
        return self._provider.find_customer_by_email(email, ctx=ctx)

    def find_or_create(
        self,
        email: str,
        data: CreateCustomerInput,
        *,
        ctx: CallContext | None = None,
    ) -> Customer:
        """Return the customer with ``email``, creating it from ``data`` if absent.

        Only a not-found lookup leads to a create; any other lookup failure is
        raised unchanged. The lookup lists every customer, so each call costs
        one full customer download.
        """

        try:
            return self._provider.find_customer_by_email(email, ctx=ctx)
        except NotFoundError:
            logger.info("No customer with email %s, creating %r", email, data.name)
        return self._provider.create_customer(data, ctx=ctx)
