from __future__ import annotations

from accounting_gateway.common.context import CallContext
from accounting_gateway.common.inputs import CreateItemInput, ListItemsInput, UpdateItemInput
from accounting_gateway.common.models import Item
from accounting_gateway.common.provider import Provider


class ItemService:
    def __init__(self, provider: Provider) -> None:
        self._provider = provider

    def create(self, data: CreateItemInput, *, ctx: CallContext | None = None) -> Item:
        return self._provider.create_item(data, ctx=ctx)

    def list(
        self, data: ListItemsInput | None = None, *, ctx: CallContext | None = None
    ) -> list[Item]:
        return self._provider.list_items(data or ListItemsInput(), ctx=ctx)

    def update(self, data: UpdateItemInput, *, ctx: CallContext | None = None) -> None:
        self._provider.update_item(data, ctx=ctx)
