"""Item-store-backed implementation of OrderRepository."""

from __future__ import annotations

import structlog

from dynashop.domain.model.order import Order
from dynashop.domain.model.value_objects import utc_now
from dynashop.domain.repository.order_repository import OrderRepository
from dynashop.infrastructure.config import TableConfig
from dynashop.infrastructure.persistence.codecs import (
    ORDER_KEY,
    order_from_item,
    order_to_item,
)
from dynashop.infrastructure.persistence.item_store import ItemStore

logger = structlog.get_logger(__name__)


class StoreOrderRepository(OrderRepository):

    def __init__(self, store: ItemStore, tables: TableConfig) -> None:
        self._store = store
        self._table = tables.orders

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        item = self._store.get(self._table, {ORDER_KEY: order_id})
        return order_from_item(item) if item is not None else None

    def list_all(self) -> list[Order]:
        orders = [order_from_item(item) for item in self._store.scan(self._table)]
        logger.info("Listed orders", count=len(orders))
        return orders

    def find_by_customer(self, customer_id: str) -> list[Order]:
        # No index on customerId: scan and filter.
        orders = [
            order
            for order in map(order_from_item, self._store.scan(self._table))
            if order.customer_id == customer_id
        ]
        logger.info("Found orders for customer", customer_id=customer_id, count=len(orders))
        return orders

    def save(self, order: Order) -> Order:
        now = utc_now()
        if order.created_at is None:
            order.created_at = now
        order.updated_at = now
        self._store.put(self._table, order_to_item(order))
        logger.info("Order saved", order_id=order.id)
        return order

    def delete(self, order_id: str) -> None:
        self._store.delete(self._table, {ORDER_KEY: order_id})
        logger.info("Order deleted", order_id=order_id)
