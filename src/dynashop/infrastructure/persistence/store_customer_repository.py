"""Item-store-backed implementation of CustomerRepository."""

from __future__ import annotations

import structlog

from dynashop.domain.model.customer import Customer
from dynashop.domain.model.value_objects import utc_now
from dynashop.domain.repository.customer_repository import CustomerRepository
from dynashop.infrastructure.config import TableConfig
from dynashop.infrastructure.persistence.codecs import (
    CUSTOMER_KEY,
    customer_from_item,
    customer_to_item,
)
from dynashop.infrastructure.persistence.item_store import ItemStore

logger = structlog.get_logger(__name__)


class StoreCustomerRepository(CustomerRepository):

    def __init__(self, store: ItemStore, tables: TableConfig) -> None:
        self._store = store
        self._table = tables.customers

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: str) -> Customer | None:
        item = self._store.get(self._table, {CUSTOMER_KEY: customer_id})
        return customer_from_item(item) if item is not None else None

    def list_all(self) -> list[Customer]:
        customers = [customer_from_item(item) for item in self._store.scan(self._table)]
        logger.info("Listed customers", count=len(customers))
        return customers

    def save(self, customer: Customer) -> Customer:
        now = utc_now()
        if customer.created_at is None:
            customer.created_at = now
        customer.updated_at = now
        self._store.put(self._table, customer_to_item(customer))
        logger.info("Customer saved", customer_id=customer.id)
        return customer

    def delete(self, customer_id: str) -> None:
        self._store.delete(self._table, {CUSTOMER_KEY: customer_id})
        logger.info("Customer deleted", customer_id=customer_id)
