"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions, and nothing here is
cached at module level: callers build what they need from a Settings.
"""

from __future__ import annotations

from dataclasses import dataclass

from dynashop.application.customer_service import CustomerService
from dynashop.application.order_service import OrderService
from dynashop.application.product_service import ProductService
from dynashop.domain.service.stock_adjustment_service import StockAdjustmentService
from dynashop.infrastructure.config import Settings, TableConfig
from dynashop.infrastructure.persistence.dynamo_item_store import DynamoItemStore
from dynashop.infrastructure.persistence.item_store import ItemStore
from dynashop.infrastructure.persistence.store_customer_repository import (
    StoreCustomerRepository,
)
from dynashop.infrastructure.persistence.store_order_repository import (
    StoreOrderRepository,
)
from dynashop.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)


@dataclass(frozen=True)
class Services:
    products: ProductService
    customers: CustomerService
    orders: OrderService


def build_services(
    store: ItemStore,
    tables: TableConfig,
    stock_max_attempts: int = 5,
    stock_retry_base_delay: float = 0.01,
) -> Services:
    product_repo = StoreProductRepository(store, tables)
    stock_service = StockAdjustmentService(
        product_repo,
        max_attempts=stock_max_attempts,
        retry_base_delay=stock_retry_base_delay,
    )
    return Services(
        products=ProductService(product_repo, stock_service),
        customers=CustomerService(StoreCustomerRepository(store, tables)),
        orders=OrderService(StoreOrderRepository(store, tables)),
    )


def services_from_settings(settings: Settings) -> Services:
    """Services backed by DynamoDB as described by ``settings``."""
    return build_services(
        DynamoItemStore.from_settings(settings),
        settings.table_config(),
        stock_max_attempts=settings.stock_max_attempts,
        stock_retry_base_delay=settings.stock_retry_base_delay,
    )
