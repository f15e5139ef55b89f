"""Item-store-backed implementation of ProductRepository."""

from __future__ import annotations

import structlog

from dynashop.domain.model.product import Product, ProductStatus
from dynashop.domain.model.value_objects import utc_now
from dynashop.domain.repository.product_repository import ProductRepository
from dynashop.infrastructure.config import TableConfig
from dynashop.infrastructure.persistence.category_index import CategoryIndexReader
from dynashop.infrastructure.persistence.codecs import (
    PRODUCT_KEY,
    product_from_item,
    product_to_item,
)
from dynashop.infrastructure.persistence.item_store import ItemStore

logger = structlog.get_logger(__name__)


class StoreProductRepository(ProductRepository):

    def __init__(self, store: ItemStore, tables: TableConfig) -> None:
        self._store = store
        self._table = tables.products
        self._index_reader = CategoryIndexReader(store, tables)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        item = self._store.get(self._table, {PRODUCT_KEY: product_id})
        if item is None:
            logger.debug("Product not found", product_id=product_id)
            return None
        return product_from_item(item)

    def list_all(self) -> list[Product]:
        products = [product_from_item(item) for item in self._store.scan(self._table)]
        logger.info("Listed products", count=len(products))
        return products

    def find_by_category(self, category: str) -> list[Product]:
        return self._index_reader.find_by_category(category)

    def find_by_status(self, status: ProductStatus) -> list[Product]:
        return self._index_reader.find_by_status(status)

    def save(self, product: Product) -> Product:
        now = utc_now()
        if product.created_at is None:
            product.created_at = now
        product.updated_at = now
        self._store.put(self._table, product_to_item(product))
        logger.info("Product saved", product_id=product.id)
        return product

    def update_stock_if_unchanged(
        self,
        product: Product,
        new_stock: int,
        new_status: ProductStatus,
    ) -> Product:
        item = self._store.update_if(
            self._table,
            {PRODUCT_KEY: product.id},
            changes={
                "stockQuantity": new_stock,
                "status": new_status.value,
                "updatedAt": utc_now().isoformat(),
            },
            expected={
                "stockQuantity": product.stock_quantity,
                "status": product.status.value,
            },
        )
        return product_from_item(item)

    def update_status_if_unchanged(
        self,
        product: Product,
        new_status: ProductStatus,
    ) -> Product:
        item = self._store.update_if(
            self._table,
            {PRODUCT_KEY: product.id},
            changes={
                "status": new_status.value,
                "updatedAt": utc_now().isoformat(),
            },
            expected={"stockQuantity": product.stock_quantity},
        )
        return product_from_item(item)

    def delete(self, product_id: str) -> None:
        self._store.delete(self._table, {PRODUCT_KEY: product_id})
        logger.info("Product deleted", product_id=product_id)

