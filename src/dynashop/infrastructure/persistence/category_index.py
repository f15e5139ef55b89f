"""Read paths over the product table that are not keyed by productId.

``find_by_category`` goes through the global secondary index on
``category``. ``find_by_status`` has no index to use and scans the whole
table, filtering client-side; that is fine for a small catalog but costs
a full read of the table on every call.
"""

from __future__ import annotations

import structlog

from dynashop.domain.model.product import Product, ProductStatus
from dynashop.infrastructure.config import TableConfig
from dynashop.infrastructure.persistence.codecs import (
    CATEGORY_ATTRIBUTE,
    product_from_item,
)
from dynashop.infrastructure.persistence.item_store import ItemStore

logger = structlog.get_logger(__name__)


class CategoryIndexReader:

    def __init__(self, store: ItemStore, tables: TableConfig) -> None:
        self._store = store
        self._table = tables.products
        self._index = tables.category_index

    def find_by_category(self, category: str) -> list[Product]:
        """All products in ``category``, unordered, across every result page."""
        items = self._store.query(self._table, self._index, {CATEGORY_ATTRIBUTE: category})
        products = [product_from_item(item) for item in items]
        logger.info("Found products by category", category=category, count=len(products))
        return products

    def find_by_status(self, status: ProductStatus) -> list[Product]:
        products = [
            product
            for product in map(product_from_item, self._store.scan(self._table))
            if product.status == status
        ]
        logger.info("Found products by status", status=status.value, count=len(products))
        return products
