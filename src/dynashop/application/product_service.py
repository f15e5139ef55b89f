"""Application service: Product use cases.

Assigns identities, checks existence before every mutation and turns a
missing record into EntityNotFoundError. Stock changes are handed to the
StockAdjustmentService, the only place allowed to write stock levels
outside a full replace.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable

import structlog

from dynashop.application.dto import ProductInput
from dynashop.domain.exceptions import (
    ConcurrencyConflictError,
    ConditionCheckFailedError,
    EntityNotFoundError,
)
from dynashop.domain.model.product import Product, ProductStatus, parse_status
from dynashop.domain.repository.product_repository import ProductRepository
from dynashop.domain.service.stock_adjustment_service import StockAdjustmentService

logger = structlog.get_logger(__name__)


def new_id() -> str:
    return str(uuid.uuid4())


class ProductService:

    def __init__(
        self,
        product_repo: ProductRepository,
        stock_service: StockAdjustmentService,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._product_repo = product_repo
        self._stock_service = stock_service
        self._id_factory = id_factory

    # --- Commands -------------------------------------------------------------

    def create(self, data: ProductInput) -> Product:
        """Add a new product; status comes from stock unless given."""
        logger.info("Creating product", name=data.name, category=data.category)
        status = parse_status(data.status) if data.status else None
        product = Product.create(
            product_id=self._id_factory(),
            name=data.name,
            category=data.category,
            price=data.price,
            stock_quantity=data.stock_quantity,
            description=data.description,
            manufacturer=data.manufacturer,
            status=status,
        )
        return self._product_repo.save(product)

    def update(self, product_id: str, data: ProductInput) -> Product:
        """Replace every mutable field of an existing product.

        ``created_at`` is kept; status is reconciled with the new stock.
        """
        logger.info("Updating product", product_id=product_id)
        product = self.get(product_id)
        status = parse_status(data.status) if data.status else None
        product.replace(
            name=data.name,
            category=data.category,
            price=data.price,
            stock_quantity=data.stock_quantity,
            description=data.description,
            manufacturer=data.manufacturer,
            status=status,
        )
        return self._product_repo.save(product)

    def update_status(self, product_id: str, status: str | ProductStatus) -> Product:
        """Set the status by hand.

        The write only lands if stock has not moved since it was read, so
        the stock/status check below cannot be defeated by a racing
        adjustment.
        """
        new_status = parse_status(status)
        logger.info("Updating product status", product_id=product_id, status=new_status.value)
        product = self.get(product_id)
        product.check_status_change(new_status)
        try:
            return self._product_repo.update_status_if_unchanged(product, new_status)
        except ConditionCheckFailedError:
            if self._product_repo.get_by_id(product_id) is None:
                raise EntityNotFoundError("Product", product_id) from None
            raise ConcurrencyConflictError("Product", product_id, 1) from None

    def adjust_stock(self, product_id: str, quantity: int) -> Product:
        return self._stock_service.adjust_stock(product_id, quantity)

    def reduce_stock(self, product_id: str, quantity: int) -> Product:
        return self._stock_service.reduce_stock(product_id, quantity)

    def increase_stock(self, product_id: str, quantity: int) -> Product:
        return self._stock_service.increase_stock(product_id, quantity)

    def delete(self, product_id: str) -> None:
        logger.info("Deleting product", product_id=product_id)
        self.get(product_id)
        self._product_repo.delete(product_id)

    # --- Queries --------------------------------------------------------------

    def get(self, product_id: str) -> Product:
        logger.debug("Retrieving product", product_id=product_id)
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    def list_all(self) -> list[Product]:
        return self._product_repo.list_all()

    def list_by_category(self, category: str) -> list[Product]:
        return self._product_repo.find_by_category(category)

    def list_by_status(self, status: str | ProductStatus) -> list[Product]:
        return self._product_repo.find_by_status(parse_status(status))

    def list_available(self) -> list[Product]:
        return self._product_repo.find_by_status(ProductStatus.ACTIVE)

    def list_out_of_stock(self) -> list[Product]:
        return self._product_repo.find_by_status(ProductStatus.OUT_OF_STOCK)
