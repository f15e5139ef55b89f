"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The store-backed implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from dynashop.domain.model.product import Product, ProductStatus


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in no particular order."""

    @abstractmethod
    def find_by_category(self, category: str) -> list[Product]:
        """Return every product whose category equals ``category``."""

    @abstractmethod
    def find_by_status(self, status: ProductStatus) -> list[Product]:
        """Return every product currently in ``status``."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or fully replaced product (last write wins).

        Sets ``created_at`` on first persist and ``updated_at`` always.
        """

    @abstractmethod
    def update_stock_if_unchanged(
        self,
        product: Product,
        new_stock: int,
        new_status: ProductStatus,
    ) -> Product:
        """Write stock and status only if both still match ``product``.

        Raises ConditionCheckFailedError when another writer got there
        first or the product was deleted.
        """

    @abstractmethod
    def update_status_if_unchanged(
        self,
        product: Product,
        new_status: ProductStatus,
    ) -> Product:
        """Write status only if stock still matches ``product``.

        Raises ConditionCheckFailedError otherwise.
        """

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product."""
