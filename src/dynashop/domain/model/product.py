"""Product aggregate.

Products live independently of orders and customers. The only invariant
they carry is the link between stock and status:

- ``stock_quantity`` is never negative
- ``status`` is OUT_OF_STOCK exactly when stock is zero, unless an operator
  parked the product as INACTIVE or DISCONTINUED

Every path that touches stock or status goes through ``derive_status`` so
the rule is applied identically on create, full update and stock adjustment.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from dynashop.domain.exceptions import ValidationError
from dynashop.domain.model.value_objects import Money, storable_number_problem


class ProductStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DISCONTINUED = "DISCONTINUED"


# Statuses an operator sets by hand; stock changes never move a product out
# of them.
OPERATOR_STATUSES = frozenset({ProductStatus.INACTIVE, ProductStatus.DISCONTINUED})


def derive_status(current: ProductStatus | None, new_stock: int) -> ProductStatus:
    """Return the status a product should have once its stock is ``new_stock``.

    ``current`` is the status before the change, or None for a product that
    has none yet (creation without an explicit status).
    """
    if current in OPERATOR_STATUSES:
        return current
    if new_stock == 0:
        return ProductStatus.OUT_OF_STOCK
    if current is None or current == ProductStatus.OUT_OF_STOCK:
        return ProductStatus.ACTIVE
    return current


def parse_status(value: str | ProductStatus) -> ProductStatus:
    if isinstance(value, ProductStatus):
        return value
    try:
        return ProductStatus(value.strip().upper())
    except (ValueError, AttributeError) as exc:
        allowed = ", ".join(s.value for s in ProductStatus)
        raise ValidationError(
            f"Unknown product status {value!r}",
            {"status": f"must be one of {allowed}"},
        ) from exc


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products; ``__init__`` stays simple so
    the repository can reconstitute stored records without re-validating.
    """

    id: str
    name: str
    category: str
    price: Money
    stock_quantity: int
    status: ProductStatus
    description: str | None = None
    manufacturer: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        product_id: str,
        name: str,
        category: str,
        price: str | int | Money,
        stock_quantity: int,
        description: str | None = None,
        manufacturer: str | None = None,
        status: ProductStatus | None = None,
    ) -> Product:
        """Create a new product; status is seeded from the initial stock."""
        clean_price = _validate_fields(name, category, price, stock_quantity)
        return Product(
            id=product_id,
            name=name.strip(),
            category=category.strip(),
            price=clean_price,
            stock_quantity=stock_quantity,
            status=derive_status(status, stock_quantity),
            description=description,
            manufacturer=manufacturer,
        )

    # --- Mutations ------------------------------------------------------------

    def replace(
        self,
        name: str,
        category: str,
        price: str | int | Money,
        stock_quantity: int,
        description: str | None = None,
        manufacturer: str | None = None,
        status: ProductStatus | None = None,
    ) -> None:
        """Full replace-update of the mutable fields.

        Without an explicit ``status`` the stored one is kept and reconciled
        with the new stock level; an explicit one is reconciled the same way.
        """
        clean_price = _validate_fields(name, category, price, stock_quantity)
        base_status = status if status is not None else self.status
        self.name = name.strip()
        self.category = category.strip()
        self.price = clean_price
        self.stock_quantity = stock_quantity
        self.status = derive_status(base_status, stock_quantity)
        self.description = description
        self.manufacturer = manufacturer

    def check_status_change(self, new_status: ProductStatus) -> None:
        """Reject explicit statuses that would contradict the stock level."""
        if new_status == ProductStatus.ACTIVE and self.stock_quantity == 0:
            raise ValidationError(
                f"Product {self.id} has no stock and cannot be ACTIVE",
                {"status": "ACTIVE requires stock above zero"},
            )
        if new_status == ProductStatus.OUT_OF_STOCK and self.stock_quantity > 0:
            raise ValidationError(
                f"Product {self.id} has {self.stock_quantity} in stock "
                f"and cannot be OUT_OF_STOCK",
                {"status": "OUT_OF_STOCK requires zero stock"},
            )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _validate_fields(
    name: str,
    category: str,
    price: str | int | Money,
    stock_quantity: int,
) -> Money:
    errors: dict[str, str] = {}
    clean_price: Money | None = None

    if not name or not name.strip():
        errors["name"] = "is required"
    # Empty strings are not valid index keys in the store.
    if not category or not category.strip():
        errors["category"] = "is required"

    if isinstance(price, Money):
        clean_price = price
    else:
        try:
            clean_price = Money.of(price)
        except ValidationError as exc:
            errors["price"] = str(exc)

    if isinstance(stock_quantity, bool) or not isinstance(stock_quantity, int):
        errors["stockQuantity"] = "must be an integer"
    elif stock_quantity < 0:
        errors["stockQuantity"] = "cannot be negative"
    elif storable_number_problem(stock_quantity) is not None:
        errors["stockQuantity"] = storable_number_problem(stock_quantity)

    if errors:
        raise ValidationError.for_fields(errors)
    return clean_price
