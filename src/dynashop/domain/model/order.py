"""Order aggregate.

Orders reference a customer by id and a product by name. Neither reference
is checked against the other tables: orders are plain records with no
cross-aggregate invariant.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from dynashop.domain.exceptions import ValidationError
from dynashop.domain.model.value_objects import Money, storable_number_problem


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


def parse_order_status(value: str | OrderStatus) -> OrderStatus:
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value.strip().upper())
    except (ValueError, AttributeError) as exc:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(
            f"Unknown order status {value!r}",
            {"status": f"must be one of {allowed}"},
        ) from exc


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: str
    customer_id: str
    product_name: str
    quantity: int
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer_id: str,
        product_name: str,
        quantity: int,
        total_amount: str | int | Money,
        status: OrderStatus | None = None,
    ) -> Order:
        amount = _validate_fields(customer_id, product_name, quantity, total_amount)
        return Order(
            id=order_id,
            customer_id=customer_id.strip(),
            product_name=product_name.strip(),
            quantity=quantity,
            total_amount=amount,
            status=status or OrderStatus.PENDING,
        )

    # --- Mutations ------------------------------------------------------------

    def replace(
        self,
        customer_id: str,
        product_name: str,
        quantity: int,
        total_amount: str | int | Money,
        status: OrderStatus | None = None,
    ) -> None:
        """Full replace-update; the stored status is kept when none is given."""
        amount = _validate_fields(customer_id, product_name, quantity, total_amount)
        self.customer_id = customer_id.strip()
        self.product_name = product_name.strip()
        self.quantity = quantity
        self.total_amount = amount
        if status is not None:
            self.status = status

    def change_status(self, status: OrderStatus) -> None:
        self.status = status


def _validate_fields(
    customer_id: str,
    product_name: str,
    quantity: int,
    total_amount: str | int | Money,
) -> Money:
    errors: dict[str, str] = {}
    amount: Money | None = None

    if not customer_id or not customer_id.strip():
        errors["customerId"] = "is required"
    if not product_name or not product_name.strip():
        errors["productName"] = "is required"
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        errors["quantity"] = "must be an integer"
    elif quantity <= 0:
        errors["quantity"] = "must be positive"
    elif storable_number_problem(quantity) is not None:
        errors["quantity"] = storable_number_problem(quantity)

    if isinstance(total_amount, Money):
        amount = total_amount
    else:
        try:
            amount = Money.of(total_amount)
        except ValidationError as exc:
            errors["totalAmount"] = str(exc)

    if errors:
        raise ValidationError.for_fields(errors)
    return amount
