"""Mapping between domain aggregates and store items.

Attribute names are camelCase, the layout shared with every other client
of these tables. Numbers come back from the store as Decimal, so integer
fields are converted explicitly. Timestamps are ISO-8601 strings and
optional attributes that are None are left out of the item.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from dynashop.domain.model.customer import Customer
from dynashop.domain.model.order import Order, OrderStatus
from dynashop.domain.model.product import Product, ProductStatus
from dynashop.domain.model.value_objects import Money
from dynashop.infrastructure.persistence.item_store import Item

PRODUCT_KEY = "productId"
CUSTOMER_KEY = "customerId"
ORDER_KEY = "orderId"
CATEGORY_ATTRIBUTE = "category"


# --- Product ------------------------------------------------------------------


def product_to_item(product: Product) -> Item:
    return _compact(
        {
            PRODUCT_KEY: product.id,
            "name": product.name,
            CATEGORY_ATTRIBUTE: product.category,
            "price": product.price.amount,
            "stockQuantity": product.stock_quantity,
            "status": product.status.value,
            "description": product.description,
            "manufacturer": product.manufacturer,
            "createdAt": _iso(product.created_at),
            "updatedAt": _iso(product.updated_at),
        }
    )


def product_from_item(item: Item) -> Product:
    return Product(
        id=item[PRODUCT_KEY],
        name=item["name"],
        category=item[CATEGORY_ATTRIBUTE],
        price=_money(item["price"]),
        stock_quantity=int(item["stockQuantity"]),
        status=ProductStatus(item["status"]),
        description=item.get("description"),
        manufacturer=item.get("manufacturer"),
        created_at=_parse(item.get("createdAt")),
        updated_at=_parse(item.get("updatedAt")),
    )


# --- Customer -----------------------------------------------------------------


def customer_to_item(customer: Customer) -> Item:
    return _compact(
        {
            CUSTOMER_KEY: customer.id,
            "email": customer.email,
            "firstName": customer.first_name,
            "lastName": customer.last_name,
            "phone": customer.phone,
            "address": customer.address,
            "createdAt": _iso(customer.created_at),
            "updatedAt": _iso(customer.updated_at),
        }
    )


def customer_from_item(item: Item) -> Customer:
    return Customer(
        id=item[CUSTOMER_KEY],
        email=item["email"],
        first_name=item["firstName"],
        last_name=item["lastName"],
        phone=item.get("phone"),
        address=item.get("address"),
        created_at=_parse(item.get("createdAt")),
        updated_at=_parse(item.get("updatedAt")),
    )


# --- Order --------------------------------------------------------------------


def order_to_item(order: Order) -> Item:
    return _compact(
        {
            ORDER_KEY: order.id,
            "customerId": order.customer_id,
            "productName": order.product_name,
            "quantity": order.quantity,
            "totalAmount": order.total_amount.amount,
            "status": order.status.value,
            "createdAt": _iso(order.created_at),
            "updatedAt": _iso(order.updated_at),
        }
    )


def order_from_item(item: Item) -> Order:
    return Order(
        id=item[ORDER_KEY],
        customer_id=item["customerId"],
        product_name=item["productName"],
        quantity=int(item["quantity"]),
        total_amount=_money(item["totalAmount"]),
        status=OrderStatus(item["status"]),
        created_at=_parse(item.get("createdAt")),
        updated_at=_parse(item.get("updatedAt")),
    )


# --- Helpers ------------------------------------------------------------------


def _compact(item: Item) -> Item:
    return {k: v for k, v in item.items() if v is not None}


def _money(value: object) -> Money:
    return Money(Decimal(str(value)))


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
