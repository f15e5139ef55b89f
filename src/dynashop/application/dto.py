"""Data Transfer Objects: plain containers that cross layer boundaries.

Inputs carry what a caller supplied, unvalidated; the domain factories
decide whether it is acceptable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductInput:
    """Create or full-replace payload for a product."""

    name: str
    category: str
    price: str
    stock_quantity: int
    description: str | None = None
    manufacturer: str | None = None
    status: str | None = None  # None lets stock decide


@dataclass(frozen=True)
class CustomerInput:

    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class OrderInput:

    customer_id: str
    product_name: str
    quantity: int
    total_amount: str
    status: str | None = None
