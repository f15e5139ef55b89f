"""Application service: Order use cases.

Orders are not checked against customers or products; the customer id
and product name are stored as given.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from dynashop.application.dto import OrderInput
from dynashop.application.product_service import new_id
from dynashop.domain.exceptions import EntityNotFoundError
from dynashop.domain.model.order import Order, OrderStatus, parse_order_status
from dynashop.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class OrderService:

    def __init__(
        self,
        order_repo: OrderRepository,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._order_repo = order_repo
        self._id_factory = id_factory

    def create(self, data: OrderInput) -> Order:
        """Place a new order, PENDING unless a status is supplied."""
        logger.info("Creating order", customer_id=data.customer_id)
        status = parse_order_status(data.status) if data.status else None
        order = Order.create(
            order_id=self._id_factory(),
            customer_id=data.customer_id,
            product_name=data.product_name,
            quantity=data.quantity,
            total_amount=data.total_amount,
            status=status,
        )
        return self._order_repo.save(order)

    def get(self, order_id: str) -> Order:
        logger.debug("Retrieving order", order_id=order_id)
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)
        return order

    def list_all(self) -> list[Order]:
        return self._order_repo.list_all()

    def list_by_customer(self, customer_id: str) -> list[Order]:
        return self._order_repo.find_by_customer(customer_id)

    def update(self, order_id: str, data: OrderInput) -> Order:
        logger.info("Updating order", order_id=order_id)
        order = self.get(order_id)
        status = parse_order_status(data.status) if data.status else None
        order.replace(
            customer_id=data.customer_id,
            product_name=data.product_name,
            quantity=data.quantity,
            total_amount=data.total_amount,
            status=status,
        )
        return self._order_repo.save(order)

    def update_status(self, order_id: str, status: str | OrderStatus) -> Order:
        new_status = parse_order_status(status)
        logger.info("Updating order status", order_id=order_id, status=new_status.value)
        order = self.get(order_id)
        order.change_status(new_status)
        return self._order_repo.save(order)

    def delete(self, order_id: str) -> None:
        logger.info("Deleting order", order_id=order_id)
        self.get(order_id)
        self._order_repo.delete(order_id)
