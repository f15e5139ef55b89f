"""Application service: Customer use cases."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from dynashop.application.dto import CustomerInput
from dynashop.application.product_service import new_id
from dynashop.domain.exceptions import EntityNotFoundError
from dynashop.domain.model.customer import Customer
from dynashop.domain.repository.customer_repository import CustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._customer_repo = customer_repo
        self._id_factory = id_factory

    def create(self, data: CustomerInput) -> Customer:
        logger.info("Creating customer", email=data.email)
        customer = Customer.create(
            customer_id=self._id_factory(),
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            address=data.address,
        )
        return self._customer_repo.save(customer)

    def get(self, customer_id: str) -> Customer:
        logger.debug("Retrieving customer", customer_id=customer_id)
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)
        return customer

    def list_all(self) -> list[Customer]:
        return self._customer_repo.list_all()

    def update(self, customer_id: str, data: CustomerInput) -> Customer:
        logger.info("Updating customer", customer_id=customer_id)
        customer = self.get(customer_id)
        customer.replace(
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            address=data.address,
        )
        return self._customer_repo.save(customer)

    def delete(self, customer_id: str) -> None:
        logger.info("Deleting customer", customer_id=customer_id)
        self.get(customer_id)
        self._customer_repo.delete(customer_id)
