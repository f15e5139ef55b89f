"""Tests for CustomerService."""

import pytest

from dynashop.application.customer_service import CustomerService
from dynashop.application.dto import CustomerInput
from dynashop.domain.exceptions import EntityNotFoundError, ValidationError
from dynashop.infrastructure.persistence.store_customer_repository import (
    StoreCustomerRepository,
)
from tests.fakes import TABLES, InMemoryItemStore, SequentialIds


def _setup() -> tuple[CustomerService, InMemoryItemStore]:
    store = InMemoryItemStore()
    svc = CustomerService(StoreCustomerRepository(store, TABLES), id_factory=SequentialIds("c"))
    return svc, store


def _input(**overrides) -> CustomerInput:
    fields = dict(email="ada@example.com", first_name="Ada", last_name="Lovelace")
    fields.update(overrides)
    return CustomerInput(**fields)


class TestCustomerService:

    def test_create_and_get(self):
        svc, store = _setup()

        customer = svc.create(_input(phone="555-0100"))

        assert customer.id == "c-1"
        assert svc.get("c-1") == customer
        item = store.raw(TABLES.customers, "c-1")
        assert item["firstName"] == "Ada"
        assert "address" not in item

    def test_invalid_input_not_saved(self):
        svc, store = _setup()

        with pytest.raises(ValidationError):
            svc.create(_input(email="nobody"))
        assert store.writes(TABLES.customers) == 0

    def test_get_missing(self):
        svc, _ = _setup()

        with pytest.raises(EntityNotFoundError, match="Customer not found: c-9"):
            svc.get("c-9")

    def test_list_all(self):
        svc, _ = _setup()
        svc.create(_input())
        svc.create(_input(email="grace@example.com", first_name="Grace", last_name="Hopper"))

        assert sorted(c.first_name for c in svc.list_all()) == ["Ada", "Grace"]

    def test_update_preserves_created_at(self):
        svc, _ = _setup()
        created = svc.create(_input())

        updated = svc.update(created.id, _input(last_name="King"))

        assert updated.last_name == "King"
        assert svc.get(created.id).created_at == created.created_at

    def test_update_missing(self):
        svc, store = _setup()

        with pytest.raises(EntityNotFoundError):
            svc.update("c-9", _input())
        assert store.raw(TABLES.customers, "c-9") is None

    def test_delete(self):
        svc, _ = _setup()
        created = svc.create(_input())

        svc.delete(created.id)

        with pytest.raises(EntityNotFoundError):
            svc.delete(created.id)
