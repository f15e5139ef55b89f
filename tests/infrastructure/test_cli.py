"""CLI tests: commands run through click's CliRunner on in-memory services."""

import pytest
from click.testing import CliRunner

from dynashop.application.dto import ProductInput
from dynashop.domain.exceptions import StorageError, StorageUnavailableError
from dynashop.infrastructure.bootstrap import build_services
from dynashop.infrastructure.cli.main import cli
from tests.fakes import TABLES, InMemoryItemStore


class UnavailableStore(InMemoryItemStore):

    def get(self, table, key):
        raise StorageUnavailableError(f"Store unavailable during get on '{table}'")


class BrokenStore(InMemoryItemStore):

    def scan(self, table):
        raise StorageError(f"Store error during scan on '{table}': ValidationException")


@pytest.fixture
def services():
    return build_services(InMemoryItemStore(), TABLES)


def _run(services, *args):
    return CliRunner().invoke(cli, ["--log-level", "ERROR", *args], obj=services)


def _seed_product(services, stock=5, **overrides):
    fields = dict(name="Widget", category="tools", price="9.99", stock_quantity=stock)
    fields.update(overrides)
    return services.products.create(ProductInput(**fields))


# ── Product ──────────────────────────────────────────────────────────────────


class TestProductCommands:

    def test_create(self, services):
        result = _run(
            services,
            "product", "create",
            "--name", "Widget", "--category", "tools", "--price", "9.99", "--stock", "0",
        )

        assert result.exit_code == 0, result.output
        assert "status=OUT_OF_STOCK" in result.output
        (product,) = services.products.list_all()
        assert product.name == "Widget"

    def test_create_invalid_lists_fields(self, services):
        result = _run(
            services,
            "product", "create",
            "--name", " ", "--category", "tools", "--price", "-3", "--stock", "1",
        )

        assert result.exit_code == 2
        assert "name: is required" in result.output
        assert "price:" in result.output

    def test_create_price_outside_store_range(self, services):
        result = _run(
            services,
            "product", "create",
            "--name", "Widget", "--category", "tools", "--price", "1e200", "--stock", "1",
        )

        assert result.exit_code == 2
        assert "price: Money amount is too large" in result.output
        assert services.products.list_all() == []

    def test_show(self, services):
        product = _seed_product(services)

        result = _run(services, "product", "show", "--id", product.id)

        assert result.exit_code == 0, result.output
        assert "Widget" in result.output
        assert "9.99" in result.output

    def test_show_missing(self, services):
        result = _run(services, "product", "show", "--id", "nope")

        assert result.exit_code == 4
        assert "Product not found: nope" in result.output

    def test_reduce(self, services):
        product = _seed_product(services, stock=5)

        result = _run(services, "product", "reduce", "--id", product.id, "--quantity", "5")

        assert result.exit_code == 0, result.output
        assert "stock is now 0 (status=OUT_OF_STOCK)" in result.output

    def test_reduce_beyond_stock(self, services):
        product = _seed_product(services, stock=2)

        result = _run(services, "product", "reduce", "--id", product.id, "--quantity", "3")

        assert result.exit_code == 5
        assert "Insufficient stock" in result.output
        assert services.products.get(product.id).stock_quantity == 2

    def test_adjust_negative(self, services):
        product = _seed_product(services, stock=2)

        result = _run(services, "product", "adjust", "--id", product.id, "--quantity", "-2")

        assert result.exit_code == 0, result.output
        assert services.products.get(product.id).stock_quantity == 0

    def test_increase(self, services):
        product = _seed_product(services, stock=0)

        result = _run(services, "product", "increase", "--id", product.id, "--quantity", "4")

        assert result.exit_code == 0, result.output
        assert "status=ACTIVE" in result.output

    def test_set_status_contradicting_stock(self, services):
        product = _seed_product(services, stock=0)

        result = _run(services, "product", "set-status", "--id", product.id, "--status", "active")

        assert result.exit_code == 2
        assert "status:" in result.output

    def test_set_status(self, services):
        product = _seed_product(services, stock=3)

        result = _run(
            services, "product", "set-status", "--id", product.id, "--status", "discontinued"
        )

        assert result.exit_code == 0, result.output
        assert services.products.get(product.id).status.value == "DISCONTINUED"

    def test_update(self, services):
        product = _seed_product(services)

        result = _run(
            services,
            "product", "update", "--id", product.id,
            "--name", "Widget Pro", "--category", "tools", "--price", "12", "--stock", "1",
        )

        assert result.exit_code == 0, result.output
        assert services.products.get(product.id).name == "Widget Pro"

    def test_list_by_category(self, services):
        _seed_product(services, name="Hammer")
        _seed_product(services, name="Yo-yo", category="toys")

        result = _run(services, "product", "list", "--category", "toys")

        assert result.exit_code == 0, result.output
        assert "Yo-yo" in result.output
        assert "Hammer" not in result.output

    def test_list_out_of_stock(self, services):
        _seed_product(services, name="Hammer", stock=0)
        _seed_product(services, name="Saw", stock=4)

        result = _run(services, "product", "list", "--out-of-stock")

        assert "Hammer" in result.output
        assert "Saw" not in result.output

    def test_list_empty(self, services):
        result = _run(services, "product", "list")

        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_list_filters_are_exclusive(self, services):
        result = _run(services, "product", "list", "--category", "tools", "--available")

        assert result.exit_code == 2
        assert "at most one" in result.output

    def test_delete(self, services):
        product = _seed_product(services)

        assert _run(services, "product", "delete", "--id", product.id).exit_code == 0
        assert _run(services, "product", "delete", "--id", product.id).exit_code == 4


# ── Customer / order ─────────────────────────────────────────────────────────


class TestCustomerAndOrderCommands:

    def test_customer_lifecycle(self, services):
        result = _run(
            services,
            "customer", "create",
            "--email", "ada@example.com", "--first-name", "Ada", "--last-name", "Lovelace",
        )
        assert result.exit_code == 0, result.output
        (customer,) = services.customers.list_all()

        shown = _run(services, "customer", "show", "--id", customer.id)
        assert "Ada Lovelace" in shown.output

        listed = _run(services, "customer", "list")
        assert "ada@example.com" in listed.output

        updated = _run(
            services,
            "customer", "update", "--id", customer.id,
            "--email", "ada@example.com", "--first-name", "Augusta", "--last-name", "King",
        )
        assert updated.exit_code == 0, updated.output
        assert services.customers.get(customer.id).full_name == "Augusta King"

        assert _run(services, "customer", "delete", "--id", customer.id).exit_code == 0

    def test_customer_bad_email(self, services):
        result = _run(
            services,
            "customer", "create", "--email", "ada", "--first-name", "Ada", "--last-name", "L",
        )

        assert result.exit_code == 2
        assert "email: must be a valid email address" in result.output

    def test_order_lifecycle(self, services):
        result = _run(
            services,
            "order", "create",
            "--customer", "c-1", "--product", "Widget", "--quantity", "2", "--total", "19.98",
        )
        assert result.exit_code == 0, result.output
        assert "status=PENDING" in result.output
        (order,) = services.orders.list_all()

        listed = _run(services, "order", "list", "--customer", "c-1")
        assert order.id in listed.output
        assert "No orders found." in _run(services, "order", "list", "--customer", "c-2").output

        shipped = _run(services, "order", "set-status", "--id", order.id, "--status", "SHIPPED")
        assert shipped.exit_code == 0, shipped.output

        shown = _run(services, "order", "show", "--id", order.id)
        assert "status=SHIPPED" in shown.output
        assert "19.98" in shown.output

        updated = _run(
            services,
            "order", "update", "--id", order.id,
            "--customer", "c-1", "--product", "Widget", "--quantity", "3", "--total", "29.97",
        )
        assert updated.exit_code == 0, updated.output
        assert services.orders.get(order.id).quantity == 3

        assert _run(services, "order", "delete", "--id", order.id).exit_code == 0
        assert _run(services, "order", "show", "--id", order.id).exit_code == 4

    def test_order_zero_quantity(self, services):
        result = _run(
            services,
            "order", "create",
            "--customer", "c-1", "--product", "Widget", "--quantity", "0", "--total", "0",
        )

        assert result.exit_code == 2
        assert "quantity: must be positive" in result.output


# ── Store failures ───────────────────────────────────────────────────────────


class TestStoreFailures:

    def test_unavailable(self):
        services = build_services(UnavailableStore(), TABLES)

        result = _run(services, "product", "show", "--id", "p-1")

        assert result.exit_code == 6
        assert "try again later" in result.output

    def test_other_store_error(self):
        services = build_services(BrokenStore(), TABLES)

        result = _run(services, "customer", "list")

        assert result.exit_code == 1
        assert "ValidationException" in result.output
