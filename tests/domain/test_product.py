"""Unit tests for the Product aggregate and status derivation."""

import pytest

from dynashop.domain.exceptions import ValidationError
from dynashop.domain.model.product import (
    Product,
    ProductStatus,
    derive_status,
    parse_status,
)
from dynashop.domain.model.value_objects import Money

ACTIVE = ProductStatus.ACTIVE
INACTIVE = ProductStatus.INACTIVE
OUT_OF_STOCK = ProductStatus.OUT_OF_STOCK
DISCONTINUED = ProductStatus.DISCONTINUED


def _product(stock: int = 10, status: ProductStatus | None = None) -> Product:
    return Product.create("p-1", "Widget", "tools", "9.99", stock, status=status)


# ── derive_status ────────────────────────────────────────────────────────────


class TestDeriveStatus:

    @pytest.mark.parametrize(
        "current, stock, expected",
        [
            (None, 0, OUT_OF_STOCK),
            (None, 5, ACTIVE),
            (ACTIVE, 0, OUT_OF_STOCK),
            (ACTIVE, 5, ACTIVE),
            (OUT_OF_STOCK, 0, OUT_OF_STOCK),
            (OUT_OF_STOCK, 1, ACTIVE),
            (INACTIVE, 0, INACTIVE),
            (INACTIVE, 5, INACTIVE),
            (DISCONTINUED, 0, DISCONTINUED),
            (DISCONTINUED, 5, DISCONTINUED),
        ],
    )
    def test_table(self, current, stock, expected):
        assert derive_status(current, stock) is expected


# ── Product.create ───────────────────────────────────────────────────────────


class TestCreate:

    def test_status_seeded_from_positive_stock(self):
        product = _product(stock=3)
        assert product.status is ACTIVE
        assert product.price == Money.of("9.99")

    def test_status_seeded_from_zero_stock(self):
        assert _product(stock=0).status is OUT_OF_STOCK

    def test_explicit_active_with_zero_stock_becomes_out_of_stock(self):
        assert _product(stock=0, status=ACTIVE).status is OUT_OF_STOCK

    def test_explicit_operator_status_kept(self):
        assert _product(stock=0, status=INACTIVE).status is INACTIVE
        assert _product(stock=7, status=DISCONTINUED).status is DISCONTINUED

    def test_names_are_trimmed(self):
        product = Product.create("p-1", "  Widget ", " tools ", "1", 1)
        assert product.name == "Widget"
        assert product.category == "tools"

    def test_all_field_errors_reported_together(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("p-1", "", "  ", "-1", -5)

        errors = exc_info.value.errors
        assert set(errors) == {"name", "category", "price", "stockQuantity"}
        assert errors["name"] == "is required"
        assert errors["stockQuantity"] == "cannot be negative"
        assert "cannot be negative" in errors["price"]

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("p-1", "Widget", "tools", "1", "5")
        assert exc_info.value.errors == {"stockQuantity": "must be an integer"}

    def test_boolean_stock_rejected(self):
        with pytest.raises(ValidationError, match="stockQuantity"):
            Product.create("p-1", "Widget", "tools", "1", True)

    @pytest.mark.parametrize(
        "price, problem",
        [
            ("1e200", "too large"),
            ("1.00000000000000000000000000000000000000001", "more than 38 digits"),
        ],
    )
    def test_price_outside_store_range_rejected(self, price, problem):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("p-1", "Widget", "tools", price, 1)
        assert set(exc_info.value.errors) == {"price"}
        assert problem in exc_info.value.errors["price"]

    def test_stock_outside_store_range_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create("p-1", "Widget", "tools", "1", 10**38)
        assert exc_info.value.errors == {"stockQuantity": "has more than 38 digits"}


# ── Product.replace ──────────────────────────────────────────────────────────


class TestReplace:

    def test_stored_status_reconciled_with_new_stock(self):
        product = _product(stock=0)
        product.replace("Widget", "tools", "9.99", 4)
        assert product.status is ACTIVE

    def test_drop_to_zero_marks_out_of_stock(self):
        product = _product(stock=4)
        product.replace("Widget", "tools", "9.99", 0)
        assert product.status is OUT_OF_STOCK

    def test_operator_status_survives_replace(self):
        product = _product(stock=4, status=INACTIVE)
        product.replace("Widget", "tools", "9.99", 0)
        assert product.status is INACTIVE

    def test_explicit_status_passed_through_derivation(self):
        product = _product(stock=4)
        product.replace("Widget", "tools", "9.99", 0, status=ACTIVE)
        assert product.status is OUT_OF_STOCK

    def test_invalid_fields_leave_product_untouched(self):
        product = _product(stock=4)
        with pytest.raises(ValidationError):
            product.replace("", "tools", "9.99", 1)
        assert product.name == "Widget"
        assert product.stock_quantity == 4


# ── Explicit status changes ──────────────────────────────────────────────────


class TestCheckStatusChange:

    def test_active_needs_stock(self):
        with pytest.raises(ValidationError, match="cannot be ACTIVE"):
            _product(stock=0).check_status_change(ACTIVE)

    def test_out_of_stock_needs_zero_stock(self):
        with pytest.raises(ValidationError, match="cannot be OUT_OF_STOCK"):
            _product(stock=2).check_status_change(OUT_OF_STOCK)

    @pytest.mark.parametrize("status", [INACTIVE, DISCONTINUED])
    def test_operator_statuses_always_allowed(self, status):
        _product(stock=0).check_status_change(status)
        _product(stock=9).check_status_change(status)


class TestParseStatus:

    def test_case_insensitive(self):
        assert parse_status(" out_of_stock ") is OUT_OF_STOCK

    def test_enum_passes_through(self):
        assert parse_status(INACTIVE) is INACTIVE

    def test_unknown_rejected_with_field_error(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_status("SOLD")
        assert "status" in exc_info.value.errors
