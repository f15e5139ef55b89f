"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from dynashop.domain.exceptions import ValidationError
from dynashop.domain.model.value_objects import Money, storable_number_problem


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        m = Money.of("25.99")
        assert m.amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        m = Money.of(10)
        assert m.amount == Decimal("10")

    def test_of_factory_from_store_decimal(self):
        assert Money.of(Decimal("4.5")) == Money.of("4.50")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("NaN"))

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "15.00"
        assert str(Money.of("9.5")) == "9.50"

    def test_largest_storable_amount(self):
        amount = "9" * 36 + ".99"
        assert Money.of(amount).amount == Decimal(amount)

    def test_zero(self):
        assert Money.of("0.00").amount == Decimal("0")


# ── Store number range ───────────────────────────────────────────────────────


class TestStorableNumbers:

    def test_too_large_rejected(self):
        with pytest.raises(ValidationError, match="too large"):
            Money.of("1e200")

    def test_too_many_digits_rejected(self):
        with pytest.raises(ValidationError, match="more than 38 digits"):
            Money.of("1.00000000000000000000000000000000000000001")

    def test_too_small_rejected(self):
        with pytest.raises(ValidationError, match="too small"):
            Money.of("1e-200")

    @pytest.mark.parametrize(
        "value, problem",
        [
            (0, None),
            (Decimal("0E-200"), "is out of range"),
            (10**38 - 1, None),
            (10**38, "has more than 38 digits"),
            (Decimal("9.9E+125"), None),
            (Decimal("1E+126"), "is too large"),
            (Decimal("1E-128"), None),
            (Decimal("1E-129"), "is too small"),
        ],
    )
    def test_storable_number_problem(self, value, problem):
        assert storable_number_problem(value) == problem
