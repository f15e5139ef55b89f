"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from dynashop.domain.exceptions import ValidationError

# Numbers the store can hold: at most 38 digits, magnitude in [1E-128, 1E+126).
MAX_STORED_DIGITS = 38
MAX_STORED_EXPONENT = 125
MIN_STORED_EXPONENT = -128


def storable_number_problem(value: Decimal | int) -> str | None:
    """Why ``value`` cannot be written as a store number, or None if it can."""
    number = Decimal(value)
    if number.is_zero():
        exponent = number.as_tuple().exponent
        lowest = MIN_STORED_EXPONENT - MAX_STORED_DIGITS + 1
        if exponent < lowest or exponent > MAX_STORED_EXPONENT + 1:
            return "is out of range"
        return None
    if len(number.as_tuple().digits) > MAX_STORED_DIGITS:
        return f"has more than {MAX_STORED_DIGITS} digits"
    if number.adjusted() > MAX_STORED_EXPONENT:
        return "is too large"
    if number.adjusted() < MIN_STORED_EXPONENT:
        return "is too small"
    return None


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors, and because the
    store hands numbers back as Decimal anyway.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        problem = storable_number_problem(self.amount)
        if problem is not None:
            raise ValidationError(f"Money amount {problem}, got {self.amount}")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
