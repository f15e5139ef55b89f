"""Customer aggregate: a plain record with a generated identifier."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from dynashop.domain.exceptions import ValidationError


@dataclass
class Customer:

    id: str
    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @staticmethod
    def create(
        customer_id: str,
        email: str,
        first_name: str,
        last_name: str,
        phone: str | None = None,
        address: str | None = None,
    ) -> Customer:
        _validate_fields(email, first_name, last_name)
        return Customer(
            id=customer_id,
            email=email.strip(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            phone=phone,
            address=address,
        )

    def replace(
        self,
        email: str,
        first_name: str,
        last_name: str,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        _validate_fields(email, first_name, last_name)
        self.email = email.strip()
        self.first_name = first_name.strip()
        self.last_name = last_name.strip()
        self.phone = phone
        self.address = address

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


def _validate_fields(email: str, first_name: str, last_name: str) -> None:
    errors: dict[str, str] = {}
    if not email or not email.strip():
        errors["email"] = "is required"
    elif "@" not in email:
        errors["email"] = "must be a valid email address"
    if not first_name or not first_name.strip():
        errors["firstName"] = "is required"
    if not last_name or not last_name.strip():
        errors["lastName"] = "is required"
    if errors:
        raise ValidationError.for_fields(errors)
