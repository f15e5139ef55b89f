"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Store faults live in a separate hierarchy rooted at StorageError: they are
not business rule violations, and callers treat them differently (a
StorageUnavailableError is safe to retry, a ValidationError never is).
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a violated business rule.

    ``errors`` maps field names to messages so every problem with an input
    can be reported at once.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.errors = dict(errors or {})

    @classmethod
    def for_fields(cls, errors: dict[str, str]) -> ValidationError:
        fields = ", ".join(sorted(errors))
        return cls(f"Invalid value for: {fields}", errors)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class InsufficientStockError(DomainException):
    """A decrement would take stock below zero."""

    def __init__(self, product_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product {product_id} "
            f"(need {requested}, have {available} available)"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class ConcurrencyConflictError(DomainException):
    """Concurrent writers kept invalidating a conditional update.

    Nothing was written by the failing call, so the caller may retry.
    """

    def __init__(self, entity: str, entity_id: str, attempts: int) -> None:
        super().__init__(
            f"{entity} {entity_id} was modified concurrently; "
            f"gave up after {attempts} attempt(s)"
        )
        self.entity = entity
        self.entity_id = entity_id
        self.attempts = attempts


class StorageError(Exception):
    """The backing store failed to complete a call."""


class StorageUnavailableError(StorageError):
    """Transient store fault (throttling, timeout, lost connection)."""


class ConditionCheckFailedError(StorageError):
    """A conditional write was rejected because the item changed or vanished."""
