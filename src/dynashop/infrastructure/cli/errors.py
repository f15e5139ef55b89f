"""Translation of domain and store failures into CLI errors.

Exit codes follow the HTTP status classes the same failures map to:
bad input, not found, conflict, unavailable.
"""

from __future__ import annotations

import click

from dynashop.domain.exceptions import (
    ConcurrencyConflictError,
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    StorageError,
    StorageUnavailableError,
    ValidationError,
)

EXIT_FAILURE = 1
EXIT_INVALID = 2
EXIT_NOT_FOUND = 4
EXIT_CONFLICT = 5
EXIT_UNAVAILABLE = 6


class CommandError(click.ClickException):
    """ClickException carrying an exit code chosen from the failure kind."""

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def to_click_error(exc: DomainException | StorageError) -> CommandError:
    if isinstance(exc, ValidationError):
        lines = [str(exc)]
        lines.extend(f"  {field}: {message}" for field, message in sorted(exc.errors.items()))
        return CommandError("\n".join(lines), EXIT_INVALID)
    if isinstance(exc, EntityNotFoundError):
        return CommandError(str(exc), EXIT_NOT_FOUND)
    if isinstance(exc, (InsufficientStockError, ConcurrencyConflictError)):
        return CommandError(str(exc), EXIT_CONFLICT)
    if isinstance(exc, StorageUnavailableError):
        return CommandError(f"{exc} (try again later)", EXIT_UNAVAILABLE)
    return CommandError(str(exc), EXIT_FAILURE)
