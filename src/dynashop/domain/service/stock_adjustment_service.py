"""Domain service: Stock Adjustment.

Applies a signed delta to a product's stock and keeps its status in step,
safely under concurrent callers working on the same product.

The store offers no multi-item transactions, and reading the stock then
writing it back is not atomic: two callers can read the same value and
the later write silently drops the earlier one. Every write here is
therefore conditional on the stock and status just read. When the
condition fails someone else changed the product in between, so the
whole read-compute-write step is repeated, up to ``max_attempts`` times,
after a short randomised pause that grows with each lost race.

Invariant violations (not found, insufficient stock) are raised on the
attempt that observes them and are never retried.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable

import structlog

from dynashop.domain.exceptions import (
    ConcurrencyConflictError,
    ConditionCheckFailedError,
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from dynashop.domain.model.product import Product, derive_status
from dynashop.domain.model.value_objects import storable_number_problem
from dynashop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 5
# Seconds; the pause after the n-th lost race is uniform in [0, base * 2**(n-1)].
DEFAULT_RETRY_BASE_DELAY = 0.01
MAX_RETRY_DELAY = 0.5


class StockAdjustmentService:

    def __init__(
        self,
        product_repo: ProductRepository,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_base_delay: float = DEFAULT_RETRY_BASE_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if retry_base_delay < 0:
            raise ValueError("retry_base_delay cannot be negative")
        self._product_repo = product_repo
        self._max_attempts = max_attempts
        self._retry_base_delay = retry_base_delay
        self._sleep = sleep

    def adjust_stock(self, product_id: str, delta: int) -> Product:
        """Add ``delta`` (negative to remove) to the product's stock.

        Returns the product as written.

        Raises:
            EntityNotFoundError: the product does not exist.
            InsufficientStockError: the result would be negative.
            ValidationError: the result would be too large to store.
            ConcurrencyConflictError: every attempt lost a race.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError.for_fields({"quantity": "must be an integer"})

        for attempt in range(1, self._max_attempts + 1):
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)

            if delta == 0:
                return product

            new_stock = product.stock_quantity + delta
            if new_stock < 0:
                logger.warning(
                    "Insufficient stock",
                    product_id=product_id,
                    available=product.stock_quantity,
                    requested=-delta,
                )
                raise InsufficientStockError(
                    product_id, requested=-delta, available=product.stock_quantity
                )
            problem = storable_number_problem(new_stock)
            if problem is not None:
                raise ValidationError.for_fields(
                    {"quantity": f"would leave a stock level that {problem}"}
                )

            new_status = derive_status(product.status, new_stock)
            try:
                updated = self._product_repo.update_stock_if_unchanged(
                    product, new_stock, new_status
                )
            except ConditionCheckFailedError:
                logger.warning(
                    "Stock write lost a race, retrying",
                    product_id=product_id,
                    attempt=attempt,
                    max_attempts=self._max_attempts,
                )
                if attempt < self._max_attempts:
                    self._sleep(self._retry_delay(attempt))
                continue

            logger.info(
                "Stock adjusted",
                product_id=product_id,
                delta=delta,
                previous_stock=product.stock_quantity,
                new_stock=new_stock,
                status=new_status.value,
                attempt=attempt,
            )
            return updated

        logger.error(
            "Stock adjustment gave up after repeated conflicts",
            product_id=product_id,
            delta=delta,
            attempts=self._max_attempts,
        )
        raise ConcurrencyConflictError("Product", product_id, self._max_attempts)

    def reduce_stock(self, product_id: str, quantity: int) -> Product:
        """Remove ``quantity`` units; ``quantity`` must not be negative."""
        _check_quantity(quantity)
        return self.adjust_stock(product_id, -quantity)

    def increase_stock(self, product_id: str, quantity: int) -> Product:
        """Add ``quantity`` units; ``quantity`` must not be negative."""
        _check_quantity(quantity)
        return self.adjust_stock(product_id, quantity)

    def _retry_delay(self, attempt: int) -> float:
        ceiling = min(MAX_RETRY_DELAY, self._retry_base_delay * 2 ** (attempt - 1))
        return random.uniform(0, ceiling)


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError.for_fields({"quantity": "must be an integer"})
    if quantity < 0:
        raise ValidationError.for_fields({"quantity": "cannot be negative"})
