"""Abstract item store: partition-keyed, schemaless records.

Items are plain dicts keyed by attribute name. The store knows nothing
about aggregates; repositories map between items and domain objects.

Implementations translate store faults into StorageUnavailableError
(transient, safe to retry) or StorageError, and never retry on their own
beyond what the underlying client is configured to do.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

Item = dict[str, Any]


class ItemStore(ABC):

    @abstractmethod
    def get(self, table: str, key: Item) -> Item | None:
        """Return the item addressed by ``key``, or None."""

    @abstractmethod
    def put(self, table: str, item: Item) -> None:
        """Create or fully replace an item."""

    @abstractmethod
    def delete(self, table: str, key: Item) -> None:
        """Remove an item; deleting a missing item is not an error."""

    @abstractmethod
    def scan(self, table: str) -> list[Item]:
        """Return every item in the table, in no particular order."""

    @abstractmethod
    def query(self, table: str, index: str, key: Item) -> list[Item]:
        """Return every item whose index key equals ``key``, unordered.

        ``key`` holds exactly one attribute: the index partition key.
        Store-side paging is followed until the result is complete.
        """

    @abstractmethod
    def update_if(
        self,
        table: str,
        key: Item,
        changes: Item,
        expected: Item,
    ) -> Item:
        """Set ``changes`` on an existing item if ``expected`` still holds.

        Every attribute in ``expected`` must currently equal the given
        value. Returns the item as stored after the update.

        Raises ConditionCheckFailedError if the item is missing or any
        expected value differs; nothing is written in that case.
        """
