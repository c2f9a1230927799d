"""Abstract repository for the StoreLedger aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from limestore.domain.model.store import StoreLedger


class StoreRepository(ABC):

    @abstractmethod
    def get(self) -> StoreLedger | None:
        """Return the store ledger, or None if no store was created yet."""

    @abstractmethod
    def save(self, ledger: StoreLedger) -> None:
        """Persist the whole ledger state, replacing what was stored."""
