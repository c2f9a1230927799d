"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from limestore.domain.model.events import DomainEvent
from limestore.domain.model.store import StoreLedger
from limestore.domain.model.token import TokenLedger
from limestore.domain.repository.store_repository import StoreRepository
from limestore.domain.repository.token_repository import TokenRepository


class FakeStoreRepository(StoreRepository):

    def __init__(self, ledger: StoreLedger | None = None) -> None:
        self._ledger = ledger
        self.saves = 0

    def get(self) -> StoreLedger | None:
        return self._ledger

    def save(self, ledger: StoreLedger) -> None:
        self._ledger = ledger
        self.saves += 1


class FakeTokenRepository(TokenRepository):

    def __init__(self, ledger: TokenLedger | None = None) -> None:
        self._ledger = ledger
        self.saves = 0

    def get(self) -> TokenLedger | None:
        return self._ledger

    def save(self, ledger: TokenLedger) -> None:
        self._ledger = ledger
        self.saves += 1


class RecordingListener:
    """Collects every event it is handed."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def __call__(self, event: DomainEvent) -> None:
        self.events.append(event)
