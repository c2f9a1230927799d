"""Application service: Show Balance use case (query)."""

from __future__ import annotations

from limestore.application.common import load_store
from limestore.domain.model.value_objects import Money
from limestore.domain.repository.store_repository import StoreRepository


class ShowBalanceHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self) -> Money:
        """Payments retained by the store, net of refunds."""
        return load_store(self._store_repo).get_total_balance()
