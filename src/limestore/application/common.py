"""Helpers shared by the application handlers."""

from __future__ import annotations

from limestore.domain.exceptions import EntityNotFoundError
from limestore.domain.model.store import StoreLedger
from limestore.domain.model.token import TokenLedger
from limestore.domain.repository.store_repository import StoreRepository
from limestore.domain.repository.token_repository import TokenRepository


def load_store(store_repo: StoreRepository) -> StoreLedger:
    ledger = store_repo.get()
    if ledger is None:
        raise EntityNotFoundError("Store has not been initialised")
    return ledger


def load_token(token_repo: TokenRepository) -> TokenLedger:
    ledger = token_repo.get()
    if ledger is None:
        raise EntityNotFoundError("Token has not been initialised")
    return ledger
