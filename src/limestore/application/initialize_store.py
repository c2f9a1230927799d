"""Application service: Initialize Store use case.

Creates the ledger once and fixes its owner. There is no way to
re-initialise or transfer ownership afterwards.
"""

from __future__ import annotations

import logging

from limestore.application.dto import StoreDTO
from limestore.domain.exceptions import ValidationError
from limestore.domain.model.store import DEFAULT_RETURN_WINDOW, PaymentPolicy, StoreLedger
from limestore.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class InitializeStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(
        self,
        owner: str,
        return_window: int = DEFAULT_RETURN_WINDOW,
        payment_policy: PaymentPolicy = PaymentPolicy.PERMISSIVE,
    ) -> StoreDTO:
        if self._store_repo.get() is not None:
            raise ValidationError("Store is already initialised")

        ledger = StoreLedger.create(
            owner=owner,
            return_window=return_window,
            payment_policy=payment_policy,
        )
        self._store_repo.save(ledger)
        logger.info(
            "Store initialised for owner %s (return window %d, %s payments)",
            ledger.owner,
            ledger.return_window,
            ledger.payment_policy.value,
        )
        return StoreDTO(
            owner=ledger.owner,
            return_window=ledger.return_window,
            payment_policy=ledger.payment_policy.value,
            balance=str(ledger.get_total_balance()),
        )
