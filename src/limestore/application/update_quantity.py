"""Application service: Update Quantity use case.

Setting the quantity to zero delists a product without deleting it.
"""

from __future__ import annotations

import logging

from limestore.application.common import load_store
from limestore.application.events import EventListener, publish
from limestore.domain.exceptions import DomainException
from limestore.domain.model.events import QuantityUpdated
from limestore.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class UpdateQuantityHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        listeners: list[EventListener] | None = None,
    ) -> None:
        self._store_repo = store_repo
        self._listeners = listeners or []

    def handle(self, caller: str, product_id: int, quantity: int) -> QuantityUpdated:
        ledger = load_store(self._store_repo)

        try:
            event = ledger.update_quantity(
                caller=caller, product_id=product_id, quantity=quantity
            )
        except DomainException as exc:
            logger.warning(
                "update_quantity(%s) by %s rejected: %s", product_id, caller, exc
            )
            raise

        self._store_repo.save(ledger)
        logger.info("Product %s quantity set to %d", product_id, quantity)
        publish(event, self._listeners)
        return event
