"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from limestore.application.common import load_store
from limestore.application.events import EventListener, publish
from limestore.domain.exceptions import DomainException
from limestore.domain.model.events import ProductAdded
from limestore.domain.model.value_objects import Money
from limestore.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        listeners: list[EventListener] | None = None,
    ) -> None:
        self._store_repo = store_repo
        self._listeners = listeners or []

    def handle(self, caller: str, product_id: int, quantity: int, price: str) -> ProductAdded:
        """Register a new product. Only the store owner may do this."""
        ledger = load_store(self._store_repo)

        try:
            event = ledger.add_product(
                caller=caller,
                product_id=product_id,
                quantity=quantity,
                price=Money.of(price),
            )
        except DomainException as exc:
            logger.warning("add_product(%s) by %s rejected: %s", product_id, caller, exc)
            raise

        self._store_repo.save(ledger)
        logger.info("Product %s added with quantity %d", product_id, quantity)
        publish(event, self._listeners)
        return event
