"""Application service: Buy Product use case.

Reads the current height from the host clock, lets the ledger validate
and record the order, then persists and publishes ``OrderPlaced``.
The payment is retained in the store balance.
"""

from __future__ import annotations

import logging

from limestore.application.common import load_store
from limestore.application.dto import OrderReceiptDTO
from limestore.application.events import EventListener, publish
from limestore.domain.clock import HeightClock
from limestore.domain.exceptions import DomainException
from limestore.domain.model.value_objects import Money
from limestore.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class BuyProductHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        clock: HeightClock,
        listeners: list[EventListener] | None = None,
    ) -> None:
        self._store_repo = store_repo
        self._clock = clock
        self._listeners = listeners or []

    def handle(self, caller: str, product_id: int, payment: str) -> OrderReceiptDTO:
        ledger = load_store(self._store_repo)
        height = self._clock.current_height()

        try:
            event = ledger.buy_product(
                caller=caller,
                product_id=product_id,
                payment=Money.of(payment),
                height=height,
            )
        except DomainException as exc:
            logger.warning("buy_product(%s) by %s rejected: %s", product_id, caller, exc)
            raise

        self._store_repo.save(ledger)
        order = ledger.get_order(caller, product_id)
        logger.info(
            "Order placed: %s bought %s at height %d for %s",
            caller, product_id, height, order.payment,
        )
        publish(event, self._listeners)

        return OrderReceiptDTO(
            product_id=order.product_id,
            customer=order.customer,
            purchase_height=order.purchase_height,
            payment=str(order.payment),
            returnable_until=order.purchase_height + ledger.return_window - 1,
        )
