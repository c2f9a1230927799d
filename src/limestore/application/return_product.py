"""Application service: Return Product use case.

The refund is the payment recorded on the order, taken back out of the
store balance. Moving the funds to the customer's account is up to the
host; the returned DTO tells it how much.
"""

from __future__ import annotations

import logging

from limestore.application.common import load_store
from limestore.application.dto import RefundDTO
from limestore.application.events import EventListener, publish
from limestore.domain.clock import HeightClock
from limestore.domain.exceptions import DomainException
from limestore.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)


class ReturnProductHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        clock: HeightClock,
        listeners: list[EventListener] | None = None,
    ) -> None:
        self._store_repo = store_repo
        self._clock = clock
        self._listeners = listeners or []

    def handle(self, caller: str, product_id: int) -> RefundDTO:
        ledger = load_store(self._store_repo)
        height = self._clock.current_height()
        order = ledger.get_order(caller, product_id)

        try:
            event = ledger.return_product(
                caller=caller, product_id=product_id, height=height
            )
        except DomainException as exc:
            logger.warning(
                "return_product(%s) by %s at height %d rejected: %s",
                product_id, caller, height, exc,
            )
            raise

        self._store_repo.save(ledger)
        logger.info("Return accepted: %s refunded %s for %s", caller, order.payment, product_id)
        publish(event, self._listeners)

        return RefundDTO(
            product_id=order.product_id,
            customer=order.customer,
            refund=str(order.payment),
        )
