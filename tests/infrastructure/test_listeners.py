"""Tests for the logging event listener."""

import logging

from limestore.domain.model.events import OrderPlaced, ProductAdded
from limestore.domain.model.value_objects import Money
from limestore.infrastructure.listeners import LoggingEventListener


def test_logs_event_name_and_payload(caplog):
    listener = LoggingEventListener()

    with caplog.at_level(logging.INFO, logger="limestore.events"):
        listener(ProductAdded(product_id=111, quantity=2, price=Money.of("1")))
        listener(OrderPlaced(product_id=111))

    assert caplog.messages == [
        "ProductAdded(product_id=111, quantity=2, price=1 ETH)",
        "OrderPlaced(product_id=111)",
    ]
