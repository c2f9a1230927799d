"""Event publishing for application handlers.

Handlers hand the event returned by a ledger operation to every
registered listener, after the new state has been saved. A failing
listener is logged and skipped: it must not undo a committed operation
or keep the other listeners from hearing about it.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from limestore.domain.model.events import DomainEvent

logger = logging.getLogger(__name__)

EventListener = Callable[[DomainEvent], None]


def publish(event: DomainEvent, listeners: Iterable[EventListener]) -> int:
    """Deliver *event* to each listener. Returns how many failed."""
    failed = 0
    for listener in listeners:
        try:
            listener(event)
        except Exception:
            failed += 1
            name = getattr(listener, "__qualname__", repr(listener))
            logger.exception("Listener %s failed on %s", name, event.name)
    return failed
