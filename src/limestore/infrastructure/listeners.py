"""Event listeners wired by the composition root."""

from __future__ import annotations

import logging

from limestore.domain.model.events import DomainEvent

logger = logging.getLogger("limestore.events")


class LoggingEventListener:
    """Writes every domain event to the ``limestore.events`` logger."""

    def __init__(self, level: int = logging.INFO) -> None:
        self._level = level

    def __call__(self, event: DomainEvent) -> None:
        args = ", ".join(f"{key}={value}" for key, value in event.payload().items())
        logger.log(self._level, "%s(%s)", event.name, args)
