"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from limestore.application.events import EventListener
from limestore.infrastructure.listeners import LoggingEventListener
from limestore.infrastructure.persistence.json_chain_clock import JsonChainClock
from limestore.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)
from limestore.infrastructure.persistence.json_token_repository import (
    JsonTokenRepository,
)
from limestore.infrastructure.settings import Settings


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def store_repository(settings: Settings) -> JsonStoreRepository:
    return JsonStoreRepository(settings.data_dir / "store.json")


def token_repository(settings: Settings) -> JsonTokenRepository:
    return JsonTokenRepository(settings.data_dir / "token.json")


def chain_clock(settings: Settings) -> JsonChainClock:
    return JsonChainClock(settings.data_dir / "chain.json")


def event_listeners() -> list[EventListener]:
    return [LoggingEventListener()]
