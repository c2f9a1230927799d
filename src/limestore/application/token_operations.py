"""Application services: token use cases.

Deploy, mint, transfer, burn and balance lookup for the fungible token.
Human amounts ("0.5") are converted to base units using the token's
``decimals`` before they reach the ledger.
"""

from __future__ import annotations

import logging

from limestore.application.common import load_token
from limestore.application.dto import TokenBalanceDTO
from limestore.application.events import EventListener, publish
from limestore.domain.exceptions import DomainException, ValidationError
from limestore.domain.model.events import Transfer
from limestore.domain.model.token import TokenLedger
from limestore.domain.repository.token_repository import TokenRepository

logger = logging.getLogger(__name__)


class InitializeTokenHandler:

    def __init__(self, token_repo: TokenRepository) -> None:
        self._token_repo = token_repo

    def handle(
        self,
        owner: str,
        name: str = "LimeToken",
        symbol: str = "LMT",
        decimals: int = 18,
    ) -> TokenLedger:
        if self._token_repo.get() is not None:
            raise ValidationError("Token is already initialised")

        ledger = TokenLedger.create(owner=owner, name=name, symbol=symbol, decimals=decimals)
        self._token_repo.save(ledger)
        logger.info("Token %s (%s) initialised for owner %s", ledger.name, ledger.symbol, owner)
        return ledger


class _TokenCommandHandler:
    """Load, apply one operation, save, publish."""

    def __init__(
        self,
        token_repo: TokenRepository,
        listeners: list[EventListener] | None = None,
    ) -> None:
        self._token_repo = token_repo
        self._listeners = listeners or []

    def _commit(self, ledger: TokenLedger, event: Transfer) -> Transfer:
        self._token_repo.save(ledger)
        logger.info(
            "Transfer of %s from %s to %s",
            ledger.format_units(event.amount), event.sender, event.recipient,
        )
        publish(event, self._listeners)
        return event


class MintTokensHandler(_TokenCommandHandler):

    def handle(self, caller: str, recipient: str, amount: str) -> Transfer:
        ledger = load_token(self._token_repo)
        try:
            event = ledger.mint(caller, recipient, ledger.to_base_units(amount))
        except DomainException as exc:
            logger.warning("mint by %s rejected: %s", caller, exc)
            raise
        return self._commit(ledger, event)


class TransferTokensHandler(_TokenCommandHandler):

    def handle(self, caller: str, recipient: str, amount: str) -> Transfer:
        ledger = load_token(self._token_repo)
        try:
            event = ledger.transfer(caller, recipient, ledger.to_base_units(amount))
        except DomainException as exc:
            logger.warning("transfer by %s rejected: %s", caller, exc)
            raise
        return self._commit(ledger, event)


class BurnTokensHandler(_TokenCommandHandler):

    def handle(self, caller: str, amount: str) -> Transfer:
        ledger = load_token(self._token_repo)
        try:
            event = ledger.burn(caller, ledger.to_base_units(amount))
        except DomainException as exc:
            logger.warning("burn by %s rejected: %s", caller, exc)
            raise
        return self._commit(ledger, event)


class ShowTokenBalanceHandler:

    def __init__(self, token_repo: TokenRepository) -> None:
        self._token_repo = token_repo

    def handle(self, account: str) -> TokenBalanceDTO:
        ledger = load_token(self._token_repo)
        balance = ledger.balance_of(account)
        return TokenBalanceDTO(
            account=account,
            balance=balance,
            formatted=ledger.format_units(balance),
        )
