"""Abstract repository for the TokenLedger aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from limestore.domain.model.token import TokenLedger


class TokenRepository(ABC):

    @abstractmethod
    def get(self) -> TokenLedger | None:
        """Return the token ledger, or None if the token was not deployed."""

    @abstractmethod
    def save(self, ledger: TokenLedger) -> None:
        """Persist the whole ledger state, replacing what was stored."""
