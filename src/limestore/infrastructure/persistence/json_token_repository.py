"""JSON-file-backed implementation of TokenRepository."""

from __future__ import annotations

import json
from pathlib import Path

from limestore.domain.model.token import TokenLedger
from limestore.domain.repository.token_repository import TokenRepository
from limestore.infrastructure.persistence.json_files import write_json_atomically


class JsonTokenRepository(TokenRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- TokenRepository interface --------------------------------------------

    def get(self) -> TokenLedger | None:
        if not self._file_path.exists():
            return None
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return TokenLedger(
            owner=raw["owner"],
            name=raw["name"],
            symbol=raw["symbol"],
            decimals=raw["decimals"],
            # Base-unit balances exceed float precision; stored as strings.
            balances={account: int(value) for account, value in raw["balances"].items()},
        )

    def save(self, ledger: TokenLedger) -> None:
        raw = {
            "owner": ledger.owner,
            "name": ledger.name,
            "symbol": ledger.symbol,
            "decimals": ledger.decimals,
            "balances": {account: str(value) for account, value in ledger.balances.items()},
        }
        write_json_atomically(self._file_path, raw)
