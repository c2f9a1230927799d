"""File-backed logical clock for the local CLI host.

Stands in for the chain: the height only moves when blocks are mined
explicitly (``limestore chain mine``).
"""

from __future__ import annotations

import json
from pathlib import Path

from limestore.domain.exceptions import ValidationError
from limestore.infrastructure.persistence.json_files import write_json_atomically


class JsonChainClock:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def current_height(self) -> int:
        if not self._file_path.exists():
            return 0
        return json.loads(self._file_path.read_text(encoding="utf-8"))["height"]

    def mine(self, blocks: int = 1) -> int:
        """Advance the height by *blocks* and return the new height."""
        if blocks <= 0:
            raise ValidationError("Number of blocks to mine must be positive")
        height = self.current_height() + blocks
        write_json_atomically(self._file_path, {"height": height})
        return height
