"""File helpers shared by the JSON-backed repositories and the chain clock."""

from __future__ import annotations

import json
import os
from pathlib import Path


def write_json_atomically(file_path: Path, raw: dict) -> None:
    """Write *raw* next to *file_path* and rename it into place.

    Readers see either the previous file or the new one, never a partial write.
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = file_path.with_suffix(file_path.suffix + ".tmp")
    tmp_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
    os.replace(tmp_path, file_path)
