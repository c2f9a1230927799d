"""Logical clock protocol.

The domain never reads a clock on its own: the current height is passed
into ledger operations. Application handlers obtain it from an injected
``HeightClock`` supplied by the host.
"""

from __future__ import annotations

from typing import Protocol

from limestore.domain.exceptions import ValidationError


class HeightClock(Protocol):
    """Source of the current logical (block) height."""

    def current_height(self) -> int:
        ...


class FixedHeightClock:
    """Clock pinned to an explicit height. Advanced only by hand."""

    def __init__(self, height: int = 0) -> None:
        if height < 0:
            raise ValidationError("Height cannot be negative")
        self._height = height

    def current_height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        if blocks < 0:
            raise ValidationError("Height never moves backwards")
        self._height += blocks
        return self._height
