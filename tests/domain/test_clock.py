"""Unit tests for the fixed height clock."""

import pytest

from limestore.domain.clock import FixedHeightClock
from limestore.domain.exceptions import ValidationError


class TestFixedHeightClock:

    def test_starts_at_given_height(self):
        assert FixedHeightClock(7).current_height() == 7

    def test_advance(self):
        clock = FixedHeightClock()
        assert clock.advance(100) == 100
        assert clock.current_height() == 100

    def test_never_moves_backwards(self):
        with pytest.raises(ValidationError):
            FixedHeightClock(5).advance(-1)

    def test_negative_start_rejected(self):
        with pytest.raises(ValidationError):
            FixedHeightClock(-1)
