"""Unit tests for the TokenLedger aggregate."""

import pytest

from limestore.domain.exceptions import (
    AuthorizationError,
    InsufficientBalanceError,
    ValidationError,
)
from limestore.domain.model.events import Transfer
from limestore.domain.model.token import ZERO_ADDRESS, TokenLedger

DEPLOYER = "0xdeployer"
CUSTOMER1 = "0xcustomer1"


def _token() -> TokenLedger:
    return TokenLedger.create(owner=DEPLOYER)


class TestMint:

    def test_owner_mints(self):
        token = _token()
        event = token.mint(DEPLOYER, DEPLOYER, 4)
        assert event == Transfer(sender=ZERO_ADDRESS, recipient=DEPLOYER, amount=4)
        assert token.balance_of(DEPLOYER) == 4
        assert token.total_supply == 4

    def test_customer_cannot_mint(self):
        token = _token()
        with pytest.raises(AuthorizationError, match="not the owner"):
            token.mint(CUSTOMER1, CUSTOMER1, 4)
        assert token.total_supply == 0

    def test_zero_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _token().mint(DEPLOYER, DEPLOYER, 0)

    def test_mint_to_zero_address_rejected(self):
        token = _token()
        with pytest.raises(ValidationError, match="zero address"):
            token.mint(DEPLOYER, ZERO_ADDRESS, 1)
        assert token.total_supply == 0


class TestTransferAndBurn:

    def test_transfer_moves_balance(self):
        token = _token()
        token.mint(DEPLOYER, DEPLOYER, 4)
        event = token.transfer(DEPLOYER, CUSTOMER1, 3)
        assert event == Transfer(sender=DEPLOYER, recipient=CUSTOMER1, amount=3)
        assert token.balance_of(DEPLOYER) == 1
        assert token.balance_of(CUSTOMER1) == 3
        assert token.total_supply == 4

    def test_transfer_above_balance_rejected(self):
        token = _token()
        token.mint(DEPLOYER, DEPLOYER, 1)
        with pytest.raises(InsufficientBalanceError):
            token.transfer(DEPLOYER, CUSTOMER1, 2)
        assert token.balance_of(DEPLOYER) == 1
        assert token.balance_of(CUSTOMER1) == 0

    def test_transfer_to_zero_address_rejected(self):
        token = _token()
        token.mint(DEPLOYER, DEPLOYER, 1)
        with pytest.raises(ValidationError, match="zero address"):
            token.transfer(DEPLOYER, ZERO_ADDRESS, 1)

    def test_burn_reduces_supply(self):
        token = _token()
        token.mint(DEPLOYER, DEPLOYER, 4)
        event = token.burn(DEPLOYER, 1)
        assert event.recipient == ZERO_ADDRESS
        assert token.balance_of(DEPLOYER) == 3
        assert token.total_supply == 3

    def test_burn_without_balance_rejected(self):
        with pytest.raises(InsufficientBalanceError):
            _token().burn(CUSTOMER1, 1)


class TestUnits:

    def test_to_base_units(self):
        token = _token()
        assert token.to_base_units("4") == 4 * 10**18
        assert token.to_base_units("0.5") == 5 * 10**17

    def test_too_many_decimals_rejected(self):
        token = TokenLedger.create(owner=DEPLOYER, decimals=2)
        with pytest.raises(ValidationError, match="decimal places"):
            token.to_base_units("0.001")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid token amount"):
            _token().to_base_units("lots")

    def test_long_amount_keeps_every_base_unit(self):
        token = _token()
        assert token.to_base_units("12345678901.000000000000000001") == (
            12345678901 * 10**18 + 1
        )

    @pytest.mark.parametrize("amount", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_rejected(self, amount):
        with pytest.raises(ValidationError, match="must be finite"):
            _token().to_base_units(amount)

    def test_digits_beyond_decimals_are_not_rounded_away(self):
        with pytest.raises(ValidationError, match="decimal places"):
            _token().to_base_units("1234567890123.0000000000000000001")

    def test_format_units(self):
        token = _token()
        assert token.format_units(35 * 10**17) == "3.5 LMT"
        assert token.format_units(0) == "0 LMT"
