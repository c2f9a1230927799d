"""TokenLedger aggregate — a fungible balance ledger.

Balances are integers in base units; ``decimals`` tells how many base
units make one whole token (18, like ether and wei).
"""

from __future__ import annotations

from decimal import Decimal, DecimalException, InvalidOperation, localcontext

from limestore.domain.exceptions import (
    AuthorizationError,
    InsufficientBalanceError,
    ValidationError,
)
from limestore.domain.model.events import Transfer
from limestore.domain.model.value_objects import Identity, check_identity

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class TokenLedger:
    """Aggregate root for token balances.

    Only the owner may mint. Anyone may transfer or burn their own tokens.
    Total supply always equals the sum of all balances.
    """

    def __init__(
        self,
        owner: Identity,
        name: str = "LimeToken",
        symbol: str = "LMT",
        decimals: int = 18,
        balances: dict[Identity, int] | None = None,
    ) -> None:
        self._owner = owner
        self.name = name
        self.symbol = symbol
        self.decimals = decimals
        self._balances: dict[Identity, int] = dict(balances or {})

    @staticmethod
    def create(
        owner: Identity,
        name: str = "LimeToken",
        symbol: str = "LMT",
        decimals: int = 18,
    ) -> TokenLedger:
        owner = check_identity(owner)
        if not symbol or not symbol.strip():
            raise ValidationError("Token symbol is required")
        if decimals < 0:
            raise ValidationError("Token decimals cannot be negative")
        return TokenLedger(owner=owner, name=name, symbol=symbol.strip(), decimals=decimals)

    @property
    def owner(self) -> Identity:
        return self._owner

    # --- Operations -----------------------------------------------------------

    def mint(self, caller: Identity, recipient: Identity, amount: int) -> Transfer:
        if caller != self._owner:
            raise AuthorizationError("Ownable: caller is not the owner")
        recipient = check_identity(recipient)
        if recipient == ZERO_ADDRESS:
            raise ValidationError("Mint to the zero address")
        self._check_amount(amount)

        self._balances[recipient] = self.balance_of(recipient) + amount
        return Transfer(sender=ZERO_ADDRESS, recipient=recipient, amount=amount)

    def transfer(self, caller: Identity, recipient: Identity, amount: int) -> Transfer:
        recipient = check_identity(recipient)
        if recipient == ZERO_ADDRESS:
            raise ValidationError("Transfer to the zero address")
        self._check_amount(amount)
        self._check_covered(caller, amount)

        self._balances[caller] -= amount
        self._balances[recipient] = self.balance_of(recipient) + amount
        return Transfer(sender=caller, recipient=recipient, amount=amount)

    def burn(self, caller: Identity, amount: int) -> Transfer:
        self._check_amount(amount)
        self._check_covered(caller, amount)

        self._balances[caller] -= amount
        return Transfer(sender=caller, recipient=ZERO_ADDRESS, amount=amount)

    # --- Queries --------------------------------------------------------------

    def balance_of(self, account: Identity) -> int:
        return self._balances.get(account, 0)

    @property
    def total_supply(self) -> int:
        return sum(self._balances.values())

    @property
    def balances(self) -> dict[Identity, int]:
        return dict(self._balances)

    # --- Unit conversion ------------------------------------------------------

    def to_base_units(self, amount: str) -> int:
        """Parse a human amount ("0.5") into base units."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid token amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Token amount must be finite, got {amount!r}")
        # scaleb only moves the exponent; enough precision keeps every digit.
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(value.as_tuple().digits))
            try:
                value = value.scaleb(self.decimals)
            except DecimalException as exc:
                raise ValidationError(f"Token amount out of range: {amount!r}") from exc
        if value != value.to_integral_value():
            raise ValidationError(
                f"Amount {amount} has more than {self.decimals} decimal places"
            )
        return int(value)

    def format_units(self, amount: int) -> str:
        value = Decimal(amount) / (Decimal(10) ** self.decimals)
        return f"{value.normalize():f} {self.symbol}"

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _check_amount(amount: int) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise ValidationError(
                f"Token amount must be an integer, got {type(amount).__name__}"
            )
        if amount <= 0:
            raise ValidationError("Token amount must be positive")

    def _check_covered(self, account: Identity, amount: int) -> None:
        available = self.balance_of(account)
        if amount > available:
            raise InsufficientBalanceError(
                f"Balance of {account} is {available}, cannot move {amount}"
            )
