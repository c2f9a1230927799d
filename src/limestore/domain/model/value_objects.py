"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from limestore.domain.exceptions import ProductQuantityError, ValidationError

# Product ids are caller-supplied unsigned integers.
ProductId = int

# Callers are opaque identities (account addresses); the domain only compares them.
Identity = str


def check_product_id(value: object) -> ProductId:
    """Return *value* as a product id, rejecting negatives and non-integers."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"Product id must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"Product id cannot be negative, got {value}")
    return value


def check_identity(value: object) -> Identity:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Caller identity is required")
    return value


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "ETH"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def same_value(self, other: Money) -> bool:
        """Compare amounts numerically (``Decimal("3") == Decimal("3.00")``)."""
        self._assert_same_currency(other)
        return self.amount == other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount.normalize():f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = "ETH") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = "ETH") -> Money:
        return Money(Decimal("0"), currency)


@dataclass(frozen=True)
class Quantity:
    """A non-negative stock count.

    Zero is a legitimate value: it is how a product is delisted or
    sold out without being deleted.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ProductQuantityError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ProductQuantityError("Quantity cannot be negative")

    @property
    def is_zero(self) -> bool:
        return self.value == 0

    def increment(self) -> Quantity:
        return Quantity(self.value + 1)

    def decrement(self) -> Quantity:
        if self.is_zero:
            raise ProductQuantityError("Cannot take a unit from an empty stock")
        return Quantity(self.value - 1)

    def __str__(self) -> str:
        return str(self.value)
