"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: int
    quantity: int
    price: str  # formatted, e.g. "3 ETH"
    available: bool


@dataclass(frozen=True)
class OrderReceiptDTO:
    """Output: what a successful purchase recorded."""

    product_id: int
    customer: str
    purchase_height: int
    payment: str
    returnable_until: int  # last height at which a return is accepted


@dataclass(frozen=True)
class RefundDTO:
    """Output: what a successful return paid back."""

    product_id: int
    customer: str
    refund: str


@dataclass(frozen=True)
class StoreDTO:
    owner: str
    return_window: int
    payment_policy: str
    balance: str


@dataclass(frozen=True)
class TokenBalanceDTO:
    account: str
    balance: int  # base units
    formatted: str  # e.g. "3.5 LMT"
