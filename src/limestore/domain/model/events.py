"""Domain events.

Every mutating ledger operation returns the event describing what it did.
The ledger never reads events back; they exist for observers (logs,
dashboards, scripts).
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from limestore.domain.model.value_objects import Identity, Money, ProductId


@dataclass(frozen=True)
class DomainEvent:

    @property
    def name(self) -> str:
        return type(self).__name__

    def payload(self) -> dict:
        """Plain-value view of the event (Money rendered as text)."""
        values = {field.name: getattr(self, field.name) for field in fields(self)}
        return {
            key: str(value) if isinstance(value, Money) else value
            for key, value in values.items()
        }


# --- Store events --------------------------------------------------------------


@dataclass(frozen=True)
class ProductAdded(DomainEvent):
    product_id: ProductId
    quantity: int
    price: Money


@dataclass(frozen=True)
class QuantityUpdated(DomainEvent):
    product_id: ProductId
    quantity: int


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    product_id: ProductId


@dataclass(frozen=True)
class ReturnInitiated(DomainEvent):
    product_id: ProductId


# --- Token events --------------------------------------------------------------


@dataclass(frozen=True)
class Transfer(DomainEvent):
    """Token movement. Mints come from, and burns go to, the zero address."""

    sender: Identity
    recipient: Identity
    amount: int
