"""Product entity.

Products are owned by the store ledger. They are never deleted: a product
whose quantity drops to zero stays in the catalog and can be restocked or
become available again when a customer returns a unit.
"""

from __future__ import annotations

from dataclasses import dataclass

from limestore.domain.model.value_objects import Money, ProductId, Quantity


@dataclass
class Product:
    """A catalog entry.

    Kept as a mutable dataclass because stock changes (restock, buy,
    return) are legitimate mutations; ``id`` and ``price`` never change.
    """

    id: ProductId
    quantity: Quantity
    price: Money

    @property
    def is_available(self) -> bool:
        return not self.quantity.is_zero

    def set_quantity(self, quantity: Quantity) -> None:
        self.quantity = quantity

    def take_one(self) -> None:
        """Remove one unit from stock (a purchase)."""
        self.quantity = self.quantity.decrement()

    def put_back(self) -> None:
        """Return one unit to stock."""
        self.quantity = self.quantity.increment()
