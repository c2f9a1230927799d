"""Order record: one customer's active claim on one unit of a product."""

from __future__ import annotations

from dataclasses import dataclass

from limestore.domain.model.value_objects import Identity, Money, ProductId


@dataclass(frozen=True)
class Order:
    """An active (not yet returned) purchase.

    ``product_id`` is a lookup reference only; the order does not own the
    product. ``payment`` is what the customer attached to the purchase and
    is what gets refunded on return.
    """

    customer: Identity
    product_id: ProductId
    purchase_height: int
    payment: Money

    @property
    def key(self) -> tuple[Identity, ProductId]:
        return (self.customer, self.product_id)

    def elapsed(self, current_height: int) -> int:
        """Logical heights passed since the order was placed."""
        return current_height - self.purchase_height

    def is_returnable(self, current_height: int, return_window: int) -> bool:
        """True while fewer than *return_window* heights have elapsed."""
        return self.elapsed(current_height) < return_window
