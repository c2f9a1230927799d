"""StoreLedger aggregate — the core of the domain.

The ledger owns every product, every active order and the accumulated
balance. All business invariants are enforced here:

- a product id can be registered only once, for the lifetime of the ledger
- a customer holds at most one active order per product
- the owner administers the catalog but can never buy from it
- a return is accepted only within ``return_window`` logical heights

Every operation validates before it mutates, so a raised error leaves the
ledger exactly as it was. The ledger never persists, authenticates or reads
a clock: the caller identity and the current height are inputs.
"""

from __future__ import annotations

from enum import Enum

from limestore.domain.exceptions import (
    AuthorizationError,
    OrderError,
    PaymentError,
    ProductDuplicationError,
    ProductMissingError,
    ProductQuantityError,
    ReturnError,
    ValidationError,
)
from limestore.domain.model.events import (
    OrderPlaced,
    ProductAdded,
    QuantityUpdated,
    ReturnInitiated,
)
from limestore.domain.model.order import Order
from limestore.domain.model.product import Product
from limestore.domain.model.value_objects import (
    Identity,
    Money,
    ProductId,
    Quantity,
    check_identity,
    check_product_id,
)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DEFAULT_RETURN_WINDOW = 100


class PaymentPolicy(Enum):
    """How a purchase payment is checked against the listed price."""

    PERMISSIVE = "permissive"  # any amount is accepted and retained
    AT_LEAST = "at_least"
    EXACT = "exact"


class StoreLedger:
    """Aggregate root for the store.

    Use ``StoreLedger.create()`` for a new store — it validates the
    configuration. ``__init__`` accepts previously persisted state so a
    repository can reconstitute a ledger without re-running operations.
    """

    def __init__(
        self,
        owner: Identity,
        return_window: int = DEFAULT_RETURN_WINDOW,
        payment_policy: PaymentPolicy = PaymentPolicy.PERMISSIVE,
        products: list[Product] | None = None,
        orders: list[Order] | None = None,
        buyers: dict[ProductId, list[Identity]] | None = None,
        balance: Money | None = None,
        available: list[ProductId] | None = None,
    ) -> None:
        self._owner = owner
        self._return_window = return_window
        self._payment_policy = payment_policy
        # dicts keep insertion order: add order for products,
        # placement order for orders.
        self._products: dict[ProductId, Product] = {p.id: p for p in products or []}
        # Products in stock, in the order they last came into stock. A product
        # leaves when its quantity reaches zero and rejoins at the end.
        if available is None:
            available = [p.id for p in self._products.values() if p.is_available]
        self._available: list[ProductId] = list(available)
        self._orders: dict[tuple[Identity, ProductId], Order] = {
            o.key: o for o in orders or []
        }
        # Distinct customers per product, in the order they first bought it.
        self._buyers: dict[ProductId, list[Identity]] = {
            pid: list(customers) for pid, customers in (buyers or {}).items()
        }
        self._balance = balance if balance is not None else Money.zero()

    # --- Factory (used for NEW stores only) -----------------------------------

    @staticmethod
    def create(
        owner: Identity,
        return_window: int = DEFAULT_RETURN_WINDOW,
        payment_policy: PaymentPolicy = PaymentPolicy.PERMISSIVE,
    ) -> StoreLedger:
        owner = check_identity(owner)
        if isinstance(return_window, bool) or not isinstance(return_window, int):
            raise ValidationError("Return window must be an integer")
        if return_window <= 0:
            raise ValidationError("Return window must be positive")
        return StoreLedger(
            owner=owner,
            return_window=return_window,
            payment_policy=payment_policy,
        )

    # --- Configuration --------------------------------------------------------

    @property
    def owner(self) -> Identity:
        return self._owner

    @property
    def return_window(self) -> int:
        return self._return_window

    @property
    def payment_policy(self) -> PaymentPolicy:
        return self._payment_policy

    # --- Administrative operations --------------------------------------------

    def add_product(
        self,
        caller: Identity,
        product_id: ProductId,
        quantity: int,
        price: Money,
    ) -> ProductAdded:
        self._require_owner(caller)
        product_id = check_product_id(product_id)
        if product_id in self._products:
            raise ProductDuplicationError("It has already been added.")
        stock = Quantity(quantity)
        if stock.is_zero:
            raise ProductQuantityError("Should be greater than zero.")

        self._products[product_id] = Product(id=product_id, quantity=stock, price=price)
        self._available.append(product_id)
        return ProductAdded(product_id=product_id, quantity=stock.value, price=price)

    def update_quantity(
        self,
        caller: Identity,
        product_id: ProductId,
        quantity: int,
    ) -> QuantityUpdated:
        """Overwrite the stock of a product. Zero delists it."""
        self._require_owner(caller)
        product = self._find_product(product_id)
        stock = Quantity(quantity)

        product.set_quantity(stock)
        self._sync_availability(product)
        return QuantityUpdated(product_id=product.id, quantity=stock.value)

    # --- Customer operations --------------------------------------------------

    def buy_product(
        self,
        caller: Identity,
        product_id: ProductId,
        payment: Money,
        height: int,
    ) -> OrderPlaced:
        """Place an order for one unit of a product.

        A sold-out product is reported exactly like a missing one.
        """
        if caller == self._owner:
            raise AuthorizationError("Not allowed for the owner.")
        customer = check_identity(caller)
        product = self._find_product(product_id)
        if (customer, product.id) in self._orders:
            raise OrderError("The customer has already bought the same product.")
        if not product.is_available:
            raise ProductMissingError("The product is missing or sold out.")
        self._check_payment(product, payment)
        new_balance = self._balance + payment

        product.take_one()
        self._sync_availability(product)
        self._orders[(customer, product.id)] = Order(
            customer=customer,
            product_id=product.id,
            purchase_height=height,
            payment=payment,
        )
        buyers = self._buyers.setdefault(product.id, [])
        if customer not in buyers:
            buyers.append(customer)
        self._balance = new_balance
        return OrderPlaced(product_id=product.id)

    def return_product(
        self,
        caller: Identity,
        product_id: ProductId,
        height: int,
    ) -> ReturnInitiated:
        """Return a unit bought earlier and refund its payment."""
        order = self._orders.get((caller, product_id))
        if order is None:
            raise ReturnError("The customer hasn't bought such product.")
        if not order.is_returnable(height, self._return_window):
            raise ReturnError("The deadline is not met.")
        product = self._find_product(product_id)
        new_balance = self._balance - order.payment

        product.put_back()
        self._sync_availability(product)
        del self._orders[order.key]
        self._balance = new_balance
        return ReturnInitiated(product_id=product.id)

    # --- Queries --------------------------------------------------------------

    def get_available_products(self) -> list[ProductId]:
        """Ids of products in stock, in the order they came into stock."""
        return list(self._available)

    def get_customers_by_product(self, product_id: ProductId) -> list[Identity]:
        """Customers holding an active order for the product."""
        return [
            customer
            for customer in self._buyers.get(product_id, [])
            if (customer, product_id) in self._orders
        ]

    def get_total_balance(self) -> Money:
        return self._balance

    def get_product(self, product_id: ProductId) -> Product:
        return self._find_product(product_id)

    def get_order(self, customer: Identity, product_id: ProductId) -> Order | None:
        return self._orders.get((customer, product_id))

    def get_orders_by_customer(self, customer: Identity) -> list[Order]:
        return [o for o in self._orders.values() if o.customer == customer]

    # --- State views (for repositories) ---------------------------------------

    @property
    def products(self) -> list[Product]:
        return list(self._products.values())

    @property
    def active_orders(self) -> list[Order]:
        return list(self._orders.values())

    @property
    def buyers(self) -> dict[ProductId, list[Identity]]:
        return {pid: list(customers) for pid, customers in self._buyers.items()}

    @property
    def available(self) -> list[ProductId]:
        return list(self._available)

    # --- Internal helpers -----------------------------------------------------

    def _require_owner(self, caller: Identity) -> None:
        if caller != self._owner:
            raise AuthorizationError("Ownable: caller is not the owner")

    def _sync_availability(self, product: Product) -> None:
        listed = product.id in self._available
        if product.is_available and not listed:
            self._available.append(product.id)
        elif not product.is_available and listed:
            self._available.remove(product.id)

    def _find_product(self, product_id: ProductId) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise ProductMissingError("The product is missing or sold out.")
        return product

    def _check_payment(self, product: Product, payment: Money) -> None:
        if payment.currency != self._balance.currency:
            raise PaymentError(
                f"Payments are accepted in {self._balance.currency}, got {payment.currency}"
            )
        if self._payment_policy is PaymentPolicy.AT_LEAST and payment < product.price:
            raise PaymentError(
                f"Payment {payment} is below the price {product.price}"
            )
        if self._payment_policy is PaymentPolicy.EXACT and not payment.same_value(
            product.price
        ):
            raise PaymentError(
                f"Payment {payment} does not match the price {product.price}"
            )
