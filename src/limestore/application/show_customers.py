"""Application service: customer and order queries (read-only)."""

from __future__ import annotations

from limestore.application.common import load_store
from limestore.application.dto import OrderReceiptDTO
from limestore.domain.repository.store_repository import StoreRepository


class ShowCustomersHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, product_id: int) -> list[str]:
        """Customers with an active order for the product, first buyers first."""
        return load_store(self._store_repo).get_customers_by_product(product_id)


class ShowCustomerOrdersHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, customer: str) -> list[OrderReceiptDTO]:
        ledger = load_store(self._store_repo)
        return [
            OrderReceiptDTO(
                product_id=order.product_id,
                customer=order.customer,
                purchase_height=order.purchase_height,
                payment=str(order.payment),
                returnable_until=order.purchase_height + ledger.return_window - 1,
            )
            for order in ledger.get_orders_by_customer(customer)
        ]
