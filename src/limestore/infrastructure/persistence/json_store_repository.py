"""JSON-file-backed implementation of StoreRepository.

The whole ledger is written in one go through a temporary file and an
atomic rename, so an operation is either fully on disk or not at all.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from limestore.domain.model.order import Order
from limestore.domain.model.product import Product
from limestore.domain.model.store import PaymentPolicy, StoreLedger
from limestore.domain.model.value_objects import Money, Quantity
from limestore.domain.repository.store_repository import StoreRepository
from limestore.infrastructure.persistence.json_files import write_json_atomically


class JsonStoreRepository(StoreRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- StoreRepository interface --------------------------------------------

    def get(self) -> StoreLedger | None:
        if not self._file_path.exists():
            return None
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return self._to_domain(raw)

    def save(self, ledger: StoreLedger) -> None:
        write_json_atomically(self._file_path, self._to_raw(ledger))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _money_to_raw(money: Money) -> dict:
        return {"amount": str(money.amount), "currency": money.currency}

    @staticmethod
    def _money_to_domain(raw: dict) -> Money:
        return Money(Decimal(raw["amount"]), raw.get("currency", "ETH"))

    @classmethod
    def _to_raw(cls, ledger: StoreLedger) -> dict:
        return {
            "owner": ledger.owner,
            "return_window": ledger.return_window,
            "payment_policy": ledger.payment_policy.value,
            "balance": cls._money_to_raw(ledger.get_total_balance()),
            "products": [
                {
                    "id": p.id,
                    "quantity": p.quantity.value,
                    "price": cls._money_to_raw(p.price),
                }
                for p in ledger.products
            ],
            "orders": [
                {
                    "customer": o.customer,
                    "product_id": o.product_id,
                    "purchase_height": o.purchase_height,
                    "payment": cls._money_to_raw(o.payment),
                }
                for o in ledger.active_orders
            ],
            "available": ledger.available,
            # JSON object keys are strings; kept as a list of pairs instead.
            "buyers": [
                {"product_id": pid, "customers": customers}
                for pid, customers in ledger.buyers.items()
            ],
        }

    @classmethod
    def _to_domain(cls, raw: dict) -> StoreLedger:
        return StoreLedger(
            owner=raw["owner"],
            return_window=raw["return_window"],
            payment_policy=PaymentPolicy(raw["payment_policy"]),
            products=[
                Product(
                    id=p["id"],
                    quantity=Quantity(p["quantity"]),
                    price=cls._money_to_domain(p["price"]),
                )
                for p in raw.get("products", [])
            ],
            orders=[
                Order(
                    customer=o["customer"],
                    product_id=o["product_id"],
                    purchase_height=o["purchase_height"],
                    payment=cls._money_to_domain(o["payment"]),
                )
                for o in raw.get("orders", [])
            ],
            buyers={b["product_id"]: b["customers"] for b in raw.get("buyers", [])},
            balance=cls._money_to_domain(raw["balance"]),
            available=raw.get("available"),
        )
