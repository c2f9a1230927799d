"""Application service: product queries (read-only)."""

from __future__ import annotations

from limestore.application.common import load_store
from limestore.application.dto import ProductDTO
from limestore.domain.model.product import Product
from limestore.domain.repository.store_repository import StoreRepository


class ShowAvailableProductsHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self) -> list[int]:
        """Ids of products in stock, in the order they were added."""
        return load_store(self._store_repo).get_available_products()


class ShowProductHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, product_id: int) -> ProductDTO:
        """Look up a single product, including sold-out ones."""
        product = load_store(self._store_repo).get_product(product_id)
        return self._to_dto(product)

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            quantity=product.quantity.value,
            price=str(product.price),
            available=product.is_available,
        )
