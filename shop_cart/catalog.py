from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from shop_cart.errors import InvalidQuantity, ProductNotFound
from shop_cart.models import Product

logger = logging.getLogger(__name__)


class Catalog:
    """
    Fixed in-memory product list.

    Products are kept in seed order; only `stock` ever changes after seeding.
    Every stock movement also lands in `logs` (handy for tests and the demo).
    """

    def __init__(self) -> None:
        self.products: Dict[int, Product] = {}

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def add_product(self, product_id: int, name: str, unit_price: Decimal, stock: int) -> None:
        self.products[product_id] = Product(id=product_id, name=name, unit_price=unit_price, stock=stock)

    def find_by_id(self, product_id: int | None) -> Optional[Product]:
        if product_id is None:
            return None
        return self.products.get(product_id)

    def list_all(self) -> List[Product]:
        return list(self.products.values())

    def reduce_stock(self, product_id: int, amount: int) -> None:
        product = self.products.get(product_id)
        if not product:
            raise ProductNotFound()
        if amount <= 0 or amount > product.stock:
            raise InvalidQuantity()
        product.stock -= amount
        self.log(f"[product={product_id}] stock reduced by {amount} (stock={product.stock})")
