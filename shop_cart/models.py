from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import List


@dataclass(slots=True)
class Product:
    id: int
    name: str
    unit_price: Decimal
    stock: int

    def snapshot(self) -> Product:
        return replace(self)


@dataclass(slots=True)
class CartEntry:
    """
    One line of the cart.

    `product` is a copy taken when the line was created, so catalog stock
    changes after that point never show up here and the unit price stays frozen.
    """

    product: Product
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return (self.product.unit_price * self.quantity).quantize(Decimal("0.01"))


@dataclass(frozen=True, slots=True)
class Receipt:
    payment_message: str
    entries: List[CartEntry] = field(default_factory=list)
    total: Decimal = Decimal("0.00")
