from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from shop_cart import payments
from shop_cart.errors import EmptyCart, InvalidQuantity, ItemNotInCart
from shop_cart.formatting import entry_lines
from shop_cart.models import CartEntry, Product, Receipt
from shop_cart.payments import PaymentMethod

logger = logging.getLogger(__name__)


class Cart:
    def __init__(self) -> None:
        self._entries: List[CartEntry] = []

    @property
    def entries(self) -> List[CartEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def _find(self, product_id: int | None) -> Optional[CartEntry]:
        for entry in self._entries:
            if entry.product.id == product_id:
                return entry
        return None

    def add(self, product: Product, quantity: int) -> None:
        """
        Put `quantity` units of `product` into the cart.

        Validated against the stock the product has right now. A repeated add of
        the same product only bumps the existing line; the summed quantity is
        not checked against stock again.
        """
        if quantity <= 0 or quantity > product.stock:
            logger.debug("add rejected: product=%s qty=%s stock=%s", product.id, quantity, product.stock)
            raise InvalidQuantity()

        entry = self._find(product.id)
        if entry:
            entry.quantity += quantity
            logger.info("cart merged: product=%s qty=+%s (qty=%s)", product.id, quantity, entry.quantity)
            return

        self._entries.append(CartEntry(product=product.snapshot(), quantity=quantity))
        logger.info("cart added: product=%s qty=%s", product.id, quantity)

    def remove(self, product_id: int | None) -> None:
        # Removed units are not handed back to the catalog.
        entry = self._find(product_id)
        if not entry:
            raise ItemNotInCart()
        self._entries.remove(entry)
        logger.info("cart removed: product=%s qty=%s", product_id, entry.quantity)

    def total(self) -> Decimal:
        return sum((entry.line_total for entry in self._entries), Decimal("0.00")).quantize(Decimal("0.01"))

    def render(self) -> List[str]:
        if self.is_empty():
            raise EmptyCart()
        return ["", "Items in Cart:", *entry_lines(self._entries, self.total())]

    def checkout(self, method: PaymentMethod) -> Receipt:
        if self.is_empty():
            raise EmptyCart()

        total = self.total()
        message = payments.pay(method, total)
        receipt = Receipt(payment_message=message, entries=list(self._entries), total=total)

        self._entries.clear()
        logger.info("checkout: method=%s lines=%s total=%s", method.name, len(receipt.entries), total)
        return receipt
