from __future__ import annotations

import logging
import sys
from collections import deque
from typing import Callable, Deque, Dict, Optional, TextIO

from shop_cart.cart import Cart
from shop_cart.catalog import Catalog
from shop_cart.errors import InvalidMenuOption, ProductNotFound, ShopError
from shop_cart.formatting import format_product, format_receipt
from shop_cart.payments import PaymentMethod

logger = logging.getLogger(__name__)

MENU = (
    "\n--- Online Shopping Cart ---\n"
    "1. View Products\n"
    "2. Add to Cart\n"
    "3. Remove from Cart\n"
    "4. View Cart\n"
    "5. Checkout\n"
    "6. Exit\n"
)
PAYMENT_MENU = "Choose payment method:\n1. Cash\n2. Card\n"
EXIT_CHOICE = 6


class EndOfInput(Exception):
    pass


class ShopSession:
    """
    Numbered text menu over one catalog and one cart.

    Reads whitespace-separated answers from `inp` and writes everything to `out`.
    Every `ShopError` raised while handling a choice is printed and the menu
    comes back; nothing the user types can end the loop except choice 6 or
    the end of input.
    """

    def __init__(
        self,
        catalog: Catalog,
        cart: Optional[Cart] = None,
        inp: Optional[TextIO] = None,
        out: Optional[TextIO] = None,
    ):
        self.catalog = catalog
        self.cart = cart if cart is not None else Cart()
        self.inp = inp or sys.stdin
        self.out = out or sys.stdout
        self._pending: Deque[str] = deque()

        self._actions: Dict[int, Callable[[], None]] = {
            1: self.view_products,
            2: self.add_to_cart,
            3: self.remove_from_cart,
            4: self.view_cart,
            5: self.checkout,
        }

    def _write(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def _next_token(self) -> str:
        # Answers are whitespace-separated, so one line may carry several of them.
        while not self._pending:
            line = self.inp.readline()
            if not line:
                raise EndOfInput()
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _prompt(self, text: str) -> Optional[int]:
        self.out.write(text)
        self.out.flush()
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            logger.debug("not a number: %r", token)
            return None

    def view_products(self) -> None:
        for product in self.catalog.list_all():
            self._write(format_product(product))

    def add_to_cart(self) -> None:
        product_id = self._prompt("Enter product ID: ")
        quantity = self._prompt("Enter quantity: ")
        product = self.catalog.find_by_id(product_id)
        if not product:
            raise ProductNotFound()
        if quantity is None:
            quantity = 0

        self.cart.add(product, quantity)
        self.catalog.reduce_stock(product.id, quantity)

    def remove_from_cart(self) -> None:
        product_id = self._prompt("Enter product ID to remove: ")
        self.cart.remove(product_id)
        self._write("Item removed from cart.")

    def view_cart(self) -> None:
        for line in self.cart.render():
            self._write(line)

    def checkout(self) -> None:
        self.out.write(PAYMENT_MENU)
        method = PaymentMethod.from_choice(self._prompt("Choice: "))
        receipt = self.cart.checkout(method)
        self._write(receipt.payment_message)
        for line in format_receipt(receipt):
            self._write(line)

    def handle(self, choice: Optional[int]) -> None:
        action = self._actions.get(choice) if choice is not None else None
        if action is None:
            raise InvalidMenuOption()
        action()

    def run(self) -> int:
        while True:
            self.out.write(MENU)
            try:
                choice = self._prompt("Enter choice: ")
                if choice == EXIT_CHOICE:
                    self._write("Thank you for shopping with us!")
                    break
                self.handle(choice)
            except ShopError as e:
                logger.debug("rejected: %s", e)
                self._write(str(e))
            except EndOfInput:
                logger.info("input closed, leaving the shop")
                break
        return 0
