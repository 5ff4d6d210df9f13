from __future__ import annotations


class ShopError(Exception):
    """Base for every input problem the menu reports back to the user."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidMenuOption(ShopError):
    message = "Invalid menu option."


class ProductNotFound(ShopError):
    message = "Product not found."


class ItemNotInCart(ShopError):
    message = "Item not found in cart."


class InvalidQuantity(ShopError):
    message = "Invalid quantity or not enough stock."


class EmptyCart(ShopError):
    message = "Cart is empty."


class InvalidPaymentType(ShopError):
    message = "Invalid payment type."
