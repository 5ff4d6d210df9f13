"""Pytest fixtures for the shopping cart."""

import io
from decimal import Decimal

import pytest

from shop_cart.cart import Cart
from shop_cart.catalog import Catalog
from shop_cart.session import ShopSession


@pytest.fixture
def catalog() -> Catalog:
    catalog = Catalog()

    catalog.add_product(1, "Wireless Mouse", unit_price=Decimal("850.00"), stock=20)
    catalog.add_product(2, "Mechanical Keyboard", unit_price=Decimal("3500.00"), stock=15)
    catalog.add_product(3, "USB-C Hub", unit_price=Decimal("1200.00"), stock=10)
    catalog.add_product(4, "Bluetooth Speaker", unit_price=Decimal("2750.00"), stock=8)
    catalog.add_product(5, "Noise Cancelling Headphones", unit_price=Decimal("6800.00"), stock=5)
    catalog.add_product(6, "Sold Out Cable", unit_price=Decimal("99.50"), stock=0)  # Out of stock

    return catalog


@pytest.fixture
def cart() -> Cart:
    return Cart()


@pytest.fixture
def run_session(catalog, cart):
    """Feed `lines` to a fresh session and return everything it printed."""

    def _run(*lines: str) -> str:
        out = io.StringIO()
        session = ShopSession(catalog, cart, inp=io.StringIO("".join(f"{l}\n" for l in lines)), out=out)
        assert session.run() == 0
        return out.getvalue()

    return _run
