from __future__ import annotations

import argparse
import logging
from decimal import Decimal

from shop_cart.cart import Cart
from shop_cart.catalog import Catalog
from shop_cart.session import ShopSession


def seed(catalog: Catalog) -> None:
    catalog.add_product(1, "Wireless Mouse", unit_price=Decimal("850.00"), stock=20)
    catalog.add_product(2, "Mechanical Keyboard", unit_price=Decimal("3500.00"), stock=15)
    catalog.add_product(3, "USB-C Hub", unit_price=Decimal("1200.00"), stock=10)
    catalog.add_product(4, "Bluetooth Speaker", unit_price=Decimal("2750.00"), stock=8)
    catalog.add_product(5, "Noise Cancelling Headphones", unit_price=Decimal("6800.00"), stock=5)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Interactive shopping cart over a fixed product catalog.")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for the stderr log (the menu itself always goes to stdout)",
    )
    args, ignored = p.parse_known_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")
    if ignored:
        logging.getLogger(__name__).warning("ignoring arguments: %s", " ".join(ignored))

    catalog = Catalog()
    seed(catalog)

    return ShopSession(catalog, Cart()).run()


if __name__ == "__main__":
    raise SystemExit(main())
