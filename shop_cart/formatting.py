from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from shop_cart.models import CartEntry, Product, Receipt

CURRENCY = "PHP"
RECEIPT_HEADER = "----- Receipt -----"
RECEIPT_FOOTER = "-------------------"


def format_amount(amount: Decimal) -> str:
    return f"{amount:.2f}"


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY} {format_amount(amount)}"


def format_product(product: Product) -> str:
    return f"{product.id:>4} | {product.name:<25} | {CURRENCY} {product.unit_price:<8.2f} | Stock: {product.stock}"


def format_entry(entry: CartEntry) -> str:
    return f"{entry.product.name} x{entry.quantity} = {format_money(entry.line_total)}"


def format_total(total: Decimal) -> str:
    return f"Total: {format_money(total)}"


def entry_lines(entries: Iterable[CartEntry], total: Decimal) -> List[str]:
    lines = [format_entry(entry) for entry in entries]
    lines.append(format_total(total))
    return lines


def format_receipt(receipt: Receipt) -> List[str]:
    return ["", RECEIPT_HEADER, *entry_lines(receipt.entries, receipt.total), RECEIPT_FOOTER]
