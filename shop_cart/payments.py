from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum

from shop_cart.errors import InvalidPaymentType
from shop_cart.formatting import format_amount

logger = logging.getLogger(__name__)


class PaymentMethod(Enum):
    CASH = "Cash"
    CARD = "Credit Card"

    @classmethod
    def from_choice(cls, choice: int | None) -> PaymentMethod:
        # Submenu numbering: 1. Cash, 2. Card
        if choice == 1:
            return cls.CASH
        if choice == 2:
            return cls.CARD
        raise InvalidPaymentType()


def pay(method: PaymentMethod, amount: Decimal) -> str:
    """Nothing is charged anywhere; paying only describes the payment."""
    message = f"Paid {format_amount(amount)} using {method.value}."
    logger.info("payment: method=%s amount=%s", method.name, amount)
    return message
