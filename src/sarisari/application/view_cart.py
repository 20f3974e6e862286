"""Application service: View Cart use case.

Viewing a non-empty cart always ends with the checkout question:

    Browsing -> Confirming -> Paying -> Recorded
    Browsing -> Confirming -> Declined (cart untouched)
"""

from __future__ import annotations

import logging
from enum import Enum

from sarisari.application.console import Console, prompt_until
from sarisari.application.dto import line_to_dto
from sarisari.application.formatting import line_table
from sarisari.application.place_order import PlaceOrderHandler
from sarisari.application.validators import parse_yes_no
from sarisari.domain.model.cart import Cart

logger = logging.getLogger(__name__)

YES_NO_ERROR = "Invalid input. Please enter 'Y' or 'N' only."


class CheckoutOutcome(Enum):
    EMPTY = "EMPTY"
    DECLINED = "DECLINED"
    RECORDED = "RECORDED"


class ViewCartHandler:

    def __init__(
        self,
        cart: Cart,
        place_order: PlaceOrderHandler,
        console: Console,
    ) -> None:
        self._cart = cart
        self._place_order = place_order
        self._console = console

    def handle(self) -> CheckoutOutcome:
        if self._cart.is_empty:
            self._console.say("Your shopping cart is empty.")
            return CheckoutOutcome.EMPTY

        lines = self._cart.snapshot()
        self._console.say()
        self._console.say("Shopping Cart:")
        for row in line_table([line_to_dto(line) for line in lines]):
            self._console.say(row)

        confirmed = prompt_until(
            self._console,
            "Do you want to check out all the products? (Y/N): ",
            parse_yes_no,
            YES_NO_ERROR,
        )
        if not confirmed:
            logger.debug("Checkout declined, cart kept (%r)", self._cart)
            return CheckoutOutcome.DECLINED

        self._place_order.handle(lines)
        self._cart.clear()
        return CheckoutOutcome.RECORDED
