"""Application service: Place Order use case.

Turns the checked-out lines into a receipt, shows it, collects payment
and records the receipt in the order history.
"""

from __future__ import annotations

import dataclasses
import logging

from sarisari.application.console import Console
from sarisari.application.dto import ReceiptDTO, receipt_to_dto
from sarisari.application.formatting import receipt_table
from sarisari.application.process_payment import ProcessPaymentHandler
from sarisari.domain.model.receipt import Receipt, ReceiptLine
from sarisari.domain.repository.order_history_repository import OrderHistoryRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderHistoryRepository,
        payment: ProcessPaymentHandler,
        console: Console,
    ) -> None:
        self._order_repo = order_repo
        self._payment = payment
        self._console = console

    def handle(self, lines: list[ReceiptLine]) -> ReceiptDTO | None:
        """Check out *lines*.

        Steps:
        1. Bail out with a message, touching nothing, if there are no lines.
        2. Allocate the next order ID (never handed back).
        3. Show the receipt and collect payment for its total.
        4. Append the receipt to the order history.
        """
        if not lines:
            self._console.say("No items to checkout.")
            return None

        order_id = self._order_repo.next_id()
        receipt = Receipt.create(order_id=order_id, lines=lines)
        dto = receipt_to_dto(receipt)

        for row in receipt_table(dto):
            self._console.say(row)

        payment = self._payment.handle(receipt.total)

        self._console.say("You have successfully checked out the products!")
        self._order_repo.append(receipt)
        logger.info(
            "Order #%s recorded: %d line(s), total %s",
            order_id, len(receipt.lines), receipt.total,
        )
        return dataclasses.replace(dto, payment=payment)
