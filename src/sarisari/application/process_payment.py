"""Application service: Process Payment use case.

``evaluate_tender`` decides what to do with one line of input and has no
side effects; ``ProcessPaymentHandler`` drives it against the console
until the customer hands over enough cash.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from sarisari.application.console import Console
from sarisari.application.dto import PaymentDTO
from sarisari.application.validators import parse_payment_amount
from sarisari.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class TenderStatus(Enum):
    INVALID = "INVALID"
    INSUFFICIENT = "INSUFFICIENT"
    ACCEPTED = "ACCEPTED"


@dataclass(frozen=True)
class TenderResult:
    status: TenderStatus
    tendered: Decimal | None = None
    change: Money | None = None

    @property
    def accepted(self) -> bool:
        return self.status is TenderStatus.ACCEPTED


def evaluate_tender(text: str, due: Money) -> TenderResult:
    """Classify a tendered amount against the amount due."""
    tendered = parse_payment_amount(text)
    if tendered is None:
        return TenderResult(TenderStatus.INVALID)
    if tendered < due.amount:
        return TenderResult(TenderStatus.INSUFFICIENT, tendered=tendered)
    return TenderResult(
        TenderStatus.ACCEPTED,
        tendered=tendered,
        change=Money(tendered, due.currency) - due,
    )


class ProcessPaymentHandler:

    def __init__(self, console: Console) -> None:
        self._console = console

    def handle(self, due: Money) -> PaymentDTO:
        """Collect cash for *due* and report the change.

        Keeps prompting while the input is malformed or short; there is no
        way to back out once payment has started.
        """
        prompt = f"Enter payment amount: {due.symbol}"
        while True:
            result = evaluate_tender(self._console.ask(prompt), due)
            if result.accepted:
                break
            if result.status is TenderStatus.INVALID:
                self._console.say("Invalid input. Please enter a valid amount.")
            else:
                logger.info("Insufficient payment %s for %s", result.tendered, due)
                self._console.say(f"Insufficient amount. Please enter at least {due}")

        self._console.say("Payment successful!")
        self._console.say(f"Your change is: {result.change}")
        logger.info("Payment of %s accepted, change %s", due, result.change)

        return PaymentDTO(
            due=str(due),
            tendered=str(Money(result.tendered, due.currency)),
            change=str(result.change),
        )
