"""Receipt: the immutable record of a completed order.

Receipt lines hold copies of the catalog data (id, name, price) taken at
checkout time, so a receipt never changes after it is written.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sarisari.domain.exceptions import ValidationError
from sarisari.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class ReceiptLine:
    """Price snapshot of one product at checkout time."""

    product_id: int
    product_name: str
    unit_price: Money  # locked at checkout time
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Receipt:
    """A frozen order: the lines checked out plus the order identifier.

    Use ``Receipt.create()`` for new receipts; it rejects empty orders.
    """

    order_id: int
    lines: tuple[ReceiptLine, ...]

    @staticmethod
    def create(order_id: int, lines: Iterable[ReceiptLine]) -> Receipt:
        frozen = tuple(lines)
        if not frozen:
            raise ValidationError("Order must contain at least one item")
        if order_id < 1:
            raise ValidationError(f"Order ID must be positive, got {order_id}")
        currencies = {line.unit_price.currency for line in frozen}
        if len(currencies) > 1:
            raise ValidationError(f"Order mixes currencies: {sorted(currencies)}")
        return Receipt(order_id=order_id, lines=frozen)

    @property
    def currency(self) -> str:
        return self.lines[0].unit_price.currency

    @property
    def total(self) -> Money:
        return sum((line.line_total for line in self.lines), Money.zero(self.currency))

    @property
    def units(self) -> int:
        return sum(line.quantity.value for line in self.lines)
