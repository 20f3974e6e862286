"""Shopping cart owned by a single session.

The cart keeps at most one line per product id; adding the same product
again bumps that line's quantity instead of appending a duplicate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sarisari.domain.model.product import CatalogItem
from sarisari.domain.model.receipt import ReceiptLine
from sarisari.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)


@dataclass
class CartLine:
    item: CatalogItem
    quantity: Quantity = field(default_factory=lambda: Quantity(1))

    def increment(self) -> None:
        self.quantity = self.quantity.increment()

    def to_receipt_line(self) -> ReceiptLine:
        return ReceiptLine(
            product_id=self.item.id,
            product_name=self.item.name,
            unit_price=self.item.unit_price,
            quantity=self.quantity,
        )


class Cart:
    """Ordered collection of cart lines, in the order products were first added."""

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    def add_item(self, item: CatalogItem) -> CartLine:
        """Add one unit of *item*, merging with an existing line for the same id."""
        for line in self._lines:
            if line.item.id == item.id:
                line.increment()
                logger.debug("Cart: %s quantity now %s", item.name, line.quantity)
                return line
        line = CartLine(item=item)
        self._lines.append(line)
        logger.debug("Cart: added %s", item.name)
        return line

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def units(self) -> int:
        return sum(line.quantity.value for line in self._lines)

    def snapshot(self) -> list[ReceiptLine]:
        """Copy the current lines into receipt lines."""
        return [line.to_receipt_line() for line in self._lines]

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"Cart(lines={len(self._lines)}, units={self.units})"
