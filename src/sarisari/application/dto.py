"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application layer to the console
without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass

from sarisari.domain.model.receipt import Receipt, ReceiptLine


@dataclass(frozen=True)
class CatalogItemDTO:
    id: int
    name: str
    unit_price: str  # formatted, e.g. "₱24.00"


@dataclass(frozen=True)
class LineDTO:
    """A single cart or receipt line as displayed to the user."""

    product_id: int
    product_name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class ReceiptDTO:
    """A recorded order.

    ``number`` is the position in the order history listing (display only);
    ``order_id`` is the identifier assigned at checkout. They are unrelated.
    """

    order_id: int
    lines: list[LineDTO]
    total: str
    number: int | None = None
    payment: PaymentDTO | None = None  # set on the receipt returned by checkout


@dataclass(frozen=True)
class PaymentDTO:
    due: str
    tendered: str
    change: str


# --- Mapping ------------------------------------------------------------------


def line_to_dto(line: ReceiptLine) -> LineDTO:
    return LineDTO(
        product_id=line.product_id,
        product_name=line.product_name,
        unit_price=str(line.unit_price),
        quantity=line.quantity.value,
        line_total=str(line.line_total),
    )


def receipt_to_dto(receipt: Receipt, number: int | None = None) -> ReceiptDTO:
    return ReceiptDTO(
        order_id=receipt.order_id,
        lines=[line_to_dto(line) for line in receipt.lines],
        total=str(receipt.total),
        number=number,
    )
