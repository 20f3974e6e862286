"""Fixed-width tables for the console.

Every function returns a list of lines; printing is left to the caller.
"""

from __future__ import annotations

from sarisari.application.dto import CatalogItemDTO, LineDTO, ReceiptDTO

LINE_RULE = "-" * 61
CATALOG_RULE = "-" * 36


def catalog_table(items: list[CatalogItemDTO]) -> list[str]:
    rows = [
        "",
        "Available Products:",
        CATALOG_RULE,
        f"{'ID':<4} | {'Name':<16} | {'Price':>10}",
        CATALOG_RULE,
    ]
    for item in items:
        rows.append(f"{item.id:>4} | {item.name:<16} | {item.unit_price:>10}")
    rows.append(CATALOG_RULE)
    return rows


def line_table(lines: list[LineDTO]) -> list[str]:
    rows = [
        LINE_RULE,
        f"{'ID':<4} | {'Name':<16} | {'Price':>10} | {'Qty':>3} | {'Subtotal':>10}",
        LINE_RULE,
    ]
    for line in lines:
        rows.append(
            f"{line.product_id:>4} | {line.product_name:<16} | "
            f"{line.unit_price:>10} | {line.quantity:>3} | {line.line_total:>10}"
        )
    rows.append(LINE_RULE)
    return rows


def receipt_table(receipt: ReceiptDTO) -> list[str]:
    """Render a receipt.

    Receipts from the history listing carry a display number and are
    headed "Order N:"; a fresh checkout is headed by its order ID only.
    """
    rows = [""]
    if receipt.number is not None:
        rows.append(f"Order {receipt.number}:")
    rows.append(f"Order ID: {receipt.order_id}")
    rows.append("Order Details:")
    rows.extend(line_table(receipt.lines))
    rows.append(f"Total Amount: {receipt.total}")
    return rows
