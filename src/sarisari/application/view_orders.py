"""Application service: View Orders use case (query)."""

from __future__ import annotations

from sarisari.application.dto import ReceiptDTO, receipt_to_dto
from sarisari.domain.repository.order_history_repository import OrderHistoryRepository


class ViewOrdersHandler:

    def __init__(self, order_repo: OrderHistoryRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[ReceiptDTO]:
        """Return every recorded receipt, numbered from 1 in insertion order."""
        return [
            receipt_to_dto(receipt, number=number)
            for number, receipt in enumerate(self._order_repo.list_all(), start=1)
        ]
