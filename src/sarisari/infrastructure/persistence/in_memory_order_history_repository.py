"""Process-lifetime implementation of OrderHistoryRepository.

Each instance owns its own counter and history, so separate sessions
(and separate tests) never share state.
"""

from __future__ import annotations

from sarisari.domain.model.receipt import Receipt
from sarisari.domain.repository.order_history_repository import OrderHistoryRepository


class InMemoryOrderHistoryRepository(OrderHistoryRepository):

    def __init__(self) -> None:
        self._receipts: list[Receipt] = []
        self._next_id = 1

    def next_id(self) -> int:
        order_id = self._next_id
        self._next_id += 1
        return order_id

    def append(self, receipt: Receipt) -> None:
        self._receipts.append(receipt)

    def list_all(self) -> list[Receipt]:
        return list(self._receipts)

    def __len__(self) -> int:
        return len(self._receipts)
