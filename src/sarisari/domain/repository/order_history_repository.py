"""Abstract repository for the append-only order history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sarisari.domain.model.receipt import Receipt


class OrderHistoryRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next order ID. IDs start at 1 and are never reused."""

    @abstractmethod
    def append(self, receipt: Receipt) -> None:
        """Record a completed order."""

    @abstractmethod
    def list_all(self) -> list[Receipt]:
        """Return every recorded receipt in insertion order."""

    def __len__(self) -> int:
        return len(self.list_all())
