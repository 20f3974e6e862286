"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is read-only for the whole session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sarisari.domain.model.product import CatalogItem


class CatalogRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> CatalogItem | None:
        """Return a catalog item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[CatalogItem]:
        """Return every item in the catalog, in display order."""
