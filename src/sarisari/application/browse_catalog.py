"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from sarisari.application.dto import CatalogItemDTO
from sarisari.domain.repository.catalog_repository import CatalogRepository


class BrowseCatalogHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self) -> list[CatalogItemDTO]:
        return [
            CatalogItemDTO(id=item.id, name=item.name, unit_price=str(item.unit_price))
            for item in self._catalog_repo.list_all()
        ]
