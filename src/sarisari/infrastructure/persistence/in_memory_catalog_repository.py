"""In-memory implementation of CatalogRepository."""

from __future__ import annotations

from sarisari.domain.exceptions import ValidationError
from sarisari.domain.model.product import CatalogItem
from sarisari.domain.model.value_objects import DEFAULT_CURRENCY, Money
from sarisari.domain.repository.catalog_repository import CatalogRepository

# (id, name, price) of the products stocked when no catalog file is given.
DEFAULT_CATALOG: tuple[tuple[int, str, str], ...] = (
    (1, "Kopiko Lucky Day", "24.00"),
    (2, "Nescafé Black", "57.00"),
    (3, "Minute Maid", "38.00"),
    (4, "C2 Apple", "32.00"),
    (5, "Pocari Sweat", "51.00"),
)


class InMemoryCatalogRepository(CatalogRepository):

    def __init__(self, items: list[CatalogItem] | None = None) -> None:
        self._store: dict[int, CatalogItem] = {}
        for item in items or []:
            if item.id in self._store:
                raise ValidationError(f"Duplicate product ID {item.id} in catalog")
            if self._store and item.unit_price.currency != self.currency:
                raise ValidationError(
                    f"{item.name} is priced in {item.unit_price.currency}, "
                    f"catalog uses {self.currency}"
                )
            self._store[item.id] = item

    @classmethod
    def default(cls, currency: str = DEFAULT_CURRENCY) -> InMemoryCatalogRepository:
        return cls([
            CatalogItem(id=pid, name=name, unit_price=Money.of(price, currency))
            for pid, name, price in DEFAULT_CATALOG
        ])

    @property
    def currency(self) -> str | None:
        """Currency shared by every item, or None for an empty catalog."""
        for item in self._store.values():
            return item.unit_price.currency
        return None

    def get_by_id(self, product_id: int) -> CatalogItem | None:
        return self._store.get(product_id)

    def list_all(self) -> list[CatalogItem]:
        return list(self._store.values())
