"""Catalog loaded from a JSON file.

The file is read once, when the repository is built; the catalog is
read-only afterwards. Expected shape::

    [{"id": 1, "name": "Kopiko Lucky Day", "price": "24.00"}, ...]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from sarisari.domain.exceptions import ValidationError
from sarisari.domain.model.product import CatalogItem
from sarisari.domain.model.value_objects import DEFAULT_CURRENCY, Money
from sarisari.infrastructure.persistence.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)

logger = logging.getLogger(__name__)


class JsonCatalogRepository(InMemoryCatalogRepository):

    def __init__(self, file_path: Path, currency: str = DEFAULT_CURRENCY) -> None:
        self._file_path = file_path
        self._currency = currency
        super().__init__(self._load())
        logger.info("Loaded %d catalog item(s) from %s", len(self._store), file_path)

    # --- Deserialization helpers ----------------------------------------------

    def _load(self) -> list[CatalogItem]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog file {self._file_path} is not valid JSON: {exc}") from exc

        if not isinstance(raw, list):
            raise ValidationError(f"Catalog file {self._file_path} must contain a list")

        return [self._to_domain(entry) for entry in raw]

    def _to_domain(self, entry: dict) -> CatalogItem:
        try:
            product_id = entry["id"]
            name = entry["name"]
            price = entry["price"]
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"Malformed catalog entry: {entry!r}") from exc

        if not isinstance(product_id, int) or isinstance(product_id, bool):
            raise ValidationError(f"Product ID must be an integer: {entry!r}")
        if not isinstance(name, str):
            raise ValidationError(f"Product name must be a string: {entry!r}")

        currency = entry.get("currency", self._currency)
        if currency != self._currency:
            raise ValidationError(
                f"Catalog entry priced in {currency}, expected {self._currency}: {entry!r}"
            )

        return CatalogItem(id=product_id, name=name, unit_price=Money.of(price, currency))
