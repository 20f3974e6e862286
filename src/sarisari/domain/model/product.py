"""Catalog item.

Items are created once when the catalog is loaded and live for the
whole session. They are never mutated; receipts copy what they need.
"""

from __future__ import annotations

from dataclasses import dataclass

from sarisari.domain.exceptions import ValidationError
from sarisari.domain.model.value_objects import Money


@dataclass(frozen=True)
class CatalogItem:
    """A purchasable product on the store shelf."""

    id: int
    name: str
    unit_price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise ValidationError(f"Product name must be a string, got {self.name!r}")
        if not self.name.strip():
            raise ValidationError("Product name is required")
