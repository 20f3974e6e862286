"""Tests for the in-memory and JSON catalog repositories."""

import json
from decimal import Decimal

import pytest

from sarisari.domain.exceptions import ValidationError
from sarisari.domain.model.value_objects import Money
from sarisari.infrastructure.persistence.in_memory_catalog_repository import (
    DEFAULT_CATALOG,
    InMemoryCatalogRepository,
)
from sarisari.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from tests.fakes import item


class TestInMemoryCatalog:

    def test_default_catalog(self):
        repo = InMemoryCatalogRepository.default()
        items = repo.list_all()
        assert len(items) == len(DEFAULT_CATALOG)
        assert repo.get_by_id(2).name == "Nescafé Black"
        assert repo.get_by_id(2).unit_price == Money.of("57")

    def test_default_catalog_in_other_currency(self):
        repo = InMemoryCatalogRepository.default("USD")
        assert repo.get_by_id(1).unit_price.currency == "USD"

    def test_unknown_id(self):
        assert InMemoryCatalogRepository.default().get_by_id(99) is None

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate product ID 1"):
            InMemoryCatalogRepository([item(1, "A", "1"), item(1, "B", "2")])

    def test_mixed_currencies_rejected(self):
        with pytest.raises(ValidationError, match="priced in USD, catalog uses PHP"):
            InMemoryCatalogRepository([item(1, "A", "1"), item(2, "B", "2", "USD")])

    def test_currency_of_catalog(self):
        assert InMemoryCatalogRepository.default("USD").currency == "USD"
        assert InMemoryCatalogRepository().currency is None


class TestJsonCatalog:

    def _write(self, tmp_path, payload):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def test_loads_items_in_file_order(self, tmp_path):
        path = self._write(tmp_path, [
            {"id": 10, "name": "Skyflakes", "price": "8.50"},
            {"id": 3, "name": "Piattos", "price": 18},
        ])
        repo = JsonCatalogRepository(path)
        assert [i.id for i in repo.list_all()] == [10, 3]
        assert repo.get_by_id(10).unit_price.amount == Decimal("8.50")
        assert repo.get_by_id(3).unit_price == Money.of("18")

    def test_entry_currency_matching_catalog_accepted(self, tmp_path):
        path = self._write(tmp_path, [{"id": 1, "name": "Gum", "price": "1", "currency": "USD"}])
        assert str(JsonCatalogRepository(path, currency="USD").get_by_id(1).unit_price) == "$1.00"

    def test_entry_in_other_currency_rejected(self, tmp_path):
        path = self._write(tmp_path, [
            {"id": 1, "name": "Kopiko", "price": "24"},
            {"id": 2, "name": "Gum", "price": "1", "currency": "USD"},
        ])
        with pytest.raises(ValidationError, match="priced in USD, expected PHP"):
            JsonCatalogRepository(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError, match="not valid JSON"):
            JsonCatalogRepository(path)

    def test_top_level_must_be_list(self, tmp_path):
        path = self._write(tmp_path, {"id": 1})
        with pytest.raises(ValidationError, match="must contain a list"):
            JsonCatalogRepository(path)

    @pytest.mark.parametrize("entry, message", [
        ({"name": "No id", "price": "1"}, "Malformed catalog entry"),
        ({"id": "1", "name": "String id", "price": "1"}, "must be an integer"),
        ({"id": 1, "name": "Bad price", "price": "abc"}, "Invalid money amount"),
        ({"id": 1, "name": "Not a number", "price": "NaN"}, "must be finite"),
        ({"id": 1, "name": "Endless", "price": "Infinity"}, "must be finite"),
        ({"id": 1, "name": 5, "price": "1"}, "name must be a string"),
        ({"id": 1, "name": None, "price": "1"}, "name must be a string"),
        ({"id": 1, "name": "Negative", "price": "-1"}, "cannot be negative"),
        ({"id": 1, "name": "", "price": "1"}, "name is required"),
    ])
    def test_bad_entries_rejected(self, tmp_path, entry, message):
        path = self._write(tmp_path, [entry])
        with pytest.raises(ValidationError, match=message):
            JsonCatalogRepository(path)

    def test_duplicate_ids_rejected(self, tmp_path):
        path = self._write(tmp_path, [
            {"id": 1, "name": "A", "price": "1"},
            {"id": 1, "name": "B", "price": "2"},
        ])
        with pytest.raises(ValidationError, match="Duplicate"):
            JsonCatalogRepository(path)
