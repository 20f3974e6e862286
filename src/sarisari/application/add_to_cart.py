"""Application service: Add To Cart use case."""

from __future__ import annotations

import logging

from sarisari.application.dto import LineDTO, line_to_dto
from sarisari.domain.exceptions import EntityNotFoundError
from sarisari.domain.model.cart import Cart
from sarisari.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, catalog_repo: CatalogRepository, cart: Cart) -> None:
        self._catalog_repo = catalog_repo
        self._cart = cart

    def handle(self, product_id: int) -> LineDTO:
        """Put one unit of the product into the cart.

        Raises EntityNotFoundError when the ID is not in the catalog.
        """
        item = self._catalog_repo.get_by_id(product_id)
        if item is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        line = self._cart.add_item(item)
        logger.info("Added %s to cart (qty=%s)", item.name, line.quantity)
        return line_to_dto(line.to_receipt_line())
