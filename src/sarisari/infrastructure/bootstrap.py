"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Each call to ``build_store`` returns a fresh, independent store: its own
catalog, cart, order history and order counter.
"""

from __future__ import annotations

from dataclasses import dataclass

from sarisari.application.add_to_cart import AddToCartHandler
from sarisari.application.browse_catalog import BrowseCatalogHandler
from sarisari.application.console import Console
from sarisari.application.place_order import PlaceOrderHandler
from sarisari.application.process_payment import ProcessPaymentHandler
from sarisari.application.view_cart import ViewCartHandler
from sarisari.application.view_orders import ViewOrdersHandler
from sarisari.domain.model.cart import Cart
from sarisari.domain.repository.catalog_repository import CatalogRepository
from sarisari.domain.repository.order_history_repository import OrderHistoryRepository
from sarisari.infrastructure.config import StoreConfig
from sarisari.infrastructure.persistence.in_memory_catalog_repository import (
    InMemoryCatalogRepository,
)
from sarisari.infrastructure.persistence.in_memory_order_history_repository import (
    InMemoryOrderHistoryRepository,
)
from sarisari.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)


@dataclass
class Store:
    """Everything one shopping session needs."""

    catalog_repo: CatalogRepository
    order_repo: OrderHistoryRepository
    cart: Cart
    browse_catalog: BrowseCatalogHandler
    add_to_cart: AddToCartHandler
    view_cart: ViewCartHandler
    view_orders: ViewOrdersHandler


def catalog_repository(config: StoreConfig) -> CatalogRepository:
    if config.catalog_path is None:
        return InMemoryCatalogRepository.default(config.currency)
    return JsonCatalogRepository(config.catalog_path, currency=config.currency)


def build_store(config: StoreConfig, console: Console) -> Store:
    catalog_repo = catalog_repository(config)
    order_repo = InMemoryOrderHistoryRepository()
    cart = Cart()

    place_order = PlaceOrderHandler(
        order_repo=order_repo,
        payment=ProcessPaymentHandler(console),
        console=console,
    )

    return Store(
        catalog_repo=catalog_repo,
        order_repo=order_repo,
        cart=cart,
        browse_catalog=BrowseCatalogHandler(catalog_repo),
        add_to_cart=AddToCartHandler(catalog_repo, cart),
        view_cart=ViewCartHandler(cart, place_order, console),
        view_orders=ViewOrdersHandler(order_repo),
    )
