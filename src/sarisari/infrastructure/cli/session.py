"""Interactive menu loop for one shopping session."""

from __future__ import annotations

import logging

from sarisari.application.console import Console, prompt_until
from sarisari.application.formatting import catalog_table, receipt_table
from sarisari.application.validators import parse_integer, parse_menu_number, parse_yes_no
from sarisari.application.view_cart import YES_NO_ERROR
from sarisari.domain.exceptions import EntityNotFoundError
from sarisari.infrastructure.bootstrap import Store

logger = logging.getLogger(__name__)

STORE_TITLE = "--- DANIBOY'S ONLINE SARI-SARI STORE ---"

VIEW_PRODUCTS = 1
VIEW_CART = 2
VIEW_ORDERS = 3
EXIT = 4

MENU = (
    (VIEW_PRODUCTS, "View Products"),
    (VIEW_CART, "View Shopping Cart"),
    (VIEW_ORDERS, "View Orders"),
    (EXIT, "Exit"),
)


class StoreSession:

    def __init__(self, store: Store, console: Console) -> None:
        self._store = store
        self._console = console

    def run(self) -> None:
        """Show the main menu until the customer picks Exit."""
        logger.info("Session started")
        while True:
            self._show_menu()
            option = parse_menu_number(self._console.ask("Enter your choice: "), VIEW_PRODUCTS, EXIT)
            if option is None:
                self._console.say(f"Invalid choice. Please enter a number between {VIEW_PRODUCTS} and {EXIT}.")
            elif option == VIEW_PRODUCTS:
                self.browse()
            elif option == VIEW_CART:
                self._store.view_cart.handle()
            elif option == VIEW_ORDERS:
                self.view_orders()
            else:
                self._console.say("Thank you for shopping with us!")
                logger.info("Session ended with %d order(s)", len(self._store.order_repo))
                return

    def browse(self) -> None:
        """Show the catalog and keep adding products while the customer says yes."""
        for row in catalog_table(self._store.browse_catalog.handle()):
            self._console.say(row)

        while True:
            self._add_one_product()
            more = prompt_until(
                self._console,
                "Do you want to add another product? (Y/N): ",
                parse_yes_no,
                YES_NO_ERROR,
            )
            if not more:
                return

    def view_orders(self) -> None:
        receipts = self._store.view_orders.handle()
        if not receipts:
            self._console.say("No previous orders found.")
            return
        for receipt in receipts:
            for row in receipt_table(receipt):
                self._console.say(row)

    # --- Internal helpers -----------------------------------------------------

    def _show_menu(self) -> None:
        self._console.say()
        self._console.say(f" {STORE_TITLE} ")
        self._console.say("Menu:")
        for number, label in MENU:
            self._console.say(f"{number}. {label}")

    def _add_one_product(self) -> None:
        while True:
            product_id = parse_integer(
                self._console.ask("Enter the ID of the product you want to add: ")
            )
            if product_id is None:
                self._console.say("Invalid input. Please enter a numeric product ID.")
                continue
            try:
                self._store.add_to_cart.handle(product_id)
            except EntityNotFoundError:
                self._console.say("Invalid product ID. Please enter a valid one.")
                continue
            self._console.say("Product added successfully!")
            return
