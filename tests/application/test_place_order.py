"""Integration tests for the Place Order use case.

Uses the in-memory order history and a scripted console.
"""

from sarisari.application.place_order import PlaceOrderHandler
from sarisari.application.process_payment import ProcessPaymentHandler
from sarisari.domain.model.cart import Cart
from sarisari.domain.model.value_objects import Money
from sarisari.infrastructure.persistence.in_memory_order_history_repository import (
    InMemoryOrderHistoryRepository,
)
from tests.fakes import FakeConsole, item


def _setup(
    answers: list[str] | None = None,
) -> tuple[PlaceOrderHandler, InMemoryOrderHistoryRepository, FakeConsole]:
    console = FakeConsole(answers)
    order_repo = InMemoryOrderHistoryRepository()
    handler = PlaceOrderHandler(order_repo, ProcessPaymentHandler(console), console)
    return handler, order_repo, console


def _lines():
    cart = Cart()
    cart.add_item(item(1, "ItemA", "24"))
    cart.add_item(item(2, "ItemB", "57"))
    cart.add_item(item(2, "ItemB", "57"))
    return cart.snapshot()


class TestPlaceOrderHappyPath:

    def test_total_change_and_history(self):
        handler, order_repo, console = _setup(["150"])
        dto = handler.handle(_lines())

        assert dto.total == "₱138.00"
        assert "Total Amount: ₱138.00" in console.output
        assert "Your change is: ₱12.00" in console.output
        assert len(order_repo) == 1
        assert order_repo.list_all()[0].total == Money.of("138")

    def test_returned_receipt_carries_payment(self):
        handler, _, _ = _setup(["abc", "150"])
        dto = handler.handle(_lines())
        assert dto.payment.due == "₱138.00"
        assert dto.payment.tendered == "₱150.00"
        assert dto.payment.change == "₱12.00"

    def test_receipt_shown_before_payment(self):
        handler, _, console = _setup(["138"])
        handler.handle(_lines())
        assert console.output.index("Total Amount: ₱138.00") < console.output.index(
            "Payment successful!"
        )
        assert console.output[-1] == "You have successfully checked out the products!"

    def test_sequential_order_ids(self):
        handler, order_repo, _ = _setup(["24", "24"])
        first = handler.handle([_lines()[0]])
        second = handler.handle([_lines()[0]])
        assert (first.order_id, second.order_id) == (1, 2)
        assert [r.order_id for r in order_repo.list_all()] == [1, 2]

    def test_order_id_shown_on_receipt(self):
        handler, _, console = _setup(["200"])
        handler.handle(_lines())
        assert "Order ID: 1" in console.output


class TestPlaceOrderEmpty:

    def test_empty_lines_are_a_no_op(self):
        handler, order_repo, console = _setup()
        assert handler.handle([]) is None
        assert len(order_repo) == 0
        assert console.prompts == []
        assert console.output == ["No items to checkout."]

    def test_empty_lines_do_not_consume_an_order_id(self):
        handler, order_repo, _ = _setup(["24"])
        handler.handle([])
        dto = handler.handle([_lines()[0]])
        assert dto.order_id == 1


class TestPriceLock:

    def test_history_keeps_checkout_prices(self):
        handler, order_repo, _ = _setup(["24"])
        cart = Cart()
        cart.add_item(item(1, "ItemA", "24"))
        handler.handle(cart.snapshot())

        # Same product id re-priced in a later catalog
        cart.clear()
        cart.add_item(item(1, "ItemA", "99"))

        assert order_repo.list_all()[0].total == Money.of("24")
