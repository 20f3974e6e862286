"""Tests for the payment step."""

from decimal import Decimal

import pytest

from sarisari.application.process_payment import (
    ProcessPaymentHandler,
    TenderStatus,
    evaluate_tender,
)
from sarisari.domain.model.value_objects import Money
from tests.fakes import FakeConsole


class TestEvaluateTender:

    def test_insufficient_amount(self):
        result = evaluate_tender("40", Money.of("50"))
        assert result.status is TenderStatus.INSUFFICIENT
        assert result.tendered == Decimal("40")
        assert result.change is None

    def test_exact_amount_gives_zero_change(self):
        result = evaluate_tender("50", Money.of("50"))
        assert result.accepted
        assert result.change == Money.of("0")

    def test_overpayment_gives_change(self):
        result = evaluate_tender("60", Money.of("50"))
        assert result.change == Money.of("10")

    @pytest.mark.parametrize("text", ["", "-", "abc", "12.5.3"])
    def test_malformed_input(self, text):
        assert evaluate_tender(text, Money.of("50")).status is TenderStatus.INVALID

    def test_zero_due_accepts_zero(self):
        assert evaluate_tender("0", Money.zero()).accepted

    def test_zero_due_rejects_negative(self):
        result = evaluate_tender("-3.0", Money.zero())
        assert result.status is TenderStatus.INSUFFICIENT

    def test_change_keeps_currency(self):
        result = evaluate_tender("5", Money.of("4.25", "USD"))
        assert str(result.change) == "$0.75"


class TestProcessPaymentHandler:

    def test_accepts_first_sufficient_amount(self):
        console = FakeConsole(["50"])
        dto = ProcessPaymentHandler(console).handle(Money.of("50"))
        assert dto.change == "₱0.00"
        assert "Payment successful!" in console.output
        assert "Your change is: ₱0.00" in console.output

    def test_reprompts_on_insufficient_then_accepts(self):
        console = FakeConsole(["40", "60"])
        dto = ProcessPaymentHandler(console).handle(Money.of("50"))
        assert len(console.prompts) == 2
        assert "Insufficient amount. Please enter at least ₱50.00" in console.output
        assert dto.tendered == "₱60.00"
        assert dto.change == "₱10.00"

    def test_reprompts_on_malformed_input(self):
        console = FakeConsole(["abc", "", "100"])
        ProcessPaymentHandler(console).handle(Money.of("50"))
        assert console.output.count("Invalid input. Please enter a valid amount.") == 2

    def test_prompt_shows_currency_symbol(self):
        console = FakeConsole(["1"])
        ProcessPaymentHandler(console).handle(Money.of("1"))
        assert console.prompts == ["Enter payment amount: ₱"]


def test_negative_zero_tender_gives_unsigned_change():
    result = evaluate_tender("-0", Money.zero())
    assert result.accepted
    assert str(result.change) == "₱0.00"
