import pytest

from pattern_demos.demos.strategy import (
    CashStrategy,
    CreditCardStrategy,
    PaymentStrategy,
    PayPalStrategy,
    ShoppingCart,
    process_payment,
    run,
)
from pattern_demos.domain.exceptions import InsufficientCashError, UnsupportedPaymentTypeError


class TestProcessPayment:
    """Tests for the conditional payment function."""

    def test_credit_card(self, capsys):
        process_payment("credit_card", 100, {"card_number": "1234-5678"})
        assert capsys.readouterr().out == "Paid 100 using Credit Card: 1234-5678\n"

    def test_paypal(self, capsys):
        process_payment("paypal", 200, {"email": "example@email.com"})
        assert capsys.readouterr().out == "Paid 200 using PayPal account: example@email.com\n"

    def test_unsupported_type_raises(self):
        with pytest.raises(UnsupportedPaymentTypeError, match="Unsupported payment type"):
            process_payment("bitcoin", 10, {})


class TestShoppingCart:
    """Tests for the strategy-based cart."""

    def test_new_cart_has_zero_amount(self):
        cart = ShoppingCart(CreditCardStrategy("1234-5678", "123", "12/25"))
        assert cart.amount == 0

    def test_checkout_delegates_to_strategy(self, capsys):
        cart = ShoppingCart(CreditCardStrategy("1234-5678", "123", "12/25"))
        cart.set_amount(100)

        cart.checkout()

        assert capsys.readouterr().out == "Paid 100 using Credit Card: 1234-5678\n"

    def test_strategy_can_be_swapped_at_runtime(self, capsys):
        cart = ShoppingCart(CreditCardStrategy("1234-5678", "123", "12/25"))
        cart.set_payment_strategy(PayPalStrategy("example@email.com", "password"))
        cart.set_amount(200)

        cart.checkout()

        assert capsys.readouterr().out == "Paid 200 using PayPal: example@email.com\n"

    def test_cash_strategy_deducts_amount(self, capsys):
        cash = CashStrategy(500)
        cart = ShoppingCart(cash)
        cart.set_amount(300)

        cart.checkout()

        assert cash.cash_amount == 200
        assert capsys.readouterr().out == "Paid 300 using Cash. Cash amount remaining: 200\n"

    def test_cash_strategy_rejects_amount_above_cash(self):
        cash = CashStrategy(500)
        cart = ShoppingCart(cash)
        cart.set_amount(300)
        cart.checkout()

        cart.set_amount(300)
        with pytest.raises(InsufficientCashError, match="Insufficient cash amount") as exc_info:
            cart.checkout()

        assert cash.cash_amount == 200
        assert exc_info.value.requested == 300
        assert exc_info.value.available == 200


def test_payment_strategy_is_abstract():
    with pytest.raises(TypeError):
        PaymentStrategy()


def test_run_pays_with_every_strategy(app_config, capsys):
    run(app_config)

    out = capsys.readouterr().out
    assert "Example 1: Without Strategy Pattern" in out
    assert "Example 2: With Strategy Pattern" in out
    assert "Paid 100 using Credit Card: 1234-5678" in out
    assert "Paid 200 using PayPal: example@email.com" in out
    assert "Paid 300 using Cash. Cash amount remaining: 200" in out
    assert "Paid 400 using Credit Card: 1234-5678" in out


def test_run_separates_examples_with_section_rule(app_config, capsys):
    run(app_config)

    lines = capsys.readouterr().out.splitlines()
    assert lines[lines.index("Example 2: With Strategy Pattern") - 1] == "-" * 32
