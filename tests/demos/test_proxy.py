import pytest

from pattern_demos.config import AppConfig
from pattern_demos.config.schemas import DisplayConfig, ProxyConfig
from pattern_demos.demos.proxy import (
    BankAccount,
    BankAccountInterface,
    BankAccountProxy,
    RealBankAccount,
    run,
)
from pattern_demos.domain.exceptions import InvalidTransactionError


@pytest.fixture
def real_account():
    return RealBankAccount(100)


@pytest.fixture
def proxy_account(real_account):
    return BankAccountProxy(real_account)


class TestRealBankAccount:
    def test_withdraw_within_balance(self, real_account):
        assert real_account.withdraw(70) is True
        assert real_account.balance == 30

    def test_withdraw_above_balance_declines(self, real_account):
        assert real_account.withdraw(150) is False
        assert real_account.balance == 100

    @pytest.mark.parametrize("amount", [0, -10])
    def test_non_positive_amounts_raise(self, real_account, amount):
        with pytest.raises(InvalidTransactionError):
            real_account.deposit(amount)
        with pytest.raises(InvalidTransactionError):
            real_account.withdraw(amount)


class TestBankAccountProxy:
    def test_deposit_is_logged_and_forwarded(self, proxy_account, real_account, capsys):
        assert proxy_account.deposit(50) is True

        assert real_account.balance == 150
        assert capsys.readouterr().out.splitlines() == [
            "Proxy: Logging deposit transaction",
            "Deposited 50. New balance: 150",
        ]

    @pytest.mark.parametrize("amount", [0, -50])
    def test_invalid_amount_never_reaches_account(self, proxy_account, real_account, amount, capsys):
        assert proxy_account.deposit(amount) is False
        assert proxy_account.withdraw(amount) is False

        assert real_account.balance == 100
        assert capsys.readouterr().out.count("Proxy: Invalid amount") == 2

    def test_limit_rejects_withdrawal_despite_sufficient_balance(self, capsys):
        # Arrange
        real_account = RealBankAccount(5000)
        proxy_account = BankAccountProxy(real_account, withdrawal_limit=1000)

        # Act
        accepted = proxy_account.withdraw(1500)

        # Assert
        assert accepted is False
        assert real_account.balance == 5000
        assert "Proxy: Cannot withdraw more than 1000 at once" in capsys.readouterr().out

    def test_withdrawal_at_limit_is_allowed(self):
        real_account = RealBankAccount(5000)
        proxy_account = BankAccountProxy(real_account, withdrawal_limit=1000)

        assert proxy_account.withdraw(1000) is True
        assert real_account.balance == 4000

    def test_insufficient_funds_reported_by_proxy(self, proxy_account, real_account, capsys):
        assert proxy_account.withdraw(150) is False

        assert real_account.balance == 100
        assert capsys.readouterr().out.splitlines() == [
            "Proxy: Checking withdrawal limit",
            "Proxy: Insufficient funds!",
        ]


def test_plain_account_reports_insufficient_funds(capsys):
    account = BankAccount(100)

    account.withdraw(150)

    assert account.balance == 100
    assert capsys.readouterr().out == "Insufficient funds!\n"


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        BankAccountInterface()


def test_run_uses_configured_limit(capsys):
    config = AppConfig(proxy=ProxyConfig(withdrawal_limit=2000))

    run(config)

    out = capsys.readouterr().out
    assert "Proxy: Cannot withdraw more than" not in out
    assert "Proxy: Insufficient funds!" in out


def test_run_with_default_limit(app_config, capsys):
    run(app_config)

    out = capsys.readouterr().out
    assert "Deposited 50. New balance: 150" in out
    assert "Proxy: Invalid amount" in out
    assert "Withdrawn 70. New balance: 80" in out
    assert "Proxy: Cannot withdraw more than 1000 at once" in out
    assert "Proxy: Insufficient funds!" in out


def test_run_section_rule_width_is_configurable(capsys):
    config = AppConfig(display=DisplayConfig(section_width=10))

    run(config)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "-" * 10
    assert lines[lines.index("Example 2: With Proxy Pattern") - 1] == "-" * 10
