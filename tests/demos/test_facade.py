import pytest

from pattern_demos.demos.facade import Discount, Fees, Shipping, ShopFacade, buy, calculate_price, run


def test_subsystem_rates():
    assert Discount().calculate(100) == pytest.approx(90)
    assert Fees().calculate(100) == pytest.approx(105)
    assert Shipping().calculate(100) == pytest.approx(10)


def test_facade_applies_discount_fees_then_shipping():
    total = ShopFacade().calculate(150000)

    assert total == pytest.approx(155925)


def test_buy_prints_each_step_and_total(capsys):
    total = buy(150000)

    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == ["Discount", "Fees", "Shipping", "Total"]
    assert float(lines[0].split(": ")[1]) == pytest.approx(135000)
    assert float(lines[1].split(": ")[1]) == pytest.approx(141750)
    assert float(lines[3].split(": ")[1]) == pytest.approx(total)


@pytest.mark.parametrize("price", [0, 1, 99.99, 150000])
def test_facade_matches_manual_calculation(price, capsys):
    manual = calculate_price(price)
    manual_output = capsys.readouterr().out

    through_facade = buy(price)
    facade_output = capsys.readouterr().out

    assert through_facade == pytest.approx(manual)
    assert facade_output == manual_output


def test_run_contrasts_both_versions(app_config, capsys):
    run(app_config)

    out = capsys.readouterr().out
    assert "Example 1: Without Facade Pattern" in out
    assert "Example 2: With Facade Pattern" in out
    assert out.count("Total:") == 2
