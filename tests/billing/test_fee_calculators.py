from src.tuition_center.tuition_center.billing.calculator.factory import FeeCalculatorFactory
from src.tuition_center.tuition_center.billing.calculator.per_cycle_calculator import PerCycleFeeCalculator
from src.tuition_center.tuition_center.billing.calculator.per_session_calculator import PerSessionFeeCalculator
from src.tuition_center.tuition_center.billing.cycle import DAILY, MONTHLY, SESSION_8, SESSION_10
from src.tuition_center.tuition_center.billing.formatting import format_currency, format_payment_cycle
from src.tuition_center.tuition_center.core.enums import FeeCalculationMethod


def test_format_currency_groups_thousands():
    assert format_currency(1500000) == "1.500.000 VND"
    assert format_currency(0) == "0 VND"
    assert format_currency("abc") == "0 VND"
    assert format_currency("250000") == "250.000 VND"


def test_format_payment_cycle_passes_unknown_through():
    assert format_payment_cycle("8-buoi") == "8 buổi"
    assert format_payment_cycle("monthly") == "1 tháng"
    assert format_payment_cycle("weird") == "weird"


def test_per_session_totals():
    calc = PerSessionFeeCalculator()

    assert calc.total(200000, SESSION_8) == 1600000
    assert calc.total(200000, SESSION_10) == 2000000
    assert calc.total(200000, MONTHLY) == 800000
    assert calc.total(200000, DAILY) == 200000
    assert calc.total(200000, None) == 800000


def test_per_session_display():
    calc = PerSessionFeeCalculator()

    assert calc.display(200000, SESSION_8) == "200.000 VND / buổi (Tổng: 1.600.000 VND)"
    assert calc.display(100000, DAILY) == "100.000 VND / ngày"
    assert calc.display(200000, None) == "200.000 VND / buổi"


def test_per_cycle_total_is_base_fee():
    calc = PerCycleFeeCalculator()

    assert calc.total(1500000, SESSION_10) == 1500000
    assert calc.total(1500000, None) == 1500000


def test_per_cycle_display():
    calc = PerCycleFeeCalculator()

    assert calc.display(1500000, SESSION_10) == "1.500.000 VND / 10 buổi"
    assert calc.display(1500000, MONTHLY) == "1.500.000 VND / tháng"
    assert calc.display(100000, DAILY) == "100.000 VND / ngày"
    assert calc.display(1500000, None) == "1.500.000 VND"


def test_factory_picks_calculator_for_method():
    factory = FeeCalculatorFactory()

    assert isinstance(factory.for_method(FeeCalculationMethod.PER_CYCLE), PerCycleFeeCalculator)
    assert isinstance(factory.for_method(FeeCalculationMethod.PER_SESSION), PerSessionFeeCalculator)
    assert isinstance(factory.for_method("PER_CYCLE"), PerCycleFeeCalculator)
