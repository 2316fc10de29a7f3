from datetime import date

import pytest

from src.tuition_center.tuition_center.billing.service import BillingService
from src.tuition_center.tuition_center.core.enums import FeeCalculationMethod
from src.tuition_center.tuition_center.core.exceptions import ValidationError
from src.tuition_center.tuition_center.settings.store import FeePolicyStore


def test_quote_follows_active_policy(settings_repo):
    store = FeePolicyStore(settings_repo)
    svc = BillingService(store)

    per_session = svc.quote(200000, "8-buoi")
    assert per_session.method == FeeCalculationMethod.PER_SESSION
    assert per_session.total == 1600000

    store.set_fee_calculation_method(FeeCalculationMethod.PER_CYCLE)
    per_cycle = svc.quote(200000, "8-buoi")
    assert per_cycle.method == FeeCalculationMethod.PER_CYCLE
    assert per_cycle.total == 200000
    assert per_cycle.display == "200.000 VND / 8 buổi"


def test_quote_with_explicit_method_and_bad_fee(settings_repo):
    svc = BillingService(FeePolicyStore(settings_repo))

    quote = svc.quote("not-a-number", "session-10", method=FeeCalculationMethod.PER_SESSION)

    assert quote.base_fee == 0
    assert quote.total == 0


def test_billing_window(settings_repo):
    svc = BillingService(FeePolicyStore(settings_repo))

    window = svc.billing_window("2024-01-20", "monthly")

    assert window.start_date == date(2024, 1, 20)
    assert window.end_date == date(2024, 2, 19)

    with pytest.raises(ValidationError):
        svc.billing_window(date(2024, 1, 20), "session-8", -2)
