from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING, Optional, Union

from ..common.datetime_utils import to_day
from ..common.validators import require_non_negative_int
from ..core.enums import FeeCalculationMethod
from .calculator.factory import FeeCalculatorFactory
from .cycle import BillingCycle, CycleType, get_cycle_type
from .formatting import to_amount

if TYPE_CHECKING:
    from ..settings.store import FeePolicyStore


@dataclass(frozen=True)
class FeeQuote:
    method: FeeCalculationMethod
    base_fee: int
    total: int
    display: str


class BillingService:
    """Use cases: quote a class fee under the active policy and compute billing windows."""

    def __init__(self, fee_policy: "FeePolicyStore", *, factory: Optional[FeeCalculatorFactory] = None):
        self._fee_policy = fee_policy
        self._factory = factory or FeeCalculatorFactory()

    def quote(
        self,
        base_fee: Union[int, float, str, None],
        cycle: Union[CycleType, str, None],
        *,
        method: Optional[FeeCalculationMethod] = None,
    ) -> FeeQuote:
        method = method or self._fee_policy.get_fee_calculation_method()
        cycle_type = cycle if isinstance(cycle, CycleType) else get_cycle_type(cycle)
        fee = to_amount(base_fee)

        calculator = self._factory.for_method(method)
        return FeeQuote(
            method=calculator.method,
            base_fee=fee,
            total=calculator.total(fee, cycle_type),
            display=calculator.display(fee, cycle_type),
        )

    def billing_window(
        self,
        start: date | datetime | str,
        cycle: Union[CycleType, str],
        completed_sessions: int = 0,
    ) -> BillingCycle:
        require_non_negative_int(completed_sessions, "Số buổi đã học")
        return BillingCycle(start_date=to_day(start), cycle_type=cycle, completed_sessions=completed_sessions)
