from __future__ import annotations

from typing import Optional

from ...core.constants import NOMINAL_SESSIONS_PER_MONTH
from ...core.enums import FeeCalculationMethod
from ..cycle import CycleKind, CycleType
from ..formatting import format_currency
from .base import FeeCalculator


class PerSessionFeeCalculator(FeeCalculator):
    """Stored fee is the price of one session: total = fee * sessions in the cycle.

    A month is billed as 4 sessions; unknown cycles are totalled by the monthly
    rule but displayed as a single session.
    """

    method = FeeCalculationMethod.PER_SESSION

    def _sessions(self, cycle_type: Optional[CycleType]) -> int:
        if cycle_type is None:
            return NOMINAL_SESSIONS_PER_MONTH
        return cycle_type.billable_sessions

    def total(self, base_fee: int, cycle_type: Optional[CycleType]) -> int:
        return base_fee * self._sessions(cycle_type)

    def display(self, base_fee: int, cycle_type: Optional[CycleType]) -> str:
        if cycle_type is None:
            return f"{format_currency(base_fee)} / buổi"
        if cycle_type.kind == CycleKind.DAILY:
            return f"{format_currency(base_fee)} / ngày"

        text = f"{format_currency(base_fee)} / buổi"
        if self._sessions(cycle_type) > 1:
            text += f" (Tổng: {format_currency(self.total(base_fee, cycle_type))})"
        return text
