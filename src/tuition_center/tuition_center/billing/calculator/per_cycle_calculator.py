from __future__ import annotations

from typing import Optional

from ...core.enums import FeeCalculationMethod
from ..cycle import CycleKind, CycleType
from ..formatting import format_currency
from .base import FeeCalculator


class PerCycleFeeCalculator(FeeCalculator):
    """Stored fee already covers the whole cycle."""

    method = FeeCalculationMethod.PER_CYCLE

    def total(self, base_fee: int, cycle_type: Optional[CycleType]) -> int:
        return base_fee

    def display(self, base_fee: int, cycle_type: Optional[CycleType]) -> str:
        amount = format_currency(base_fee)
        if cycle_type is None:
            return amount
        if cycle_type.kind == CycleKind.SESSIONS:
            return f"{amount} / {cycle_type.sessions} buổi"
        if cycle_type.kind == CycleKind.TIME:
            return f"{amount} / tháng"
        return f"{amount} / ngày"
