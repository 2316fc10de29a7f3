from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import FeeCalculationMethod
from .base import FeeCalculator
from .per_cycle_calculator import PerCycleFeeCalculator
from .per_session_calculator import PerSessionFeeCalculator


@dataclass
class FeeCalculatorFactory:
    """Factory Pattern: choose the fee calculator for the active policy."""

    def for_method(self, method: FeeCalculationMethod) -> FeeCalculator:
        if FeeCalculationMethod.parse(method) == FeeCalculationMethod.PER_CYCLE:
            return PerCycleFeeCalculator()
        return PerSessionFeeCalculator()
