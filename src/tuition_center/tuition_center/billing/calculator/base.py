from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...core.enums import FeeCalculationMethod
from ..cycle import CycleType


class FeeCalculator(ABC):
    """Calculator interface (Strategy Pattern for tuition fees)."""

    method: FeeCalculationMethod

    @abstractmethod
    def total(self, base_fee: int, cycle_type: Optional[CycleType]) -> int:
        raise NotImplementedError

    @abstractmethod
    def display(self, base_fee: int, cycle_type: Optional[CycleType]) -> str:
        raise NotImplementedError
