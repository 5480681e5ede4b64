from __future__ import annotations

from dataclasses import dataclass

from .calculator.base import PayCalculator
from .calculator.half_pay_calculator import HalfPayCalculator
from .calculator.standard_calculator import StandardPayCalculator


@dataclass
class PayCalculatorFactory:
    """Factory Pattern: the approval flag is checked before the daily minimum."""

    def for_flag(self, approved_late_checkout: bool) -> PayCalculator:
        if approved_late_checkout:
            return HalfPayCalculator()
        return StandardPayCalculator()
