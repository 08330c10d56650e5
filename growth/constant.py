"""
ConstantGrowthPolicy — same annual rate for every year, ignoring the model's
growth settings. Useful for what-if comparisons against a flat market return.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.schema import FinancialModel

from .base import GrowthRatePolicy


@dataclass(frozen=True)
class ConstantGrowthPolicy(GrowthRatePolicy):
    annual_rate: float = 0.05

    def rate_for_age(self, model: FinancialModel, age_years: int) -> float:
        return float(self.annual_rate)
