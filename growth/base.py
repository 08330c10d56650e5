"""
Base class for investment growth-rate policies.
The projection engine asks the policy for one annual rate per simulated year
and applies it to the pooled investment balance.
"""

from __future__ import annotations

from core.schema import FinancialModel


class GrowthRatePolicy:
    """Interface for choosing the annual growth rate of the investment pool."""

    def rate_for_age(self, model: FinancialModel, age_years: int) -> float:
        raise NotImplementedError
