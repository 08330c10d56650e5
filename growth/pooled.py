"""
PooledFirstMatchPolicy — the default single shared rate for the investment pool.

All investments are pooled into one running balance, and the pool grows at
ONE rate per simulated year chosen by first match:
  1. the first investment whose yearly-table growth model has an entry for
     the age
  2. otherwise the first investment with a fixed growth model
  3. otherwise 0

This is not per-investment compounding. Swapping in a different policy
changes projected balances, so existing scenarios only reproduce with this one.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.schema import FinancialModel, FixedGrowth, YearlyTableGrowth

from .base import GrowthRatePolicy


@dataclass(frozen=True)
class PooledFirstMatchPolicy(GrowthRatePolicy):

    def rate_for_age(self, model: FinancialModel, age_years: int) -> float:
        for inv in model.investments:
            growth = inv.growth
            if isinstance(growth, YearlyTableGrowth) and age_years in growth.rate_per_age_year:
                return float(growth.rate_per_age_year[age_years])

        fixed = next(
            (inv.growth for inv in model.investments if isinstance(inv.growth, FixedGrowth)),
            None,
        )
        return float(fixed.annual_rate) if fixed is not None else 0.0
