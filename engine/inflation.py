"""
Inflation indexing — base-year (real) amounts to calendar-year (nominal) amounts.

The simulation's base year is "now" while the timeline starts at birth, so
calendar years before the base year are routine and yield a factor below 1.
"""

from __future__ import annotations

from typing import Mapping, Optional

import numpy as np

from core.schema import InflationConfig


def _table_product(rates: Mapping[int, float], first_year: int, stop_year: int) -> float:
    """Product of (1 + rate) for years in [first_year, stop_year); missing years are 0%."""
    growth = [1.0 + float(rates.get(y, 0.0)) for y in range(first_year, stop_year)]
    return float(np.prod(growth)) if growth else 1.0


def inflation_factor(
    mode: str,
    base_year: int,
    calendar_year: int,
    single_rate: Optional[float] = None,
    yearly_rates: Optional[Mapping[int, float]] = None,
) -> float:
    """
    Multiplier taking a base-year amount to ``calendar_year`` money.

    single                  (1 + single_rate) ** (calendar_year - base_year)
    yearly_table / imported product of the table's yearly rates between the
                            two years, reciprocal when going backwards
    """
    if calendar_year == base_year:
        return 1.0

    if mode == "single":
        r = single_rate or 0.0
        return float(np.power(1.0 + r, calendar_year - base_year))

    if mode in ("yearly_table", "imported"):
        table = yearly_rates or {}
        if calendar_year > base_year:
            return _table_product(table, base_year, calendar_year)
        return 1.0 / _table_product(table, calendar_year, base_year)

    raise ValueError(f"Unknown inflation mode: {mode!r}")


def factor_for_year(config: InflationConfig, calendar_year: int) -> float:
    return inflation_factor(
        config.mode,
        config.base_year,
        calendar_year,
        single_rate=config.single_rate,
        yearly_rates=config.yearly_rates,
    )


def index_nominal(base_amount: float, factor: float) -> float:
    return base_amount * factor


def deflate_to_real(nominal_amount: float, factor: float) -> float:
    if factor == 0:
        return nominal_amount
    return nominal_amount / factor
