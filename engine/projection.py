"""
Projection engine — month-by-month net worth from birth to age 100.

One strictly sequential pass over months 0..horizon-1. Month m+1 depends on
the pooled investment balance, running net worth and depletion state carried
out of month m, so a run cannot be split across months. Runs share no state:
each call to simulate() takes a full model snapshot and returns a fresh series.

Per month:
  1. inflation factor for the calendar year of the month
  2. base-year aggregates of active incomes / expenses / contributions
  3. index them to nominal money
  4. outstanding loan balances
  5. grow the investment pool, add contributions and lump-sum principals
  6. retirement drawdown or pre-retirement shortfall withdrawal
  7-9. cash flow, net worth, warning / depletion flags
  10. safety-savings target
  11. optional deflation to base-year money for display
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import List, Optional, Sequence

import pandas as pd

from core.config import SimulationConfig
from core.schema import EMPLOYMENT, MONTHS_PER_YEAR, FinancialModel, SeriesPoint
from core.utils import birth_year
from growth.base import GrowthRatePolicy
from growth.pooled import PooledFirstMatchPolicy

from .inflation import deflate_to_real, factor_for_year, index_nominal
from .loans import total_loan_balance
from .recurrence import contribution_at, principal_due_at, sum_active
from .safety import safety_target_at

logger = logging.getLogger(__name__)


def _is_employment(item) -> bool:
    return item.category == EMPLOYMENT


def _is_other_income(item) -> bool:
    return item.category != EMPLOYMENT


def simulate(
    model: FinancialModel,
    *,
    config: Optional[SimulationConfig] = None,
    policy: Optional[GrowthRatePolicy] = None,
) -> List[SeriesPoint]:
    """
    Run the full projection for one financial model.

    Parameters
    ----------
    model : FinancialModel
        Immutable input snapshot; never modified.
    config : SimulationConfig, optional
        Horizon and engine defaults. Defaults to SimulationConfig().
    policy : GrowthRatePolicy, optional
        Chooses the pool's annual growth rate per simulated year.
        Defaults to PooledFirstMatchPolicy.

    Returns
    -------
    List of SeriesPoint, one per month (1200 by default).
    """
    cfg = config or SimulationConfig()
    policy = policy or PooledFirstMatchPolicy()
    infl = model.inflation
    first_year = birth_year(model.dob)

    if model.retirement is not None:
        retire_age = model.retirement.age
        withdrawal_rate = float(model.retirement.withdrawal_rate)
    else:
        retire_age = cfg.never_retire_age
        withdrawal_rate = 0.0

    logger.debug(
        "Simulating %d months: %d incomes, %d expenses, %d investments, %d loans, %d safety rules",
        cfg.horizon_months,
        len(model.incomes),
        len(model.expenses),
        len(model.investments),
        len(model.loans),
        len(model.safety_savings),
    )

    investments_total = 0.0
    net_worth = 0.0
    previous_depleted = False
    points: List[SeriesPoint] = []

    for m in range(cfg.horizon_months):
        age = m // MONTHS_PER_YEAR
        factor = factor_for_year(infl, first_year + age)

        # --- base-year aggregates ---
        employment_base = sum_active(model.incomes, m, _is_employment)
        other_income_base = sum_active(model.incomes, m, _is_other_income)
        expense_base = sum_active(model.expenses, m)
        contrib_base = sum((contribution_at(inv, m) for inv in model.investments), 0.0)
        principal_due = sum((principal_due_at(inv, m) for inv in model.investments), 0.0)

        # --- nominal money ---
        employment = index_nominal(employment_base, factor)
        income = index_nominal(employment_base + other_income_base, factor)
        expense = index_nominal(expense_base, factor)
        contrib = index_nominal(contrib_base, factor)

        loans_total = total_loan_balance(
            model.loans, m, default_term=cfg.default_loan_term_months
        )

        # --- pooled investment growth ---
        monthly_rate = policy.rate_for_age(model, age) / 12.0
        investments_total = investments_total * (1.0 + monthly_rate) + contrib + principal_due

        # --- withdrawals ---
        withdrawal = 0.0
        if age >= retire_age:
            if m == retire_age * MONTHS_PER_YEAR:
                logger.info("Retirement drawdown starts at month %d (age %d)", m, age)
            # employment income stops
            income -= employment
            available = income
            uncovered = max(0.0, expense - available)
            withdrawal = min(uncovered, investments_total)
            discretionary = min(
                investments_total * withdrawal_rate / 12.0,
                investments_total - withdrawal,
            )
            withdrawal += max(0.0, discretionary)
            available += withdrawal
            shortfall = max(0.0, expense - available)
        else:
            shortfall = max(0.0, expense - income)
            if shortfall > 0 and investments_total > 0:
                withdrawal = min(shortfall, investments_total)
                shortfall -= withdrawal

        investments_total = max(0.0, investments_total - withdrawal)

        # --- accounting ---
        cash_flow = income - expense - contrib
        net_worth += cash_flow - withdrawal

        wealth_warning = net_worth < 0 and investments_total > 0
        depleted_now = net_worth < 0 and investments_total <= 0
        savings_depleted = depleted_now and not previous_depleted
        previous_depleted = depleted_now
        if savings_depleted:
            logger.info("Savings depleted at month %d (age %d), net worth %.2f", m, age, net_worth)

        safety = index_nominal(
            safety_target_at(
                model,
                m,
                expense_base=expense_base,
                default_end=cfg.safety_rule_default_end_month,
            ),
            factor,
        )

        values = {
            "income": income,
            "expense": expense,
            "loans": loans_total,
            "invest": investments_total,
            "net_worth": net_worth,
            "safety": safety,
            "cash_flow": cash_flow,
            "investment_withdrawal": withdrawal,
            "contrib": contrib,
            "shortfall": shortfall,
        }
        if infl.display_mode == "real":
            values = {k: deflate_to_real(v, factor) for k, v in values.items()}

        points.append(
            SeriesPoint(
                m=m,
                savings_depleted=savings_depleted,
                wealth_warning=wealth_warning,
                **values,
            )
        )

    return points


def series_to_frame(series: Sequence[SeriesPoint]) -> pd.DataFrame:
    """One row per month with an ``age`` column for plotting."""
    df = pd.DataFrame([asdict(p) for p in series])
    if df.empty:
        return df
    df.insert(1, "age", df["m"] // MONTHS_PER_YEAR)
    return df
