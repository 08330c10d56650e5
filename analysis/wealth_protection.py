"""
Wealth protection analysis — flag risk conditions in a projected series.

Two entry points:
  validate_wealth_protection()  dynamic checks over the simulated months
  validate_preset()             static checks over the model alone, no simulation

Findings are data, never exceptions: errors make the report invalid,
warnings and suggestions are informational.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence

from core.config import SimulationConfig
from core.results import CheckResult
from core.schema import FinancialModel, Recurring, SeriesPoint
from core.utils import current_age

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport(CheckResult):
    """Collects wealth-protection findings for one model or run."""
    suggestions: List[str] = field(default_factory=list)

    def _sections(self):
        return (*super()._sections(), ("SUGGESTIONS", "→", self.suggestions))


@dataclass(frozen=True)
class WealthScenario:
    """The slice of a SeriesPoint the analyzer looks at."""
    month_index: int
    net_worth: float
    investments_total: float
    monthly_income: float
    monthly_expenses: float
    monthly_contributions: float
    investment_withdrawal: float
    wealth_warning: bool
    savings_depleted: bool


def scenarios_from_series(series: Sequence[SeriesPoint]) -> List[WealthScenario]:
    return [
        WealthScenario(
            month_index=p.m,
            net_worth=p.net_worth,
            investments_total=p.invest,
            monthly_income=p.income,
            monthly_expenses=p.expense,
            monthly_contributions=p.contrib,
            investment_withdrawal=p.investment_withdrawal,
            wealth_warning=p.wealth_warning,
            savings_depleted=p.savings_depleted,
        )
        for p in series
    ]


def _fmt_money(val: float) -> str:
    return f"${val:,.0f}"


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def longest_consecutive_run(month_indices: Sequence[int]) -> int:
    """Longest run of consecutive month indices; a gap resets the run."""
    if not month_indices:
        return 0
    longest = current = 1
    for prev, cur in zip(month_indices, month_indices[1:]):
        if cur == prev + 1:
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def validate_wealth_protection(
    scenarios: Sequence[WealthScenario],
    model: Optional[FinancialModel] = None,
    *,
    config: Optional[SimulationConfig] = None,
) -> ValidationReport:
    """
    Dynamic checks over simulated months.

    ``model`` is accepted so callers can pass the snapshot the series came from;
    none of the current rules need it.
    """
    cfg = config or SimulationConfig()
    report = ValidationReport()

    negative_with_investments = [
        s for s in scenarios if s.wealth_warning and s.investments_total > 0
    ]
    if negative_with_investments:
        report.warnings.append(
            f"Found {len(negative_with_investments)} months with negative net worth "
            f"despite available investments"
        )
        run = longest_consecutive_run([s.month_index for s in negative_with_investments])
        if run > cfg.warning_run_threshold_months:
            report.errors.append(
                f"Extended period of negative wealth ({run} months) - consider reducing "
                f"expenses or increasing income"
            )

    depleted = [s for s in scenarios if s.savings_depleted]
    if depleted:
        report.errors.append(
            f"Savings depleted in {len(depleted)} months - critical financial risk"
        )

    avg_contribution = _mean([s.monthly_contributions for s in scenarios])
    avg_expenses = _mean([s.monthly_expenses for s in scenarios])
    avg_income = _mean([s.monthly_income for s in scenarios])

    if avg_contribution > avg_income * cfg.contribution_ratio_limit:
        report.warnings.append(
            "High investment contribution rate (>50% of income) - ensure sufficient emergency fund"
        )
    if avg_expenses > avg_income * cfg.expense_ratio_limit:
        report.warnings.append(
            "High expense ratio (>90% of income) - consider reducing expenses or increasing income"
        )

    if negative_with_investments:
        report.suggestions.extend([
            "Consider reducing monthly expenses",
            "Increase emergency fund target",
            "Review investment withdrawal strategy",
        ])
    if depleted:
        report.suggestions.extend([
            "Build larger emergency fund",
            "Reduce high-risk expenses",
            "Consider additional income sources",
        ])

    logger.debug(
        "Wealth protection: %d warnings, %d errors over %d months",
        len(report.warnings),
        len(report.errors),
        len(scenarios),
    )
    return report


def validate_preset(
    model: FinancialModel,
    *,
    today: Optional[date] = None,
    config: Optional[SimulationConfig] = None,
) -> ValidationReport:
    """
    Static consistency checks on the model alone.

    Sums are flat snapshots of monthly amounts (recurring incomes/expenses,
    every investment's recurring contribution, every loan payment); recurrence
    windows are deliberately ignored.
    """
    cfg = config or SimulationConfig()
    report = ValidationReport()

    total_income = sum(i.amount for i in model.incomes if isinstance(i.recurrence, Recurring))
    total_expenses = sum(e.amount for e in model.expenses if isinstance(e.recurrence, Recurring))
    total_contributions = sum(inv.recurring_amount or 0.0 for inv in model.investments)
    total_loan_payments = sum(loan.monthly_payment for loan in model.loans)

    if total_expenses > total_income:
        report.errors.append(
            f"Monthly expenses ({_fmt_money(total_expenses)}) exceed income "
            f"({_fmt_money(total_income)})"
        )

    available = total_income - total_expenses - total_loan_payments
    if total_contributions > available:
        report.warnings.append(
            f"Investment contributions ({_fmt_money(total_contributions)}) exceed available "
            f"income after expenses and loans ({_fmt_money(available)})"
        )

    emergency_months = max((r.months_coverage for r in model.safety_savings), default=0)
    if emergency_months < cfg.min_emergency_months:
        report.warnings.append(
            f"Emergency fund target ({emergency_months} months) may be insufficient - "
            f"consider 3-6 months minimum"
        )

    retirement = model.retirement
    if retirement is not None and retirement.age < cfg.early_retirement_age:
        years_to_retirement = retirement.age - current_age(model.dob, today)
        if (
            years_to_retirement < cfg.early_retirement_horizon_years
            and total_contributions < total_income * cfg.early_retirement_savings_rate
        ):
            report.warnings.append(
                "Early retirement target may require higher savings rate (20%+ of income)"
            )

    logger.debug(
        "Preset check: %d warnings, %d errors", len(report.warnings), len(report.errors)
    )
    return report


def generate_recommendations(scenarios: Sequence[WealthScenario]) -> List[str]:
    """Advice derived from cash-flow and withdrawal patterns across the run."""
    if not scenarios:
        return []

    recommendations = []
    total_months = len(scenarios)

    negative_cash_flow = sum(1 for s in scenarios if s.monthly_income < s.monthly_expenses)
    if negative_cash_flow / total_months > 0.1:
        recommendations.append("Consider reducing monthly expenses or increasing income")

    with_withdrawals = sum(1 for s in scenarios if s.investment_withdrawal > 0)
    if with_withdrawals > total_months * 0.2:
        recommendations.append(
            "Frequent investment withdrawals detected - review spending patterns"
        )

    lowest_net_worth = min(s.net_worth for s in scenarios)
    avg_expenses = _mean([s.monthly_expenses for s in scenarios])
    if lowest_net_worth < -avg_expenses * 6:
        recommendations.append("Consider building larger emergency fund (6+ months expenses)")

    logger.debug("%d recommendations over %d months", len(recommendations), total_months)
    return recommendations
