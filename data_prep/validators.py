"""
Structural validation for financial models before they enter the engine.

The engine assumes well-formed input and will produce nonsense, not errors,
for things like a zero recurrence step. Catch those here:
- recurrence steps below one month
- windows that end before they start
- AgeMonth values whose age and month disagree
- negative amounts
- rates that look like percentages instead of decimals
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from core.schema import MONTHS_PER_YEAR, AgeMonth, FinancialModel, OneTime, Recurrence, Recurring
from core.results import CheckResult
from core.utils import parse_dob
from engine.loans import level_payment, term_months


@dataclass
class ModelCheckResult(CheckResult):
    """Collects all validation warnings/errors for a financial model."""


def _check_age_month(at: AgeMonth, where: str, result: ModelCheckResult) -> None:
    if at.month_index < 0:
        result.errors.append(f"{where}: negative month index {at.month_index}.")
    if at.age_years != at.month_index // MONTHS_PER_YEAR:
        result.warnings.append(
            f"{where}: age {at.age_years} does not match month {at.month_index}; "
            f"month index is used."
        )


def _check_recurrence(rec: Recurrence, where: str, result: ModelCheckResult) -> None:
    if isinstance(rec, OneTime):
        _check_age_month(rec.at, f"{where} at", result)
        return
    _check_age_month(rec.start, f"{where} start", result)
    if rec.end is not None:
        _check_age_month(rec.end, f"{where} end", result)
        if rec.end.month_index < rec.start.month_index:
            result.errors.append(
                f"{where}: ends (month {rec.end.month_index}) before it starts "
                f"(month {rec.start.month_index})."
            )
    if rec.every_months < 1:
        result.errors.append(f"{where}: every_months must be >= 1, got {rec.every_months}.")


def _check_rate(rate: float, where: str, result: ModelCheckResult) -> None:
    if rate > 1.0:
        result.warnings.append(
            f"{where}: rate {rate} > 1.0 — check if rates are in percent vs decimal form."
        )


def _check_non_negative(value: float, where: str, result: ModelCheckResult) -> None:
    if value < 0:
        result.errors.append(f"{where}: negative amount {value}.")


def _check_cash_flows(items: Iterable, kind: str, result: ModelCheckResult) -> None:
    for item in items:
        where = f"{kind} '{item.label}'"
        _check_non_negative(item.amount, where, result)
        _check_recurrence(item.recurrence, where, result)


def validate_model(model: FinancialModel) -> ModelCheckResult:
    """
    Run all structural checks on a financial model.
    Returns a ModelCheckResult with errors (blocking) and warnings (informational).
    """
    result = ModelCheckResult()

    try:
        parse_dob(model.dob)
    except ValueError as exc:
        result.errors.append(str(exc))

    _check_cash_flows(model.incomes, "Income", result)
    _check_cash_flows(model.expenses, "Expense", result)

    for inv in model.investments:
        where = f"Investment '{inv.label}'"
        _check_non_negative(inv.principal, f"{where} principal", result)
        _check_non_negative(inv.recurring_amount or 0.0, f"{where} recurring amount", result)
        _check_recurrence(inv.recurrence, where, result)
        if inv.growth.kind == "fixed":
            _check_rate(inv.growth.annual_rate, where, result)
        else:
            for age, rate in inv.growth.rate_per_age_year.items():
                _check_rate(rate, f"{where} age {age}", result)

    for loan in model.loans:
        where = f"Loan '{loan.label}'"
        _check_non_negative(loan.principal, f"{where} principal", result)
        _check_non_negative(loan.monthly_payment, f"{where} monthly payment", result)
        _check_recurrence(loan.recurrence, where, result)
        if loan.interest_rate < 0:
            result.errors.append(f"{where}: negative interest rate {loan.interest_rate}.")
        _check_rate(loan.interest_rate, where, result)
        if not isinstance(loan.recurrence, Recurring):
            result.warnings.append(
                f"{where}: one-time recurrence; the default term is used for amortization."
            )
        elif loan.interest_rate > 0 and loan.principal > 0:
            term = term_months(loan)
            required = level_payment(loan.principal, loan.interest_rate / 12.0, term)
            if loan.monthly_payment < required * 0.99:
                result.warnings.append(
                    f"{where}: monthly payment {loan.monthly_payment:,.2f} is below the "
                    f"{required:,.2f} needed to amortize over {term} months."
                )

    for rule in model.safety_savings:
        where = f"Safety rule '{rule.label}'"
        _check_age_month(rule.start, f"{where} start", result)
        if rule.end is not None:
            _check_age_month(rule.end, f"{where} end", result)
            if rule.end.month_index < rule.start.month_index:
                result.errors.append(f"{where}: ends before it starts.")
        if rule.months_coverage < 0:
            result.errors.append(f"{where}: negative months coverage {rule.months_coverage}.")
        _check_non_negative(rule.monthly_expenses, f"{where} monthly expenses", result)

    if model.retirement is not None:
        if model.retirement.age < 0:
            result.errors.append(f"Retirement age {model.retirement.age} is negative.")
        _check_rate(model.retirement.withdrawal_rate, "Retirement withdrawal", result)

    infl = model.inflation
    if infl.mode == "single" and infl.single_rate is not None:
        _check_rate(infl.single_rate, "Inflation", result)
    elif infl.mode in ("yearly_table", "imported"):
        if not infl.yearly_rates:
            result.warnings.append(
                f"Inflation mode '{infl.mode}' has no yearly rates; every year is 0%."
            )
        for year, rate in (infl.yearly_rates or {}).items():
            _check_rate(rate, f"Inflation {year}", result)

    return result
