"""
Loan amortization — outstanding balance at an arbitrary month.

The balance assumes the loan fully amortizes from ``principal`` over its term
at ``interest_rate``. ``monthly_payment`` only drives the zero-rate branch;
for interest-bearing loans it is informational.
"""

from __future__ import annotations

from typing import Iterable

from core.schema import Loan, OneTime

from .recurrence import start_month

DEFAULT_TERM_MONTHS = 360


def level_payment(balance: float, monthly_rate: float, n_months: int) -> float:
    """Standard fully-amortizing level payment (PMT) with near-zero rate guard."""
    if n_months <= 0:
        return float(balance)
    if abs(monthly_rate) < 1e-12:
        return float(balance) / n_months
    return float(balance) * (monthly_rate * (1 + monthly_rate) ** n_months) / (
        (1 + monthly_rate) ** n_months - 1
    )


def term_months(loan: Loan, default_term: int = DEFAULT_TERM_MONTHS) -> int:
    # a one-time recurrence has no window of its own
    if isinstance(loan.recurrence, OneTime) or loan.recurrence.end is None:
        return default_term
    return loan.recurrence.end.month_index - loan.recurrence.start.month_index


def balance_at(loan: Loan, month: int, *, default_term: int = DEFAULT_TERM_MONTHS) -> float:
    start = start_month(loan.recurrence)
    term = term_months(loan, default_term)
    elapsed = month - start
    if elapsed < 0 or elapsed >= term:
        return 0.0

    principal = float(loan.principal)
    monthly_rate = float(loan.interest_rate) / 12.0

    if monthly_rate == 0:
        return max(0.0, principal - float(loan.monthly_payment) * elapsed)

    growth_term = (1 + monthly_rate) ** term
    growth_elapsed = (1 + monthly_rate) ** elapsed
    balance = principal * (growth_term - growth_elapsed) / (growth_term - 1)
    return max(0.0, balance)


def total_loan_balance(
    loans: Iterable[Loan], month: int, *, default_term: int = DEFAULT_TERM_MONTHS
) -> float:
    return sum((balance_at(loan, month, default_term=default_term) for loan in loans), 0.0)
