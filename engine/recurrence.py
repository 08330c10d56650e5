"""
Recurrence evaluation — is a cash-flow item active in a given month?

Pure functions of (recurrence, month): callable for any month in any order,
so they serve both the sequential simulation and ad hoc queries.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from core.schema import CashFlowItem, Investment, OneTime, Recurrence, Recurring


def is_active_at(recurrence: Recurrence, month: int) -> bool:
    if isinstance(recurrence, OneTime):
        return month == recurrence.at.month_index
    if isinstance(recurrence, Recurring):
        start = recurrence.start.month_index
        if month < start:
            return False
        if recurrence.end is not None and month > recurrence.end.month_index:
            return False
        return (month - start) % recurrence.every_months == 0
    raise TypeError(f"Unsupported recurrence: {type(recurrence).__name__}")


def start_month(recurrence: Recurrence) -> int:
    if isinstance(recurrence, OneTime):
        return recurrence.at.month_index
    if isinstance(recurrence, Recurring):
        return recurrence.start.month_index
    raise TypeError(f"Unsupported recurrence: {type(recurrence).__name__}")


def amount_at(item: CashFlowItem, month: int) -> float:
    return float(item.amount) if is_active_at(item.recurrence, month) else 0.0


def sum_active(
    items: Iterable[CashFlowItem],
    month: int,
    where: Optional[Callable[[CashFlowItem], bool]] = None,
) -> float:
    total = 0.0
    for item in items:
        if where is not None and not where(item):
            continue
        total += amount_at(item, month)
    return total


def contribution_at(investment: Investment, month: int) -> float:
    """Recurring contribution for the month; one-time investments contribute only principal."""
    if not isinstance(investment.recurrence, Recurring):
        return 0.0
    if not is_active_at(investment.recurrence, month):
        return 0.0
    return float(investment.recurring_amount or 0.0)


def principal_due_at(investment: Investment, month: int) -> float:
    """Lump-sum principal, paid once in the recurrence's first month."""
    return float(investment.principal) if start_month(investment.recurrence) == month else 0.0
