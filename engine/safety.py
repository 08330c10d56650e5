from __future__ import annotations

from typing import Optional

from core.schema import FinancialModel, SafetySavingsRule

from .recurrence import sum_active

DEFAULT_RULE_END_MONTH = 1200


def rule_active_at(
    rule: SafetySavingsRule, month: int, default_end: int = DEFAULT_RULE_END_MONTH
) -> bool:
    end = rule.end.month_index if rule.end is not None else default_end
    return rule.start.month_index <= month <= end


def safety_target_at(
    model: FinancialModel,
    month: int,
    *,
    expense_base: Optional[float] = None,
    default_end: int = DEFAULT_RULE_END_MONTH,
) -> float:
    """
    Base-year safety-savings target for ``month``.

    Each active rule asks for ``months_coverage`` months of the larger of its
    own monthly-expense figure and the month's actual expenses. Overlapping
    rules are alternatives, so the strictest one governs (max, not sum).
    """
    if expense_base is None:
        expense_base = sum_active(model.expenses, month)

    target = 0.0
    for rule in model.safety_savings:
        if not rule_active_at(rule, month, default_end):
            continue
        monthly = max(float(rule.monthly_expenses), expense_base)
        target = max(target, rule.months_coverage * monthly)
    return target
