"""
Core package — financial model types, configuration, and shared utilities.
No business logic lives here.
"""

from .schema import (
    EMPLOYMENT,
    AgeMonth,
    OneTime,
    Recurring,
    CashFlowItem,
    Income,
    Expense,
    FixedGrowth,
    YearlyTableGrowth,
    Investment,
    Loan,
    SafetySavingsRule,
    Retirement,
    InflationConfig,
    Milestone,
    FinancialModel,
    SeriesPoint,
)
from .config import SimulationConfig
from .results import CheckResult
from .utils import age_month, birth_year, current_age, month_to_age

__all__ = [
    "EMPLOYMENT",
    "AgeMonth",
    "OneTime",
    "Recurring",
    "CashFlowItem",
    "Income",
    "Expense",
    "FixedGrowth",
    "YearlyTableGrowth",
    "Investment",
    "Loan",
    "SafetySavingsRule",
    "Retirement",
    "InflationConfig",
    "Milestone",
    "FinancialModel",
    "SeriesPoint",
    "SimulationConfig",
    "CheckResult",
    "age_month",
    "birth_year",
    "current_age",
    "month_to_age",
]
