"""
Projection engine — inflation indexing, recurrence evaluation, loan amortization,
safety targets and the month-by-month simulation that ties them together.
"""

from .inflation import deflate_to_real, index_nominal, inflation_factor
from .loans import balance_at, total_loan_balance
from .projection import series_to_frame, simulate
from .recurrence import amount_at, is_active_at
from .safety import safety_target_at

__all__ = [
    "inflation_factor",
    "index_nominal",
    "deflate_to_real",
    "is_active_at",
    "amount_at",
    "balance_at",
    "total_loan_balance",
    "safety_target_at",
    "simulate",
    "series_to_frame",
]
