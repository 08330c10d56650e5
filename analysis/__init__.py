"""
Analysis — wealth-protection checks, recommendations and period summaries
over a projected series.
"""

from .wealth_protection import (
    ValidationReport,
    WealthScenario,
    scenarios_from_series,
    validate_wealth_protection,
    validate_preset,
    generate_recommendations,
)
from .summary import PeriodSummary, summarize_period, milestone_points

__all__ = [
    "ValidationReport",
    "WealthScenario",
    "scenarios_from_series",
    "validate_wealth_protection",
    "validate_preset",
    "generate_recommendations",
    "PeriodSummary",
    "summarize_period",
    "milestone_points",
]
