"""
Simulation configuration.
Engine constants and analyzer thresholds live here so callers can override
them per run without touching the financial model.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationConfig:
    horizon_months: int = 1200  # birth to age 100

    # loans without an end month amortize over this many months
    default_loan_term_months: int = 360

    # stand-in retirement age when no retirement is configured
    never_retire_age: int = 200

    safety_rule_default_end_month: int = 1200

    # wealth-protection thresholds
    warning_run_threshold_months: int = 6
    contribution_ratio_limit: float = 0.5
    expense_ratio_limit: float = 0.9
    min_emergency_months: int = 3
    early_retirement_age: int = 55
    early_retirement_horizon_years: int = 20
    early_retirement_savings_rate: float = 0.2
