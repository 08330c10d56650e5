from __future__ import annotations

import pytest

from core.schema import (
    Expense,
    FinancialModel,
    FixedGrowth,
    Income,
    InflationConfig,
    Investment,
    Loan,
    Milestone,
    Recurring,
    Retirement,
    SafetySavingsRule,
)
from core.utils import age_month


@pytest.fixture
def flat_inflation() -> InflationConfig:
    return InflationConfig(base_year=2024, mode="single", single_rate=0.0)


@pytest.fixture
def salary_model(flat_inflation) -> FinancialModel:
    """5000/month from age 25 through age 35 inclusive, nothing else."""
    return FinancialModel(
        dob="1990-01-01",
        inflation=flat_inflation,
        incomes=(
            Income(
                "inc-1",
                "Salary",
                5000.0,
                Recurring(start=age_month(25), end=age_month(35), every_months=1),
            ),
        ),
    )


@pytest.fixture
def worker_model() -> FinancialModel:
    start = age_month(22)
    return FinancialModel(
        dob="1990-01-01",
        inflation=InflationConfig(base_year=2024, mode="single", single_rate=0.025),
        incomes=(
            Income("inc-job", "Salary", 3500.0,
                   Recurring(start=start, end=age_month(65)), category="employment"),
        ),
        expenses=(
            Expense("exp-rent", "Rent", 1200.0, Recurring(start=start)),
            Expense("exp-food", "Food & Bills", 800.0, Recurring(start=start)),
            Expense("exp-transport", "Transport", 300.0, Recurring(start=start)),
        ),
        investments=(
            Investment(
                "inv-401k", "401k", 0.0,
                Recurring(start=age_month(25), end=age_month(65)),
                FixedGrowth(0.06),
                recurring_amount=300.0,
            ),
        ),
        loans=(
            Loan("loan-student", "Student Loan", 25000.0, 200.0,
                 Recurring(start=start, end=age_month(35)), 0.045, category="education"),
        ),
        safety_savings=(
            SafetySavingsRule("ss-1", "Emergency Fund", age_month(25), 6, 2300.0),
        ),
        retirement=Retirement(age=65, withdrawal_rate=0.04),
        milestones=(
            Milestone("ms-grad", age_month(22), "First Job"),
            Milestone("ms-retire", age_month(65), "Retirement"),
        ),
    )
