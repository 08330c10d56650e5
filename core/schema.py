"""
Financial model and series types.

Every type here is a frozen dataclass: a FinancialModel is an input snapshot
that no engine component mutates, and a SeriesPoint is immutable once emitted.
Tagged unions (recurrence kind, growth model) carry a ``kind`` literal so
persisted payloads stay unambiguous.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Tuple, Union

MONTHS_PER_YEAR = 12

# Income category suppressed once the retirement age is reached.
EMPLOYMENT = "employment"

InflationMode = Literal["single", "yearly_table", "imported"]
DisplayMode = Literal["nominal", "real"]


@dataclass(frozen=True)
class AgeMonth:
    """
    A point on the life timeline.

    ``month_index`` is canonical for simulation; ``age_years`` is the derived
    display value and must equal ``month_index // 12`` for whole-year points.
    """

    age_years: int
    month_index: int


@dataclass(frozen=True)
class OneTime:
    at: AgeMonth
    kind: Literal["one_time"] = "one_time"


@dataclass(frozen=True)
class Recurring:
    start: AgeMonth
    end: Optional[AgeMonth] = None
    every_months: int = 1
    kind: Literal["recurring"] = "recurring"


Recurrence = Union[OneTime, Recurring]


@dataclass(frozen=True)
class CashFlowItem:
    id: str
    label: str
    amount: float
    recurrence: Recurrence
    category: Optional[str] = None


@dataclass(frozen=True)
class Income(CashFlowItem):
    pass


@dataclass(frozen=True)
class Expense(CashFlowItem):
    pass


@dataclass(frozen=True)
class FixedGrowth:
    annual_rate: float
    kind: Literal["fixed"] = "fixed"


@dataclass(frozen=True)
class YearlyTableGrowth:
    # age in years -> annual rate
    rate_per_age_year: Dict[int, float] = field(default_factory=dict)
    kind: Literal["yearly_table"] = "yearly_table"


GrowthModel = Union[FixedGrowth, YearlyTableGrowth]


@dataclass(frozen=True)
class Investment:
    """
    An investment feeding the pooled balance.

    ``principal`` is a lump sum added once, in the month the recurrence starts;
    ``recurring_amount`` is contributed every month the recurrence is active.
    """

    id: str
    label: str
    principal: float
    recurrence: Recurrence
    growth: GrowthModel
    recurring_amount: float = 0.0


@dataclass(frozen=True)
class Loan:
    id: str
    label: str
    principal: float
    monthly_payment: float
    recurrence: Recurrence
    interest_rate: float
    category: Optional[str] = None


@dataclass(frozen=True)
class SafetySavingsRule:
    id: str
    label: str
    start: AgeMonth
    months_coverage: int
    monthly_expenses: float
    end: Optional[AgeMonth] = None


@dataclass(frozen=True)
class Retirement:
    age: int
    withdrawal_rate: float


@dataclass(frozen=True)
class InflationConfig:
    """
    Inflation settings.

    ``imported`` is table-driven exactly like ``yearly_table``; it only records
    that the table came from an upload.
    """

    base_year: int
    mode: InflationMode = "single"
    single_rate: Optional[float] = None
    yearly_rates: Optional[Dict[int, float]] = None
    display_mode: DisplayMode = "nominal"


@dataclass(frozen=True)
class Milestone:
    id: str
    at: AgeMonth
    label: str


@dataclass(frozen=True)
class FinancialModel:
    """Aggregate root handed to the projection engine, one snapshot per run."""

    dob: str  # ISO date, e.g. "1990-01-01"
    inflation: InflationConfig
    incomes: Tuple[Income, ...] = ()
    expenses: Tuple[Expense, ...] = ()
    investments: Tuple[Investment, ...] = ()
    loans: Tuple[Loan, ...] = ()
    safety_savings: Tuple[SafetySavingsRule, ...] = ()
    retirement: Optional[Retirement] = None
    milestones: Tuple[Milestone, ...] = ()


@dataclass(frozen=True)
class SeriesPoint:
    """One simulated month. Money fields are nominal or real per display mode."""

    m: int
    income: float
    expense: float
    loans: float
    invest: float
    net_worth: float
    safety: float
    cash_flow: float
    investment_withdrawal: float
    contrib: float
    shortfall: float
    savings_depleted: bool
    wealth_warning: bool

    @property
    def age_years(self) -> int:
        return self.m // MONTHS_PER_YEAR
