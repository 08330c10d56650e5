"""
Period summaries over a projected series.

Totals for an inclusive age range and growth versus the period just before it,
plus milestone lookup for annotating the timeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import pandas as pd

from core.schema import Milestone, SeriesPoint
from engine.projection import series_to_frame


@dataclass(frozen=True)
class PeriodSummary:
    start_age: int
    end_age: int
    total_income: float
    total_expenses: float
    total_contributions: float
    ending_investments: float
    ending_net_worth: float
    income_growth_pct: float
    expenses_growth_pct: float
    contributions_growth_pct: float
    net_worth_growth_pct: float


def _growth_pct(current: float, previous: float) -> float:
    return (current - previous) / previous * 100.0 if previous > 0 else 0.0


def _totals(df: pd.DataFrame, start_age: int, end_age: int) -> dict:
    window = df[(df["age"] >= start_age) & (df["age"] <= end_age)]
    if window.empty:
        return {"income": 0.0, "expense": 0.0, "contrib": 0.0, "invest": 0.0, "net_worth": 0.0}
    last = window.iloc[-1]
    return {
        "income": float(window["income"].sum()),
        "expense": float(window["expense"].sum()),
        "contrib": float(window["contrib"].sum()),
        "invest": float(last["invest"]),
        "net_worth": float(last["net_worth"]),
    }


def summarize_period(
    series: Sequence[SeriesPoint], start_age: int, end_age: int
) -> PeriodSummary:
    """
    Summarize ages ``start_age``..``end_age`` inclusive.

    The comparison period is the equal-length window just before it: ages
    ``start_age - (end_age - start_age + 1)``..``start_age - 1``, clipped at birth.
    """
    if end_age < start_age:
        raise ValueError(f"end_age ({end_age}) is before start_age ({start_age})")

    df = series_to_frame(series)
    cur = _totals(df, start_age, end_age)
    prev_start = max(0, start_age - (end_age - start_age + 1))
    prev = _totals(df, prev_start, start_age - 1)

    return PeriodSummary(
        start_age=start_age,
        end_age=end_age,
        total_income=cur["income"],
        total_expenses=cur["expense"],
        total_contributions=cur["contrib"],
        ending_investments=cur["invest"],
        ending_net_worth=cur["net_worth"],
        income_growth_pct=_growth_pct(cur["income"], prev["income"]),
        expenses_growth_pct=_growth_pct(cur["expense"], prev["expense"]),
        contributions_growth_pct=_growth_pct(cur["contrib"], prev["contrib"]),
        net_worth_growth_pct=_growth_pct(cur["net_worth"], prev["net_worth"]),
    )


def milestone_points(
    series: Sequence[SeriesPoint], milestones: Sequence[Milestone]
) -> List[Tuple[Milestone, SeriesPoint]]:
    """Pair each milestone with the point at its month; out-of-range milestones are skipped."""
    by_month = {p.m: p for p in series}
    return [
        (ms, by_month[ms.at.month_index])
        for ms in sorted(milestones, key=lambda ms: ms.at.month_index)
        if ms.at.month_index in by_month
    ]
