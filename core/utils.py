from __future__ import annotations

from datetime import date
from typing import Optional

import pandas as pd
from dateutil.relativedelta import relativedelta

from .schema import MONTHS_PER_YEAR, AgeMonth


def parse_dob(dob: str) -> pd.Timestamp:
    ts = pd.to_datetime(dob, errors="coerce")
    if pd.isna(ts):
        raise ValueError(f"Unparseable date of birth: {dob!r}")
    return pd.Timestamp(ts)


def birth_year(dob: str) -> int:
    return int(parse_dob(dob).year)


def current_age(dob: str, today: Optional[date] = None) -> int:
    """Completed years between ``dob`` and ``today`` (defaults to the system clock)."""
    born = parse_dob(dob).date()
    today = today or date.today()
    return relativedelta(today, born).years


def age_month(age_years: int, months: int = 0) -> AgeMonth:
    """Build a consistent AgeMonth, e.g. ``age_month(25)`` -> month 300."""
    month_index = age_years * MONTHS_PER_YEAR + months
    return AgeMonth(age_years=month_index // MONTHS_PER_YEAR, month_index=month_index)


def month_to_age(month_index: int) -> int:
    return month_index // MONTHS_PER_YEAR
