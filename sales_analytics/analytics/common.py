"""
Helpers shared by the report builders.

All functions here are pure: they copy before adding columns and never
modify the frames they are given.
"""

from datetime import date, datetime
from typing import Optional, Union

import pandas as pd

AsOf = Optional[Union[date, datetime, str, pd.Timestamp]]


def evaluation_time(as_of: AsOf = None) -> pd.Timestamp:
    """
    Resolve the evaluation moment for age and recency.

    ``None`` captures "now" once; callers pass the result to every report of
    a run so the whole run sees the same moment.
    """
    if as_of is None:
        return pd.Timestamp.now().normalize()
    return pd.Timestamp(as_of).normalize()


def require_columns(df: pd.DataFrame, columns: list[str], table: str) -> None:
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"{table} is missing required columns: {missing}")


def dated_sales(sales_df: pd.DataFrame) -> pd.DataFrame:
    """Copy of the fact rows that carry an order_date, with dates parsed."""
    df = sales_df.copy()
    df["order_date"] = pd.to_datetime(df["order_date"], errors="coerce")
    return df[df["order_date"].notna()].copy()


def months_between(start, end):
    """
    Number of month boundaries crossed between ``start`` and ``end``.

    2021-01-31 -> 2021-02-01 is one month; 2021-01-01 -> 2021-01-31 is zero.
    Works on Series and Timestamps; inputs must not be null.
    """
    start_year, start_month = _year_month(start)
    end_year, end_month = _year_month(end)
    diff = (end_year - start_year) * 12 + (end_month - start_month)
    return diff.astype("int64") if isinstance(diff, pd.Series) else int(diff)


def _year_month(value):
    if isinstance(value, pd.Series):
        return value.dt.year.astype("int64"), value.dt.month.astype("int64")
    return value.year, value.month


def age_in_years(birthdate: pd.Series, as_of: pd.Timestamp) -> pd.Series:
    """
    Whole years between birthdate and ``as_of`` (birthday not yet reached
    this year counts as one year less). Null birthdates and birthdates after
    ``as_of`` give <NA>.
    """
    birthdate = pd.to_datetime(birthdate, errors="coerce")
    birthday_pending = (birthdate.dt.month > as_of.month) | (
        (birthdate.dt.month == as_of.month) & (birthdate.dt.day > as_of.day)
    )
    age = as_of.year - birthdate.dt.year - birthday_pending.astype("int64")
    age = age.where(~(birthdate > as_of))
    return age.astype("Int64")


def safe_divide(numerator: pd.Series, denominator: pd.Series, fallback: pd.Series) -> pd.Series:
    """Element-wise ratio, taking ``fallback`` where the denominator is 0."""
    denominator = denominator.astype(float)
    ratio = numerator.astype(float) / denominator.where(denominator != 0)
    return ratio.where(denominator != 0, fallback.astype(float))
