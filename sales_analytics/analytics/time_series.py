import pandas as pd

from sales_analytics.logger import setup_logger
from .common import dated_sales, require_columns

logger = setup_logger("analytics.time_series")

GRANULARITIES = ("day", "month", "year")


def _period(order_date: pd.Series, granularity: str) -> pd.Series:
    if granularity == "day":
        return order_date.dt.normalize()
    if granularity == "month":
        return order_date.dt.to_period("M").dt.to_timestamp()
    return order_date.dt.year.astype("int64")


def sales_by_period(sales_df: pd.DataFrame, granularity: str = "day") -> pd.DataFrame:
    """
    Total sales per day, month or year, ordered by period ascending.

    Day and month periods are timestamps (month = first day of the month);
    year periods are plain integers.
    """
    if granularity not in GRANULARITIES:
        raise ValueError(f"Unknown granularity '{granularity}', expected one of {GRANULARITIES}")
    require_columns(sales_df, ["order_date", "sales_amount"], "sales")

    df = dated_sales(sales_df)
    logger.info(f"Aggregating {len(df)} dated sales rows by {granularity}")

    df["period"] = _period(df["order_date"], granularity)
    result = (
        df.groupby("period", sort=True)["sales_amount"]
        .sum()
        .astype(float)
        .rename("total_sales")
        .reset_index()
    )
    logger.info(f"Sales by {granularity}: {len(result)} periods")
    return result


def monthly_sales_trends(sales_df: pd.DataFrame) -> pd.DataFrame:
    """
    Monthly totals with a running sales total and a cumulative average of the
    monthly average price.

    Both window columns accumulate from the first month up to the current
    one; the price average is not a fixed-size window.
    """
    require_columns(sales_df, ["order_date", "sales_amount", "price"], "sales")

    df = dated_sales(sales_df)
    df["period"] = _period(df["order_date"], "month")

    result = (
        df.groupby("period", sort=True)
        .agg(total_sales=("sales_amount", "sum"), avg_price=("price", "mean"))
        .reset_index()
    )
    result["total_sales"] = result["total_sales"].astype(float)

    # Sort-then-scan: period is the group key, so there are no ties
    result["running_total_sales"] = result["total_sales"].cumsum()
    result["moving_avg_price"] = result["avg_price"].expanding().mean()

    logger.info(f"Monthly trends: {len(result)} months")
    return result[["period", "total_sales", "running_total_sales", "avg_price", "moving_avg_price"]]


def yearly_sales_ranking(sales_df: pd.DataFrame) -> pd.DataFrame:
    """Yearly sales and distinct customers, best year first."""
    require_columns(sales_df, ["order_date", "sales_amount", "customer_key"], "sales")

    df = dated_sales(sales_df)
    df["order_year"] = _period(df["order_date"], "year")

    result = (
        df.groupby("order_year")
        .agg(total_sales=("sales_amount", "sum"), total_customers=("customer_key", "nunique"))
        .reset_index()
    )
    result["total_sales"] = result["total_sales"].astype(float)
    result = result.sort_values(
        ["total_sales", "order_year"], ascending=[False, True]
    ).reset_index(drop=True)

    logger.info(f"Yearly ranking: {len(result)} years")
    return result
