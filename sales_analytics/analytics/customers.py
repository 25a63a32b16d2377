import pandas as pd

from sales_analytics.logger import setup_logger
from . import rules
from .common import (
    AsOf,
    age_in_years,
    dated_sales,
    evaluation_time,
    months_between,
    require_columns,
    safe_divide,
)

logger = setup_logger("analytics.customers")

REPORT_COLUMNS = [
    "customer_key",
    "customer_number",
    "customer_name",
    "age",
    "age_group",
    "customer_segment",
    "last_order_date",
    "recency_months",
    "total_orders",
    "total_sales",
    "total_quantity",
    "total_products",
    "lifespan_months",
    "avg_order_value",
    "avg_monthly_spend",
]


def _customer_attributes(customers_df: pd.DataFrame, as_of: pd.Timestamp) -> pd.DataFrame:
    customers = customers_df[
        ["customer_key", "customer_number", "first_name", "last_name", "birthdate"]
    ].copy()
    customers["customer_name"] = (
        customers["first_name"].fillna("") + " " + customers["last_name"].fillna("")
    ).str.strip()
    customers["age"] = age_in_years(customers["birthdate"], as_of)
    return customers[["customer_key", "customer_number", "customer_name", "age"]]


def customer_report(
    sales_df: pd.DataFrame,
    customers_df: pd.DataFrame,
    as_of: AsOf = None,
) -> pd.DataFrame:
    """
    Lifetime profile of every customer with at least one dated sale.

    Steps:
        1. Keep dated sales and LEFT JOIN dim_customers, so sales of unknown
           customers are still profiled with null customer attributes.
        2. Aggregate orders, sales, quantity, distinct products and the
           first/last order dates per customer_key.
        3. Derive lifespan and recency in months, age group and value
           segment (VIP / Regular / New).
        4. Average order value (0 when there are no sales or no orders) and
           average monthly spend (total sales when lifespan is 0).

    Age and recency are measured against ``as_of`` (default: now, captured
    once for the whole report).
    """
    require_columns(
        sales_df,
        ["order_number", "order_date", "customer_key", "product_key", "sales_amount", "quantity"],
        "sales",
    )
    require_columns(
        customers_df,
        ["customer_key", "customer_number", "first_name", "last_name", "birthdate"],
        "customers",
    )

    as_of = evaluation_time(as_of)
    logger.info(f"Starting customer report (as of {as_of.date()})")

    sales = dated_sales(sales_df)
    skipped = len(sales_df) - len(sales)
    if skipped:
        logger.warning(f"Customer report: {skipped} sales rows without order_date excluded")

    df = sales.merge(
        _customer_attributes(customers_df, as_of),
        on="customer_key",
        how="left",
        indicator=True,
    )
    unmatched = int((df["_merge"] == "left_only").sum())
    if unmatched:
        logger.warning(f"Customer report: {unmatched} sales rows reference unknown customers")

    report = (
        df.groupby("customer_key", dropna=False)
        .agg(
            customer_number=("customer_number", "first"),
            customer_name=("customer_name", "first"),
            age=("age", "first"),
            total_orders=("order_number", "nunique"),
            total_sales=("sales_amount", "sum"),
            total_quantity=("quantity", "sum"),
            total_products=("product_key", "nunique"),
            first_order_date=("order_date", "min"),
            last_order_date=("order_date", "max"),
        )
        .reset_index()
    )
    report["total_sales"] = report["total_sales"].astype(float)
    report["total_quantity"] = report["total_quantity"].astype("int64")
    report["age"] = report["age"].astype("Int64")

    report["lifespan_months"] = months_between(report["first_order_date"], report["last_order_date"])
    report["recency_months"] = months_between(report["last_order_date"], as_of)

    report["age_group"] = report["age"].map(rules.age_group).astype(object)
    report["customer_segment"] = [
        rules.customer_segment(lifespan, sales_total)
        for lifespan, sales_total in zip(report["lifespan_months"], report["total_sales"])
    ]

    zero = pd.Series(0.0, index=report.index)
    report["avg_order_value"] = safe_divide(
        report["total_sales"], report["total_orders"], fallback=zero
    ).where(report["total_sales"] != 0, 0.0)
    report["avg_monthly_spend"] = safe_divide(
        report["total_sales"], report["lifespan_months"], fallback=report["total_sales"]
    )

    logger.info(
        f"Customer report completed: {len(report)} customers, "
        f"segments {report['customer_segment'].value_counts().to_dict()}"
    )
    return report[REPORT_COLUMNS]
