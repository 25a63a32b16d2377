import pandas as pd

from sales_analytics.logger import setup_logger
from . import rules
from .common import (
    AsOf,
    dated_sales,
    evaluation_time,
    months_between,
    require_columns,
    safe_divide,
)

logger = setup_logger("analytics.products")

REPORT_COLUMNS = [
    "product_key",
    "product_name",
    "category",
    "subcategory",
    "cost",
    "last_sale_date",
    "recency_months",
    "product_segment",
    "lifespan_months",
    "total_orders",
    "total_sales",
    "total_quantity",
    "total_customers",
    "avg_selling_price",
    "avg_order_revenue",
    "avg_monthly_revenue",
]


def product_report(
    sales_df: pd.DataFrame,
    products_df: pd.DataFrame,
    as_of: AsOf = None,
) -> pd.DataFrame:
    """
    Lifetime profile of every product with at least one dated sale.

    avg_selling_price is the mean of sales_amount / quantity over order lines,
    rounded to one decimal; lines with zero quantity are left out of the
    mean. Products are segmented High-Performer (> 50000), Mid-Range
    (10000 to 50000) or Low-Performer.
    """
    require_columns(
        sales_df,
        ["order_number", "order_date", "customer_key", "product_key", "sales_amount", "quantity"],
        "sales",
    )
    require_columns(
        products_df,
        ["product_key", "product_name", "category", "subcategory", "cost"],
        "products",
    )

    as_of = evaluation_time(as_of)
    logger.info(f"Starting product report (as of {as_of.date()})")

    sales = dated_sales(sales_df)
    skipped = len(sales_df) - len(sales)
    if skipped:
        logger.warning(f"Product report: {skipped} sales rows without order_date excluded")

    df = sales.merge(
        products_df[["product_key", "product_name", "category", "subcategory", "cost"]],
        on="product_key",
        how="left",
        indicator=True,
    )
    unmatched = int((df["_merge"] == "left_only").sum())
    if unmatched:
        logger.warning(f"Product report: {unmatched} sales rows reference unknown products")

    quantity = df["quantity"].astype(float)
    df["unit_price"] = df["sales_amount"].astype(float) / quantity.where(quantity != 0)

    report = (
        df.groupby("product_key", dropna=False)
        .agg(
            product_name=("product_name", "first"),
            category=("category", "first"),
            subcategory=("subcategory", "first"),
            cost=("cost", "first"),
            first_sale_date=("order_date", "min"),
            last_sale_date=("order_date", "max"),
            total_orders=("order_number", "nunique"),
            total_customers=("customer_key", "nunique"),
            total_sales=("sales_amount", "sum"),
            total_quantity=("quantity", "sum"),
            avg_selling_price=("unit_price", "mean"),
        )
        .reset_index()
    )
    report["total_sales"] = report["total_sales"].astype(float)
    report["total_quantity"] = report["total_quantity"].astype("int64")
    report["avg_selling_price"] = report["avg_selling_price"].round(1)

    report["lifespan_months"] = months_between(report["first_sale_date"], report["last_sale_date"])
    report["recency_months"] = months_between(report["last_sale_date"], as_of)
    report["product_segment"] = report["total_sales"].map(rules.product_segment)

    zero = pd.Series(0.0, index=report.index)
    report["avg_order_revenue"] = safe_divide(
        report["total_sales"], report["total_orders"], fallback=zero
    )
    report["avg_monthly_revenue"] = safe_divide(
        report["total_sales"], report["lifespan_months"], fallback=report["total_sales"]
    )

    logger.info(
        f"Product report completed: {len(report)} products, "
        f"segments {report['product_segment'].value_counts().to_dict()}"
    )
    return report[REPORT_COLUMNS]
