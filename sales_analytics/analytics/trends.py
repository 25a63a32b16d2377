import pandas as pd

from sales_analytics.logger import setup_logger
from .common import dated_sales, require_columns
from .rules import average_comparison_label, year_over_year_label

logger = setup_logger("analytics.trends")


def yearly_product_performance(sales_df: pd.DataFrame, products_df: pd.DataFrame) -> pd.DataFrame:
    """
    Compare each product's yearly sales with its previous year and with its
    own average across all years.

    The previous year is the closest earlier year the product sold in, not
    necessarily the calendar year before. Output is ordered by product name,
    then year.
    """
    require_columns(sales_df, ["order_date", "product_key", "sales_amount"], "sales")
    require_columns(products_df, ["product_key", "product_name"], "products")

    logger.info("Starting yearly product performance")

    # LEFT JOIN keeps sales whose product is missing from dim_products
    df = dated_sales(sales_df).merge(
        products_df[["product_key", "product_name"]],
        on="product_key",
        how="left",
    )
    df["order_year"] = df["order_date"].dt.year.astype("int64")

    yearly = (
        df.groupby(["order_year", "product_name"], dropna=False)["sales_amount"]
        .sum()
        .astype(float)
        .rename("current_sales")
        .reset_index()
    )

    # Sort by partition and order keys, then look back one row per partition
    yearly = yearly.sort_values(
        ["product_name", "order_year"], na_position="last"
    ).reset_index(drop=True)
    by_product = yearly.groupby("product_name", dropna=False)["current_sales"]

    yearly["py_sales"] = by_product.shift(1)
    yearly["py_diff"] = yearly["current_sales"] - yearly["py_sales"]
    yearly["py_result"] = yearly["py_diff"].map(year_over_year_label)

    yearly["average_sales"] = by_product.transform("mean")
    yearly["diff"] = yearly["current_sales"] - yearly["average_sales"]
    yearly["sales_result"] = yearly["diff"].map(average_comparison_label)

    logger.info(
        f"Yearly product performance: {len(yearly)} product-years "
        f"across {yearly['product_name'].nunique(dropna=False)} products"
    )
    return yearly[
        [
            "order_year",
            "product_name",
            "current_sales",
            "py_sales",
            "py_diff",
            "py_result",
            "average_sales",
            "diff",
            "sales_result",
        ]
    ]
