import pandas as pd

from sales_analytics.logger import setup_logger
from .common import dated_sales, require_columns
from .rules import COST_BANDS, cost_band

logger = setup_logger("analytics.segments")


def category_sales_share(sales_df: pd.DataFrame, products_df: pd.DataFrame) -> pd.DataFrame:
    """
    Sales per product category and each category's share of all sales.

    ``sales_share`` is the share in percent rounded to one decimal and
    ``sales_percentage`` the same value formatted for display ("34.5%").
    Sales of products missing from dim_products land in a null category.
    """
    require_columns(sales_df, ["order_date", "product_key", "sales_amount"], "sales")
    require_columns(products_df, ["product_key", "category"], "products")

    df = dated_sales(sales_df).merge(
        products_df[["product_key", "category"]],
        on="product_key",
        how="left",
    )

    result = (
        df.groupby("category", dropna=False)["sales_amount"]
        .sum()
        .astype(float)
        .reset_index()
    )
    overall_sales = float(result["sales_amount"].sum())
    result["overall_sales"] = overall_sales

    if overall_sales:
        result["sales_share"] = (result["sales_amount"] / overall_sales * 100).round(1)
    else:
        result["sales_share"] = 0.0
    result["sales_percentage"] = result["sales_share"].map(lambda share: f"{share:.1f}%")

    result = result.sort_values(
        ["sales_amount", "category"], ascending=[False, True], na_position="last"
    ).reset_index(drop=True)
    logger.info(f"Category breakdown: {len(result)} categories, overall sales {overall_sales:,.2f}")
    return result


def cost_band_counts(products_df: pd.DataFrame) -> pd.DataFrame:
    """
    Number of products per cost band, most populated band first.

    Products without a cost cannot be banded and are left out.
    """
    require_columns(products_df, ["product_key", "cost"], "products")

    df = products_df[["product_key", "cost"]].copy()
    df["cost_range"] = df["cost"].map(cost_band)

    unbanded = int(df["cost_range"].isna().sum())
    if unbanded:
        logger.warning(f"Cost bands: {unbanded} products without cost excluded")

    result = (
        df.dropna(subset=["cost_range"])
        .groupby("cost_range")["product_key"]
        .count()
        .rename("total_products")
        .reset_index()
    )

    # Ties keep band order (cheapest first)
    result["_band_order"] = result["cost_range"].map(COST_BANDS.index)
    result = result.sort_values(
        ["total_products", "_band_order"], ascending=[False, True]
    ).reset_index(drop=True)

    logger.info(f"Cost bands: {len(df) - unbanded} products in {len(result)} bands")
    return result[["cost_range", "total_products"]]
