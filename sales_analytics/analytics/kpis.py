import pandas as pd

from sales_analytics.logger import setup_logger
from .common import dated_sales, require_columns

logger = setup_logger("analytics.kpis")

MEASURES = [
    "Total Quantity",
    "Total Sales",
    "Average Price",
    "Total Orders",
    "Total Products",
    "Total Customers",
]


def key_metrics(
    sales_df: pd.DataFrame,
    customers_df: pd.DataFrame,
    products_df: pd.DataFrame,
) -> pd.DataFrame:
    """Headline totals as one (measure_name, measure_value) row per measure."""
    require_columns(sales_df, ["order_number", "order_date", "quantity", "sales_amount", "price"], "sales")
    require_columns(customers_df, ["customer_key"], "customers")
    require_columns(products_df, ["product_key"], "products")

    sales = dated_sales(sales_df)

    values = [
        float(sales["quantity"].sum()),
        float(sales["sales_amount"].sum()),
        float(sales["price"].mean()),
        float(sales["order_number"].nunique()),
        float(products_df["product_key"].nunique()),
        float(customers_df["customer_key"].nunique()),
    ]

    result = pd.DataFrame({"measure_name": MEASURES, "measure_value": values})
    logger.info(f"Key metrics: {dict(zip(MEASURES, values))}")
    return result
