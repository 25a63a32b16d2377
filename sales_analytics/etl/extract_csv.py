from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from sales_analytics.logger import setup_logger
from sales_analytics.utils.paths import PathLike, build_table_path

logger = setup_logger("etl.extract_csv")

# Date columns parsed per table when present in the export
DATE_COLUMNS = {
    "sales": ["order_date", "shipping_date", "due_date"],
    "customers": ["birthdate", "create_date"],
    "products": ["start_date"],
}


@dataclass(frozen=True)
class SalesDataset:
    """
    Read-only snapshot of the three gold tables.

    Reports receive the frames from here and must never modify them.
    """

    sales: pd.DataFrame
    customers: pd.DataFrame
    products: pd.DataFrame


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lowercase column names and replace spaces with underscores."""
    df = df.copy()
    df.columns = df.columns.str.strip().str.lower().str.replace(" ", "_")
    return df


def parse_dates(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """
    Parse date columns, turning unparseable values into NaT.

    NaT order dates are kept here; every report drops them itself.
    """
    df = df.copy()
    for col in columns:
        if col in df.columns:
            df[col] = pd.to_datetime(df[col], errors="coerce")
    return df


def _read_table(path: Path, table: str) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"{table} export not found: {path}")

    logger.info(f"Extracting {table} from {path}")
    df = pd.read_csv(path)
    logger.info(f"Successfully extracted {len(df)} rows from {table}")

    df = normalize_columns(df)
    df = parse_dates(df, DATE_COLUMNS[table])
    logger.info(f"Normalized {table} columns: {list(df.columns)}")
    return df


def extract_gold_tables(
    data_dir: PathLike,
    sales_file: str = "fact_sales.csv",
    customers_file: str = "dim_customers.csv",
    products_file: str = "dim_products.csv",
) -> SalesDataset:
    """
    Extract fact_sales, dim_customers and dim_products CSV exports.
    """
    sales_df = _read_table(build_table_path(data_dir, sales_file), "sales")
    customers_df = _read_table(build_table_path(data_dir, customers_file), "customers")
    products_df = _read_table(build_table_path(data_dir, products_file), "products")

    null_dates = int(sales_df["order_date"].isna().sum()) if "order_date" in sales_df else 0
    if null_dates:
        logger.warning(f"{null_dates} sales rows have no order_date")

    return SalesDataset(sales=sales_df, customers=customers_df, products=products_df)


# Expected export layout:
# data/gold/
# ├── fact_sales.csv
# ├── dim_customers.csv
# └── dim_products.csv
