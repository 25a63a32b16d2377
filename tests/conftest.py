"""
Pytest configuration and fixtures for the analytics tests.

This file is automatically discovered by pytest and provides a small gold
dataset shared by all test modules. Every fixture returns fresh frames.
"""

import pytest
import sys
from pathlib import Path

import pandas as pd

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sales_analytics.etl.extract_csv import SalesDataset


@pytest.fixture
def as_of():
    """Frozen evaluation moment for age and recency."""
    return pd.Timestamp("2025-06-15")


@pytest.fixture
def sample_sales_df():
    """
    Line items covering the interesting cases:
    - customer 1: two orders one month apart (profile example)
    - customer 2: a year of history with 5500 in sales (VIP)
    - customer 3: one dated order plus one row without order_date
    - customer 99 / product 99: missing from the dimensions, zero quantity
    """
    return pd.DataFrame({
        "order_number": ["SO1", "SO2", "SO3", "SO4", "SO5", "SO6", "SO7"],
        "order_date": pd.to_datetime([
            "2021-01-10", "2021-02-05", "2022-01-01", "2023-01-15", "2023-03-03", None, "2023-05-05",
        ]),
        "customer_key": [1, 1, 2, 2, 3, 3, 99],
        "product_key": [10, 10, 20, 20, 30, 30, 99],
        "quantity": [2, 1, 1, 1, 5, 1, 0],
        "sales_amount": [100.0, 60.0, 3000.0, 2500.0, 500.0, 999.0, 40.0],
        "price": [50.0, 60.0, 3000.0, 2500.0, 100.0, 999.0, 40.0],
    })


@pytest.fixture
def sample_customers_df():
    return pd.DataFrame({
        "customer_key": [1, 2, 3],
        "customer_number": ["AW001", "AW002", "AW003"],
        "first_name": ["John", "Jane", "Sam"],
        "last_name": ["Doe", "Roe", "Poe"],
        "country": ["Germany", "France", "Canada"],
        "gender": ["Male", "Female", "Male"],
        "birthdate": pd.to_datetime(["2005-06-15", "1980-01-01", None]),
    })


@pytest.fixture
def sample_products_df():
    return pd.DataFrame({
        "product_key": [10, 20, 30],
        "product_name": ["Road Bike", "Mountain Bike", "Helmet"],
        "category": ["Bikes", "Bikes", "Accessories"],
        "subcategory": ["Road Bikes", "Mountain Bikes", "Helmets"],
        "cost": [50.0, 500.0, 1500.0],
    })


@pytest.fixture
def sample_dataset(sample_sales_df, sample_customers_df, sample_products_df):
    return SalesDataset(
        sales=sample_sales_df,
        customers=sample_customers_df,
        products=sample_products_df,
    )


@pytest.fixture
def gold_export_dir(tmp_path, sample_sales_df, sample_customers_df, sample_products_df):
    """Sample dataset written out the way the gold layer exports it."""
    data_dir = tmp_path / "gold"
    data_dir.mkdir()
    sales = sample_sales_df.rename(columns={"order_number": "Order Number"})
    sales.to_csv(data_dir / "fact_sales.csv", index=False)
    sample_customers_df.to_csv(data_dir / "dim_customers.csv", index=False)
    sample_products_df.to_csv(data_dir / "dim_products.csv", index=False)
    return data_dir


# Add pytest CLI options
def pytest_addoption(parser):
    """Add custom pytest options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Run integration tests (requires gold exports under data/gold)"
    )


def pytest_collection_modifyitems(config, items):
    """Mark integration tests for conditional execution."""
    if config.getoption("--integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
