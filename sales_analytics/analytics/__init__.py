"""
Report builders over the gold sales tables.

Every builder takes plain DataFrames, returns a new DataFrame and leaves its
inputs untouched.
"""

from .customers import customer_report
from .kpis import key_metrics
from .products import product_report
from .segments import category_sales_share, cost_band_counts
from .time_series import monthly_sales_trends, sales_by_period, yearly_sales_ranking
from .trends import yearly_product_performance

__all__ = [
    "sales_by_period",
    "monthly_sales_trends",
    "yearly_sales_ranking",
    "yearly_product_performance",
    "category_sales_share",
    "cost_band_counts",
    "customer_report",
    "product_report",
    "key_metrics",
]
