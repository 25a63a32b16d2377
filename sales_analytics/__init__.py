"""
Sales analytics over the gold retail star schema.

Reports are pure functions of the fact_sales, dim_customers and dim_products
tables; see ``sales_analytics.pipeline`` for the batch runner.
"""

__version__ = "1.0.0"
