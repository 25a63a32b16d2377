import pandera.pandas as pa
from pandera.pandas import Check, Column, DataFrameSchema


customer_report_schema = DataFrameSchema(
    {
        # Identifiers
        "customer_key": Column(int, nullable=False, unique=True),
        "customer_number": Column(str, nullable=True),
        "customer_name": Column(str, nullable=True),

        # Segments
        "age": Column("Int64", Check.ge(0), nullable=True),
        "age_group": Column(
            str,
            Check.isin(["Under 20", "20-29", "30-39", "40-49", "50 and above"]),
            nullable=True,
        ),
        "customer_segment": Column(str, Check.isin(["VIP", "Regular", "New"]), nullable=False),

        # Activity
        "last_order_date": Column(pa.DateTime, nullable=False),
        "recency_months": Column(int, nullable=False),
        "lifespan_months": Column(int, Check.ge(0), nullable=False),

        # Measures
        "total_orders": Column(int, Check.ge(0), nullable=False),
        "total_sales": Column(float, Check.ge(0), nullable=False),
        "total_quantity": Column(int, Check.ge(0), nullable=False),
        "total_products": Column(int, Check.ge(1), nullable=False),
        "avg_order_value": Column(float, Check.ge(0), nullable=False),
        "avg_monthly_spend": Column(float, Check.ge(0), nullable=False),
    },
    strict=True
)


product_report_schema = DataFrameSchema(
    {
        # Identifiers and dimension attributes (null for unknown products)
        "product_key": Column(int, nullable=False, unique=True),
        "product_name": Column(str, nullable=True),
        "category": Column(str, nullable=True),
        "subcategory": Column(str, nullable=True),
        "cost": Column(float, nullable=True, coerce=True),

        # Segments
        "product_segment": Column(
            str, Check.isin(["High-Performer", "Mid-Range", "Low-Performer"]), nullable=False
        ),

        # Activity
        "last_sale_date": Column(pa.DateTime, nullable=False),
        "recency_months": Column(int, nullable=False),
        "lifespan_months": Column(int, Check.ge(0), nullable=False),

        # Measures
        "total_orders": Column(int, Check.ge(0), nullable=False),
        "total_sales": Column(float, Check.ge(0), nullable=False),
        "total_quantity": Column(int, Check.ge(0), nullable=False),
        "total_customers": Column(int, Check.ge(1), nullable=False),
        "avg_selling_price": Column(float, Check.ge(0), nullable=True),
        "avg_order_revenue": Column(float, Check.ge(0), nullable=False),
        "avg_monthly_revenue": Column(float, Check.ge(0), nullable=False),
    },
    strict=True
)
