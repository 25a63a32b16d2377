from pandera.pandas import Check, Column, DataFrameSchema
import pandera.pandas as pa


sales_schema = DataFrameSchema(
    {
        # Line-item grain: order_number repeats across rows
        "order_number": Column(str, nullable=False),
        "product_key": Column(int, nullable=False),
        "customer_key": Column(int, nullable=False),

        # Null dates are allowed; reports exclude them
        "order_date": Column(pa.DateTime, nullable=True),

        # Measures
        "sales_amount": Column(float, Check.ge(0), nullable=True, coerce=True),
        "quantity": Column(int, Check.ge(0), nullable=False),
        "price": Column(float, Check.ge(0), nullable=True, coerce=True),
    },
    strict=False  # Allow extra columns (shipping_date, due_date, ...)
)


customers_schema = DataFrameSchema(
    {
        "customer_key": Column(int, nullable=False, unique=True),
        "customer_number": Column(str, nullable=True),
        "first_name": Column(str, nullable=True),
        "last_name": Column(str, nullable=True),
        "country": Column(str, nullable=True, required=False),
        "gender": Column(str, nullable=True, required=False),
        "birthdate": Column(pa.DateTime, nullable=True),
    },
    strict=False
)


products_schema = DataFrameSchema(
    {
        "product_key": Column(int, nullable=False, unique=True),
        "product_name": Column(str, nullable=True),
        "category": Column(str, nullable=True),
        "subcategory": Column(str, nullable=True),
        "cost": Column(float, Check.ge(0), nullable=True, coerce=True),
    },
    strict=False
)
