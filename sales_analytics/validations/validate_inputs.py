from pandera.errors import SchemaError, SchemaErrors

from sales_analytics.logger import setup_logger
from .input_schemas import customers_schema, products_schema, sales_schema

logger = setup_logger("validation.input")


def _drop_failed_rows(df, failed):
    # Table-level failures (missing column, wrong dtype) carry no row index
    if len(failed) > 0:
        failed_indices = failed["index"].dropna().unique()
        if len(failed_indices) > 0:
            return df.drop(index=failed_indices)
    return df.copy()


def _validate(df, schema, table):
    logger.info(f"Starting {table} validation on {len(df)} rows")
    try:
        validated_df = schema.validate(df, lazy=True)
        logger.info(f"{table.capitalize()} validation passed")
        return validated_df, 0

    except SchemaErrors as err:
        failed = err.failure_cases
        invalid_count = len(failed)
        logger.warning(f"{table.capitalize()} validation failed: {invalid_count} issues")
        logger.warning(f"Errors summary:\n{failed.groupby(['column', 'check']).size()}")

        clean_df = _drop_failed_rows(df, failed)

        try:
            clean_df = schema.validate(clean_df)  # re-validate clean data
            logger.info(f"Cleaned {table}: {len(clean_df)} rows remaining")
        except (SchemaError, SchemaErrors):
            logger.warning("Could not clean all invalid rows. Returning best effort.")

        return clean_df, invalid_count


def validate_sales(df):
    return _validate(df, sales_schema, "sales")


def validate_customers(df):
    return _validate(df, customers_schema, "customers")


def validate_products(df):
    return _validate(df, products_schema, "products")
