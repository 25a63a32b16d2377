from pandera.errors import SchemaError, SchemaErrors

from sales_analytics.logger import setup_logger
from .output_schemas import customer_report_schema, product_report_schema

logger = setup_logger("validation.output")


def _validate_report(df, schema, report_name):
    """
    Validate a profile report before it is written out.
    """
    logger.info(f"Starting output validation of {report_name} on {len(df)} records")

    # No dated sales means no profiles; an empty report is not a failure
    if df.empty:
        logger.warning(f"{report_name} is empty - skipping output validation")
        return df, 0

    try:
        validated_df = schema.validate(df, lazy=True)
        logger.info("Output validation passed")
        return validated_df, 0

    except SchemaErrors as err:
        failed = err.failure_cases
        invalid_count = len(failed)

        logger.error(
            f"Output validation of {report_name} failed with {invalid_count} issues"
        )
        logger.error(
            f"Failure summary:\n{failed.groupby(['column', 'check']).size()}"
        )

        # Drop invalid rows by filtering out failed indices
        clean_df = df.copy()
        if len(failed) > 0:
            failed_indices = failed["index"].dropna().unique()
            if len(failed_indices) > 0:
                clean_df = df.drop(index=failed_indices)

        if clean_df.empty:
            raise ValueError(
                f"All rows of {report_name} failed output validation - aborting"
            )

        try:
            clean_df = schema.validate(clean_df)
            logger.info(
                f"Cleaned {report_name}: {len(clean_df)} valid rows"
            )
        except (SchemaError, SchemaErrors):
            logger.warning("Could not clean all invalid rows. Returning best effort.")

        return clean_df, invalid_count


def validate_customer_report(df):
    return _validate_report(df, customer_report_schema, "customer_report")


def validate_product_report(df):
    return _validate_report(df, product_report_schema, "product_report")
