import pandas as pd

from sales_analytics.logger import setup_logger
from sales_analytics.utils.paths import PathLike, build_report_path

logger = setup_logger("etl.load_csv")


def write_report_csv(df: pd.DataFrame, output_dir: PathLike, report_name: str) -> str:
    """
    Write a report dataframe to ``<output_dir>/<report_name>.csv``.
    Returns the written path.
    """

    logger.info(f"Writing {len(df)} rows of {report_name} to {output_dir}")

    try:
        if not report_name:
            raise ValueError("Report name must not be empty")

        if df.empty:
            logger.warning(f"Report {report_name} is empty - writing header only")

        path = build_report_path(output_dir, report_name)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(path, index=False)
        except PermissionError as e:
            logger.error(f"Access denied writing {path}")
            raise PermissionError(
                f"Access denied to report location '{path}'. "
                "Check output.dir in config.yaml and directory permissions."
            ) from e

        logger.info(f"Successfully written report: {path}")
        return str(path)

    except (ValueError, PermissionError) as e:
        logger.error(f"Validation/Permission error: {str(e)}")
        raise

    except OSError as e:
        logger.error(f"Unexpected error writing {report_name}: {str(e)}", exc_info=True)
        raise RuntimeError(
            f"Failed to write report {report_name}: {str(e)}"
        ) from e
