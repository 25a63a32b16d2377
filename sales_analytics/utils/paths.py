"""
Local path helpers.

Table and report file names are resolved in one place so the loader, the
writer and the pipeline agree on where CSV files live.
"""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def _ensure_csv_suffix(name: str) -> str:
    if not name:
        raise ValueError("File name must not be empty")
    return name if name.lower().endswith(".csv") else f"{name}.csv"


def build_table_path(data_dir: PathLike, file_name: str) -> Path:
    """
    Build the path of an input table export.

    Example:
        build_table_path("data/gold", "fact_sales")
        -> Path("data/gold/fact_sales.csv")
    """

    return Path(data_dir) / _ensure_csv_suffix(file_name.lstrip("/"))


def build_report_path(output_dir: PathLike, report_name: str) -> Path:
    """
    Build the path a report is written to.

    Example:
        build_report_path("reports/", "customer_report")
        -> Path("reports/customer_report.csv")
    """

    return Path(output_dir) / _ensure_csv_suffix(report_name)
