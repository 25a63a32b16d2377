"""
Sales analytics batch run.

Data Flow:
1. Extract: load fact_sales, dim_customers and dim_products CSV exports
2. Validate: check input quality with pandera schemas, drop invalid rows
3. Build: compute the selected reports against one evaluation moment
4. Validate: schema checks on the customer and product profiles
5. Load: write each report to the output directory as CSV

Reports are independent of each other; each reads the same validated
snapshot and none of them modifies it.
"""

import argparse
from pathlib import Path
from typing import Any, Callable, Optional

import pandas as pd

from sales_analytics.analytics import (
    category_sales_share,
    cost_band_counts,
    customer_report,
    key_metrics,
    monthly_sales_trends,
    product_report,
    sales_by_period,
    yearly_product_performance,
    yearly_sales_ranking,
)
from sales_analytics.analytics.common import AsOf, evaluation_time
from sales_analytics.etl.extract_csv import SalesDataset, extract_gold_tables
from sales_analytics.etl.load_csv import write_report_csv
from sales_analytics.logger import setup_logger
from sales_analytics.settings import load_config
from sales_analytics.validations.validate_inputs import (
    validate_customers,
    validate_products,
    validate_sales,
)
from sales_analytics.validations.validate_outputs import (
    validate_customer_report,
    validate_product_report,
)

logger = setup_logger("pipeline.sales_reports")

ReportBuilder = Callable[[SalesDataset, pd.Timestamp], pd.DataFrame]

REPORTS: dict[str, ReportBuilder] = {
    "daily_sales": lambda ds, as_of: sales_by_period(ds.sales, "day"),
    "monthly_sales": lambda ds, as_of: sales_by_period(ds.sales, "month"),
    "yearly_sales": lambda ds, as_of: sales_by_period(ds.sales, "year"),
    "yearly_sales_ranking": lambda ds, as_of: yearly_sales_ranking(ds.sales),
    "monthly_trends": lambda ds, as_of: monthly_sales_trends(ds.sales),
    "product_yearly_performance": lambda ds, as_of: yearly_product_performance(ds.sales, ds.products),
    "category_sales_share": lambda ds, as_of: category_sales_share(ds.sales, ds.products),
    "cost_bands": lambda ds, as_of: cost_band_counts(ds.products),
    "customer_report": lambda ds, as_of: customer_report(ds.sales, ds.customers, as_of=as_of),
    "product_report": lambda ds, as_of: product_report(ds.sales, ds.products, as_of=as_of),
    "key_metrics": lambda ds, as_of: key_metrics(ds.sales, ds.customers, ds.products),
}

OUTPUT_VALIDATORS = {
    "customer_report": validate_customer_report,
    "product_report": validate_product_report,
}


def build_report(dataset: SalesDataset, name: str, as_of: AsOf = None) -> pd.DataFrame:
    """Build one report by name from the dataset."""
    if name not in REPORTS:
        raise ValueError(f"Unknown report '{name}', expected one of {sorted(REPORTS)}")
    return REPORTS[name](dataset, evaluation_time(as_of))


def validate_dataset(dataset: SalesDataset) -> SalesDataset:
    """Validate the three input tables and return the cleaned snapshot."""
    clean_sales, sales_dropped = validate_sales(dataset.sales)
    clean_customers, customers_dropped = validate_customers(dataset.customers)
    clean_products, products_dropped = validate_products(dataset.products)

    logger.info("✓ Input validation passed")
    logger.info(f"  - Sales: {len(clean_sales)} valid ({sales_dropped} issues)")
    logger.info(f"  - Customers: {len(clean_customers)} valid ({customers_dropped} issues)")
    logger.info(f"  - Products: {len(clean_products)} valid ({products_dropped} issues)")

    if clean_sales.empty:
        raise ValueError("Validation resulted in empty sales dataset")

    return SalesDataset(sales=clean_sales, customers=clean_customers, products=clean_products)


def build_reports(
    dataset: SalesDataset,
    names: Optional[list[str]] = None,
    as_of: AsOf = None,
) -> dict[str, pd.DataFrame]:
    """
    Build the named reports (all of them by default).

    ``as_of`` is resolved once so every report of the run shares it.
    """
    names = names or list(REPORTS)
    unknown = [name for name in names if name not in REPORTS]
    if unknown:
        raise ValueError(f"Unknown reports {unknown}, expected names from {sorted(REPORTS)}")

    as_of = evaluation_time(as_of)
    reports = {}
    for name in names:
        report = REPORTS[name](dataset, as_of)
        if name in OUTPUT_VALIDATORS:
            report, dropped = OUTPUT_VALIDATORS[name](report)
            if dropped > 0:
                logger.warning(f"  ⚠ {dropped} issues in {name}; failing rows excluded")
        logger.info(f"✓ Built {name}: {len(report)} rows")
        reports[name] = report
    return reports


def run_pipeline(config: Optional[dict[str, Any]] = None, as_of: AsOf = None) -> dict[str, pd.DataFrame]:
    """
    Run extract, validate, build and load with the given configuration.

    ``as_of`` overrides the ``as_of`` config entry; when both are unset the
    run is evaluated against the current date.
    """
    config = config or load_config()
    data_cfg = config.get("data", {})
    output_cfg = config.get("output", {})
    as_of = evaluation_time(as_of if as_of is not None else config.get("as_of"))

    logger.info(f"Starting sales analytics run (as of {as_of.date()})")

    try:
        dataset = extract_gold_tables(
            data_dir=data_cfg.get("dir", "data/gold"),
            sales_file=data_cfg.get("sales_file", "fact_sales.csv"),
            customers_file=data_cfg.get("customers_file", "dim_customers.csv"),
            products_file=data_cfg.get("products_file", "dim_products.csv"),
        )
    except Exception as e:
        logger.error(f"✗ Extraction failed: {str(e)}")
        raise

    try:
        dataset = validate_dataset(dataset)
        reports = build_reports(dataset, config.get("reports") or None, as_of=as_of)
    except Exception as e:
        logger.error(f"✗ Report build failed: {str(e)}")
        raise

    if output_cfg.get("write_csv", True):
        output_dir = Path(output_cfg.get("dir", "reports"))
        for name, report in reports.items():
            write_report_csv(report, output_dir, name)

    logger.info(f"✓ Run SUCCESS: {len(reports)} reports built")
    return reports


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build sales analytics reports from gold table exports")
    parser.add_argument("--config", type=Path, default=None, help="Path to a config.yaml")
    parser.add_argument("--as-of", default=None, help="Evaluation date for age and recency (YYYY-MM-DD)")
    parser.add_argument(
        "--report",
        action="append",
        choices=sorted(REPORTS),
        help="Report to build; repeat for several (default: all)",
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.report:
        config["reports"] = args.report
    run_pipeline(config, as_of=args.as_of)


if __name__ == "__main__":
    main()
