"""
Classification rules for the segment and label columns.

Each rule set is an ordered list of ``(predicate, label)`` pairs evaluated
first-match-wins, so overlapping bounds resolve to the earlier band.
"""

from typing import Callable, Optional, Sequence, Tuple

import pandas as pd

Rule = Tuple[Callable[[float], bool], str]

# Customer value segmentation
VIP_MIN_LIFESPAN_MONTHS = 12
VIP_MIN_SALES = 5000

# Product performance segmentation
HIGH_PERFORMER_MIN_SALES = 50000
MID_RANGE_MIN_SALES = 10000

AGE_GROUP_RULES: Sequence[Rule] = [
    (lambda age: age < 20, "Under 20"),
    (lambda age: 20 <= age <= 29, "20-29"),
    (lambda age: 30 <= age <= 39, "30-39"),
    (lambda age: 40 <= age <= 49, "40-49"),
    (lambda age: age >= 50, "50 and above"),
]

# 500 matches both middle bands; first match puts it in "100-500"
COST_BAND_RULES: Sequence[Rule] = [
    (lambda cost: cost < 100, "Below 100"),
    (lambda cost: 100 <= cost <= 500, "100-500"),
    (lambda cost: 500 <= cost <= 1000, "500-1000"),
    (lambda cost: cost > 1000, "Above 1000"),
]

COST_BANDS = [label for _, label in COST_BAND_RULES]

PRODUCT_SEGMENT_RULES: Sequence[Rule] = [
    (lambda sales: sales > HIGH_PERFORMER_MIN_SALES, "High-Performer"),
    (lambda sales: sales >= MID_RANGE_MIN_SALES, "Mid-Range"),
    (lambda sales: True, "Low-Performer"),
]


def classify(value, rules: Sequence[Rule], default: Optional[str] = None) -> Optional[str]:
    """Label of the first rule matching ``value``; ``None`` for null values."""
    if value is None or pd.isna(value):
        return None
    for predicate, label in rules:
        if predicate(value):
            return label
    return default


def age_group(age) -> Optional[str]:
    return classify(age, AGE_GROUP_RULES)


def cost_band(cost) -> Optional[str]:
    return classify(cost, COST_BAND_RULES)


def product_segment(total_sales) -> str:
    return classify(total_sales, PRODUCT_SEGMENT_RULES) or "Low-Performer"


def customer_segment(lifespan_months, total_sales) -> str:
    """
    VIP: at least a year of history and more than 5000 in sales.
    Regular: at least a year of history, 5000 or less.
    New: everyone else.
    """
    if pd.isna(lifespan_months) or pd.isna(total_sales):
        return "New"
    if lifespan_months < VIP_MIN_LIFESPAN_MONTHS:
        return "New"
    if total_sales > VIP_MIN_SALES:
        return "VIP"
    return "Regular"


def change_label(diff, positive: str, negative: str, neutral: str) -> str:
    """Sign label for a difference; a null difference is neutral."""
    if diff is None or pd.isna(diff):
        return neutral
    if diff > 0:
        return positive
    if diff < 0:
        return negative
    return neutral


def year_over_year_label(py_diff) -> str:
    return change_label(py_diff, "Increase", "Decrease", "No Change")


def average_comparison_label(diff) -> str:
    return change_label(diff, "Above Average", "Below Average", "Average")
