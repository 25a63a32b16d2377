"""
Unit tests for the classification rules.

Boundaries matter here: each band is checked on both sides of its limits.
"""

import pytest
import pandas as pd

from sales_analytics.analytics.rules import (
    COST_BANDS,
    age_group,
    average_comparison_label,
    classify,
    cost_band,
    customer_segment,
    product_segment,
    year_over_year_label,
)


class TestCustomerSegment:
    """VIP needs lifespan >= 12 and sales strictly above 5000."""

    def test_vip(self):
        assert customer_segment(12, 5000.01) == "VIP"
        assert customer_segment(30, 100000) == "VIP"

    def test_boundary_is_regular_not_vip(self):
        assert customer_segment(12, 5000) == "Regular"

    def test_regular(self):
        assert customer_segment(24, 10) == "Regular"

    def test_short_history_is_new_regardless_of_sales(self):
        assert customer_segment(11, 999999) == "New"
        assert customer_segment(0, 0) == "New"

    def test_null_lifespan_is_new(self):
        assert customer_segment(None, 6000) == "New"


class TestProductSegment:
    @pytest.mark.parametrize(
        "total_sales, expected",
        [
            (50000.01, "High-Performer"),
            (50000, "Mid-Range"),
            (10000, "Mid-Range"),
            (9999.99, "Low-Performer"),
            (0, "Low-Performer"),
        ],
    )
    def test_bands(self, total_sales, expected):
        assert product_segment(total_sales) == expected

    def test_every_value_gets_exactly_one_band(self):
        labels = {product_segment(v) for v in range(0, 120000, 2500)}
        assert labels == {"High-Performer", "Mid-Range", "Low-Performer"}


class TestAgeGroup:
    @pytest.mark.parametrize(
        "age, expected",
        [
            (0, "Under 20"),
            (19, "Under 20"),
            (20, "20-29"),
            (29, "20-29"),
            (30, "30-39"),
            (39, "30-39"),
            (40, "40-49"),
            (49, "40-49"),
            (50, "50 and above"),
            (87, "50 and above"),
        ],
    )
    def test_bands(self, age, expected):
        assert age_group(age) == expected

    def test_unknown_age_has_no_group(self):
        assert age_group(None) is None
        assert age_group(pd.NA) is None


class TestCostBand:
    def test_cost_band_example(self):
        costs = [50, 100, 500, 501, 1500]
        assert [cost_band(c) for c in costs] == [
            "Below 100", "100-500", "100-500", "500-1000", "Above 1000",
        ]

    def test_upper_limits(self):
        assert cost_band(99.99) == "Below 100"
        assert cost_band(1000) == "500-1000"
        assert cost_band(1000.01) == "Above 1000"

    def test_missing_cost_has_no_band(self):
        assert cost_band(float("nan")) is None

    def test_band_order(self):
        assert COST_BANDS == ["Below 100", "100-500", "500-1000", "Above 1000"]


class TestChangeLabels:
    def test_year_over_year(self):
        assert year_over_year_label(10) == "Increase"
        assert year_over_year_label(-0.5) == "Decrease"
        assert year_over_year_label(0) == "No Change"

    def test_missing_previous_year_is_no_change(self):
        assert year_over_year_label(None) == "No Change"
        assert year_over_year_label(float("nan")) == "No Change"

    def test_average_comparison(self):
        assert average_comparison_label(1) == "Above Average"
        assert average_comparison_label(-1) == "Below Average"
        assert average_comparison_label(0) == "Average"


def test_classify_first_match_wins():
    rules = [(lambda v: v >= 0, "first"), (lambda v: v >= 0, "second")]
    assert classify(5, rules) == "first"
    assert classify(-1, rules, default="fallback") == "fallback"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
