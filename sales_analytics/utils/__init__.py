"""
Shared utilities for the analytics reports.

Keep helpers here small and dependency-free.
"""

from .paths import build_report_path, build_table_path

__all__ = ["build_table_path", "build_report_path"]
