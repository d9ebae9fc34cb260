"""Terminal reporters for resolved package licenses.

This module provides a per-package list reporter and a per-license summary
reporter, both rendering fixed-width lines with ``rich``.
"""

from check_licenses.reporters.base import (
    BaseReporter,
    ReportStyle,
    missing_warning,
    truncate,
)
from check_licenses.reporters.listing import ListReporter
from check_licenses.reporters.summary import SummaryReporter, count_licenses

__all__ = [
    "BaseReporter",
    "ListReporter",
    "ReportStyle",
    "SummaryReporter",
    "count_licenses",
    "missing_warning",
    "truncate",
]
