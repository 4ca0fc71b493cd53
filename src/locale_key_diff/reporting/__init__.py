"""Reporting of comparison results."""

from .formatter import GitHubActionsFormatter, PlainFormatter, ReportFormatter
from .outputs import reports_to_dict, set_output
from .printer import ReportTotals, get_totals, print_comparison_report

__all__ = [
    "GitHubActionsFormatter",
    "PlainFormatter",
    "ReportFormatter",
    "ReportTotals",
    "get_totals",
    "print_comparison_report",
    "reports_to_dict",
    "set_output",
]
