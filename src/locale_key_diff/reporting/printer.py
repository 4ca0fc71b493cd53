"""Human-readable comparison report."""

import os
from dataclasses import dataclass
from typing import List, Tuple

from ..keys.models import ComparisonReports, FileReport, KeyPair
from .formatter import ReportFormatter

PASS_MARK = "✓"
FAIL_MARK = "✖"


@dataclass(frozen=True)
class ReportTotals:
    total_keys_to_add: int = 0
    total_keys_to_remove: int = 0


def get_totals(reports: ComparisonReports) -> ReportTotals:
    """Sum keys to add and remove over every locale and file."""
    to_add = 0
    to_remove = 0
    for file_reports in reports.values():
        for report in file_reports.values():
            to_add += len(report.keys_to_add)
            to_remove += len(report.keys_to_remove)
    return ReportTotals(total_keys_to_add=to_add, total_keys_to_remove=to_remove)


def _sorted_pairs(pairs: Tuple[KeyPair, ...]) -> List[KeyPair]:
    return sorted(pairs, key=lambda pair: (pair.full_key, pair.file_key))


def display_path(compare_path: str, compare_base: str) -> str:
    """Path shown for a report, relative to ``compare_base`` or the working directory."""
    return os.path.relpath(compare_path, compare_base or os.curdir)


def file_report_lines(
    compare_path: str,
    report: FileReport,
    compare_base: str,
    formatter: ReportFormatter,
) -> List[str]:
    """Styled lines describing one file report."""
    failed = report.failed
    style = "red_bright" if failed else "green_bright"
    mark = FAIL_MARK if failed else PASS_MARK

    lines = [f"  {display_path(compare_path, compare_base)} {mark}"]

    if report.errors:
        lines.append("    Errors:")
        lines.extend(f"      {FAIL_MARK} {error}" for error in report.errors)

    if report.keys_to_add:
        lines.append("    Keys to add:")
        lines.extend(
            f"      + {pair.full_key} ({pair.file_key})" for pair in _sorted_pairs(report.keys_to_add)
        )

    if report.keys_to_remove:
        lines.append("    Keys to remove:")
        lines.extend(
            f"      - {pair.full_key} ({pair.file_key})" for pair in _sorted_pairs(report.keys_to_remove)
        )

    return [formatter.style(style, line) for line in lines]


def print_comparison_report(
    reports: ComparisonReports,
    default_locale: str,
    compare_base: str,
    formatter: ReportFormatter,
) -> None:
    """Write the totals line and one group per comparison locale."""
    formatter.notice(
        formatter.style("bold", f'Comparing languages against default locale: "{default_locale}"')
    )

    totals = get_totals(reports)
    formatter.notice(
        f"Total keys to add: {formatter.style('bold', totals.total_keys_to_add)}, "
        f"Total keys to remove: {formatter.style('bold', totals.total_keys_to_remove)}"
    )

    for locale, file_reports in reports.items():
        output: List[Tuple[str, bool]] = []
        locale_failed = False

        for compare_path, report in file_reports.items():
            locale_failed = locale_failed or report.failed
            output.extend(
                (line, report.failed)
                for line in file_report_lines(compare_path, report, compare_base, formatter)
            )

        title = f'Report for "{locale}":'
        if locale_failed:
            formatter.start_group(formatter.style("red_bright", f"{title} {FAIL_MARK}"))
        else:
            formatter.start_group(formatter.style("green_bright", f"{title} {PASS_MARK}"))

        for line, failed in output:
            if failed:
                formatter.error(line)
            else:
                formatter.notice(line)

        formatter.end_group()
