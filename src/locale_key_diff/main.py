"""Main entry point for the translation key checker."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence, TextIO

import structlog

from locale_key_diff import __version__
from locale_key_diff.config import ActionInputs, load_inputs
from locale_key_diff.errors import ConfigurationError, ErrorContextManager, categorize_error, log_errors
from locale_key_diff.keys import ComparisonReports, compare_all_locales
from locale_key_diff.reporting import (
    GitHubActionsFormatter,
    PlainFormatter,
    ReportFormatter,
    print_comparison_report,
    reports_to_dict,
    set_output,
)

OUTPUT_NAME = "comparisonReports"


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging."""
    level = logging.DEBUG if debug else logging.INFO

    # stdout carries the report, logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.dev.ConsoleRenderer(colors=True)
                if debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Report translation keys missing from or extra in comparison locales",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"locale-key-diff {__version__}"
    )

    parser.add_argument(
        "--shared-folder-paths",
        help='JSON array of [path, prefix?] arrays, or a file containing one',
    )
    parser.add_argument("--default-locale", help='Default locale folder name (default "en")')
    parser.add_argument("--default-base", help="Path prefix for default locale folders")
    parser.add_argument("--compare-base", help="Path prefix for comparison locale folders")
    parser.add_argument("--compare-locales", help='JSON array of comparison locale names')

    parser.add_argument(
        "--format",
        choices=("github", "plain"),
        help="Report format (default: github on GitHub Actions, plain otherwise)",
    )
    parser.add_argument("--json-output", type=Path, help="Also write the reports as JSON to this file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def create_formatter(name: Optional[str], env: Mapping[str, str], stream: TextIO) -> ReportFormatter:
    if name is None:
        name = "github" if env.get("GITHUB_ACTIONS") == "true" else "plain"
    if name == "github":
        return GitHubActionsFormatter(stream)
    return PlainFormatter(stream, colors=stream.isatty())


def cli_overrides(args: argparse.Namespace) -> Dict[str, Optional[str]]:
    return {
        "shared_folder_paths": args.shared_folder_paths,
        "default_locale": args.default_locale,
        "default_base": args.default_base,
        "compare_base": args.compare_base,
        "compare_locales": args.compare_locales,
    }


@log_errors(operation_name="compare_translations", include_traceback=True)
def execute(
    inputs: ActionInputs,
    formatter: ReportFormatter,
    env: Mapping[str, str],
    json_output: Optional[Path] = None,
) -> ComparisonReports:
    """Compare every locale, print the report and publish the outputs."""
    logger = structlog.get_logger()
    logger.info(
        "Comparing translations",
        default_locale=inputs.default_locale,
        compare_locales=inputs.compare_locales,
        shared_folders=len(inputs.shared_folder_paths),
    )

    error_context = ErrorContextManager()
    reports = compare_all_locales(
        inputs.shared_folder_paths,
        inputs.default_base,
        inputs.compare_base,
        inputs.default_locale,
        inputs.compare_locales,
        error_context=error_context,
    )

    for record in error_context.errors:
        formatter.error(record["display"])

    print_comparison_report(reports, inputs.default_locale, inputs.compare_base, formatter)

    data = reports_to_dict(reports)
    set_output(OUTPUT_NAME, data, env)
    if json_output is not None:
        json_output.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Reports written", file=str(json_output))

    logger.info("Comparison finished", **error_context.get_error_stats())
    return reports


def run(
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """Run one comparison and return the process exit status."""
    args = parse_args(argv)
    env = dict(os.environ if env is None else env)
    stream = stream or sys.stdout

    setup_logging(debug=args.debug)
    logger = structlog.get_logger()
    formatter = create_formatter(args.format, env, stream)

    try:
        inputs = load_inputs(env, overrides=cli_overrides(args))
    except ConfigurationError as e:
        logger.error("Invalid configuration", config_key=e.context.get("config_key"), error=e.message)
        formatter.error(e.message)
        return 1

    if inputs.debug and not args.debug:
        setup_logging(debug=True)

    try:
        execute(inputs, formatter, env, json_output=args.json_output)
    except Exception as e:
        logger.error("Comparison failed", category=categorize_error(e), error=str(e))
        formatter.error(str(e))
        return 1

    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
