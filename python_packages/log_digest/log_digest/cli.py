# log_digest/log_digest/cli.py
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .analyzers.summary import (
    AnalysisState,
    SummaryDataCollector,
    SummaryReporter,
    build_report_lines,
    format_report,
)
from .config import DEFAULT_TOP_N, ReportConfig
from .core import LogReader
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="log-digest",
        description="Summarize a plain-text log file by level, message and IP",
    )
    parser.add_argument("log_path", type=Path, help="Path to the log file")
    parser.add_argument(
        "--top",
        type=_positive_int,
        default=DEFAULT_TOP_N,
        help=f"Number of most frequent messages to list (default: {DEFAULT_TOP_N})",
    )
    parser.add_argument(
        "--color", action="store_true", help="Colorize the report (ANSI)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log diagnostics to stderr"
    )
    return parser.parse_args(argv)


def collect(log_path: Path) -> AnalysisState:
    """Stream every line of the log file into a fresh summary state"""
    collector = SummaryDataCollector()
    for record in LogReader.iter_records(log_path):
        collector.absorb(record)

    stats = collector.stats
    logger.debug(
        "Processed %d lines: %d distinct messages, %d unique IPs",
        stats.total_lines,
        len(stats.message_counts),
        len(stats.unique_ips),
    )
    return stats


def run(log_path: Path, top_n: int = DEFAULT_TOP_N) -> str:
    """Analyze a log file and return the plain-text report

    Raises:
        FileNotFoundError: If the log file is missing or unreadable
    """
    stats = collect(log_path)
    return format_report(stats, str(log_path), top_n)


def analyze_summary(log_path: Path, report_config: ReportConfig) -> None:
    """Run summary analysis on log file and print the report"""
    stats = collect(log_path)

    reporter = SummaryReporter(color=report_config.color)
    reporter.generate_report(
        build_report_lines(stats, str(log_path), report_config.top_n)
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        analyze_summary(args.log_path, ReportConfig.from_args(args))
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
