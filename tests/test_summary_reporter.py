from __future__ import annotations

import io
import re

from rich.console import Console
from rich.theme import Theme

from log_digest import config
from log_digest.analyzers.summary import (
    AnalysisState,
    SummaryDataCollector,
    SummaryReporter,
    build_report_lines,
    format_report,
)
from log_digest.core import LogRecord

from conftest import SAMPLE_LINES

EXPECTED_SAMPLE_REPORT = """\
========== LOG ANALYSIS REPORT ==========
File: app.log
Total Lines: 4
-----------------------------------------
ERROR:   1
WARN:    1
INFO:    2
DEBUG:   0
-----------------------------------------
Top 5 Messages:
  1. User login successful from 192.168.1.100 (1 occurrences)
  2. Database connection failed (1 occurrences)
  3. High memory usage detected (1 occurrences)
  4. Request processed from 10.0.0.50 (1 occurrences)
-----------------------------------------
Unique IP Addresses Found:
  - 192.168.1.100
  - 10.0.0.50
========================================="""


def _state(lines: list[str]) -> AnalysisState:
    collector = SummaryDataCollector()
    for line in lines:
        collector.absorb(LogRecord.from_line(line))
    return collector.stats


def test_format_sample_report() -> None:
    assert format_report(_state(SAMPLE_LINES), "app.log") == EXPECTED_SAMPLE_REPORT


def test_format_empty_state() -> None:
    report = format_report(AnalysisState(), "empty.log")
    lines = report.splitlines()
    assert "Total Lines: 0" in lines
    for row in ("ERROR:   0", "WARN:    0", "INFO:    0", "DEBUG:   0"):
        assert row in lines
    ip_header = lines.index("Unique IP Addresses Found:")
    assert lines[ip_header + 1] == "  none found"


def test_unknown_level_not_in_table() -> None:
    report = format_report(_state(["plain text"]), "x.log")
    assert "UNKNOWN" not in report
    assert "Total Lines: 1" in report


def test_top_n_limits_and_header() -> None:
    state = _state(["INFO a", "INFO b", "INFO b", "INFO c"])
    lines = format_report(state, "x.log", top_n=1).splitlines()
    header = lines.index("Top 1 Messages:")
    assert lines[header + 1] == "  1. b (2 occurrences)"
    assert lines[header + 2].startswith("-----")


def test_rules_are_fixed_width() -> None:
    lines = format_report(AnalysisState(), "x.log").splitlines()
    assert lines[0] == "========== LOG ANALYSIS REPORT =========="
    assert len(lines[0]) == 41
    assert lines[-1] == "=" * 41
    assert lines[3] == "-" * 41


def test_format_is_deterministic() -> None:
    lines = ["INFO b", "INFO a", "INFO a", "INFO b", "WARN 1.1.1.1 2.2.2.2"]
    assert format_report(_state(lines), "x.log") == format_report(_state(lines), "x.log")


def test_build_report_lines_styles() -> None:
    lines = build_report_lines(_state(SAMPLE_LINES), "app.log")
    styles = dict(lines)
    assert styles["ERROR:   1"] == "level.error"
    assert styles["  - 10.0.0.50"] == "ip"


def test_reporter_plain_output_matches_format(capsys) -> None:
    state = _state(SAMPLE_LINES)
    SummaryReporter().generate_report(build_report_lines(state, "app.log"))
    assert capsys.readouterr().out == EXPECTED_SAMPLE_REPORT + "\n"


def test_reporter_plain_output_keeps_tabs(capsys) -> None:
    state = _state(["INFO col1\tcol2"])
    SummaryReporter().generate_report(build_report_lines(state, "t.log"))
    assert "  1. col1\tcol2 (1 occurrences)" in capsys.readouterr().out


def test_reporter_color_output_keeps_text() -> None:
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        theme=Theme(config.REPORT_THEME),
        force_terminal=True,
        color_system="standard",
        width=200,
    )
    reporter = SummaryReporter(color=True, console=console)
    reporter.generate_report(build_report_lines(_state(SAMPLE_LINES), "app.log"))
    output = buffer.getvalue()
    assert "\x1b[" in output
    assert "Database connection failed" in output


def test_reporter_color_output_text_matches_plain_report(capsys, monkeypatch) -> None:
    monkeypatch.setenv("TERM", "xterm-256color")
    monkeypatch.delenv("NO_COLOR", raising=False)
    state = _state(SAMPLE_LINES + ["DEBUG col1\tcol2"])
    SummaryReporter(color=True).generate_report(build_report_lines(state, "app.log"))
    out = capsys.readouterr().out
    assert "\x1b[" in out
    assert re.sub(r"\x1b\[[0-9;]*m", "", out) == format_report(state, "app.log") + "\n"
