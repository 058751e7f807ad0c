# log_digest/log_digest/analyzers/summary/reporter.py
from typing import List, Optional, Tuple

from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment
from rich.theme import Theme

from log_digest import config
from log_digest.core import TABLE_LEVELS, Reporter
from .models import AnalysisState

# (text, style) pairs; style names refer to config.REPORT_THEME
ReportLine = Tuple[str, Optional[str]]


def build_report_lines(
    state: AnalysisState, source_path: str, top_n: int = config.DEFAULT_TOP_N
) -> List[ReportLine]:
    """Lay out the summary report line by line"""
    rule = "-" * config.RULE_WIDTH
    banner = f" {config.REPORT_TITLE} ".center(config.RULE_WIDTH, "=")

    lines: List[ReportLine] = [
        (banner, "title"),
        (f"File: {source_path}", "label"),
        (f"Total Lines: {state.total_lines}", "label"),
        (rule, "rule"),
    ]

    for level in TABLE_LEVELS:
        label = f"{level.value}:"
        lines.append(
            (f"{label:<9}{state.level_counts[level]}", f"level.{level.value.lower()}")
        )
    lines.append((rule, "rule"))

    lines.append((f"Top {top_n} Messages:", "label"))
    top = state.top_messages(top_n)
    if top:
        for rank, (message, count) in enumerate(top, start=1):
            lines.append((f"  {rank}. {message} ({count} occurrences)", "rank"))
    else:
        lines.append((f"  {config.NONE_FOUND}", None))
    lines.append((rule, "rule"))

    lines.append(("Unique IP Addresses Found:", "label"))
    if state.ip_first_seen_order:
        for ip in state.ip_first_seen_order:
            lines.append((f"  - {ip}", "ip"))
    else:
        lines.append((f"  {config.NONE_FOUND}", None))
    lines.append(("=" * config.RULE_WIDTH, "title"))

    return lines


def format_report(
    state: AnalysisState, source_path: str, top_n: int = config.DEFAULT_TOP_N
) -> str:
    """Render the summary report as plain text"""
    return "\n".join(
        text for text, _ in build_report_lines(state, source_path, top_n)
    )


class SummaryReporter(Reporter):
    def __init__(self, color: bool = False, console: Optional[Console] = None):
        self.color = color
        if console is None:
            console = Console(
                theme=Theme(config.REPORT_THEME),
                force_terminal=True if color else None,
                highlight=False,
                emoji=False,
                markup=False,
                soft_wrap=True,
            )
        super().__init__(console)

    def generate_report(self, analysis_result: List[ReportLine]) -> None:
        """Print report lines, styled when colour is enabled"""
        for text, style in analysis_result:
            if self.color:
                self.console.print(StyledLine(text, style))
            else:
                print(text, file=self.console.file)


class StyledLine:
    """One report line emitted as a raw segment

    Segments skip Text rendering, so tabs and spacing are not expanded.
    """

    def __init__(self, text: str, style: Optional[str] = None):
        self.text = text
        self.style = style

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        style = console.get_style(self.style) if self.style else None
        yield Segment(self.text, style)
        yield Segment.line()
