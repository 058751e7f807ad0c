"""Report layout and colour configuration"""
from dataclasses import dataclass

DEFAULT_TOP_N = 5
RULE_WIDTH = 41

REPORT_TITLE = "LOG ANALYSIS REPORT"
NONE_FOUND = "none found"

TITLE = "magenta"
RULE = "bright_black"
LABEL = "yellow"
ERROR = "red"
WARN = "dark_orange3"
INFO = "green"
DEBUG = "deep_sky_blue1"
RANK = "cyan"
IP = "bright_cyan"

REPORT_THEME = {
    "title": TITLE,
    "rule": RULE,
    "label": LABEL,
    "level.error": ERROR,
    "level.warn": WARN,
    "level.info": INFO,
    "level.debug": DEBUG,
    "rank": RANK,
    "ip": IP,
}


@dataclass(frozen=True)
class ReportConfig:
    """Per-run report options"""
    top_n: int = DEFAULT_TOP_N
    color: bool = False

    @classmethod
    def from_args(cls, args) -> 'ReportConfig':
        return cls(top_n=args.top, color=args.color)
