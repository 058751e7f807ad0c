# log_digest/log_digest/core/levels.py
import re
from enum import Enum
from typing import Optional, Tuple


class LevelKind(Enum):
    """Severity levels recognized in a log line"""
    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    UNKNOWN = "UNKNOWN"


# Rows of the level table, in display order. UNKNOWN is never displayed.
TABLE_LEVELS: Tuple[LevelKind, ...] = (
    LevelKind.ERROR,
    LevelKind.WARN,
    LevelKind.INFO,
    LevelKind.DEBUG,
)

_KEYWORDS = {
    'ERROR': LevelKind.ERROR,
    'WARNING': LevelKind.WARN,
    'WARN': LevelKind.WARN,
    'INFO': LevelKind.INFO,
    'DEBUG': LevelKind.DEBUG,
}

# Whole word: neighbours must be non-alphanumeric or the string edge
_LEVEL_RE = re.compile(
    r'(?<![A-Za-z0-9])(ERROR|WARNING|WARN|INFO|DEBUG)(?![A-Za-z0-9])'
)


def find_level(line: str) -> Optional[re.Match]:
    """Return the leftmost level keyword match in the line, if any"""
    return _LEVEL_RE.search(line)


def classify(line: str) -> LevelKind:
    """Determine the severity level of a single log line"""
    match = find_level(line)
    if match is None:
        return LevelKind.UNKNOWN
    return _KEYWORDS[match.group(1)]
