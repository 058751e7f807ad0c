# log_digest/log_digest/core/log.py
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterator

from .extractor import extract
from .levels import LevelKind, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogRecord:
    """One classified line of a log file"""
    raw_line: str
    level: LevelKind
    ips: FrozenSet[str] = field(default_factory=frozenset)
    message_key: str = ""

    @classmethod
    def from_line(cls, line: str) -> 'LogRecord':
        """Classify a log line and extract its tokens"""
        line = line.rstrip('\r\n')
        ips, key = extract(line)
        return cls(
            raw_line=line,
            level=classify(line),
            ips=ips,
            message_key=key
        )


class LogReader:
    """Streams a log file as LogRecord objects, one per line"""

    @staticmethod
    def iter_records(file_path: Path) -> Iterator[LogRecord]:
        """Yield a record for every newline-delimited line of the file

        Raises:
            FileNotFoundError: If the path is not a readable regular file
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Log file not found: {path}")

        try:
            f = open(path, 'r', encoding='utf-8', errors='replace', newline='\n')
        except OSError as e:
            raise FileNotFoundError(f"Log file not readable: {path}") from e

        logger.debug("Reading %s", path)
        with f:
            for line in f:
                yield LogRecord.from_line(line)
