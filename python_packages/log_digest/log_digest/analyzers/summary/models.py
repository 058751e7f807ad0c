# log_digest/log_digest/analyzers/summary/models.py
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from log_digest.core import LevelKind, LogRecord


def _empty_level_counts() -> Dict[LevelKind, int]:
    return {level: 0 for level in LevelKind}


@dataclass
class AnalysisState:
    """Running counts accumulated over one log file"""
    total_lines: int = 0
    level_counts: Dict[LevelKind, int] = field(default_factory=_empty_level_counts)
    message_counts: Dict[str, int] = field(default_factory=dict)
    message_first_seen: Dict[str, int] = field(default_factory=dict)
    unique_ips: Set[str] = field(default_factory=set)
    ip_first_seen_order: List[str] = field(default_factory=list)

    def add_record(self, record: LogRecord) -> None:
        """Fold one record into the counts"""
        self.total_lines += 1
        self.level_counts[record.level] += 1

        key = record.message_key
        if key not in self.message_counts:
            self.message_counts[key] = 0
            self.message_first_seen[key] = self.total_lines
        self.message_counts[key] += 1

        # Sorted so several new IPs on one line get a reproducible order
        for ip in sorted(record.ips):
            if ip not in self.unique_ips:
                self.unique_ips.add(ip)
                self.ip_first_seen_order.append(ip)

    def top_messages(self, n: int) -> List[Tuple[str, int]]:
        """Most frequent messages, earliest first occurrence breaking ties"""
        if n <= 0:
            return []
        ranked = sorted(
            self.message_counts.items(),
            key=lambda item: (-item[1], self.message_first_seen[item[0]])
        )
        return ranked[:n]
