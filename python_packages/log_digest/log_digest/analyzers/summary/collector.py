# log_digest/log_digest/analyzers/summary/collector.py
from typing import List, Optional, Tuple
from log_digest.core import DataCollector, LogRecord
from .models import AnalysisState

class SummaryDataCollector(DataCollector):
    def __init__(self, state: Optional[AnalysisState] = None):
        self.stats = state if state is not None else AnalysisState()

    def process_entry(self, entry: LogRecord) -> None:
        """Fold a log record into the summary, UNKNOWN lines included"""
        self.stats.add_record(entry)

    absorb = process_entry

    def top_messages(self, n: int) -> List[Tuple[str, int]]:
        return self.stats.top_messages(n)
