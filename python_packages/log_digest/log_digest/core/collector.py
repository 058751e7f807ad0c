# log_digest/log_digest/core/collector.py
from abc import ABC, abstractmethod
from .log import LogRecord

class DataCollector(ABC):
    """Base class for collecting statistics from log records"""
    @abstractmethod
    def process_entry(self, entry: LogRecord) -> None:
        """Process a single log record"""
        pass
