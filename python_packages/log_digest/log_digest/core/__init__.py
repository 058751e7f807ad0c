# log_digest/log_digest/core/__init__.py
from .levels import LevelKind, TABLE_LEVELS, classify, find_level
from .extractor import extract, extract_ips, message_key
from .log import LogRecord, LogReader
from .collector import DataCollector
from .reporter import Reporter

__all__ = [
    'LevelKind',
    'TABLE_LEVELS',
    'classify',
    'find_level',
    'extract',
    'extract_ips',
    'message_key',
    'LogRecord',
    'LogReader',
    'DataCollector',
    'Reporter'
]
