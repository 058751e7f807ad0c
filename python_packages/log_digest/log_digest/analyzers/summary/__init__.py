# log_digest/log_digest/analyzers/summary/__init__.py
from .collector import SummaryDataCollector
from .models import AnalysisState
from .reporter import SummaryReporter, build_report_lines, format_report

__all__ = [
    'SummaryDataCollector',
    'AnalysisState',
    'SummaryReporter',
    'build_report_lines',
    'format_report'
]
