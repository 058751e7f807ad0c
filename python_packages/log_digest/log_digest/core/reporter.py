# log_digest/log_digest/core/reporter.py
from abc import ABC, abstractmethod
from typing import Any
from rich.console import Console

class Reporter(ABC):
    """Base class for generating reports"""
    def __init__(self, console: Console):
        self.console = console

    @abstractmethod
    def generate_report(self, analysis_result: Any) -> None:
        """Generate and display the report"""
        pass
