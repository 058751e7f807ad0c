"""
Summarize plain-text log files: level counts, frequent messages, unique IPs
"""

__version__ = "0.1.0"
