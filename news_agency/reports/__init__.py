"""
Report rendering and output.

Line formatting for schedules, bills, receipts and earnings, and the
writers that send those lines to their destination.
"""
from .base import BaseReportWriter
from .formatting import ReportFormatter, format_money
from .memory_writer import MemoryReportWriter
from .stdout_writer import StdoutReportWriter

__all__ = [
    "BaseReportWriter",
    "MemoryReportWriter",
    "ReportFormatter",
    "StdoutReportWriter",
    "format_money",
]
