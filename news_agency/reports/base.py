"""Base classes for report writers."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

import structlog


class BaseReportWriter(ABC):
    """Base class for report output destinations."""

    def __init__(self, name: str):
        self.name = name
        self.logger = structlog.get_logger(f"news_agency.reports.{name}")
        self._report_count = 0
        self._line_count = 0

    @abstractmethod
    def _emit(self, lines: Sequence[str]) -> None:
        """
        Send report lines to the destination.

        Args:
            lines: Report lines without trailing newlines
        """

    def write(self, lines: Sequence[str]) -> None:
        """Write one report and update statistics."""
        self._emit(lines)
        self._report_count += 1
        self._line_count += len(lines)
        self.logger.debug("Report written", writer=self.name, line_count=len(lines))

    def get_stats(self) -> dict[str, Any]:
        """Get writer statistics."""
        return {
            "name": self.name,
            "report_count": self._report_count,
            "line_count": self._line_count,
        }

    def reset_stats(self):
        """Reset writer statistics."""
        self._report_count = 0
        self._line_count = 0
