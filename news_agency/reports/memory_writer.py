"""In-memory report writer."""

from typing import Sequence

from .base import BaseReportWriter


class MemoryReportWriter(BaseReportWriter):
    """Keeps report lines in memory for embedding callers."""

    def __init__(self, name: str = "memory"):
        super().__init__(name)
        self.lines: list[str] = []

    def _emit(self, lines: Sequence[str]) -> None:
        self.lines.extend(lines)

    def text(self) -> str:
        """All collected lines joined as console text."""
        return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()
