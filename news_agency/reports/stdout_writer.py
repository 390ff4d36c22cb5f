"""Standard output report writer."""

import sys
from typing import Sequence

from .base import BaseReportWriter


class StdoutReportWriter(BaseReportWriter):
    """Prints report lines to stdout."""

    def __init__(self, name: str = "stdout"):
        super().__init__(name)

    def _emit(self, lines: Sequence[str]) -> None:
        # Resolved per call so redirected or captured stdout is honoured
        for line in lines:
            print(line, file=sys.stdout)
        sys.stdout.flush()
