"""Tests for report writers."""

import pytest

from news_agency.reports import BaseReportWriter, MemoryReportWriter, StdoutReportWriter


class TestStdoutReportWriter:

    def test_prints_lines(self, capsys):
        writer = StdoutReportWriter()

        writer.write(["Bill for Alice:", "Total Cost: $1.5"])

        assert capsys.readouterr().out == "Bill for Alice:\nTotal Cost: $1.5\n"


class TestMemoryReportWriter:

    def test_collects_lines(self):
        writer = MemoryReportWriter()

        writer.write(["a", "b"])
        writer.write(["c"])

        assert writer.lines == ["a", "b", "c"]
        assert writer.text() == "a\nb\nc\n"

    def test_clear(self):
        writer = MemoryReportWriter()
        writer.write(["a"])

        writer.clear()

        assert writer.lines == []


class TestWriterStats:

    def test_counts_reports_and_lines(self):
        writer = MemoryReportWriter("audit")
        writer.write(["a", "b"])
        writer.write([])

        assert writer.get_stats() == {"name": "audit", "report_count": 2, "line_count": 2}

    def test_reset_stats(self):
        writer = MemoryReportWriter()
        writer.write(["a"])

        writer.reset_stats()

        assert writer.get_stats()["report_count"] == 0

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            BaseReportWriter("bare")
