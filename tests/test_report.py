"""Tests for the plain text sweep table."""

import pytest

from line_width_planner import run
from line_width_planner.report import COLUMNS, format_row, format_table


class TestFormatRow:
    @pytest.fixture
    def first(self):
        return run(0.4, 0.6, 0.04)[0]

    def test_one_cell_per_column(self, first):
        assert len(format_row(first)) == len(COLUMNS)

    def test_rounded_values(self, first):
        cells = format_row(first)
        assert cells[0] == "0.04"
        assert cells[1] == "0.44"
        assert cells[2] == "0.006"
        assert cells[3] == "-87.9%"
        assert cells[4] == "1.265"
        assert cells[5] == "0.64"


class TestFormatTable:
    @pytest.fixture
    def records(self):
        return run(0.4, 0.6, 0.04)

    def test_header(self, records):
        header = format_table(records).splitlines()[0]
        for title, _ in COLUMNS:
            assert title in header

    def test_two_lines_per_record(self, records):
        lines = format_table(records).splitlines()
        assert len(lines) == 2 + 2 * len(records)

    def test_notes_with_colors(self, records):
        lines = format_table(records).splitlines()
        assert lines[3] == f"    [#f00] {records[0].notes}"

    def test_notes_without_colors(self, records):
        lines = format_table(records, show_colors=False).splitlines()
        assert lines[3] == f"    {records[0].notes}"

    def test_empty(self):
        assert format_table([]) == "No layer heights"

    def test_output_volume_summary(self, records):
        lines = format_table(records, output_volume=0.0502654).splitlines()
        assert lines[0] == "Constant Output Volume: 0.05"
        assert lines[1].startswith("Layer Height")
        assert len(lines) == 3 + 2 * len(records)

    def test_no_output_volume_summary_by_default(self, records):
        assert "Constant Output Volume" not in format_table(records)
