"""
Unit tests for the results workbook
"""

from pathlib import Path

import pandas as pd
import pytest
from openpyxl import load_workbook
from steelhinge.core.errors import ExportError
from steelhinge.design import calculate
from steelhinge.io.excel_export import (
    SHEET_NAMES,
    ExcelResultsSink,
    results_path_for,
    variant_row,
)


@pytest.fixture
def calculated_beam(beam_variant, catalog):
    return calculate(beam_variant, catalog)


@pytest.fixture
def calculated_brace(brace_variant, catalog):
    return calculate(brace_variant, catalog)


class TestResultsPath:
    """Test the workbook name derived from the model."""

    def test_next_to_model(self):
        assert results_path_for("/work/frame.$2k") == Path("/work/frame_Results.xlsx")


class TestVariantRow:
    """Test row flattening."""

    def test_beam_row(self, calculated_beam):
        row = variant_row(calculated_beam)
        assert row["Section"] == "IPE400"
        assert row["Hinge"] == "IPE400_V1_M3"
        assert row["Adjustment Factor"] == pytest.approx(0.64)
        assert row["prime_a"] == pytest.approx(5.76)
        assert row["column_depth"] == 300
        assert row["result1"]

    def test_rounded_to_three_decimals(self, calculated_beam):
        row = variant_row(calculated_beam)
        assert row["θy (rad)"] == round(calculated_beam.results.yield_rotation, 3)
        assert row["My (kN·m)"] == pytest.approx(450.915)

    def test_brace_row(self, calculated_brace):
        row = variant_row(calculated_brace)
        assert row["Hinge"] == "BOX150_B1_Axial"
        assert row["KL/r"] == pytest.approx(75.0)
        assert row["tension_a"] == 8.0
        assert "Axial Capacity (kN)" not in row

    def test_column_row(self, column_variant, catalog):
        row = variant_row(calculate(column_variant, catalog))
        assert row["Axial Capacity (kN)"] == pytest.approx(round(14910 * 345 / 1000, 3))

    def test_uncalculated(self, beam_variant):
        with pytest.raises(ExportError, match="not been calculated"):
            variant_row(beam_variant)


class TestExcelResultsSink:
    """Test writing and appending."""

    def test_creates_workbook(self, tmp_path, calculated_beam):
        path = tmp_path / "frame_Results.xlsx"
        ExcelResultsSink(path).export(calculated_beam)
        frame = pd.read_excel(path, sheet_name=SHEET_NAMES["Beam"])
        assert len(frame) == 1
        assert frame.loc[0, "Hinge"] == "IPE400_V1_M3"

    def test_appends_rows_and_sheets(self, tmp_path, calculated_beam, calculated_brace):
        path = tmp_path / "frame_Results.xlsx"
        sink = ExcelResultsSink(path)
        sink.export(calculated_beam)
        sink.export(calculated_beam)
        sink.export(calculated_brace)
        sheets = pd.read_excel(path, sheet_name=None)
        assert len(sheets[SHEET_NAMES["Beam"]]) == 2
        assert len(sheets[SHEET_NAMES["Brace"]]) == 1

    def test_header_styled(self, tmp_path, calculated_beam):
        path = tmp_path / "frame_Results.xlsx"
        ExcelResultsSink(path).export(calculated_beam)
        ws = load_workbook(path)[SHEET_NAMES["Beam"]]
        assert ws["A1"].value == "Calculated"
        assert ws["A1"].font.bold

    def test_uncalculated_raises(self, tmp_path, beam_variant):
        path = tmp_path / "frame_Results.xlsx"
        with pytest.raises(ExportError):
            ExcelResultsSink(path).export(beam_variant)
        assert not path.exists()

    def test_corrupt_workbook(self, tmp_path, calculated_beam):
        path = tmp_path / "frame_Results.xlsx"
        path.write_text("not a workbook")
        with pytest.raises(ExportError):
            ExcelResultsSink(path).export(calculated_beam)
