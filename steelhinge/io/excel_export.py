"""
Results workbook for human review.

One sheet per member type; each exported variant appends one row with its
inputs, geometry, intermediate values and final hinge parameters. Numbers are
rounded to three decimals.
"""

import zipfile
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Union

import pandas as pd
from loguru import logger
from openpyxl import load_workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from steelhinge.core.errors import ExportError
from steelhinge.core.variants import hinge_name

SHEET_NAMES = {
    "Beam": "Beam Results",
    "Brace": "Brace Results",
    "Column": "Column Results",
}
HEADER_FILL = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
DECIMALS = 3


def results_path_for(model_path: Union[str, Path]) -> Path:
    """``frame.$2k`` -> ``frame_Results.xlsx`` next to the model."""
    path = Path(model_path)
    return path.with_name(f"{path.stem}_Results.xlsx")


def _profile_columns(prefix: str, profile) -> Dict[str, float]:
    return {f"{prefix}_{k}": v for k, v in profile.model_dump().items()}


def _geometry_columns(prefix: str, geometry) -> Dict[str, Any]:
    if geometry is None:
        return {}
    data = geometry.model_dump(exclude={"shape", "material"})
    return {f"{prefix}{k}": v for k, v in data.items()}


def variant_row(variant) -> Dict[str, Any]:
    """
    Flatten a calculated variant into one spreadsheet row.

    Raises:
        ExportError: If the variant has no results
    """
    if variant.results is None:
        raise ExportError(f"Variant '{variant.name}' has not been calculated")

    row: Dict[str, Any] = {
        "Calculated": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "Section": variant.section_name,
        "Variant": variant.name,
        "Category": str(variant.category),
        "Hinge": hinge_name(variant),
        "L (mm)": variant.length,
        "Fy (MPa)": variant.fy,
    }
    results = variant.results
    if variant.member == "Beam":
        cls = results.classification
        factors = results.control_factors
        row.update({
            "Column": variant.column_section,
            "Column L (mm)": variant.column_length,
            "Column Fy (MPa)": variant.column_fy,
            "n": variant.beam_n,
        })
        row.update(_geometry_columns("", variant.geometry))
        row.update(_geometry_columns("column_", variant.column_geometry))
        row.update({
            "bf/tf": cls.flange_ratio,
            "h/tw": cls.web_ratio,
            "limit1": cls.compact_flange_limit,
            "limit2": cls.compact_web_limit,
            "limit3": cls.slender_flange_limit,
            "limit4": cls.slender_web_limit,
            "result1": cls.flange_compact,
            "result2": cls.web_compact,
            "result3": cls.flange_slender,
            "result4": cls.web_slender,
            "My (kN·m)": results.yield_moment,
            "θy (rad)": results.yield_rotation,
        })
        row.update(_profile_columns("profile", results.profile))
        row.update({
            "control_1": factors.connection,
            "control_2": factors.hinge_location,
            "control_3": factors.panel_zone,
            "control_4": factors.slenderness,
            "Adjustment Factor": factors.adjustment_factor,
        })
        row.update(_profile_columns("prime", results.profile_prime))
    else:
        cls = results.classification
        cap = results.capacity
        row.update(_geometry_columns("", variant.geometry))
        row.update({
            "KL/r": cls.slenderness,
            "limit_stocky": cls.stocky_limit,
            "limit_slender": cls.slender_limit,
            "Fe (MPa)": cap.euler_stress,
            "Fcr (MPa)": cap.critical_stress,
            "A (mm²)": cap.area,
            "P_y (kN)": cap.compression_force,
            "delta_c (mm)": cap.compression_displacement,
            "T_y (kN)": cap.tension_force,
            "delta_t (mm)": cap.tension_displacement,
        })
        row.update(_profile_columns("compression", results.compression))
        row.update(_profile_columns("tension", results.tension))
        if variant.member == "Column":
            row["Axial Capacity (kN)"] = results.axial_capacity

    return {k: round(v, DECIMALS) if isinstance(v, float) else v for k, v in row.items()}


def _style_sheet(ws) -> None:
    for cell in ws[1]:
        cell.font = Font(bold=True)
        cell.fill = HEADER_FILL
    for col in ws.columns:
        max_len = max(len("" if cell.value is None else str(cell.value)) for cell in col)
        ws.column_dimensions[get_column_letter(col[0].column)].width = min(60, max(10, max_len + 2))


class ResultsSink(ABC):
    """Receiver of calculated variants."""

    @abstractmethod
    def export(self, variant) -> None:
        """Raises ExportError on failure."""
        pass


class ExcelResultsSink(ResultsSink):
    """
    Appends rows to ``<model>_Results.xlsx``.

    Existing sheets are kept; a row is appended to the sheet of the variant's
    member type.

    Example:
        >>> sink = ExcelResultsSink(results_path_for("frame.$2k"))
        >>> sink.export(calculated_beam)
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _existing_sheets(self) -> Dict[str, pd.DataFrame]:
        if not self.path.exists():
            return {}
        return pd.read_excel(self.path, sheet_name=None, engine="openpyxl")

    def export(self, variant) -> None:
        sheet = SHEET_NAMES[variant.member]
        try:
            row = variant_row(variant)
            sheets = self._existing_sheets()
            new = pd.DataFrame([row])
            if sheet in sheets and not sheets[sheet].empty:
                sheets[sheet] = pd.concat([sheets[sheet], new], ignore_index=True)
            else:
                sheets[sheet] = new

            with pd.ExcelWriter(self.path, engine="openpyxl") as writer:
                for name, frame in sheets.items():
                    frame.to_excel(writer, sheet_name=name, index=False)
            wb = load_workbook(self.path)
            for ws in wb.worksheets:
                _style_sheet(ws)
            wb.save(self.path)
        except ExportError:
            raise
        except (OSError, ValueError, KeyError, zipfile.BadZipFile) as exc:
            raise ExportError(f"Could not export '{variant.name}' to {self.path}: {exc}") from exc
        logger.info(f"Exported {variant.section_name}/{variant.name} to {self.path.name} [{sheet}]")
