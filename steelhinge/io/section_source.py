"""
Section-property sources.

Calculators never talk to a model directly; they receive a
SectionPropertySource and ask it for a section by name and expected shape.

Sources:
- S2kSectionSource: reads frame sections and steel data from the $2k file
- CatalogSectionSource: in-memory catalog, optionally loaded from YAML

:func:`fetch_section` is the tolerant entry point used by the batch run: a
failed lookup is logged and replaced by all-zero geometry.

Catalog YAML:

    sections:
      IPE400:
        shape: I
        depth: 400
        flange_width: 180
        flange_thickness: 13.5
        web_thickness: 8.6
        fillet_radius: 21
        ...
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional, Union
import yaml
from loguru import logger

from steelhinge.core.errors import SectionLookupError
from steelhinge.core.sections import SectionGeometry, ShapeKind
from steelhinge.io.s2k_tables import ModelTextFile

FRAME_SECTIONS_TABLE = "FRAME SECTION PROPERTIES 01 - GENERAL"
STEEL_DATA_TABLE = "MATERIAL PROPERTIES 03A - STEEL DATA"
PROGRAM_CONTROL_TABLE = "PROGRAM CONTROL"

# Shape names as written by SAP2000
SAP_SHAPES = {
    "I/Wide Flange": ShapeKind.I_SECTION,
    "Channel": ShapeKind.CHANNEL,
    "Box/Tube": ShapeKind.BOX,
    "Pipe": ShapeKind.TUBE,
    "Angle": ShapeKind.ANGLE,
}

# Unit factors to N and mm
LENGTH_UNITS = {"mm": 1.0, "cm": 10.0, "m": 1000.0, "in": 25.4, "ft": 304.8}
FORCE_UNITS = {"N": 1.0, "KN": 1000.0, "kip": 4448.2216, "lb": 4.4482216, "Kgf": 9.80665, "Tonf": 9806.65}


def shape_matches(requested: Optional[ShapeKind], found: ShapeKind) -> bool:
    """Tube requests accept boxes and pipes; UserDefined accepts anything."""
    if requested is None or requested == ShapeKind.USER_DEFINED:
        return True
    if requested == ShapeKind.TUBE:
        return found in (ShapeKind.BOX, ShapeKind.TUBE)
    return requested == found


class SectionPropertySource(ABC):
    """Abstract provider of section geometry."""

    @abstractmethod
    def get_section(self, name: str, shape: Optional[ShapeKind] = None) -> SectionGeometry:
        """
        Look up one section.

        Raises:
            SectionLookupError: If the section is unknown or has another shape
        """
        pass


class CatalogSectionSource(SectionPropertySource):
    """Sections held in memory, keyed by name."""

    def __init__(self, sections: Mapping[str, Union[SectionGeometry, Dict]]):
        self._sections: Dict[str, SectionGeometry] = {
            name: geom if isinstance(geom, SectionGeometry) else SectionGeometry.model_validate(geom)
            for name, geom in sections.items()
        }

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "CatalogSectionSource":
        """
        Load a catalog file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        with open(Path(path), "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(data.get("sections", {}))

    def get_section(self, name: str, shape: Optional[ShapeKind] = None) -> SectionGeometry:
        if name not in self._sections:
            raise SectionLookupError(f"Section '{name}' is not in the catalog")
        geometry = self._sections[name]
        if not shape_matches(shape, geometry.shape):
            raise SectionLookupError(
                f"Section '{name}' is {geometry.shape.value}, expected {shape.value}"
            )
        return geometry

    def __contains__(self, name: str) -> bool:
        return name in self._sections


class S2kSectionSource(SectionPropertySource):
    """
    Sections read from the frame-section and steel tables of a $2k file.

    Values are converted to N and mm using the CurrUnits entry of the
    PROGRAM CONTROL table (mm and N when it is missing). The file is parsed
    once, on first use.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._sections: Optional[Dict[str, Dict[str, str]]] = None
        self._fy: Dict[str, float] = {}
        self._length = 1.0
        self._force = 1.0

    def _load(self) -> None:
        try:
            model = ModelTextFile.read(self.path)
        except OSError as exc:
            raise SectionLookupError(f"Cannot read sections from {self.path}: {exc}") from exc

        for row in model.rows(PROGRAM_CONTROL_TABLE):
            units = row.get("CurrUnits")
            if units:
                self._set_units(units)
        self._sections = {
            row["SectionName"]: row
            for row in model.rows(FRAME_SECTIONS_TABLE)
            if "SectionName" in row
        }
        stress = self._force / self._length ** 2
        for row in model.rows(STEEL_DATA_TABLE):
            if "Material" in row and "Fy" in row:
                self._fy[row["Material"]] = self._number(row["Fy"]) * stress
        logger.debug(f"Loaded {len(self._sections)} frame sections from {self.path.name}")

    def _set_units(self, units: str) -> None:
        parts = [p.strip() for p in units.split(",")]
        if len(parts) >= 2:
            self._force = FORCE_UNITS.get(parts[0], 1.0)
            self._length = LENGTH_UNITS.get(parts[1], 1.0)

    @staticmethod
    def _number(text: Optional[str]) -> float:
        if text is None or text == "":
            return 0.0
        try:
            return float(text)
        except ValueError:
            return 0.0

    def get_section(self, name: str, shape: Optional[ShapeKind] = None) -> SectionGeometry:
        if self._sections is None:
            self._load()
        row = self._sections.get(name)
        if row is None:
            raise SectionLookupError(f"Section '{name}' not found in {self.path.name}")

        found = SAP_SHAPES.get(row.get("Shape", ""), ShapeKind.USER_DEFINED)
        if not shape_matches(shape, found):
            raise SectionLookupError(
                f"Section '{name}' is '{row.get('Shape')}', expected {shape.value}"
            )

        L = self._length
        num = self._number
        material = row.get("Material", "")
        try:
            return SectionGeometry(
                depth=num(row.get("t3")) * L,
                flange_width=num(row.get("t2")) * L,
                flange_thickness=num(row.get("tf")) * L,
                web_thickness=num(row.get("tw")) * L,
                bottom_flange_width=num(row.get("t2b")) * L,
                bottom_flange_thickness=num(row.get("tfb")) * L,
                fillet_radius=num(row.get("FilletRadius")) * L if found == ShapeKind.I_SECTION else 0.0,
                inertia_major=num(row.get("I33")) * L ** 4,
                modulus_major=num(row.get("Z33")) * L ** 3,
                area=num(row.get("Area")) * L ** 2,
                radius_major=num(row.get("R33")) * L,
                radius_minor=num(row.get("R22")) * L,
                yield_strength=self._fy.get(material, 0.0),
                shape=found,
                material=material,
            )
        except ValueError as exc:
            raise SectionLookupError(f"Section '{name}' has invalid properties in {self.path.name}: {exc}") from exc


def fetch_section(
    source: SectionPropertySource,
    name: str,
    shape: Optional[ShapeKind] = None,
) -> SectionGeometry:
    """
    Tolerant lookup: zero geometry (and a warning) instead of an error.

    Example:
        >>> fetch_section(CatalogSectionSource({}), "MISSING").is_empty
        True
    """
    try:
        return source.get_section(name, shape)
    except SectionLookupError as exc:
        logger.warning(f"Section lookup failed, using zero geometry: {exc}")
        return SectionGeometry.empty(shape)
