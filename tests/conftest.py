"""
Shared fixtures: a small $2k model, a section catalog and sample variants.
"""

import pytest

from steelhinge.core.sections import SectionGeometry, ShapeKind
from steelhinge.core.variants import BeamVariant, BraceVariant, ColumnVariant
from steelhinge.io.section_source import CatalogSectionSource

SAMPLE_MODEL = (
    "File C:\\models\\frame.$2k was saved on 10/19/26 at 09:15:02\n"
    "\n"
    'TABLE:  "PROGRAM CONTROL"\n'
    '   ProgramName=SAP2000   Version=24.0.0   CurrUnits="KN, mm, C"\n'
    "\n"
    'TABLE:  "MATERIAL PROPERTIES 03A - STEEL DATA"\n'
    "   Material=S355   Fy=0.355   Fu=0.51   EffFy=0.3905   EffFu=0.561\n"
    "\n"
    'TABLE:  "FRAME SECTION PROPERTIES 01 - GENERAL"\n'
    '   SectionName=IPE400   Material=S355   Shape="I/Wide Flange"   t3=400   t2=180   tf=13.5   tw=8.6 _\n'
    "        t2b=180   tfb=13.5   FilletRadius=21   Area=8446   I33=231280000   Z33=1307000   R33=165.5   R22=39.5\n"
    '   SectionName=HEB300   Material=S355   Shape="I/Wide Flange"   t3=300   t2=300   tf=19   tw=11 _\n'
    "        t2b=300   tfb=19   FilletRadius=27   Area=14910   I33=251700000   Z33=1869000   R33=129.9   R22=75.8\n"
    "   SectionName=BOX150   Material=S355   Shape=Box/Tube   t3=150   t2=150   tf=8   tw=8   Area=4480 _\n"
    "        I33=16130000   Z33=253000   R33=60   R22=40\n"
    "\n"
    'TABLE:  "LOAD PATTERN DEFINITIONS"\n'
    "   LoadPat=DEAD   DesignType=Dead   SelfWtMult=1\n"
    "\n"
    "END TABLE DATA\n"
)

IPE400 = SectionGeometry(
    depth=400, flange_width=180, flange_thickness=13.5, web_thickness=8.6,
    bottom_flange_width=180, bottom_flange_thickness=13.5, fillet_radius=21,
    area=8446, inertia_major=231280000, modulus_major=1307000,
    radius_major=165.5, radius_minor=39.5, yield_strength=355,
    shape=ShapeKind.I_SECTION, material="S355",
)
HEB300 = SectionGeometry(
    depth=300, flange_width=300, flange_thickness=19, web_thickness=11,
    bottom_flange_width=300, bottom_flange_thickness=19, fillet_radius=27,
    area=14910, inertia_major=251700000, modulus_major=1869000,
    radius_major=129.9, radius_minor=75.8, yield_strength=355,
    shape=ShapeKind.I_SECTION, material="S355",
)
BOX150 = SectionGeometry(
    depth=150, flange_width=150, flange_thickness=8, web_thickness=8,
    area=4480, inertia_major=16130000, modulus_major=253000,
    radius_major=60, radius_minor=40, yield_strength=355,
    shape=ShapeKind.BOX, material="S355",
)


@pytest.fixture
def sample_model():
    return SAMPLE_MODEL


@pytest.fixture
def model_file(tmp_path):
    """Sample model written to a temporary directory."""
    path = tmp_path / "frame.$2k"
    path.write_bytes(SAMPLE_MODEL.encode("latin-1"))
    return path


@pytest.fixture
def catalog():
    return CatalogSectionSource({"IPE400": IPE400, "HEB300": HEB300, "BOX150": BOX150})


@pytest.fixture
def beam_variant():
    return BeamVariant(
        name="V1", section_name="IPE400", category="Beam-I-Section",
        length=6000, fy=345, column_section="HEB300",
        column_length=3500, column_fy=345,
    )


@pytest.fixture
def brace_variant():
    return BraceVariant(
        name="B1", section_name="BOX150", category="Brace-Tube-Section",
        length=3000, fy=345, length_minor=3000, length_major=3000,
    )


@pytest.fixture
def column_variant():
    return ColumnVariant(
        name="C1", section_name="HEB300", category="Column-I-Section",
        length=3500, fy=345,
    )
