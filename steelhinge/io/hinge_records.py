"""
Hinge records and their $2k line format.

A HingeRecord is the transient bundle written for one hinge name: the
general (header) definition, nine backbone points -E..E and three acceptance
levels IO/LS/CP. Records are built from calculation results by
:func:`moment_hinge_record` (beams) and :func:`axial_hinge_record` (braces,
columns) and rendered by :func:`render_hinge`.

Backbone values are normalized: forces in multiples of the yield force
(moment), deformations in multiples of the yield deformation.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from steelhinge.core.variants import AxialCapacity, ProfileParameters

# Table names are external contract strings of the model file format
GENERAL_TABLE = "HINGES DEF 02 - NONINTERACTING - DEFORM CONTROL - GENERAL"
BACKBONE_TABLE = "HINGES DEF 03 - NONINTERACTING - DEFORM CONTROL - FORCE-DEFORM"
ACCEPTANCE_TABLE = "HINGES DEF 04 - NONINTERACTING - DEFORM CONTROL - ACCEPTANCE"
HINGE_TABLES = (GENERAL_TABLE, BACKBONE_TABLE, ACCEPTANCE_TABLE)

STATIONS = ("-E", "-D", "-C", "-B", "A", "B", "C", "D", "E")
ACCEPTANCE_LEVELS = ("IO", "LS", "CP")

SEPARATOR = "   "
INDENT = "   "

# Residual strength ramp between B and C
HARDENING_SLOPE = 0.03


class BackbonePoint(BaseModel):
    """One (force, deformation) station with its print precision."""
    station: str
    force: float
    displacement: float
    force_digits: int = Field(default=2, ge=0)
    displacement_digits: int = Field(default=2, ge=0)

    model_config = {"frozen": True}


class AcceptancePoint(BaseModel):
    """Deformation limits for one performance level."""
    level: str
    positive: float
    negative: float

    model_config = {"frozen": True}


class YieldScale(BaseModel):
    """Directional yield force / displacement scale factors (kN, mm)."""
    positive_force: float
    positive_displacement: float
    negative_force: float
    negative_displacement: float

    model_config = {"frozen": True}


class HingeRecord(BaseModel):
    """
    Everything written to the three hinge tables for one hinge name.

    Attributes:
        dof_type: "Moment M3" or "Axial P"
        symmetric: Same backbone in both directions
        fd_type: "Moment-Rot" or "Force-Displ"
        use_yield_force: Scale forces by the section yield force
        use_yield_displacement: Scale deformations by the yield deformation
        yield_scale: Explicit scale factors (axial hinges)
        backbone: Nine points in station order -E..E
        acceptance: IO, LS, CP in that order
    """
    dof_type: Literal["Moment M3", "Axial P"]
    symmetric: bool
    fd_type: Literal["Moment-Rot", "Force-Displ"]
    use_yield_force: bool
    use_yield_displacement: bool
    yield_scale: Optional[YieldScale] = None
    backbone: List[BackbonePoint]
    acceptance: List[AcceptancePoint]

    model_config = {"frozen": True}

    @field_validator("backbone")
    @classmethod
    def validate_backbone(cls, v: List[BackbonePoint]) -> List[BackbonePoint]:
        stations = tuple(p.station for p in v)
        if stations != STATIONS:
            raise ValueError(f"Backbone stations must be {STATIONS}, got {stations}")
        return v

    @field_validator("acceptance")
    @classmethod
    def validate_acceptance(cls, v: List[AcceptancePoint]) -> List[AcceptancePoint]:
        levels = tuple(p.level for p in v)
        if levels != ACCEPTANCE_LEVELS:
            raise ValueError(f"Acceptance levels must be {ACCEPTANCE_LEVELS}, got {levels}")
        return v

    @property
    def line_count(self) -> int:
        return 1 + len(self.backbone) + len(self.acceptance)


# ============================================================================
# BUILDERS
# ============================================================================

def moment_hinge_record(profile: ProfileParameters, profile_prime: ProfileParameters) -> HingeRecord:
    """
    Symmetric moment-rotation hinge for a beam.

    The residual strength uses the unadjusted ``profile.c``; deformations and
    acceptance limits use the adjusted ``profile_prime`` values.
    """
    c = profile.c
    a = profile_prime.a
    b = profile_prime.b
    peak = 1 + HARDENING_SLOPE * a

    def pt(station, force, displ, fd=2, dd=2):
        return BackbonePoint(station=station, force=force, displacement=displ,
                             force_digits=fd, displacement_digits=dd)

    backbone = [
        pt("-E", -c, -b),
        pt("-D", -c, -1.1 * a),
        pt("-C", -peak, -a),
        pt("-B", -1.0, 0.0, 1, 1),
        pt("A", 0.0, 0.0, 1, 1),
        pt("B", 1.0, 0.0, 1, 1),
        pt("C", peak, a),
        pt("D", c, 1.1 * a),
        pt("E", c, b),
    ]
    acceptance = [
        AcceptancePoint(level=level, positive=value, negative=-value)
        for level, value in (("IO", profile_prime.IO), ("LS", profile_prime.LS), ("CP", profile_prime.CP))
    ]
    return HingeRecord(
        dof_type="Moment M3",
        symmetric=True,
        fd_type="Moment-Rot",
        use_yield_force=True,
        use_yield_displacement=True,
        backbone=backbone,
        acceptance=acceptance,
    )


def axial_hinge_record(
    compression: ProfileParameters,
    tension: ProfileParameters,
    capacity: AxialCapacity,
) -> HingeRecord:
    """
    Non-symmetric axial force-displacement hinge for a brace or column.

    Compression is the negative branch, tension the positive one; the yield
    scales come from the tension and compression capacities.
    """
    ca, cb, cc = compression.a, compression.b, compression.c
    ta, tb, tc = tension.a, tension.b, tension.c
    peak = 1 + HARDENING_SLOPE * ta

    def pt(station, force, displ, fd=2, dd=4):
        return BackbonePoint(station=station, force=force, displacement=displ,
                             force_digits=fd, displacement_digits=dd)

    backbone = [
        pt("-E", -cc, -cb),
        pt("-D", -cc, (-ca - 1) + cc),
        pt("-C", -1.0, -ca),
        pt("-B", -1.0, 0.0, 2, 1),
        pt("A", 0.0, 0.0, 1, 1),
        pt("B", 1.0, 0.0, 2, 1),
        pt("C", peak, ta),
        pt("D", tc, peak - tc + ta),
        pt("E", tc, tb),
    ]
    acceptance = [
        AcceptancePoint(level="IO", positive=tension.IO, negative=-compression.IO),
        AcceptancePoint(level="LS", positive=tension.LS, negative=-compression.LS),
        AcceptancePoint(level="CP", positive=tension.CP, negative=-compression.CP),
    ]
    return HingeRecord(
        dof_type="Axial P",
        symmetric=False,
        fd_type="Force-Displ",
        use_yield_force=False,
        use_yield_displacement=False,
        yield_scale=YieldScale(
            positive_force=capacity.tension_force,
            positive_displacement=capacity.tension_displacement,
            negative_force=capacity.compression_force,
            negative_displacement=capacity.compression_displacement,
        ),
        backbone=backbone,
        acceptance=acceptance,
    )


# ============================================================================
# RENDERING
# ============================================================================

def _fmt(value: float, digits: int) -> str:
    return f"{value:.{digits}f}"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _line(tokens: List[str]) -> str:
    return INDENT + SEPARATOR.join(tokens)


def render_general(hinge_name: str, record: HingeRecord) -> str:
    """The single HINGES DEF 02 line."""
    tokens = [
        f"HingeName={hinge_name}",
        f'DOFType="{record.dof_type}"',
        f"Symmetric={_yes_no(record.symmetric)}",
        "BeyondE=Extrapolated",
        f"FDType={record.fd_type}",
        f"UseYldForce={_yes_no(record.use_yield_force)}",
        f"UseYldDispl={_yes_no(record.use_yield_displacement)}",
    ]
    if record.yield_scale is not None:
        scale = record.yield_scale
        tokens += [
            f"FDPosForSF={_fmt(scale.positive_force, 2)}",
            f"FDPosDisSF={_fmt(scale.positive_displacement, 2)}",
            f"FDNegForSF={_fmt(scale.negative_force, 2)}",
            f"FDNegDisSF={_fmt(scale.negative_displacement, 2)}",
        ]
    tokens += ["LengthType=Absolute", "SSAbsLen=1", "HysType=Kinematic"]
    return _line(tokens)


def render_backbone(hinge_name: str, record: HingeRecord) -> List[str]:
    """Nine HINGES DEF 03 lines, -E first."""
    return [
        _line([
            f"HingeName={hinge_name}",
            f"FDPoint={p.station}",
            f"Force={_fmt(p.force, p.force_digits)}",
            f"Displ={_fmt(p.displacement, p.displacement_digits)}",
        ])
        for p in record.backbone
    ]


def render_acceptance(hinge_name: str, record: HingeRecord) -> List[str]:
    """Three HINGES DEF 04 lines, IO first."""
    return [
        _line([
            f"HingeName={hinge_name}",
            f"ACPoint={p.level}",
            f"ACPos={_fmt(p.positive, 2)}",
            f"ACNeg={_fmt(p.negative, 2)}",
        ])
        for p in record.acceptance
    ]


def render_hinge(hinge_name: str, record: HingeRecord) -> Dict[str, List[str]]:
    """Lines per table, in the order the tables are patched."""
    return {
        GENERAL_TABLE: [render_general(hinge_name, record)],
        BACKBONE_TABLE: render_backbone(hinge_name, record),
        ACCEPTANCE_TABLE: render_acceptance(hinge_name, record),
    }
