"""
Cross-section data for hinge calculations.

This module provides:
- MemberType / ShapeKind: the two halves of a section category
- SectionCategory: parsed "{Member}-{Shape}-Section" tags
- SectionGeometry: geometric and material properties of one section
- Area approximations and slenderness ratios derived from the geometry

Units: length mm, stress MPa, area mm², inertia mm⁴, modulus mm³.

Examples:
    >>> category = SectionCategory.parse("Beam-I-Section")
    >>> category.member, category.shape
    (<MemberType.BEAM: 'Beam'>, <ShapeKind.I_SECTION: 'I'>)
    >>> geom = SectionGeometry(depth=400, flange_width=180, flange_thickness=13.5,
    ...                        web_thickness=8.6, fillet_radius=21)
    >>> round(flange_slenderness(geom), 2)
    6.67
"""

from enum import Enum
from typing import Optional
import numpy as np
from pydantic import BaseModel, Field

from steelhinge.core.errors import InputValidationError

# Fallback area (mm²) for user-defined shapes with no tabulated area;
# HingeParameters.default_area overrides it per project
DEFAULT_AREA = 5000.0


class MemberType(str, Enum):
    """Structural role of a member."""
    BEAM = "Beam"
    BRACE = "Brace"
    COLUMN = "Column"


class ShapeKind(str, Enum):
    """Cross-section shape family."""
    I_SECTION = "I"
    CHANNEL = "Channel"
    BOX = "Box"
    ANGLE = "Angle"
    TUBE = "Tube"
    USER_DEFINED = "UserDefined"


class SectionCategory(BaseModel):
    """
    Member role plus shape family, e.g. ``Brace-Tube-Section``.

    Attributes:
        member: Beam, Brace or Column
        shape: Shape family of the cross-section
    """
    member: MemberType = Field(..., description="Member role")
    shape: ShapeKind = Field(..., description="Shape family")

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, text: str) -> "SectionCategory":
        """
        Parse ``"Beam-I"`` or ``"Beam-I-Section"`` style tags.

        Raises:
            InputValidationError: If member or shape is not recognised
        """
        raw = (text or "").strip()
        if raw.endswith("-Section"):
            raw = raw[: -len("-Section")]
        member_text, _, shape_text = raw.partition("-")
        try:
            member = MemberType(member_text)
        except ValueError:
            raise InputValidationError(
                f"Unknown member type in category '{text}'. "
                f"Available: {', '.join(m.value for m in MemberType)}"
            ) from None
        try:
            shape = ShapeKind(shape_text)
        except ValueError:
            raise InputValidationError(
                f"Unknown shape in category '{text}'. "
                f"Available: {', '.join(s.value for s in ShapeKind)}"
            ) from None
        return cls(member=member, shape=shape)

    def __str__(self) -> str:
        return f"{self.member.value}-{self.shape.value}-Section"


class SectionGeometry(BaseModel):
    """
    Geometric and material properties of one frame section.

    Fields that the section source could not resolve stay at zero. Which
    fields are meaningful depends on the shape (fillet radius is only
    reported for I-sections, for instance).

    Attributes:
        depth: Total depth d / t3 (mm)
        flange_width: Flange width bf / t2 (mm)
        flange_thickness: Flange thickness tf (mm)
        web_thickness: Web (or wall) thickness tw (mm)
        bottom_flange_width: Bottom flange width t2b (mm)
        bottom_flange_thickness: Bottom flange thickness tfb (mm)
        fillet_radius: Root fillet radius r (mm)
        inertia_major: Major-axis moment of inertia I33 (mm⁴)
        modulus_major: Major-axis plastic modulus Z33 (mm³)
        area: Gross area A (mm²)
        radius_major: Major-axis radius of gyration r33 (mm)
        radius_minor: Minor-axis radius of gyration r22 (mm)
        yield_strength: Material yield strength from the model (MPa)
        shape: Shape family reported by the source
        material: Material name reported by the source
    """
    depth: float = Field(default=0.0, ge=0, description="Total depth t3 (mm)")
    flange_width: float = Field(default=0.0, ge=0, description="Flange width t2 (mm)")
    flange_thickness: float = Field(default=0.0, ge=0, description="Flange thickness tf (mm)")
    web_thickness: float = Field(default=0.0, ge=0, description="Web thickness tw (mm)")
    bottom_flange_width: float = Field(default=0.0, ge=0, description="Bottom flange width t2b (mm)")
    bottom_flange_thickness: float = Field(default=0.0, ge=0, description="Bottom flange thickness tfb (mm)")
    fillet_radius: float = Field(default=0.0, ge=0, description="Fillet radius (mm)")
    inertia_major: float = Field(default=0.0, ge=0, description="I33 (mm⁴)")
    modulus_major: float = Field(default=0.0, ge=0, description="Z33 (mm³)")
    area: float = Field(default=0.0, ge=0, description="Area (mm²)")
    radius_major: float = Field(default=0.0, ge=0, description="r33 (mm)")
    radius_minor: float = Field(default=0.0, ge=0, description="r22 (mm)")
    yield_strength: float = Field(default=0.0, ge=0, description="Fy from model (MPa)")
    shape: ShapeKind = Field(default=ShapeKind.USER_DEFINED, description="Shape family")
    material: str = Field(default="", description="Material name")

    model_config = {"frozen": True}

    @classmethod
    def empty(cls, shape: Optional[ShapeKind] = None) -> "SectionGeometry":
        """All-zero geometry used when a lookup fails."""
        return cls(shape=shape or ShapeKind.USER_DEFINED)

    @property
    def is_empty(self) -> bool:
        """True when no dimension or property has been resolved."""
        return not any((
            self.depth, self.flange_width, self.flange_thickness,
            self.web_thickness, self.area, self.inertia_major,
        ))


def approximate_area(geometry: SectionGeometry, default_area: float = DEFAULT_AREA) -> float:
    """
    Approximate gross area from plate dimensions.

    Formulas by shape (d = depth, bf = flange width, tf, tw):
        I:       2·tf·bf + (d − 2tf)·tw
        Channel: tf·bf + (d − tf)·tw
        Box:     2·tf·(bf − 2tw) + 2·tw·d
        Angle:   tf·bf + tw·d − tf·tw
        Tube:    π·(D² − (D − 2t)²)/4 with D = d, t = tw
        UserDefined: default_area

    Returns:
        Area in mm² (default_area when the dimensions give nothing positive)
    """
    d = geometry.depth
    bf = geometry.flange_width
    tf = geometry.flange_thickness
    tw = geometry.web_thickness
    shape = geometry.shape

    if shape == ShapeKind.I_SECTION:
        area = 2 * tf * bf + (d - 2 * tf) * tw
    elif shape == ShapeKind.CHANNEL:
        area = tf * bf + (d - tf) * tw
    elif shape == ShapeKind.BOX:
        area = 2 * tf * (bf - 2 * tw) + 2 * tw * d
    elif shape == ShapeKind.ANGLE:
        area = tf * bf + tw * d - tf * tw
    elif shape == ShapeKind.TUBE:
        inner = d - 2 * tw
        area = np.pi * (d ** 2 - inner ** 2) / 4.0
    else:
        area = default_area

    return float(area) if area > 0 else default_area


def effective_area(geometry: SectionGeometry, default_area: float = DEFAULT_AREA) -> float:
    """Tabulated area when available, otherwise :func:`approximate_area`."""
    if geometry.area > 0:
        return geometry.area
    return approximate_area(geometry, default_area)


def flange_slenderness(geometry: SectionGeometry) -> float:
    """
    Flange width-to-thickness ratio bf/2tf.

    Raises:
        InputValidationError: If the flange thickness is not positive
    """
    if geometry.flange_thickness <= 0:
        raise InputValidationError(
            "Flange thickness must be positive to compute bf/tf "
            "(section geometry unresolved?)"
        )
    return (geometry.flange_width / 2.0) / geometry.flange_thickness


def web_slenderness(geometry: SectionGeometry) -> float:
    """
    Clear web height-to-thickness ratio h/tw with h = d − 2tf − 2r.

    Raises:
        InputValidationError: If the web thickness is not positive
    """
    if geometry.web_thickness <= 0:
        raise InputValidationError(
            "Web thickness must be positive to compute h/tw "
            "(section geometry unresolved?)"
        )
    h = geometry.depth - 2 * geometry.flange_thickness - 2 * geometry.fillet_radius
    return h / geometry.web_thickness
