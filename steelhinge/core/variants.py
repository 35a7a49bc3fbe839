"""
Calculation variants and their results.

A *variant* is one named set of user inputs for a section, e.g. the beam
``IPE400`` spanning 6 m between ``HEB300`` columns. Variants are immutable:
the calculators return a copy with ``geometry`` and ``results`` filled in.

This module provides:
- Result models (ProfileParameters, classifications, control factors, capacity)
- BeamVariant / BraceVariant / ColumnVariant tagged by ``member``
- variant_from_dict: build the right variant from plain data (YAML, forms)
- VariantCollection: ordered, name-unique store used by the batch run
- hinge_name: hinge identity written to the model file

Examples:
    >>> beam = BeamVariant(name="V1", section_name="IPE400", category="Beam-I-Section",
    ...                    length=6000, fy=345, column_section="HEB300",
    ...                    column_length=3500, column_fy=345)
    >>> hinge_name(beam)
    'IPE400_V1_M3'
"""

from datetime import datetime
from typing import Annotated, Dict, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator, model_validator

from steelhinge.core.errors import InputValidationError
from steelhinge.core.sections import MemberType, SectionCategory, SectionGeometry


# ============================================================================
# RESULT MODELS
# ============================================================================

class ProfileParameters(BaseModel):
    """
    Hinge parameters in multiples of yield deformation.

    Attributes:
        a: Plastic deformation at peak strength
        b: Plastic deformation at loss of strength
        c: Residual strength ratio
        IO: Immediate Occupancy acceptance limit
        LS: Life Safety acceptance limit
        CP: Collapse Prevention acceptance limit
    """
    a: float
    b: float
    c: float
    IO: float
    LS: float
    CP: float

    model_config = {"frozen": True}

    def scaled(self, factor: float) -> "ProfileParameters":
        """Return every parameter multiplied by ``factor``."""
        return ProfileParameters(**{k: v * factor for k, v in self.model_dump().items()})


class BeamClassification(BaseModel):
    """Beam slenderness ratios, their limits and the four comparison flags."""
    flange_ratio: float = Field(..., description="bf/tf (half flange)")
    web_ratio: float = Field(..., description="h/tw")
    compact_flange_limit: float
    compact_web_limit: float
    slender_flange_limit: float
    slender_web_limit: float

    model_config = {"frozen": True}

    @property
    def flange_compact(self) -> bool:
        return self.flange_ratio <= self.compact_flange_limit

    @property
    def web_compact(self) -> bool:
        return self.web_ratio <= self.compact_web_limit

    @property
    def flange_slender(self) -> bool:
        return self.flange_ratio >= self.slender_flange_limit

    @property
    def web_slender(self) -> bool:
        return self.web_ratio >= self.slender_web_limit

    @property
    def is_ductile(self) -> bool:
        """Both ratios within the compact limits."""
        return self.flange_compact and self.web_compact

    @property
    def is_non_ductile(self) -> bool:
        """Either ratio at or beyond its slender limit."""
        return self.flange_slender or self.web_slender


class AxialClassification(BaseModel):
    """Effective slenderness KL/r of a brace or column against its limits."""
    slenderness: float = Field(..., description="KL/r")
    stocky_limit: float = Field(..., description="2.1·sqrt(E/Fy)")
    slender_limit: float = Field(..., description="4.2·sqrt(E/Fy)")

    model_config = {"frozen": True}

    @property
    def is_stocky(self) -> bool:
        return self.slenderness <= self.stocky_limit

    @property
    def is_slender(self) -> bool:
        return self.slenderness >= self.slender_limit


class ControlFactors(BaseModel):
    """
    The four beam reduction factors.

    Attributes:
        connection: control_1, column flange strength vs. beam flange
        hinge_location: control_2, plastic hinge demand ratio
        panel_zone: control_3, clear span to depth decay
        slenderness: control_4, flange/web slenderness part factor
    """
    connection: float
    hinge_location: float
    panel_zone: float
    slenderness: float

    model_config = {"frozen": True}

    @property
    def adjustment_factor(self) -> float:
        """Product of the four factors."""
        return self.connection * self.hinge_location * self.panel_zone * self.slenderness


class AxialCapacity(BaseModel):
    """Axial yield forces (kN) and elastic deformations (mm)."""
    euler_stress: float = Field(..., description="Fe (MPa)")
    critical_stress: float = Field(..., description="Fcr (MPa)")
    compression_force: float = Field(..., description="P_y = Fcr·A (kN)")
    compression_displacement: float = Field(..., description="delta_c (mm)")
    tension_force: float = Field(..., description="T_y = Fy·A (kN)")
    tension_displacement: float = Field(..., description="delta_t (mm)")
    area: float = Field(..., description="Area used (mm²)")

    model_config = {"frozen": True}


class BeamResults(BaseModel):
    """Everything computed for a beam variant."""
    classification: BeamClassification
    profile: ProfileParameters
    profile_prime: ProfileParameters
    control_factors: ControlFactors
    yield_moment: float = Field(..., description="My (kN·m)")
    yield_rotation: float = Field(..., description="θy (rad)")

    model_config = {"frozen": True}


class BraceResults(BaseModel):
    """Everything computed for a brace variant."""
    classification: AxialClassification
    compression: ProfileParameters
    tension: ProfileParameters
    capacity: AxialCapacity

    model_config = {"frozen": True}


class ColumnResults(BraceResults):
    """Brace results plus the squash-load placeholder."""
    axial_capacity: float = Field(..., description="A·Fy (kN)")


# ============================================================================
# VARIANTS
# ============================================================================

class VariantBase(BaseModel):
    """Inputs shared by all member types."""
    member: str
    name: str = Field(..., min_length=1, description="Variant name")
    section_name: str = Field(..., min_length=1, description="Frame section name")
    category: SectionCategory = Field(..., description="Member-shape category")
    length: float = Field(..., gt=0, description="Member length L (mm)")
    fy: float = Field(..., gt=0, description="Yield strength Fy (MPa)")
    created: datetime = Field(default_factory=datetime.now)
    geometry: Optional[SectionGeometry] = None

    model_config = {"frozen": True}

    @field_validator("name", "section_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Names become part of the hinge identity token."""
        if any(ch.isspace() for ch in v) or '"' in v:
            raise ValueError(f"Name '{v}' must not contain whitespace or quotes")
        return v

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, v):
        if isinstance(v, str):
            return SectionCategory.parse(v)
        return v

    @model_validator(mode="after")
    def check_member(self):
        if self.category.member.value != self.member:
            raise ValueError(
                f"Category '{self.category}' does not describe a {self.member}"
            )
        return self

    @property
    def key(self) -> tuple:
        return (self.section_name, self.name)


class BeamVariant(VariantBase):
    """
    Beam framing into a column (moment hinge).

    ``beam_n`` selects whether one (n=1) or two (n=0) column depths are
    removed from the span for the clear-span ratio and scales the hinge
    location demand.
    """
    member: Literal["Beam"] = "Beam"
    column_section: str = Field(..., min_length=1, description="Connected column section")
    column_length: float = Field(..., gt=0, description="Column length H (mm)")
    column_fy: float = Field(..., gt=0, description="Column yield strength (MPa)")
    beam_n: int = Field(default=0, ge=0, le=1, description="Connection flag n")
    continuity_plate_thickness: float = Field(default=0.0, ge=0, description="Continuity plate (mm)")
    column_geometry: Optional[SectionGeometry] = None
    results: Optional[BeamResults] = None


class BraceVariant(VariantBase):
    """Brace (axial hinge) with separate unbraced lengths per axis."""
    member: Literal["Brace"] = "Brace"
    length_minor: float = Field(..., gt=0, description="Unbraced length L2 (mm)")
    length_major: float = Field(..., gt=0, description="Unbraced length L3 (mm)")
    results: Optional[BraceResults] = None


class ColumnVariant(VariantBase):
    """Column (axial hinge). Unbraced lengths default to the member length."""
    member: Literal["Column"] = "Column"
    length_minor: Optional[float] = Field(default=None, gt=0, description="L2 (mm)")
    length_major: Optional[float] = Field(default=None, gt=0, description="L3 (mm)")
    results: Optional[ColumnResults] = None

    @property
    def effective_length_minor(self) -> float:
        return self.length_minor if self.length_minor is not None else self.length

    @property
    def effective_length_major(self) -> float:
        return self.length_major if self.length_major is not None else self.length


Variant = Annotated[
    Union[BeamVariant, BraceVariant, ColumnVariant],
    Field(discriminator="member"),
]

_VARIANT_ADAPTER = TypeAdapter(Variant)


def variant_from_dict(data: Dict) -> Union[BeamVariant, BraceVariant, ColumnVariant]:
    """
    Build a variant from plain data.

    The ``member`` tag is taken from ``category`` when it is not given.

    Raises:
        InputValidationError: If the data does not describe a valid variant
    """
    payload = dict(data)
    if "member" not in payload:
        category = payload.get("category")
        if isinstance(category, SectionCategory):
            payload["member"] = category.member.value
        else:
            payload["member"] = SectionCategory.parse(str(category)).member.value
    try:
        return _VARIANT_ADAPTER.validate_python(payload)
    except ValueError as exc:
        raise InputValidationError(
            f"Invalid variant '{payload.get('name', '?')}': {exc}"
        ) from exc


def hinge_name(variant: Union[BeamVariant, BraceVariant, ColumnVariant]) -> str:
    """Hinge identity: ``{section}_{variant}_M3`` for beams, ``_Axial`` otherwise."""
    suffix = "M3" if variant.member == MemberType.BEAM.value else "Axial"
    return f"{variant.section_name}_{variant.name}_{suffix}"


# ============================================================================
# COLLECTION
# ============================================================================

class VariantCollection:
    """
    Variants in insertion order, unique by (section name, variant name).

    Example:
        >>> collection = VariantCollection()
        >>> collection.add(beam)
        >>> len(collection)
        1
    """

    def __init__(self, variants: Optional[List] = None):
        self._variants: List = []
        for variant in variants or []:
            self.add(variant)

    def _index(self, section_name: str, name: str) -> Optional[int]:
        for i, variant in enumerate(self._variants):
            if variant.key == (section_name, name):
                return i
        return None

    def add(self, variant) -> None:
        """
        Append a new variant.

        Raises:
            ValueError: If the section already has a variant of that name
        """
        if self._index(*variant.key) is not None:
            raise ValueError(
                f"Variant '{variant.name}' already exists for section '{variant.section_name}'"
            )
        self._variants.append(variant)

    def upsert(self, variant) -> None:
        """Replace a same-named variant in place, or append."""
        index = self._index(*variant.key)
        if index is None:
            self._variants.append(variant)
        else:
            self._variants[index] = variant

    def remove(self, section_name: str, name: str) -> None:
        """Raises KeyError if the variant is unknown."""
        index = self._index(section_name, name)
        if index is None:
            raise KeyError(f"No variant '{name}' for section '{section_name}'")
        del self._variants[index]

    def get(self, section_name: str, name: str):
        index = self._index(section_name, name)
        return None if index is None else self._variants[index]

    def for_section(self, section_name: str) -> List:
        return [v for v in self._variants if v.section_name == section_name]

    def __iter__(self) -> Iterator:
        return iter(list(self._variants))

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, key) -> bool:
        return self._index(*key) is not None
