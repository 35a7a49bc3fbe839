"""
Reference constants for hinge parameter derivation.

The constants live in ``steelhinge/data/hinge_parameters.yaml`` so they can be
reviewed (or overridden per project) without touching code. They are loaded
into pydantic models on import; :func:`load_hinge_parameters` accepts an
alternative file.

Example:
    >>> params = load_hinge_parameters()
    >>> params.beam.parameters["a"].ductile
    9.0
    >>> params.brace.tension.CP
    9.0
"""

from pathlib import Path
from typing import Dict, Optional, Union
import yaml
from pydantic import BaseModel, Field, field_validator

from steelhinge.core.sections import DEFAULT_AREA

# Order in which hinge parameters are reported and exported
PARAMETER_NAMES = ("a", "b", "c", "IO", "LS", "CP")

DEFAULT_PARAMETERS_PATH = Path(__file__).parent.parent / "data" / "hinge_parameters.yaml"


class ParameterPair(BaseModel):
    """Reference values at the two ends of the slenderness range."""
    ductile: float = Field(..., description="Compact / stocky value")
    non_ductile: float = Field(..., description="Non-compact / slender value")

    model_config = {"frozen": True}


class FixedParameters(BaseModel):
    """A complete, non-interpolated set of a, b, c, IO, LS, CP."""
    a: float
    b: float
    c: float
    IO: float
    LS: float
    CP: float

    model_config = {"frozen": True}


def check_parameter_table(v: Dict[str, ParameterPair]) -> Dict[str, ParameterPair]:
    """Ensure every hinge parameter has a reference pair."""
    missing = [name for name in PARAMETER_NAMES if name not in v]
    if missing:
        raise ValueError(f"Parameter table is missing: {', '.join(missing)}")
    return v


class BeamLimits(BaseModel):
    """Coefficients k of the slenderness limits k / sqrt(Fy[ksi])."""
    compact_flange: float = Field(..., gt=0)
    compact_web: float = Field(..., gt=0)
    slender_flange: float = Field(..., gt=0)
    slender_web: float = Field(..., gt=0)


class BeamControlSettings(BaseModel):
    """Thresholds used by the four beam control factors."""
    strong_flange_divisor: float = Field(default=5.2, gt=0)
    weak_flange_divisor: float = Field(default=7.0, gt=0)
    reduced_factor: float = Field(default=0.8, gt=0, le=1)
    hinge_ratio_min: float = Field(default=0.6)
    hinge_ratio_max: float = Field(default=0.9)
    panel_zone_shear_coefficient: float = Field(default=0.55, gt=0)
    clear_span_ratio_limit: float = Field(default=8.0, gt=0)
    slender_part_factor: float = Field(default=0.5, gt=0, le=1)


class BeamSettings(BaseModel):
    """Beam (moment hinge) constants."""
    mpa_per_ksi: float = Field(default=6.895, gt=0)
    limits: BeamLimits
    parameters: Dict[str, ParameterPair]
    control: BeamControlSettings = Field(default_factory=BeamControlSettings)

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, v):
        return check_parameter_table(v)


class BraceLimits(BaseModel):
    """Coefficients k of the KL/r limits k·sqrt(E/Fy)."""
    stocky: float = Field(..., gt=0)
    slender: float = Field(..., gt=0)


class BraceSettings(BaseModel):
    """Brace / column (axial hinge) constants."""
    limits: BraceLimits
    compression: Dict[str, ParameterPair]
    tension: FixedParameters

    @field_validator("compression")
    @classmethod
    def validate_compression(cls, v):
        return check_parameter_table(v)


class HingeParameters(BaseModel):
    """All reference constants needed by the calculators."""
    elastic_modulus: float = Field(default=200000.0, gt=0, description="E (MPa)")
    default_area: float = Field(default=DEFAULT_AREA, gt=0, description="Fallback area (mm²)")
    beam: BeamSettings
    brace: BraceSettings


def load_hinge_parameters(path: Optional[Union[str, Path]] = None) -> HingeParameters:
    """
    Load reference constants from YAML.

    Args:
        path: Alternative YAML file; the packaged defaults when omitted

    Returns:
        HingeParameters instance

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file content does not validate
    """
    yaml_path = Path(path) if path is not None else DEFAULT_PARAMETERS_PATH
    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return HingeParameters.model_validate(data)


# Load defaults on module import
DEFAULT_PARAMETERS = load_hinge_parameters()
