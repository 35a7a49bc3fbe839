"""
Slenderness classification of beams, braces and columns.

Beam limits (b/t and h/tw, Fy converted to ksi):
    compact flange  52 / sqrt(Fy/6.895)     compact web  418 / sqrt(Fy/6.895)
    slender flange  65 / sqrt(Fy/6.895)     slender web  640 / sqrt(Fy/6.895)

Brace / column limits on KL/r:
    stocky   2.1·sqrt(E/Fy)
    slender  4.2·sqrt(E/Fy)

All comparisons are inclusive at the limit.

Examples:
    >>> limits = beam_limits(345)
    >>> round(limits["compact_flange"], 2)
    7.35
    >>> round(brace_limits(345)["slender"], 1)
    101.1
"""

from typing import Dict, Optional
import numpy as np

from steelhinge.core.errors import InputValidationError
from steelhinge.core.sections import SectionGeometry, flange_slenderness, web_slenderness
from steelhinge.core.settings import DEFAULT_PARAMETERS, HingeParameters
from steelhinge.core.variants import AxialClassification, BeamClassification


def _require_positive(value: float, label: str) -> None:
    if value is None or not value > 0:
        raise InputValidationError(f"{label} must be positive (got {value})")


# ============================================================================
# BEAMS
# ============================================================================

def beam_limits(fy: float, parameters: Optional[HingeParameters] = None) -> Dict[str, float]:
    """
    Flange and web slenderness limits for a given yield strength.

    Args:
        fy: Yield strength (MPa)
        parameters: Reference constants (defaults to the packaged set)

    Returns:
        dict with keys 'compact_flange', 'compact_web', 'slender_flange', 'slender_web'

    Raises:
        InputValidationError: If fy is not positive
    """
    _require_positive(fy, "Yield strength Fy")
    params = parameters or DEFAULT_PARAMETERS
    root = np.sqrt(fy / params.beam.mpa_per_ksi)
    coeffs = params.beam.limits
    return {
        "compact_flange": float(coeffs.compact_flange / root),
        "compact_web": float(coeffs.compact_web / root),
        "slender_flange": float(coeffs.slender_flange / root),
        "slender_web": float(coeffs.slender_web / root),
    }


def classify_beam_ratios(
    flange_ratio: float,
    web_ratio: float,
    fy: float,
    parameters: Optional[HingeParameters] = None,
) -> BeamClassification:
    """Classify precomputed bf/tf and h/tw ratios."""
    limits = beam_limits(fy, parameters)
    return BeamClassification(
        flange_ratio=flange_ratio,
        web_ratio=web_ratio,
        compact_flange_limit=limits["compact_flange"],
        compact_web_limit=limits["compact_web"],
        slender_flange_limit=limits["slender_flange"],
        slender_web_limit=limits["slender_web"],
    )


def classify_beam(
    geometry: SectionGeometry,
    fy: float,
    parameters: Optional[HingeParameters] = None,
) -> BeamClassification:
    """
    Classify a beam section from its geometry.

    Raises:
        InputValidationError: If fy, tf or tw are not positive
    """
    _require_positive(fy, "Yield strength Fy")
    return classify_beam_ratios(
        flange_slenderness(geometry), web_slenderness(geometry), fy, parameters
    )


# ============================================================================
# BRACES AND COLUMNS
# ============================================================================

def brace_limits(
    fy: float,
    elastic_modulus: Optional[float] = None,
    parameters: Optional[HingeParameters] = None,
) -> Dict[str, float]:
    """
    KL/r limits 'stocky' and 'slender'.

    Raises:
        InputValidationError: If fy is not positive
    """
    _require_positive(fy, "Yield strength Fy")
    params = parameters or DEFAULT_PARAMETERS
    E = elastic_modulus if elastic_modulus is not None else params.elastic_modulus
    root = np.sqrt(E / fy)
    return {
        "stocky": float(params.brace.limits.stocky * root),
        "slender": float(params.brace.limits.slender * root),
    }


def effective_slenderness(
    length_major: float,
    radius_major: float,
    length_minor: float,
    radius_minor: float,
) -> float:
    """
    Governing slenderness max(L3/r3, L2/r2).

    Raises:
        InputValidationError: If a radius of gyration is not positive
    """
    _require_positive(radius_major, "Radius of gyration r33")
    _require_positive(radius_minor, "Radius of gyration r22")
    return float(max(length_major / radius_major, length_minor / radius_minor))


def classify_axial(
    slenderness: float,
    fy: float,
    elastic_modulus: Optional[float] = None,
    parameters: Optional[HingeParameters] = None,
) -> AxialClassification:
    """Classify a KL/r value against the stocky and slender limits."""
    limits = brace_limits(fy, elastic_modulus, parameters)
    return AxialClassification(
        slenderness=slenderness,
        stocky_limit=limits["stocky"],
        slender_limit=limits["slender"],
    )
