"""
Selection and interpolation of hinge parameters.

Every parameter has a ductile and a non-ductile reference value. A compact
(stocky) member gets the ductile value, a slender one the non-ductile value,
and anything in between a linear blend. For beams the blend is done along the
flange and web ratios separately and the smaller result governs.
"""

from typing import Optional
import numpy as np

from steelhinge.core.errors import InputValidationError
from steelhinge.core.settings import DEFAULT_PARAMETERS, PARAMETER_NAMES, HingeParameters, ParameterPair
from steelhinge.core.variants import AxialClassification, BeamClassification, ProfileParameters


def interpolate_axis(
    ratio: float,
    compact: float,
    slender: float,
    ductile: float,
    non_ductile: float,
) -> float:
    """
    Linear blend between two reference values along one slenderness axis.

    Outside [compact, slender] the value is clamped to the nearer end.

    Args:
        ratio: Slenderness ratio of the member
        compact: Ratio at which the ductile value applies
        slender: Ratio at which the non-ductile value applies
        ductile: Value at ``compact``
        non_ductile: Value at ``slender``

    Returns:
        Interpolated value

    Raises:
        InputValidationError: If the limits are not increasing
    """
    if not slender > compact:
        raise InputValidationError(
            f"Slender limit {slender} must exceed compact limit {compact}"
        )
    return float(np.interp(ratio, [compact, slender], [ductile, non_ductile]))


def beam_parameter(classification: BeamClassification, pair: ParameterPair) -> float:
    """Value of one beam parameter for the given classification."""
    if classification.is_ductile:
        return pair.ductile
    if classification.is_non_ductile:
        return pair.non_ductile
    by_flange = interpolate_axis(
        classification.flange_ratio,
        classification.compact_flange_limit,
        classification.slender_flange_limit,
        pair.ductile,
        pair.non_ductile,
    )
    by_web = interpolate_axis(
        classification.web_ratio,
        classification.compact_web_limit,
        classification.slender_web_limit,
        pair.ductile,
        pair.non_ductile,
    )
    return min(by_flange, by_web)


def axial_parameter(classification: AxialClassification, pair: ParameterPair) -> float:
    """Value of one compression parameter for the given classification."""
    if classification.is_stocky:
        return pair.ductile
    if classification.is_slender:
        return pair.non_ductile
    return interpolate_axis(
        classification.slenderness,
        classification.stocky_limit,
        classification.slender_limit,
        pair.ductile,
        pair.non_ductile,
    )


def beam_profile(
    classification: BeamClassification,
    parameters: Optional[HingeParameters] = None,
) -> ProfileParameters:
    """All six beam parameters (before control factors)."""
    table = (parameters or DEFAULT_PARAMETERS).beam.parameters
    return ProfileParameters(
        **{name: beam_parameter(classification, table[name]) for name in PARAMETER_NAMES}
    )


def compression_profile(
    classification: AxialClassification,
    parameters: Optional[HingeParameters] = None,
) -> ProfileParameters:
    """All six compression parameters of a brace or column."""
    table = (parameters or DEFAULT_PARAMETERS).brace.compression
    return ProfileParameters(
        **{name: axial_parameter(classification, table[name]) for name in PARAMETER_NAMES}
    )


def tension_profile(parameters: Optional[HingeParameters] = None) -> ProfileParameters:
    """Tension parameters are fixed reference values."""
    tension = (parameters or DEFAULT_PARAMETERS).brace.tension
    return ProfileParameters(**tension.model_dump())
