"""
Hinge calculation modules for steel beams, braces and columns.
"""

from typing import Optional

from steelhinge.core.errors import InputValidationError
from steelhinge.core.sections import MemberType, SectionCategory, SectionGeometry
from steelhinge.core.settings import HingeParameters
from steelhinge.io.section_source import SectionPropertySource, fetch_section

from .base import MemberCalculator
from .beam import BeamCalculator, yield_moment, yield_rotation
from .axial import BraceCalculator, ColumnCalculator
from .classification import (
    beam_limits,
    classify_beam,
    classify_beam_ratios,
    brace_limits,
    effective_slenderness,
    classify_axial,
)
from .interpolation import (
    interpolate_axis,
    beam_parameter,
    axial_parameter,
    beam_profile,
    compression_profile,
    tension_profile,
)
from .control_factors import (
    connection_factor,
    hinge_location_ratio,
    hinge_location_factor,
    clear_span_ratio,
    panel_zone_factor,
    slenderness_factor,
    compute_control_factors,
)
from .capacity import euler_stress, critical_stress, axial_capacity

# ============================================================================
# CALCULATOR REGISTRY (Factory Pattern)
# ============================================================================

CALCULATOR_REGISTRY = {
    MemberType.BEAM: BeamCalculator,
    MemberType.BRACE: BraceCalculator,
    MemberType.COLUMN: ColumnCalculator,
}


def get_calculator(member, parameters: Optional[HingeParameters] = None) -> MemberCalculator:
    """
    Factory method to get a member calculator.

    Args:
        member: MemberType or its tag ('Beam', 'Brace', 'Column')
        parameters: Reference constants (defaults to the packaged set)

    Returns:
        MemberCalculator implementation instance

    Raises:
        InputValidationError: If member is not a known member type
    """
    try:
        key = MemberType(member)
    except ValueError:
        available = ", ".join(m.value for m in CALCULATOR_REGISTRY)
        raise InputValidationError(f"Unknown member type: {member}. Available: {available}") from None
    return CALCULATOR_REGISTRY[key](parameters)


def fetch(section: str, category, source: SectionPropertySource) -> SectionGeometry:
    """
    Geometry of one section for a category such as ``Beam-I-Section``.

    Lookup failures give zero geometry and a logged warning.
    """
    if not isinstance(category, SectionCategory):
        category = SectionCategory.parse(str(category))
    return fetch_section(source, section, category.shape)


def calculate(variant, source: SectionPropertySource, parameters: Optional[HingeParameters] = None):
    """
    Fetch geometry and compute results for one variant.

    Returns:
        Copy of the variant with geometry and results set

    Raises:
        InputValidationError: If the inputs make the calculation undefined
    """
    calculator = get_calculator(variant.member, parameters)
    return calculator.calculate(calculator.fetch(variant, source))


__all__ = [
    'MemberCalculator',
    'BeamCalculator',
    'BraceCalculator',
    'ColumnCalculator',
    'CALCULATOR_REGISTRY',
    'get_calculator',
    'fetch',
    'calculate',
    'yield_moment',
    'yield_rotation',
    'beam_limits',
    'classify_beam',
    'classify_beam_ratios',
    'brace_limits',
    'effective_slenderness',
    'classify_axial',
    'interpolate_axis',
    'beam_parameter',
    'axial_parameter',
    'beam_profile',
    'compression_profile',
    'tension_profile',
    'connection_factor',
    'hinge_location_ratio',
    'hinge_location_factor',
    'clear_span_ratio',
    'panel_zone_factor',
    'slenderness_factor',
    'compute_control_factors',
    'euler_stress',
    'critical_stress',
    'axial_capacity',
]
