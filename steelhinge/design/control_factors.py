"""
Beam control (reduction) factors.

Four independent factors reduce the beam hinge parameters for connection
and detailing deficiencies; their product is the adjustment factor applied to
the six profile values.

    control_1  connection_factor       column flange vs. beam flange
    control_2  hinge_location_factor   plastic hinge demand / panel shear capacity
    control_3  panel_zone_factor       clear span to depth ratio
    control_4  slenderness_factor      flange / web slenderness

Notation (mm, MPa, kN·m):
    bf, tf      beam flange width and thickness
    db          beam depth
    L           beam span
    n           connection flag (0 or 1)
    tcf, dc     column flange thickness and depth
    twc         column web thickness
    H           column length
    Fyc         column yield strength
    tcp         continuity plate thickness

Examples:
    >>> panel_zone_factor(8.0)
    1.0
    >>> round(panel_zone_factor(0.0), 4)
    0.1575
"""

from typing import Optional

from loguru import logger

from steelhinge.core.errors import InputValidationError
from steelhinge.core.settings import DEFAULT_PARAMETERS, HingeParameters
from steelhinge.core.variants import BeamClassification, ControlFactors


def _control(parameters: Optional[HingeParameters]):
    return (parameters or DEFAULT_PARAMETERS).beam.control


def connection_factor(
    column_flange_thickness: float,
    beam_flange_width: float,
    beam_flange_thickness: float,
    continuity_plate_thickness: float = 0.0,
    parameters: Optional[HingeParameters] = None,
) -> float:
    """
    control_1: 1.0 when the column flange is strong enough, else 0.8.

    The flange is strong enough when any of the following holds:
        tcf >= bf/5.2
        tcf >= bf/7  and  bf/5.2 >= tcp >= tf/2
        tcf <  bf/7  and  tcp >= tf
    """
    ctrl = _control(parameters)
    strong = beam_flange_width / ctrl.strong_flange_divisor
    weak = beam_flange_width / ctrl.weak_flange_divisor
    tcf = column_flange_thickness
    tcp = continuity_plate_thickness

    if tcf >= strong:
        return 1.0
    if tcf >= weak and tcp <= strong and tcp >= beam_flange_thickness / 2.0:
        return 1.0
    if tcf < weak and tcp >= beam_flange_thickness:
        return 1.0
    return ctrl.reduced_factor


def hinge_location_ratio(
    yield_moment: float,
    beam_depth: float,
    beam_length: float,
    column_depth: float,
    column_length: float,
    column_fy: float,
    column_web_thickness: float,
    beam_n: int = 0,
    parameters: Optional[HingeParameters] = None,
) -> float:
    """
    Demand-to-capacity ratio behind control_2.

        demand   = n·My·10⁶/db · L/(L − dc) · (H − db)/H / 1000
        capacity = 0.55·Fyc·dc·twc / 1000

    Raises:
        InputValidationError: If L <= dc, H <= 0, db <= 0 or capacity <= 0
    """
    ctrl = _control(parameters)
    if beam_depth <= 0:
        raise InputValidationError(f"Beam depth must be positive (got {beam_depth})")
    if beam_length <= column_depth:
        raise InputValidationError(
            f"Beam length {beam_length} mm must exceed column depth {column_depth} mm"
        )
    if column_length <= 0:
        raise InputValidationError(f"Column length must be positive (got {column_length})")

    capacity = ctrl.panel_zone_shear_coefficient * column_fy * column_depth * column_web_thickness / 1000.0
    if capacity <= 0:
        raise InputValidationError(
            "Panel zone shear capacity is not positive "
            f"(Fyc={column_fy}, dc={column_depth}, twc={column_web_thickness})"
        )

    demand = (
        beam_n * yield_moment * 1e6 / beam_depth
        * (beam_length / (beam_length - column_depth))
        * ((column_length - beam_depth) / column_length)
        / 1000.0
    )
    return demand / capacity


def hinge_location_factor(ratio: float, parameters: Optional[HingeParameters] = None) -> float:
    """control_2: 1.0 inside [0.6, 0.9], else 0.8."""
    ctrl = _control(parameters)
    if ctrl.hinge_ratio_min <= ratio <= ctrl.hinge_ratio_max:
        return 1.0
    return ctrl.reduced_factor


def clear_span_ratio(beam_length: float, column_depth: float, beam_depth: float, beam_n: int = 0) -> float:
    """
    (L − dc)/db for n = 1, (L − 2dc)/db otherwise.

    Raises:
        InputValidationError: If the beam depth is not positive
    """
    if beam_depth <= 0:
        raise InputValidationError(f"Beam depth must be positive (got {beam_depth})")
    removed = column_depth if beam_n == 1 else 2 * column_depth
    return (beam_length - removed) / beam_depth


def panel_zone_factor(ratio: float, parameters: Optional[HingeParameters] = None) -> float:
    """control_3: 1.0 at or above 8, else 0.5^((8 − ratio)/3)."""
    limit = _control(parameters).clear_span_ratio_limit
    if ratio >= limit:
        return 1.0
    return float(0.5 ** ((limit - ratio) / 3.0))


def _part_factor(compact: bool, slender: bool, ratio: float,
                 compact_limit: float, slender_limit: float, floor: float) -> float:
    if compact:
        return 1.0
    if slender:
        return floor
    return (floor - 1.0) / (slender_limit - compact_limit) * (ratio - compact_limit) + 1.0


def slenderness_factor(
    classification: BeamClassification,
    parameters: Optional[HingeParameters] = None,
) -> float:
    """control_4: smaller of the flange and web part factors (1.0 compact, 0.5 slender)."""
    floor = _control(parameters).slender_part_factor
    flange = _part_factor(
        classification.flange_compact,
        classification.flange_slender,
        classification.flange_ratio,
        classification.compact_flange_limit,
        classification.slender_flange_limit,
        floor,
    )
    web = _part_factor(
        classification.web_compact,
        classification.web_slender,
        classification.web_ratio,
        classification.compact_web_limit,
        classification.slender_web_limit,
        floor,
    )
    return min(flange, web)


def compute_control_factors(
    classification: BeamClassification,
    *,
    beam_flange_width: float,
    beam_flange_thickness: float,
    beam_depth: float,
    beam_length: float,
    yield_moment: float,
    column_flange_thickness: float,
    column_web_thickness: float,
    column_depth: float,
    column_length: float,
    column_fy: float,
    beam_n: int = 0,
    continuity_plate_thickness: float = 0.0,
    parameters: Optional[HingeParameters] = None,
) -> ControlFactors:
    """
    Evaluate all four control factors.

    Returns:
        ControlFactors (``adjustment_factor`` is their product)

    Raises:
        InputValidationError: See :func:`hinge_location_ratio`
    """
    c1 = connection_factor(
        column_flange_thickness, beam_flange_width, beam_flange_thickness,
        continuity_plate_thickness, parameters,
    )
    ratio = hinge_location_ratio(
        yield_moment, beam_depth, beam_length, column_depth, column_length,
        column_fy, column_web_thickness, beam_n, parameters,
    )
    c2 = hinge_location_factor(ratio, parameters)
    c3 = panel_zone_factor(clear_span_ratio(beam_length, column_depth, beam_depth, beam_n), parameters)
    c4 = slenderness_factor(classification, parameters)

    logger.debug(
        f"Control factors: control_1={c1:.2f}, control_2={c2:.2f} (ratio {ratio:.3f}), "
        f"control_3={c3:.2f}, control_4={c4:.2f}"
    )
    return ControlFactors(connection=c1, hinge_location=c2, panel_zone=c3, slenderness=c4)
