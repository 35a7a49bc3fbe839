"""
Beam moment-hinge calculator.

Steps for one beam variant:
1. Classify flange (bf/tf) and web (h/tw) slenderness against Fy limits
2. Select or interpolate the six profile parameters a, b, c, IO, LS, CP
3. Yield moment My = Z·Fy/10⁶ (kN·m) and rotation θy = Z·Fy·L/(6·E·I)
4. Evaluate the four control factors against the connected column
5. Scale the profile by the adjustment factor (the "prime" values)

Example:
    >>> calc = BeamCalculator()
    >>> beam = calc.fetch(beam, source)
    >>> beam = calc.calculate(beam)
    >>> beam.results.control_factors.adjustment_factor
    0.64
"""

from loguru import logger

from steelhinge.core.errors import InputValidationError
from steelhinge.core.sections import MemberType, SectionGeometry
from steelhinge.core.variants import BeamResults, BeamVariant
from steelhinge.design.base import MemberCalculator
from steelhinge.design.classification import classify_beam
from steelhinge.design.control_factors import compute_control_factors
from steelhinge.design.interpolation import beam_profile
from steelhinge.io.hinge_records import HingeRecord, moment_hinge_record
from steelhinge.io.section_source import SectionPropertySource, fetch_section


def yield_moment(geometry: SectionGeometry, fy: float) -> float:
    """My = Z33·Fy / 10⁶ (kN·m)."""
    return geometry.modulus_major * fy / 1e6


def yield_rotation(geometry: SectionGeometry, fy: float, length: float, elastic_modulus: float) -> float:
    """
    θy = Z33·Fy·L / (6·E·I33).

    Raises:
        InputValidationError: If I33 is not positive
    """
    if geometry.inertia_major <= 0:
        raise InputValidationError("Moment of inertia I33 must be positive to compute θy")
    return geometry.modulus_major * fy * length / (6.0 * elastic_modulus * geometry.inertia_major)


class BeamCalculator(MemberCalculator):
    """Moment (M3) hinge parameters for beams framing into columns."""

    @property
    def member_type(self) -> str:
        return MemberType.BEAM.value

    def fetch(self, variant: BeamVariant, source: SectionPropertySource) -> BeamVariant:
        geometry = fetch_section(source, variant.section_name, variant.category.shape)
        column_geometry = fetch_section(source, variant.column_section)
        return variant.model_copy(update={"geometry": geometry, "column_geometry": column_geometry})

    def calculate(self, variant: BeamVariant) -> BeamVariant:
        if variant.geometry is None or variant.column_geometry is None:
            raise InputValidationError(
                f"Beam '{variant.name}': section geometry has not been fetched"
            )
        geom = variant.geometry
        col = variant.column_geometry
        params = self.parameters

        classification = classify_beam(geom, variant.fy, params)
        profile = beam_profile(classification, params)

        m_y = yield_moment(geom, variant.fy)
        theta_y = yield_rotation(geom, variant.fy, variant.length, params.elastic_modulus)

        factors = compute_control_factors(
            classification,
            beam_flange_width=geom.flange_width,
            beam_flange_thickness=geom.flange_thickness,
            beam_depth=geom.depth,
            beam_length=variant.length,
            yield_moment=m_y,
            column_flange_thickness=col.flange_thickness,
            column_web_thickness=col.web_thickness,
            column_depth=col.depth,
            column_length=variant.column_length,
            column_fy=variant.column_fy,
            beam_n=variant.beam_n,
            continuity_plate_thickness=variant.continuity_plate_thickness,
            parameters=params,
        )
        profile_prime = profile.scaled(factors.adjustment_factor)

        logger.debug(
            f"Beam {variant.section_name}/{variant.name}: bf/tf={classification.flange_ratio:.2f}, "
            f"h/tw={classification.web_ratio:.2f}, My={m_y:.2f} kN·m, "
            f"adjustment={factors.adjustment_factor:.3f}"
        )
        results = BeamResults(
            classification=classification,
            profile=profile,
            profile_prime=profile_prime,
            control_factors=factors,
            yield_moment=m_y,
            yield_rotation=theta_y,
        )
        return variant.model_copy(update={"results": results})

    def build_hinge_record(self, variant: BeamVariant) -> HingeRecord:
        results = self._require_results(variant)
        return moment_hinge_record(results.profile, results.profile_prime)
