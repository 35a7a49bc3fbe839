"""
Axial-hinge calculators for braces and columns.

Both member types share the same derivation:
1. Effective slenderness KL/r = max(L3/r33, L2/r22)
2. Compression parameters from the stocky/slender limits 2.1 and 4.2·sqrt(E/Fy)
3. Fixed tension parameters
4. Buckling and yield capacities with their elastic deformations

Columns additionally report the squash load A·Fy as axial capacity, and
their unbraced lengths default to the member length.
"""

from typing import Union

from loguru import logger

from steelhinge.core.errors import InputValidationError
from steelhinge.core.sections import MemberType, effective_area
from steelhinge.core.variants import BraceResults, BraceVariant, ColumnResults, ColumnVariant
from steelhinge.design.base import MemberCalculator
from steelhinge.design.capacity import axial_capacity
from steelhinge.design.classification import classify_axial, effective_slenderness
from steelhinge.design.interpolation import compression_profile, tension_profile
from steelhinge.io.hinge_records import HingeRecord, axial_hinge_record
from steelhinge.io.section_source import SectionPropertySource, fetch_section


class BraceCalculator(MemberCalculator):
    """Axial (P) hinge parameters for braces."""

    @property
    def member_type(self) -> str:
        return MemberType.BRACE.value

    def fetch(self, variant, source: SectionPropertySource):
        geometry = fetch_section(source, variant.section_name, variant.category.shape)
        return variant.model_copy(update={"geometry": geometry})

    def _lengths(self, variant):
        return variant.length_minor, variant.length_major

    def _axial_results(self, variant: Union[BraceVariant, ColumnVariant]) -> dict:
        if variant.geometry is None:
            raise InputValidationError(
                f"{self.member_type} '{variant.name}': section geometry has not been fetched"
            )
        geom = variant.geometry
        params = self.parameters
        length_minor, length_major = self._lengths(variant)

        slenderness = effective_slenderness(
            length_major, geom.radius_major, length_minor, geom.radius_minor
        )
        classification = classify_axial(slenderness, variant.fy, params.elastic_modulus, params)
        area = effective_area(geom, params.default_area)
        capacity = axial_capacity(slenderness, variant.fy, area, variant.length, params.elastic_modulus)

        logger.debug(
            f"{self.member_type} {variant.section_name}/{variant.name}: KL/r={slenderness:.1f} "
            f"(limits {classification.stocky_limit:.1f}/{classification.slender_limit:.1f}), "
            f"Fcr={capacity.critical_stress:.1f} MPa, A={area:.0f} mm²"
        )
        return {
            "classification": classification,
            "compression": compression_profile(classification, params),
            "tension": tension_profile(params),
            "capacity": capacity,
        }

    def calculate(self, variant: BraceVariant) -> BraceVariant:
        results = BraceResults(**self._axial_results(variant))
        return variant.model_copy(update={"results": results})

    def build_hinge_record(self, variant) -> HingeRecord:
        results = self._require_results(variant)
        return axial_hinge_record(results.compression, results.tension, results.capacity)


class ColumnCalculator(BraceCalculator):
    """Axial (P) hinge parameters for columns plus the squash load."""

    @property
    def member_type(self) -> str:
        return MemberType.COLUMN.value

    def _lengths(self, variant: ColumnVariant):
        return variant.effective_length_minor, variant.effective_length_major

    def calculate(self, variant: ColumnVariant) -> ColumnVariant:
        data = self._axial_results(variant)
        area = data["capacity"].area
        results = ColumnResults(**data, axial_capacity=area * variant.fy / 1000.0)
        return variant.model_copy(update={"results": results})
