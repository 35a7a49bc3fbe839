"""
Unit tests for the member calculators and their registry
"""

import pytest
from steelhinge.core.settings import DEFAULT_PARAMETERS
from steelhinge.core.errors import InputValidationError
from steelhinge.core.sections import MemberType, SectionGeometry
from steelhinge.design import (
    CALCULATOR_REGISTRY,
    BeamCalculator,
    BraceCalculator,
    ColumnCalculator,
    calculate,
    fetch,
    get_calculator,
)


class TestRegistry:
    """Test factory dispatch on the member tag."""

    def test_registry_covers_members(self):
        assert set(CALCULATOR_REGISTRY) == set(MemberType)

    @pytest.mark.parametrize("member,cls", [
        ("Beam", BeamCalculator),
        ("Brace", BraceCalculator),
        ("Column", ColumnCalculator),
    ])
    def test_get_calculator(self, member, cls):
        calculator = get_calculator(member)
        assert type(calculator) is cls
        assert calculator.member_type == member

    def test_unknown_member(self):
        with pytest.raises(InputValidationError, match="Available"):
            get_calculator("Truss")


class TestFetch:
    """Test geometry lookup through the injected source."""

    def test_fetch_by_category(self, catalog):
        geom = fetch("IPE400", "Beam-I-Section", catalog)
        assert geom.depth == 400

    def test_missing_section_gives_zero_geometry(self, catalog):
        geom = fetch("IPE999", "Beam-I-Section", catalog)
        assert geom.is_empty


class TestBeamCalculator:
    """Test beam results for IPE400 framing into HEB300."""

    def test_results(self, beam_variant, catalog):
        result = calculate(beam_variant, catalog)
        res = result.results
        assert result.geometry.depth == 400
        assert result.column_geometry.depth == 300
        assert res.classification.is_ductile
        assert res.profile.a == 9.0
        assert res.control_factors.adjustment_factor == pytest.approx(0.64)
        assert res.profile_prime.a == pytest.approx(5.76)
        assert res.profile_prime.CP == pytest.approx(7.04)
        assert res.yield_moment == pytest.approx(1307000 * 345 / 1e6)
        assert res.yield_rotation == pytest.approx(1307000 * 345 * 6000 / (6 * 200000 * 231280000))

    def test_input_variant_untouched(self, beam_variant, catalog):
        calculate(beam_variant, catalog)
        assert beam_variant.results is None

    def test_hinge_record(self, beam_variant, catalog):
        calculator = BeamCalculator()
        computed = calculator.calculate(calculator.fetch(beam_variant, catalog))
        record = calculator.build_hinge_record(computed)
        assert record.dof_type == "Moment M3"
        assert record.backbone[-1].displacement == pytest.approx(7.04)

    def test_record_requires_results(self, beam_variant):
        with pytest.raises(ValueError, match="not been calculated"):
            BeamCalculator().build_hinge_record(beam_variant)

    def test_calculate_without_fetch(self, beam_variant):
        with pytest.raises(InputValidationError, match="not been fetched"):
            BeamCalculator().calculate(beam_variant)

    def test_missing_column_section(self, beam_variant, catalog):
        """An unknown column degrades to zero geometry, then fails validation."""
        variant = beam_variant.model_copy(update={"column_section": "HEB999"})
        with pytest.raises(InputValidationError):
            calculate(variant, catalog)

    def test_zero_geometry(self, beam_variant):
        """Unresolved beam geometry is an input error, not NaN."""
        variant = beam_variant.model_copy(update={
            "geometry": SectionGeometry(), "column_geometry": SectionGeometry(),
        })
        with pytest.raises(InputValidationError):
            BeamCalculator().calculate(variant)


class TestBraceCalculator:
    """Test brace results for BOX150 (r33=60, r22=40, L=3000)."""

    def test_results(self, brace_variant, catalog):
        res = calculate(brace_variant, catalog).results
        assert res.classification.slenderness == pytest.approx(75.0)
        assert 0.5 < res.compression.a < 1.0
        assert res.tension.a == 8.0
        assert res.capacity.area == 4480
        assert res.capacity.tension_force == pytest.approx(345 * 4480 / 1000)

    def test_hinge_record(self, brace_variant, catalog):
        calculator = BraceCalculator()
        computed = calculator.calculate(calculator.fetch(brace_variant, catalog))
        record = calculator.build_hinge_record(computed)
        assert record.dof_type == "Axial P"
        assert record.yield_scale.positive_force == pytest.approx(computed.results.capacity.tension_force)

    def test_unknown_section_fails(self, brace_variant, catalog):
        """Zero radii of gyration cannot give KL/r."""
        variant = brace_variant.model_copy(update={"section_name": "NOPE"})
        with pytest.raises(InputValidationError):
            calculate(variant, catalog)


class TestColumnCalculator:
    """Test column results."""

    def test_results(self, column_variant, catalog):
        res = calculate(column_variant, catalog).results
        assert res.classification.slenderness == pytest.approx(3500 / 75.8)
        assert res.axial_capacity == pytest.approx(14910 * 345 / 1000)
        assert res.tension.CP == 9.0

    def test_area_approximated_when_missing(self, column_variant):
        geom = SectionGeometry(depth=300, flange_width=300, flange_thickness=19, web_thickness=11,
                               radius_major=129.9, radius_minor=75.8, shape="I")
        variant = column_variant.model_copy(update={"geometry": geom})
        res = ColumnCalculator().calculate(variant).results
        expected_area = 2 * 19 * 300 + (300 - 38) * 11
        assert res.capacity.area == pytest.approx(expected_area)
        assert res.axial_capacity == pytest.approx(expected_area * 345 / 1000)

    def test_default_area_from_parameters(self, column_variant):
        """A user-defined section without area uses the configured fallback."""
        geom = SectionGeometry(radius_major=100.0, radius_minor=50.0, shape="UserDefined")
        variant = column_variant.model_copy(update={"geometry": geom})
        params = DEFAULT_PARAMETERS.model_copy(update={"default_area": 1234.0})
        res = ColumnCalculator(params).calculate(variant).results
        assert res.capacity.area == 1234.0
        assert res.axial_capacity == pytest.approx(1234.0 * 345 / 1000)
