"""
Unit tests for beam and brace slenderness classification
"""

import pytest
import numpy as np
from steelhinge.core.errors import InputValidationError
from steelhinge.core.sections import SectionGeometry
from steelhinge.design.classification import (
    beam_limits,
    brace_limits,
    classify_axial,
    classify_beam,
    classify_beam_ratios,
    effective_slenderness,
)


class TestBeamLimits:
    """Test beam limit formulas."""

    def test_limits_at_345(self):
        """Test k / sqrt(Fy/6.895)."""
        root = np.sqrt(345 / 6.895)
        limits = beam_limits(345)
        assert limits["compact_flange"] == pytest.approx(52 / root)
        assert limits["compact_web"] == pytest.approx(418 / root)
        assert limits["slender_flange"] == pytest.approx(65 / root)
        assert limits["slender_web"] == pytest.approx(640 / root)

    def test_higher_fy_tightens_limits(self):
        assert beam_limits(460)["compact_flange"] < beam_limits(235)["compact_flange"]

    @pytest.mark.parametrize("fy", [0, -10])
    def test_nonpositive_fy(self, fy):
        """Test Fy <= 0 is rejected before any division."""
        with pytest.raises(InputValidationError):
            beam_limits(fy)


class TestClassifyBeam:
    """Test beam classification flags."""

    def test_compact_example(self):
        """Fy=345, bf/tf=6, h/tw=40 is ductile."""
        cls = classify_beam_ratios(6.0, 40.0, 345)
        assert cls.flange_compact and cls.web_compact
        assert cls.is_ductile
        assert not cls.is_non_ductile

    def test_web_slender_flips_exactly_at_limit(self):
        """Test the slender web flag is inclusive at the limit."""
        limit = beam_limits(345)["slender_web"]
        assert not classify_beam_ratios(6.0, limit - 1e-9, 345).web_slender
        assert classify_beam_ratios(6.0, limit, 345).web_slender
        assert classify_beam_ratios(6.0, limit + 1.0, 345).is_non_ductile

    def test_compact_flag_inclusive(self):
        """Test the compact flange flag holds at the limit."""
        limit = beam_limits(345)["compact_flange"]
        assert classify_beam_ratios(limit, 40.0, 345).flange_compact
        assert not classify_beam_ratios(limit + 1e-6, 40.0, 345).flange_compact

    def test_from_geometry(self):
        """Test ratios are derived from the geometry."""
        geom = SectionGeometry(depth=400, flange_width=180, flange_thickness=13.5,
                               web_thickness=8.6, fillet_radius=21)
        cls = classify_beam(geom, 345)
        assert cls.flange_ratio == pytest.approx(90 / 13.5)
        assert cls.web_ratio == pytest.approx(331 / 8.6)
        assert cls.is_ductile

    def test_unresolved_geometry(self):
        """Test zero geometry is an input error."""
        with pytest.raises(InputValidationError):
            classify_beam(SectionGeometry(), 345)


class TestBraceClassification:
    """Test KL/r limits and classification."""

    def test_limits(self):
        """Test 2.1 and 4.2 sqrt(E/Fy)."""
        limits = brace_limits(345)
        assert limits["slender"] == pytest.approx(101.1, abs=0.05)
        assert limits["stocky"] == pytest.approx(50.5, abs=0.1)

    def test_custom_modulus(self):
        limits = brace_limits(345, elastic_modulus=210000)
        assert limits["slender"] == pytest.approx(4.2 * np.sqrt(210000 / 345))

    def test_effective_slenderness(self):
        """Test KL/r is the larger axis ratio."""
        assert effective_slenderness(3000, 60, 3000, 40) == pytest.approx(75.0)
        assert effective_slenderness(6000, 60, 1000, 40) == pytest.approx(100.0)

    def test_zero_radius(self):
        with pytest.raises(InputValidationError):
            effective_slenderness(3000, 0, 3000, 40)

    def test_transition_zone(self):
        """KL/r = 75 lies between the stocky and slender limits."""
        cls = classify_axial(75.0, 345)
        assert not cls.is_stocky
        assert not cls.is_slender

    def test_stocky_and_slender(self):
        assert classify_axial(40.0, 345).is_stocky
        assert classify_axial(120.0, 345).is_slender

    def test_nonpositive_fy(self):
        with pytest.raises(InputValidationError):
            classify_axial(75.0, 0)
