"""
Unit tests for the four beam control factors
"""

import pytest
from steelhinge.core.errors import InputValidationError
from steelhinge.design.classification import beam_limits, classify_beam_ratios
from steelhinge.design.control_factors import (
    clear_span_ratio,
    compute_control_factors,
    connection_factor,
    hinge_location_factor,
    hinge_location_ratio,
    panel_zone_factor,
    slenderness_factor,
)


class TestConnectionFactor:
    """Test control_1."""

    def test_strong_column_flange(self):
        """tcf >= bf/5.2."""
        assert connection_factor(35.0, 180.0, 13.5) == 1.0

    def test_intermediate_with_plate(self):
        """bf/7 <= tcf < bf/5.2 with tf/2 <= tcp <= bf/5.2."""
        assert connection_factor(30.0, 180.0, 13.5, continuity_plate_thickness=10.0) == 1.0

    def test_intermediate_without_plate(self):
        assert connection_factor(30.0, 180.0, 13.5) == 0.8

    def test_weak_flange_with_thick_plate(self):
        """tcf < bf/7 needs tcp >= tf."""
        assert connection_factor(19.0, 180.0, 13.5, continuity_plate_thickness=14.0) == 1.0
        assert connection_factor(19.0, 180.0, 13.5, continuity_plate_thickness=10.0) == 0.8

    def test_default_plate_is_zero(self):
        assert connection_factor(19.0, 180.0, 13.5) == 0.8


class TestHingeLocationFactor:
    """Test control_2."""

    def test_window_inclusive(self):
        assert hinge_location_factor(0.6) == 1.0
        assert hinge_location_factor(0.75) == 1.0
        assert hinge_location_factor(0.9) == 1.0

    def test_outside_window(self):
        assert hinge_location_factor(0.59) == 0.8
        assert hinge_location_factor(0.91) == 0.8

    def test_ratio_zero_when_n_is_zero(self):
        """The demand vanishes with n = 0."""
        ratio = hinge_location_ratio(450.0, 400.0, 6000.0, 300.0, 3500.0, 345.0, 11.0, beam_n=0)
        assert ratio == 0.0
        assert hinge_location_factor(ratio) == 0.8

    def test_ratio_formula(self):
        """Test the demand / capacity expression for n = 1."""
        My, db, L, dc, H, fyc, twc = 450.0, 400.0, 6000.0, 300.0, 3500.0, 345.0, 11.0
        demand = My * 1e6 / db * (L / (L - dc)) * ((H - db) / H) / 1000
        capacity = 0.55 * fyc * dc * twc / 1000
        ratio = hinge_location_ratio(My, db, L, dc, H, fyc, twc, beam_n=1)
        assert ratio == pytest.approx(demand / capacity)

    def test_span_not_longer_than_column_depth(self):
        with pytest.raises(InputValidationError, match="must exceed"):
            hinge_location_ratio(450.0, 400.0, 300.0, 300.0, 3500.0, 345.0, 11.0, beam_n=1)

    def test_zero_column_length(self):
        with pytest.raises(InputValidationError):
            hinge_location_ratio(450.0, 400.0, 6000.0, 300.0, 0.0, 345.0, 11.0, beam_n=1)

    def test_zero_panel_capacity(self):
        """Unresolved column web gives no shear capacity."""
        with pytest.raises(InputValidationError, match="shear capacity"):
            hinge_location_ratio(450.0, 400.0, 6000.0, 300.0, 3500.0, 345.0, 0.0, beam_n=1)


class TestPanelZoneFactor:
    """Test control_3."""

    def test_at_limit(self):
        assert panel_zone_factor(8.0) == 1.0

    def test_above_limit(self):
        assert panel_zone_factor(13.5) == 1.0

    def test_at_zero(self):
        """0.5^(8/3)."""
        assert panel_zone_factor(0.0) == pytest.approx(0.5 ** (8 / 3))
        assert panel_zone_factor(0.0) == pytest.approx(0.1575, abs=1e-4)

    def test_decay(self):
        assert panel_zone_factor(5.0) == pytest.approx(0.5)

    def test_clear_span_ratio(self):
        """n = 1 removes one column depth, otherwise two."""
        assert clear_span_ratio(6000, 300, 400, beam_n=1) == pytest.approx(14.25)
        assert clear_span_ratio(6000, 300, 400, beam_n=0) == pytest.approx(13.5)

    def test_clear_span_zero_depth(self):
        with pytest.raises(InputValidationError):
            clear_span_ratio(6000, 300, 0)


class TestSlendernessFactor:
    """Test control_4."""

    def test_compact(self):
        assert slenderness_factor(classify_beam_ratios(6.0, 40.0, 345)) == 1.0

    def test_slender_flange(self):
        limits = beam_limits(345)
        cls = classify_beam_ratios(limits["slender_flange"] + 1, 40.0, 345)
        assert slenderness_factor(cls) == 0.5

    def test_transition_minimum(self):
        """Midway on the flange axis gives 0.75."""
        limits = beam_limits(345)
        flange = (limits["compact_flange"] + limits["slender_flange"]) / 2
        cls = classify_beam_ratios(flange, 40.0, 345)
        assert slenderness_factor(cls) == pytest.approx(0.75)


class TestComputeControlFactors:
    """Test the combined evaluation."""

    def test_ipe400_into_heb300(self):
        """Weak column flange, n = 0, long span, compact beam."""
        cls = classify_beam_ratios(90 / 13.5, 331 / 8.6, 345)
        factors = compute_control_factors(
            cls,
            beam_flange_width=180, beam_flange_thickness=13.5, beam_depth=400,
            beam_length=6000, yield_moment=450.915,
            column_flange_thickness=19, column_web_thickness=11,
            column_depth=300, column_length=3500, column_fy=345,
        )
        assert factors.connection == 0.8
        assert factors.hinge_location == 0.8
        assert factors.panel_zone == 1.0
        assert factors.slenderness == 1.0
        assert factors.adjustment_factor == pytest.approx(0.64)
