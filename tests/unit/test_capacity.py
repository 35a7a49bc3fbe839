"""
Unit tests for buckling stress and axial capacity
"""

import pytest
import numpy as np
from steelhinge.core.errors import InputValidationError
from steelhinge.design.capacity import axial_capacity, critical_stress, euler_stress

E = 200000.0


class TestCriticalStress:
    """Test the two-branch Fcr rule."""

    def test_euler_stress(self):
        assert euler_stress(75.0) == pytest.approx(np.pi ** 2 * E / 75.0 ** 2)

    def test_inelastic_branch(self):
        """KL/r below 4.71 sqrt(E/Fy)."""
        fe = np.pi ** 2 * E / 75.0 ** 2
        assert critical_stress(75.0, 345.0) == pytest.approx(0.658 ** (345.0 / fe) * 345.0)
        assert critical_stress(75.0, 345.0) == pytest.approx(228.6, abs=0.1)

    def test_elastic_branch(self):
        """KL/r above 4.71 sqrt(E/Fy)."""
        kl_r = 150.0
        assert kl_r > 4.71 * np.sqrt(E / 345.0)
        assert critical_stress(kl_r, 345.0) == pytest.approx(0.877 * np.pi ** 2 * E / kl_r ** 2)

    def test_short_member_near_yield(self):
        assert critical_stress(1.0, 345.0) == pytest.approx(345.0, rel=1e-3)

    def test_invalid_inputs(self):
        with pytest.raises(InputValidationError):
            critical_stress(75.0, 0.0)
        with pytest.raises(InputValidationError):
            critical_stress(0.0, 345.0)


class TestAxialCapacity:
    """Test forces and deformations."""

    def test_values(self):
        cap = axial_capacity(75.0, 345.0, 4480.0, 3000.0)
        fcr = critical_stress(75.0, 345.0)
        assert cap.compression_force == pytest.approx(fcr * 4480.0 / 1000)
        assert cap.tension_force == pytest.approx(345.0 * 4480.0 / 1000)
        assert cap.compression_displacement == pytest.approx(cap.compression_force * 1000 * 3000 / (4480 * E))
        assert cap.tension_displacement == pytest.approx(345.0 * 3000 / E)
        assert cap.area == 4480.0

    def test_compression_below_tension(self):
        cap = axial_capacity(75.0, 345.0, 4480.0, 3000.0)
        assert cap.compression_force < cap.tension_force

    def test_zero_area(self):
        with pytest.raises(InputValidationError):
            axial_capacity(75.0, 345.0, 0.0, 3000.0)
