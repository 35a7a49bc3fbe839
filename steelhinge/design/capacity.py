"""
Axial capacity of braces and columns.

    Fe  = π²E / (KL/r)²
    Fcr = 0.658^(Fy/Fe)·Fy    if KL/r <= 4.71·sqrt(E/Fy)   (inelastic buckling)
        = 0.877·Fe            otherwise                    (elastic buckling)

    P_y = Fcr·A/1000  (kN),  delta_c = P_y·1000·L/(A·E)  (mm)
    T_y = Fy·A/1000   (kN),  delta_t = T_y·1000·L/(A·E)  (mm)

Example:
    >>> fcr = critical_stress(75.0, 345.0)
    >>> round(fcr, 1)
    228.6
"""

from typing import Optional
import numpy as np

from steelhinge.core.errors import InputValidationError
from steelhinge.core.settings import DEFAULT_PARAMETERS
from steelhinge.core.variants import AxialCapacity

INELASTIC_LIMIT_COEFF = 4.71
INELASTIC_BASE = 0.658
ELASTIC_REDUCTION = 0.877


def euler_stress(slenderness: float, elastic_modulus: Optional[float] = None) -> float:
    """Elastic buckling stress Fe (MPa)."""
    if slenderness <= 0:
        raise InputValidationError(f"Slenderness must be positive (got {slenderness})")
    E = elastic_modulus if elastic_modulus is not None else DEFAULT_PARAMETERS.elastic_modulus
    return float(np.pi ** 2 * E / slenderness ** 2)


def critical_stress(slenderness: float, fy: float, elastic_modulus: Optional[float] = None) -> float:
    """
    Flexural buckling stress Fcr (MPa).

    Raises:
        InputValidationError: If slenderness or fy are not positive
    """
    if fy <= 0:
        raise InputValidationError(f"Yield strength Fy must be positive (got {fy})")
    E = elastic_modulus if elastic_modulus is not None else DEFAULT_PARAMETERS.elastic_modulus
    fe = euler_stress(slenderness, E)
    if slenderness <= INELASTIC_LIMIT_COEFF * np.sqrt(E / fy):
        return float(INELASTIC_BASE ** (fy / fe) * fy)
    return float(ELASTIC_REDUCTION * fe)


def axial_capacity(
    slenderness: float,
    fy: float,
    area: float,
    length: float,
    elastic_modulus: Optional[float] = None,
) -> AxialCapacity:
    """
    Yield forces and elastic deformations in compression and tension.

    Args:
        slenderness: Governing KL/r
        fy: Yield strength (MPa)
        area: Gross area (mm²)
        length: Member length (mm)
        elastic_modulus: E (MPa), defaults to 200 000

    Returns:
        AxialCapacity

    Raises:
        InputValidationError: If area, length, fy or slenderness are not positive
    """
    if area <= 0:
        raise InputValidationError(f"Area must be positive (got {area})")
    if length <= 0:
        raise InputValidationError(f"Length must be positive (got {length})")
    E = elastic_modulus if elastic_modulus is not None else DEFAULT_PARAMETERS.elastic_modulus

    fe = euler_stress(slenderness, E)
    fcr = critical_stress(slenderness, fy, E)
    p_y = fcr * area / 1000.0
    t_y = fy * area / 1000.0
    return AxialCapacity(
        euler_stress=fe,
        critical_stress=fcr,
        compression_force=p_y,
        compression_displacement=p_y * 1000.0 * length / (area * E),
        tension_force=t_y,
        tension_displacement=t_y * 1000.0 * length / (area * E),
        area=area,
    )
