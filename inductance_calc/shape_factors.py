"""
Dimensionless shape factors of Babic & Akyel, "Improvement in Calculation of the Self- and Mutual Inductance of
Thin-Wall Solenoids and Disk Coils" (IEEE Trans. Magn., 2000).

T(beta) corrects the infinite-solenoid inductance of a thin-wall solenoid (it is Nagaoka's coefficient) and S(alpha)
is the corresponding factor of a flat disk coil. Both reduce to complete elliptic integrals; S additionally needs the
auxiliary integrals J1 and J2, which have no closed form and are integrated numerically.
"""
import logging
import math
from typing import Tuple

import numpy as np

from inductance_calc.constants import CATALAN
from inductance_calc.elliptic import elliptic_integral
from inductance_calc.errors import DomainError
from inductance_calc.quadrature import DEFAULT_QUADRATURE, QuadratureResult, QuadratureSettings, integrate

logger = logging.getLogger(__name__)

_HALF_PI = math.pi / 2


def solenoid_modulus(beta: float) -> Tuple[float, float]:
    """k and k' for the thin-wall solenoid, k^2 = 1 / (1 + beta^2)"""
    root = math.hypot(1.0, beta)
    return 1.0 / root, beta / root


def disk_coil_modulus(alpha: float) -> Tuple[float, float]:
    """k and k' for the disk coil, k^2 = 4 alpha / (1 + alpha)^2"""
    return 2.0 * math.sqrt(alpha) / (1.0 + alpha), (alpha - 1.0) / (alpha + 1.0)


def solenoid_shape_factor(beta: float) -> float:
    """
    T(beta) for a thin-wall solenoid
    :param beta: half the winding height over the mean radius, must be finite and positive
    :return: shape factor, tends to 1 for long solenoids and to 0 for short ones
    """
    if not (math.isfinite(beta) and beta > 0):
        raise DomainError(f"beta must be finite and positive, got {beta}")

    k, kc = solenoid_modulus(beta)
    k_squared = k * k
    k_cubed = k_squared * k
    integrals = elliptic_integral(k, kc)

    # (2k^2 - 1)E + (1 - k^2)K - k^3, regrouped around K - E
    difference = integrals.first_minus_second
    bracket = difference + k_squared * (integrals.first_kind - 2.0 * difference) - k_cubed

    return 4.0 / (3.0 * math.pi * beta * k_cubed) * bracket


def _require_disk_alpha(alpha: float):
    if not (math.isfinite(alpha) and alpha > 1.0):
        raise DomainError(f"alpha must be finite and greater than 1, got {alpha}")


def j1_integral(alpha: float, settings: QuadratureSettings = DEFAULT_QUADRATURE) -> QuadratureResult:
    _require_disk_alpha(alpha)
    alpha_squared = alpha * alpha

    def integrand(x):
        numerator = np.sqrt(1.0 + alpha_squared + 2.0 * alpha * np.cos(x)) + 1.0 + alpha * np.cos(x)
        denominator = np.sqrt(1.0 + alpha_squared - 2.0 * alpha * np.sin(x)) + alpha * np.sin(x) - 1.0
        return np.log(numerator / denominator)

    return integrate(integrand, 0.0, _HALF_PI, settings)


def j2_integral(alpha: float, settings: QuadratureSettings = DEFAULT_QUADRATURE) -> QuadratureResult:
    _require_disk_alpha(alpha)
    alpha_squared = alpha * alpha

    def integrand(x):
        cos_2x = np.cos(2.0 * x)
        return np.log(np.sqrt(1.0 + alpha_squared + 2.0 * alpha * cos_2x) + alpha + cos_2x)

    return integrate(integrand, 0.0, _HALF_PI, settings)


def disk_coil_shape_factor(alpha: float, settings: QuadratureSettings = DEFAULT_QUADRATURE) -> float:
    """
    S(alpha) for a flat disk coil
    :param alpha: outer radius over inner radius, must be finite and greater than 1
    :param settings: quadrature settings used for J1 and J2
    :return: shape factor
    """
    _require_disk_alpha(alpha)

    k, kc = disk_coil_modulus(alpha)
    k_squared = k * k
    alpha_squared = alpha * alpha
    alpha_cubed = alpha * alpha_squared
    alpha_fourth = alpha_squared * alpha_squared

    integrals = elliptic_integral(k, kc)
    K = integrals.first_kind
    E = integrals.second_kind
    J1 = j1_integral(alpha, settings).unwrap(f"J1({alpha})")
    J2 = j2_integral(alpha, settings).unwrap(f"J2({alpha})")

    k_coefficient = (alpha_fourth + 4.0 * alpha_cubed + 4.0 * alpha + 1.0) * k_squared - 4.0 * alpha * (alpha_squared + 1.0)
    e_coefficient = -(alpha_fourth + 2.0 * alpha_cubed + 2.0 * alpha + 1.0) * k_squared + 4.0 * alpha * (alpha_squared + 1.0)

    result = (
        (alpha_cubed + 1.0) * (2.0 * CATALAN - 1.0)
        - _HALF_PI * math.log(2.0)
        - (alpha_cubed + 1.0) * K
        + (alpha + 1.0) / (2.0 * alpha * k_squared) * (k_coefficient * K + e_coefficient * E)
        - alpha_cubed / 2.0 * J1
        - J2
    )

    logger.debug("S(%g) = %.16g (J1 = %.16g, J2 = %.16g)", alpha, result, J1, J2)
    return result
