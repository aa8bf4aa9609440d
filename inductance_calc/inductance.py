import logging
import math
from dataclasses import dataclass

from inductance_calc.constants import DISK_ALPHA_MAX, DISK_ALPHA_MIN, METERS_PER_INCH, MU_0, SOLENOID_BETA_RANGE
from inductance_calc.errors import DomainError
from inductance_calc.quadrature import DEFAULT_QUADRATURE, QuadratureSettings
from inductance_calc.shape_factors import disk_coil_shape_factor, solenoid_shape_factor
from inductance_calc.utils import require_positive_finite

logger = logging.getLogger(__name__)


def self_inductance_solenoid(turns: float, mean_radius: float, height: float) -> float:
    """
    Self-inductance of an air-core thin-wall solenoid (single layer winding)
    :param turns: number of turns, need not be an integer
    :param mean_radius: mean radius of the winding in meters
    :param height: winding height (axial length) in meters
    :return: inductance in henries
    """
    turns = require_positive_finite("turns", turns)
    mean_radius = require_positive_finite("mean_radius", mean_radius)
    height = require_positive_finite("height", height)

    beta = (height / 2.0) / mean_radius
    low, high = SOLENOID_BETA_RANGE
    if not low <= beta <= high:
        raise DomainError(f"Height to diameter ratio {beta} is outside the supported range [{low}, {high}]")

    inductance = MU_0 * math.pi * turns * turns * mean_radius * mean_radius * solenoid_shape_factor(beta) / height
    logger.debug("Ltws(N=%g, R=%g, ht=%g) = %.12g H", turns, mean_radius, height, inductance)
    return inductance


def self_inductance_disk_coil(
    turns: float,
    inner_radius: float,
    outer_radius: float,
    settings: QuadratureSettings = DEFAULT_QUADRATURE,
) -> float:
    """
    Self-inductance of an air-core disk coil (flat spiral winding)
    :param turns: number of turns, need not be an integer
    :param inner_radius: inner radius of the winding in meters
    :param outer_radius: outer radius of the winding in meters, strictly greater than inner_radius
    :param settings: quadrature settings for the auxiliary integrals J1 and J2
    :return: inductance in henries
    """
    turns = require_positive_finite("turns", turns)
    inner_radius = require_positive_finite("inner_radius", inner_radius)
    outer_radius = require_positive_finite("outer_radius", outer_radius)

    if outer_radius < inner_radius:
        raise DomainError(f"Outer radius {outer_radius} must be greater than inner radius {inner_radius}")
    if outer_radius == inner_radius:
        raise DomainError("Outer radius equals inner radius, a disk coil of zero width has no finite inductance")

    alpha = outer_radius / inner_radius
    if alpha < DISK_ALPHA_MIN:
        raise DomainError(f"Radius ratio {alpha} is below the supported minimum {DISK_ALPHA_MIN}")
    if alpha > DISK_ALPHA_MAX:
        raise DomainError(f"Radius ratio {alpha} is above the supported maximum {DISK_ALPHA_MAX}")

    inductance = MU_0 * turns * turns * inner_radius * disk_coil_shape_factor(alpha, settings) / (
        3.0 * (alpha - 1.0) * (alpha - 1.0)
    )
    logger.debug("Ldc(N=%g, R1=%g, R2=%g) = %.12g H", turns, inner_radius, outer_radius, inductance)
    return inductance


@dataclass(frozen=True)
class SolenoidGeometry:
    turns: float
    mean_radius_m: float
    height_m: float

    @classmethod
    def from_inches(cls, turns: float, mean_radius_in: float, height_in: float) -> "SolenoidGeometry":
        return cls(turns, mean_radius_in * METERS_PER_INCH, height_in * METERS_PER_INCH)

    @property
    def beta(self) -> float:
        return (self.height_m / 2.0) / self.mean_radius_m

    def inductance(self) -> float:
        return self_inductance_solenoid(self.turns, self.mean_radius_m, self.height_m)


@dataclass(frozen=True)
class DiskCoilGeometry:
    turns: float
    inner_radius_m: float
    outer_radius_m: float

    @classmethod
    def from_inches(cls, turns: float, inner_radius_in: float, outer_radius_in: float) -> "DiskCoilGeometry":
        return cls(turns, inner_radius_in * METERS_PER_INCH, outer_radius_in * METERS_PER_INCH)

    @property
    def alpha(self) -> float:
        return self.outer_radius_m / self.inner_radius_m

    @property
    def mean_radius_m(self) -> float:
        return (self.inner_radius_m + self.outer_radius_m) / 2.0

    def inductance(self, settings: QuadratureSettings = DEFAULT_QUADRATURE) -> float:
        return self_inductance_disk_coil(self.turns, self.inner_radius_m, self.outer_radius_m, settings)
