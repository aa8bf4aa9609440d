"""
Adaptive integration over a finite interval with scipy's QUADPACK QAGS (21-point Gauss-Kronrod rule, bisection of the
worst subinterval and epsilon-algorithm extrapolation). QAGS never samples the interval end points, so integrable end
point singularities (e.g. log(x) at 0) are handled without help from the caller.

Failure is reported in the returned QuadratureResult and never replaced by a default value.
"""
import logging
import math
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional

from scipy.integrate import quad

from inductance_calc.errors import ConvergenceError, DomainError

logger = logging.getLogger(__name__)

# QUADPACK rejects a pure relative tolerance below this as invalid input
_MIN_RELATIVE_TOLERANCE = max(50 * sys.float_info.epsilon, 5e-29)


@dataclass(frozen=True)
class QuadratureSettings:
    absolute_tolerance: float = 1e-12
    relative_tolerance: float = 1e-8
    # QAGS reports failure whenever this is 1
    max_subdivisions: int = 10
    max_seconds: Optional[float] = None

    def __post_init__(self):
        if self.absolute_tolerance < 0 or self.relative_tolerance < 0:
            raise DomainError("Quadrature tolerances must be non-negative")
        if self.absolute_tolerance == 0 and self.relative_tolerance == 0:
            raise DomainError("At least one quadrature tolerance must be positive")
        if self.absolute_tolerance == 0 and self.relative_tolerance < _MIN_RELATIVE_TOLERANCE:
            raise DomainError(f"relative_tolerance must be at least {_MIN_RELATIVE_TOLERANCE} when absolute_tolerance is 0")
        if self.max_subdivisions < 1:
            raise DomainError("max_subdivisions must be at least 1")
        if self.max_seconds is not None and self.max_seconds <= 0:
            raise DomainError("max_seconds must be positive")


DEFAULT_QUADRATURE = QuadratureSettings()


@dataclass(frozen=True)
class QuadratureResult:
    value: float
    abs_error: float
    subdivisions: int
    converged: bool
    message: str = ""

    def unwrap(self, name: Optional[str] = None) -> float:
        """
        Returns the value of a converged result
        :param name: label of the integral, prefixed to the error message
        :return: the estimate
        """
        if not self.converged:
            message = f"{name} did not converge: {self.message}" if name else self.message
            raise ConvergenceError(message, self.value, self.abs_error, self.subdivisions)
        return self.value


class _DeadlineExceeded(Exception):
    pass


def integrate(
    func: Callable[[float], float],
    a: float,
    b: float,
    settings: QuadratureSettings = DEFAULT_QUADRATURE,
) -> QuadratureResult:
    """
    Integrates func over [a, b] adaptively
    :param func: integrand of one real variable
    :param a: lower bound (finite)
    :param b: upper bound (finite)
    :param settings: tolerances, subdivision budget and optional wall-clock cap
    :return: QuadratureResult; converged is False when the error target was not met
    """
    a = float(a)
    b = float(b)
    if not (math.isfinite(a) and math.isfinite(b)):
        raise DomainError(f"Integration bounds must be finite, got [{a}, {b}]")
    if a == b:
        return QuadratureResult(0.0, 0.0, 0, True)

    integrand = func
    if settings.max_seconds is not None:
        deadline = time.monotonic() + settings.max_seconds

        def integrand(x):
            if time.monotonic() > deadline:
                raise _DeadlineExceeded()
            return func(x)

    try:
        output = quad(
            integrand,
            a,
            b,
            epsabs=settings.absolute_tolerance,
            epsrel=settings.relative_tolerance,
            limit=settings.max_subdivisions,
            full_output=1,
        )
    except _DeadlineExceeded:
        return _failure(math.nan, math.inf, 0, f"Wall-clock limit of {settings.max_seconds} s exceeded")

    # quad appends a message only when QUADPACK reports ier != 0
    value, abs_error, info = output[:3]
    subdivisions = int(info["last"])
    if not (math.isfinite(value) and math.isfinite(abs_error)):
        return _failure(value, abs_error, subdivisions, f"Integrand is not finite on [{a}, {b}]")
    if len(output) > 3:
        return _failure(value, abs_error, subdivisions, str(output[3]))

    logger.debug("Integral over [%g, %g] converged: %.16g +/- %.3g in %d subintervals",
                 a, b, value, abs_error, subdivisions)
    return QuadratureResult(value, abs_error, subdivisions, True)


def _failure(estimate: float, error: float, subdivisions: int, message: str) -> QuadratureResult:
    logger.warning("Adaptive quadrature failed: %s", message)
    return QuadratureResult(estimate, error, subdivisions, False, message)
