from typing import Optional


class InductanceError(Exception):
    """Base class for every failure raised by inductance_calc."""


class DomainError(InductanceError, ValueError):
    """The coil geometry or a derived argument violates a precondition."""


class ConvergenceError(InductanceError, RuntimeError):
    def __init__(
        self,
        message: str,
        estimate: Optional[float] = None,
        abs_error: Optional[float] = None,
        subdivisions: int = 0,
    ):
        """
        Raised when the adaptive quadrature cannot meet its error target
        :param message: diagnostic from the integrator
        :param estimate: last (unconverged) estimate of the integral
        :param abs_error: error bound achieved by that estimate
        :param subdivisions: number of subintervals in use when it gave up
        """
        super().__init__(message)
        self.estimate = estimate
        self.abs_error = abs_error
        self.subdivisions = subdivisions
