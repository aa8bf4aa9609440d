import logging
from dataclasses import dataclass
from multiprocessing import Pool
from typing import List, Optional, Sequence, Union

from inductance_calc.errors import InductanceError
from inductance_calc.inductance import DiskCoilGeometry, SolenoidGeometry
from inductance_calc.quadrature import DEFAULT_QUADRATURE, QuadratureSettings

logger = logging.getLogger(__name__)

Geometry = Union[SolenoidGeometry, DiskCoilGeometry]


@dataclass(frozen=True)
class CoilResult:
    geometry: Geometry
    inductance_henries: Optional[float]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _evaluate_one(geometry: Geometry, settings: QuadratureSettings = DEFAULT_QUADRATURE) -> CoilResult:
    try:
        if isinstance(geometry, DiskCoilGeometry):
            return CoilResult(geometry, geometry.inductance(settings))
        return CoilResult(geometry, geometry.inductance())
    except InductanceError as e:
        logger.info("%s failed: %s", geometry, e)
        return CoilResult(geometry, None, f"{type(e).__name__}: {e}")


def _evaluate_with_settings(args) -> CoilResult:
    return _evaluate_one(*args)


def evaluate_sequential(
    geometries: Sequence[Geometry], settings: QuadratureSettings = DEFAULT_QUADRATURE
) -> List[CoilResult]:
    return [_evaluate_one(geometry, settings) for geometry in geometries]


def evaluate(
    geometries: Sequence[Geometry],
    processes: Optional[int] = None,
    settings: QuadratureSettings = DEFAULT_QUADRATURE,
) -> List[CoilResult]:
    """
    Evaluates many coils on a pool of worker processes. The calculations share no state, so no coordination beyond
    collecting the results is needed.
    :param geometries: solenoid and/or disk coil geometries
    :param processes: number of worker processes, defaults to the CPU count
    :param settings: quadrature settings for the disk coils
    :return: one CoilResult per geometry, in input order. A failed geometry carries its error message instead of a value
    """
    if not geometries:
        return []

    with Pool(processes) as pool:
        results = pool.map(_evaluate_with_settings, [(geometry, settings) for geometry in geometries])

    failed = sum(1 for result in results if not result.ok)
    if failed:
        logger.warning("%d of %d coil evaluations failed", failed, len(results))
    return results
