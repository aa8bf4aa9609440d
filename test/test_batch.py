import pytest

from inductance_calc.batch import evaluate, evaluate_sequential
from inductance_calc.inductance import DiskCoilGeometry, SolenoidGeometry, self_inductance_solenoid
from inductance_calc.quadrature import QuadratureSettings

GEOMETRIES = [
    SolenoidGeometry(100, 0.05, 0.1),
    DiskCoilGeometry.from_inches(100, 15.0, 22.5),
    DiskCoilGeometry(100, 0.1, 0.1),
    SolenoidGeometry(100, -0.05, 0.1),
    DiskCoilGeometry(10, 1.0, 1.0 + 1e-7),
]


def _check(results):
    assert [result.geometry for result in results] == GEOMETRIES
    assert [result.ok for result in results] == [True, True, False, False, False]

    assert results[0].inductance_henries == pytest.approx(self_inductance_solenoid(100, 0.05, 0.1))
    assert results[1].inductance_henries == pytest.approx(7.5010460036745719e-3, rel=1e-8)
    assert results[2].inductance_henries is None
    assert results[2].error.startswith("DomainError")
    assert results[3].error.startswith("DomainError")
    assert results[4].error.startswith("DomainError")


def test_sequential_batch_records_failures():
    _check(evaluate_sequential(GEOMETRIES))


def test_parallel_batch_matches_sequential():
    results = evaluate(GEOMETRIES, processes=2)
    _check(results)
    assert results == evaluate_sequential(GEOMETRIES)


def test_settings_reach_disk_coils_only():
    geometries = [SolenoidGeometry(100, 0.05, 0.1), DiskCoilGeometry(10, 1.0, 1.01)]
    strict = QuadratureSettings(max_subdivisions=1)

    for results in [evaluate_sequential(geometries, strict), evaluate(geometries, processes=2, settings=strict)]:
        assert results[0].ok
        assert results[0].inductance_henries == pytest.approx(self_inductance_solenoid(100, 0.05, 0.1))
        assert not results[1].ok
        assert results[1].inductance_henries is None
        assert results[1].error.startswith("ConvergenceError: J1(1.01) did not converge")


def test_empty_batch():
    assert evaluate([]) == []
