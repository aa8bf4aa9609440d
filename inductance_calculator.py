import logging
from multiprocessing import freeze_support

import matplotlib.pyplot as plt
import numpy as np

from inductance_calc.batch import evaluate
from inductance_calc.inductance import DiskCoilGeometry
from inductance_calc.shape_factors import disk_coil_shape_factor, solenoid_shape_factor


base_disk = DiskCoilGeometry.from_inches(turns=100, inner_radius_in=15.0, outer_radius_in=1.5 * 15.0)


def run_worked_example():
    beta = 0.1
    print(f"B: {beta} => T: {solenoid_shape_factor(beta)}")

    inductance = base_disk.inductance()
    normalized = inductance / (base_disk.turns * base_disk.turns * base_disk.mean_radius_m)
    print(f"Alpha: {base_disk.alpha} => L: {inductance} => L/(N*N*R): {normalized}")


def plot_shape_factors():
    betas = np.logspace(-2, 2, 200)
    plt.semilogx(betas, [solenoid_shape_factor(beta) for beta in betas])
    plt.xlabel("beta = height / (2 * mean radius)")
    plt.ylabel("T(beta)")
    plt.show()

    alphas = np.linspace(1.02, 10, 200)
    plt.semilogy(alphas, [disk_coil_shape_factor(alpha) for alpha in alphas])
    plt.xlabel("alpha = outer radius / inner radius")
    plt.ylabel("S(alpha)")
    plt.show()


def run_disk_sweep():
    sweep = []
    for alpha in np.linspace(1.05, 4.0, 60):
        sweep.append(DiskCoilGeometry(base_disk.turns, base_disk.inner_radius_m, alpha * base_disk.inner_radius_m))

    results = evaluate(sweep, processes=4)
    x = [result.geometry.alpha for result in results if result.ok]
    y = [result.inductance_henries * 1e3 for result in results if result.ok]

    plt.plot(x, y)
    plt.xlabel("Outer radius / inner radius")
    plt.ylabel("Inductance [mH]")
    plt.show()


if __name__ == '__main__':
    freeze_support()
    logging.basicConfig(level=logging.INFO)
    run_worked_example()
    plot_shape_factors()
    run_disk_sweep()
