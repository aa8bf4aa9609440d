import numpy as np

# Vacuum permeability, H/m
MU_0 = 4 * np.pi * 1e-7

# Catalan's constant G
CATALAN = 0.915965594177219015054603514932384110774

METERS_PER_INCH = 0.0254

# Arguments outside these ranges lose more than ~1e-8 relative precision in the
# shape-factor assembly and are rejected.
SOLENOID_BETA_RANGE = (1e-4, 1e6)
# Below DISK_ALPHA_MIN the (alpha - 1)^2 divisor of the disk coil formula amplifies rounding in S(alpha)
# beyond any useful precision.
DISK_ALPHA_MIN = 1.0 + 1e-6
DISK_ALPHA_MAX = 1e4
