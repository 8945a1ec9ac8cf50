"""Physical constants used by the field formulas (SI units)."""
from typing import Final

import numpy as np

# Vacuum permittivity, F/m
EPSILON_0: Final[float] = 8.85e-12

# Vacuum permeability, H/m
MU_0: Final[float] = 4 * np.pi * 1e-7
