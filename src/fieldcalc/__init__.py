"""
Elementary electromagnetic field calculations.

Exports the field vector container and the electric/magnetic field samples
so callers can write ``from fieldcalc import ElectricFieldSample``.
"""
from fieldcalc.model.vector import FieldVector
from fieldcalc.model.fields import FieldSample, ElectricFieldSample, MagneticFieldSample

__all__ = [
    "FieldVector",
    "FieldSample",
    "ElectricFieldSample",
    "MagneticFieldSample",
]
