"""
Field Samples
=============
Electric and magnetic field calculators. Each sample owns a ``FieldVector``
and a scalar ``computed_magnitude`` filled in by its formula.

Zero distance is not guarded: the formulas divide with numpy floating-point
semantics, so ``distance == 0`` gives ``inf`` (``nan`` for a zero source).
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import ClassVar, TYPE_CHECKING, Union

import numpy as np

from fieldcalc.model.constants import EPSILON_0, MU_0
from fieldcalc.model.vector import FieldVector, format_component

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Scalar = Union[float, "npt.NDArray[np.float64]"]


@dataclass
class FieldSample(ABC):
    """
    Abstract base class for field samples.
    """
    LABEL: ClassVar[str] = "?"

    vector: FieldVector = field(default_factory=FieldVector)
    computed_magnitude: Scalar = 0.0

    @classmethod
    def from_components(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        return cls(vector=FieldVector(x, y, z))

    @abstractmethod
    def formula(self, source: Scalar, distance: Scalar) -> Scalar:
        """
        Evaluate the field magnitude produced by ``source`` at ``distance``.

        Args:
            source: Charge in C or current in A.
            distance: Distance from the source in m.

        Returns:
            Field magnitude (V/m or T).
        """
        pass

    def _compute(self, source: Scalar, distance: Scalar) -> Scalar:
        with np.errstate(divide="ignore", invalid="ignore"):
            self.computed_magnitude = self.formula(source, distance)
        logger.debug(f"{self.LABEL}({source}, r={distance}) = {self.computed_magnitude}")
        return self.computed_magnitude

    def add(self, other: FieldSample) -> FieldSample:
        """
        Component-wise sum of the two vectors. The computed magnitudes are not
        combined; the result starts uncomputed.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot add {type(other).__name__} to {type(self).__name__}."
            )
        logger.debug(f"Adding {self} + {other}")
        return type(self)(vector=self.vector + other.vector)

    def __add__(self, other: FieldSample) -> FieldSample:
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def copy(self) -> FieldSample:
        return replace(self, vector=self.vector.copy())

    @property
    def is_computed(self) -> bool:
        return bool(np.any(self.computed_magnitude != 0.0))

    def describe(self) -> str:
        return self.vector.describe()

    def magnitude_text(self) -> str:
        """
        Computed magnitude as text, e.g. '|E| = 899180'. Array results are
        formatted element by element: '|E| = [899180, 224795]'.
        """
        mag = self.computed_magnitude
        if np.ndim(mag) > 0:
            text = np.array2string(
                np.asarray(mag, dtype=np.float64),
                formatter={"float_kind": format_component},
                separator=", ",
            )
        else:
            text = format_component(mag)
        return f"|{self.LABEL}| = {text}"

    def __str__(self) -> str:
        return f"{self.LABEL}-Field: {self.vector}"


@dataclass
class ElectricFieldSample(FieldSample):
    """
    Electric field sample, magnitude from Gauss' Law for a point charge.
    """
    LABEL: ClassVar[str] = "E"

    def formula(self, source: Scalar, distance: Scalar) -> Scalar:
        """E = Q / (4π r² ε₀)"""
        return np.divide(source, 4 * np.pi * np.square(distance) * EPSILON_0)

    def compute_from_point_charge(self, charge: Scalar, distance: Scalar) -> Scalar:
        """
        Set ``computed_magnitude`` from a point charge.

        Args:
            charge: Enclosed charge in C.
            distance: Distance from the charge in m.

        Returns:
            Electric field magnitude in V/m.
        """
        return self._compute(charge, distance)


@dataclass
class MagneticFieldSample(FieldSample):
    """
    Magnetic field sample, magnitude from Ampère's Law for a long straight wire.
    """
    LABEL: ClassVar[str] = "B"

    def formula(self, source: Scalar, distance: Scalar) -> Scalar:
        """B = μ₀ I / (2π r)"""
        return np.divide(np.multiply(MU_0, source), 2 * np.pi * np.asarray(distance))

    def compute_from_current(self, current: Scalar, distance: Scalar) -> Scalar:
        """
        Set ``computed_magnitude`` from the current in a straight wire.

        Args:
            current: Current in A.
            distance: Perpendicular distance from the wire in m.

        Returns:
            Magnetic flux density in T.
        """
        return self._compute(current, distance)
