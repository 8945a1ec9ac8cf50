"""
Field Vector Container
======================
Three-component (x, y, z) storage shared by the electric and magnetic samples.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Sequence, TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def format_component(value: float) -> str:
    """Format a single component with six significant digits ('1e5' -> '100000')."""
    return f"{value:g}"


@dataclass(frozen=True)
class FieldVector:
    """
    A field vector in 3D space. Components default to zero and are never
    changed after construction; use ``dataclasses.replace`` for a modified copy.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: FieldVector) -> FieldVector:
        if not isinstance(other, FieldVector):
            return NotImplemented
        return FieldVector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __str__(self) -> str:
        return f"({format_component(self.x)}, {format_component(self.y)}, {format_component(self.z)})"

    @property
    def components(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def copy(self) -> FieldVector:
        return replace(self)

    def describe(self) -> str:
        """Component report, e.g. 'Components: (0, 100000, 1000)'."""
        return f"Components: {self}"

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float] | npt.NDArray[np.float64]) -> FieldVector:
        """
        Build a vector from a flat sequence of exactly three numbers.

        Raises:
            ValueError: if ``values`` is not one-dimensional or does not hold
                exactly three elements.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError(f"A field vector needs a flat sequence, got shape {arr.shape}.")
        if arr.size != 3:
            raise ValueError(f"A field vector needs exactly 3 components, got {arr.size}.")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))
