import math

import numpy as np
import pytest

from fieldcalc import ElectricFieldSample, MagneticFieldSample, FieldVector
from fieldcalc.model.constants import EPSILON_0, MU_0


def test_constants():
    assert EPSILON_0 == 8.85e-12
    assert MU_0 == pytest.approx(4 * math.pi * 1e-7)


@pytest.mark.parametrize("cls", [ElectricFieldSample, MagneticFieldSample])
def test_default_sample(cls):
    s = cls()
    assert s.vector == FieldVector(0.0, 0.0, 0.0)
    assert s.computed_magnitude == 0.0
    assert not s.is_computed


def test_gauss_point_charge():
    e = ElectricFieldSample.from_components(0, 1e5, 1e3)
    result = e.compute_from_point_charge(1e-6, 0.1)
    expected = 1e-6 / (4 * math.pi * 0.1**2 * 8.85e-12)
    assert result == pytest.approx(expected)
    assert e.computed_magnitude == pytest.approx(8.99e5, rel=1e-3)
    assert e.is_computed
    # the vector is untouched by the formula
    assert e.vector == FieldVector(0, 1e5, 1e3)


def test_ampere_straight_wire():
    b = MagneticFieldSample.from_components(0, 2, 1)
    result = b.compute_from_current(10, 0.1)
    assert result == pytest.approx(2e-5)
    assert b.computed_magnitude == pytest.approx(2e-5)


def test_formulas_accept_arrays():
    distances = np.array([0.1, 0.2, 0.4])
    e = ElectricFieldSample()
    fields = e.compute_from_point_charge(1e-6, distances)
    # inverse square law
    assert np.allclose(fields[0] / fields, [1.0, 4.0, 16.0])

    b = MagneticFieldSample()
    fields = b.compute_from_current(10.0, distances)
    assert np.allclose(fields, [2e-5, 1e-5, 5e-6])


def test_magnitude_text_for_array_results():
    e = ElectricFieldSample.from_components(0, 1, 2)
    e.compute_from_point_charge(1e-6, np.array([0.1, 0.2]))
    assert e.magnitude_text() == "|E| = [899180, 224795]"

    b = MagneticFieldSample()
    b.compute_from_current(np.array([10.0, 5.0]), 0.1)
    assert b.magnitude_text() == "|B| = [2e-05, 1e-05]"


def test_zero_distance_is_unguarded():
    e = ElectricFieldSample()
    assert np.isinf(e.compute_from_point_charge(1e-6, 0.0))

    b = MagneticFieldSample()
    assert np.isinf(b.compute_from_current(10.0, 0.0))

    assert np.isnan(ElectricFieldSample().compute_from_point_charge(0.0, 0.0))


def test_electric_sum():
    e1 = ElectricFieldSample.from_components(0, 1e5, 1e3)
    e2 = ElectricFieldSample.from_components(1e4, 2e5, 3e3)
    e3 = e1 + e2
    assert isinstance(e3, ElectricFieldSample)
    assert e3.vector.components == pytest.approx((1e4, 3e5, 4e3))
    assert str(e3) == "E-Field: (10000, 300000, 4000)"


def test_magnetic_sum():
    b1 = MagneticFieldSample.from_components(0, 2, 1)
    b2 = MagneticFieldSample.from_components(3, 1, 4)
    b3 = b1.add(b2)
    assert isinstance(b3, MagneticFieldSample)
    assert b3.vector == FieldVector(3, 3, 5)
    assert str(b3) == "B-Field: (3, 3, 5)"


def test_add_is_commutative():
    b1 = MagneticFieldSample.from_components(0.5, -2, 1)
    b2 = MagneticFieldSample.from_components(3, 1, 4.25)
    assert (b1 + b2).vector == (b2 + b1).vector


def test_add_does_not_combine_magnitudes():
    e1 = ElectricFieldSample.from_components(1, 2, 3)
    e2 = ElectricFieldSample.from_components(4, 5, 6)
    e1.compute_from_point_charge(1e-6, 0.1)
    e2.compute_from_point_charge(2e-6, 0.1)
    assert (e1 + e2).computed_magnitude == 0.0
    # operands are left as they were
    assert e1.vector == FieldVector(1, 2, 3)


def test_mixing_kinds_is_rejected():
    e = ElectricFieldSample.from_components(1, 2, 3)
    b = MagneticFieldSample.from_components(1, 2, 3)
    with pytest.raises(TypeError):
        e + b
    with pytest.raises(TypeError):
        e.add(b)


def test_copy_keeps_magnitude():
    e = ElectricFieldSample.from_components(1, 2, 3)
    e.compute_from_point_charge(1e-6, 0.1)
    c = e.copy()
    assert isinstance(c, ElectricFieldSample)
    assert c.vector == e.vector
    assert c.computed_magnitude == e.computed_magnitude
    c.compute_from_point_charge(1e-6, 0.2)
    assert c.computed_magnitude != e.computed_magnitude


def test_text_representation():
    e = ElectricFieldSample.from_components(0, 1e5, 1e3)
    assert str(e) == "E-Field: (0, 100000, 1000)"
    assert e.describe() == "Components: (0, 100000, 1000)"
    b = MagneticFieldSample.from_components(0, 2, 1)
    b.compute_from_current(10, 0.1)
    assert b.magnitude_text() == "|B| = 2e-05"
