# MIT License (see LICENSE)
import numpy as np
import pytest

from sphere_sim.util import from_length_and_angles, norm, unit, vec, xy_angle, zy_angle


def test_length():
    assert norm(vec(3.0, 4.0, 12.0)) == pytest.approx(13.0)
    assert norm(vec()) == 0.0


@pytest.mark.parametrize("v", [
    (1.0, 0.0, 0.0),
    (0.0, -2.5, 0.0),
    (0.0, 0.0, -7.0),
    (3.0, -4.0, 5.0),
    (-1e-3, 2e-3, 4e3),
    (-12.0, -0.5, -3.25),
])
def test_length_and_angles_round_trip(v):
    v = np.array(v, dtype=np.float64)
    w = from_length_and_angles(norm(v), xy_angle(v), zy_angle(v))
    assert np.allclose(w, v, rtol=1e-9, atol=1e-9 * norm(v))


def test_planar_motion_uses_right_angle_polar():
    """A zy angle of π/2 keeps the vector in the XY plane."""
    v = from_length_and_angles(10.0, np.radians(30.0), np.pi / 2)
    assert v[2] == pytest.approx(0.0, abs=1e-12)
    assert v[0] == pytest.approx(10.0 * np.cos(np.radians(30.0)))
    assert v[1] == pytest.approx(5.0)


def test_angles_at_origin_are_zero():
    assert xy_angle(vec()) == 0.0
    assert zy_angle(vec()) == 0.0


def test_unit():
    u = unit(vec(0.0, 3.0, 4.0))
    assert np.allclose(u, [0.0, 0.6, 0.8])
    assert np.array_equal(unit(vec()), np.zeros(3))
