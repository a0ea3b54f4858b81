# MIT License (see LICENSE)
import numpy as np
import pytest

from sphere_sim import G, Body, Scene, Status, ZeroDistanceError
from sphere_sim.core.forces import mutual_gravity_forces, net_forces
from sphere_sim.core.invariants import (
    gravitational_potential_energy,
    kinetic_energy,
    linear_momentum,
)


def _isolated_scene(*bodies: Body) -> Scene:
    scene = Scene(air_density=0.0, external_acceleration=(0.0, 0.0, 0.0), mutual_gravity=True)
    for b in bodies:
        scene.add_body(b)
    return scene


def test_pair_force_follows_inverse_square():
    m1, m2, r = 1.0e10, 2.0e10, 10.0
    a = Body(position=(0.0, 0.0, 0.0), mass=m1, radius=0.5)
    b = Body(position=(r, 0.0, 0.0), mass=m2, radius=0.5)
    fa, fb = mutual_gravity_forces([a, b])

    expected = G * m1 * m2 / (r * r)
    assert fa[0] == pytest.approx(expected, rel=1e-12)
    assert np.allclose(fa[1:], 0.0)
    assert np.array_equal(fa, -fb)


def test_third_law_momentum_exchange():
    """Momentum gained by one body is lost by the other at every step."""
    m1, m2 = 1.0e10, 3.0e10
    a = Body(position=(-5.0, 0.0, 0.0), mass=m1, radius=0.1)
    b = Body(position=(5.0, 0.0, 0.0), mass=m2, radius=0.1)
    scene = _isolated_scene(a, b)

    for _ in range(50):
        p1, p2 = m1 * a.velocity.copy(), m2 * b.velocity.copy()
        assert scene.step(0.1) is Status.OK
        dp1 = m1 * a.velocity - p1
        dp2 = m2 * b.velocity - p2
        assert np.array_equal(a.net_force, -b.net_force)
        assert np.allclose(dp1, -dp2, rtol=1e-9, atol=1e-9 * np.linalg.norm(dp1))
        assert dp1[0] > 0.0

    assert np.linalg.norm(linear_momentum([a, b])) <= 1e-9 * m1 * np.linalg.norm(a.velocity)


def test_three_bodies_net_force_sums_to_zero():
    bodies = [
        Body(position=(0.0, 0.0, 0.0), mass=5.0e9),
        Body(position=(3.0, 4.0, 0.0), mass=1.0e9),
        Body(position=(-2.0, 1.0, 6.0), mass=8.0e9),
    ]
    scene = _isolated_scene(*bodies)
    total = sum(net_forces(scene))
    scale = max(np.linalg.norm(f) for f in net_forces(scene))
    assert np.linalg.norm(total) <= 1e-12 * scale


def test_coincident_bodies_fail_with_zero_distance():
    a = Body(position=(1.0, 1.0, 1.0), velocity=(1.0, 0.0, 0.0), mass=1.0, radius=0.1)
    b = Body(position=(1.0, 1.0, 1.0), mass=2.0, radius=0.1)
    scene = _isolated_scene(a, b)

    with pytest.raises(ZeroDistanceError):
        mutual_gravity_forces([a, b])

    assert scene.run(0.1, 10) is Status.ZERO_DISTANCE
    assert scene.elapsed_time == 0.0
    assert np.array_equal(a.position, [1.0, 1.0, 1.0])
    assert np.array_equal(b.position, [1.0, 1.0, 1.0])


def test_coincident_bodies_ignored_without_mutual_gravity():
    a = Body(position=(1.0, 1.0, 1.0), mass=1.0, radius=0.1)
    b = Body(position=(1.0, 1.0, 1.0), mass=2.0, radius=0.1)
    scene = Scene(bodies=[a, b], mutual_gravity=False)
    assert scene.run(0.1, 10) is Status.OK


def test_circular_orbit_conserves_energy():
    """
    Satellite on a circular orbit, v = sqrt(G M / r), over one period
      T = 2π r / v
    keeps its radius and total energy within integration error.
    """
    M, m, r = 1.0e13, 1.0, 100.0
    v = np.sqrt(G * M / r)
    period = 2 * np.pi * r / v
    dt = 0.02

    sun = Body(position=(0.0, 0.0, 0.0), mass=M, radius=1.0)
    sat = Body(position=(r, 0.0, 0.0), velocity=(0.0, v, 0.0), mass=m, radius=0.1)
    scene = _isolated_scene(sun, sat)

    def energy() -> float:
        return kinetic_energy([sun, sat]) + gravitational_potential_energy([sun, sat])

    e0 = energy()
    assert scene.run(dt, int(period / dt)) is Status.OK

    radius = np.linalg.norm(sat.position - sun.position)
    assert abs(radius - r) / r <= 1e-2
    assert abs(energy() - e0) / abs(e0) <= 1e-2
    # back near the start after one revolution
    assert np.linalg.norm(sat.position - (r, 0.0, 0.0)) <= 0.1 * r
