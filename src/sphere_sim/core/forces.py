# MIT License (see LICENSE)
"""
Force model for sphere simulation.

Each function returns a new force vector instead of accumulating into the
body, so a whole step's forces can be computed from one consistent set of
positions before any body moves.

Force terms:
- Drag:      F = -½ ρ C_d A |v_rel| v_rel,  v_rel = v - wind
- External:  F = m a_ext  (uniform acceleration expressed as a force)
- Gravity:   F = G m_i m_j d / |d|³,  d = x_j - x_i

Mutual gravity is O(N²); every step recomputes all pairs from scratch.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np

from ..constants import G, SPHERE_DRAG_COEFFICIENT
from ..errors import ZeroDistanceError
from ..util import norm2

if TYPE_CHECKING:
    from ..scene import Scene
    from ..types import Body


def drag_force(body: Body, air_density: float, wind: np.ndarray) -> np.ndarray:
    """
    Quadratic air drag on a sphere moving relative to the wind.

    Args:
        body: The body experiencing drag.
        air_density: Medium density in kg/m³. 0 disables drag (vacuum).
        wind: Ambient air velocity [wx, wy, wz] in m/s.

    Returns:
        Drag force opposing the velocity relative to the air. Zero when the
        density, the cross-section or the relative speed is zero.
    """
    v_rel = body.velocity - wind
    speed2 = norm2(v_rel)
    area = body.cross_section_area
    if speed2 == 0.0 or air_density <= 0.0 or area <= 0.0:
        return np.zeros(3, dtype=np.float64)
    # ½ρC_dA|v|² along -v/|v|
    k = 0.5 * air_density * SPHERE_DRAG_COEFFICIENT * area
    return -k * np.sqrt(speed2) * v_rel


def external_force(body: Body, acceleration: np.ndarray) -> np.ndarray:
    """
    Convert the uniform scene acceleration into a force on this body.

    Body.advance divides by the same mass, so the body sees the given
    acceleration regardless of its mass. The product and the quotient are
    each rounded, so the recovered acceleration can differ from the input by
    one or two ulp per component.
    """
    return body.mass * acceleration


def mutual_gravity_forces(bodies: Sequence[Body]) -> list[np.ndarray]:
    """
    Newtonian attraction between every unordered pair of bodies.

    Each pair is visited once (i < j) and the same vector is added to i and
    subtracted from j, so the pair forces cancel exactly.

    Returns:
        One force vector per body, in input order.

    Raises:
        ZeroDistanceError: If any two bodies share the same centre.
    """
    n = len(bodies)
    forces = [np.zeros(3, dtype=np.float64) for _ in range(n)]
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            bj = bodies[j]
            d = bj.position - bi.position
            r2 = norm2(d)
            if r2 == 0.0:
                raise ZeroDistanceError(i, j)
            # G m_i m_j / r² along d / r
            f = (G * bi.mass * bj.mass / (r2 * np.sqrt(r2))) * d
            forces[i] += f
            forces[j] -= f
    return forces


def net_forces(scene: Scene) -> tuple[np.ndarray, ...]:
    """
    Compute the net force on every body in the scene for one step.

    Positions and velocities are only read, so the result reflects a single
    consistent snapshot of the scene.

    Returns:
        Tuple of read-only force vectors, one per body, in scene order.

    Raises:
        ZeroDistanceError: If mutual gravity is enabled and two bodies coincide.
    """
    bodies = scene.active_bodies
    if scene.mutual_gravity:
        gravity = mutual_gravity_forces(bodies)
    else:
        gravity = None

    out = []
    for k, b in enumerate(bodies):
        f = drag_force(b, scene.air_density, scene.wind) + external_force(b, scene.external_acceleration)
        if gravity is not None:
            f = f + gravity[k]
        f.setflags(write=False)
        out.append(f)
    return tuple(out)
