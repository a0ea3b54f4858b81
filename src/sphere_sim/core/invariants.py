# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness. With drag and external
acceleration off, mutual gravity conserves total momentum exactly (up to
rounding) and total energy up to integration error.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..constants import G
from ..types import Body
from ..util import norm


def kinetic_energy(bodies: Sequence[Body]) -> float:
    """
    Calculate the total kinetic energy of a system of bodies.

    T = Σ 0.5 * m * v²

    Returns:
        Total kinetic energy in Joules.
    """
    ke = 0.0
    for b in bodies:
        if b.mass <= 0:
            continue
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def linear_momentum(bodies: Sequence[Body]) -> np.ndarray:
    """
    Calculate the total linear momentum of a system.

    P = Σ (m * v)

    Returns:
        Total momentum vector [Px, Py, Pz] in kg·m/s.
    """
    p = np.zeros(3, dtype=np.float64)
    for b in bodies:
        if b.mass <= 0:
            continue
        p += b.mass * b.velocity
    return p


def gravitational_potential_energy(bodies: Sequence[Body]) -> float:
    """
    Mutual gravitational potential energy, U = -Σ_{i<j} G m_i m_j / r_ij.

    Coincident pairs are skipped.
    """
    u = 0.0
    n = len(bodies)
    for i in range(n):
        bi = bodies[i]
        if bi.mass <= 0:
            continue
        for j in range(i + 1, n):
            bj = bodies[j]
            if bj.mass <= 0:
                continue
            r = norm(bj.position - bi.position)
            if r == 0.0:
                continue
            u -= G * bi.mass * bj.mass / r
    return u
