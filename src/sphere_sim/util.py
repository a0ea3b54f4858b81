# MIT License (see LICENSE)
"""
Vector algebra and small numeric helpers.

Vectors are numpy arrays of shape (3,) and dtype float64. The same type
carries positions (m), velocities (m/s) and forces (N); the unit is a
matter of context.

Angles follow the spherical convention:
  - xy angle: azimuth in the XY plane, measured from +x towards +y.
  - zy angle: polar angle measured from the +z axis.
Motion confined to the XY plane therefore uses a zy angle of π/2.
"""
from __future__ import annotations
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for positions, velocities and fields.
    """
    return np.array(x, dtype=np.float64)


def vec(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """Build a 3D vector from its components."""
    return np.array([x, y, z], dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-12) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return np.zeros(3, dtype=np.float64)
    return v / n


def from_length_and_angles(length: float, xy_angle: float, zy_angle: float) -> np.ndarray:
    """
    Build a vector from its magnitude and two spherical angles (radians).

        x = L sin(φ) cos(θ)
        y = L sin(φ) sin(θ)
        z = L cos(φ)

    where θ is the xy (azimuthal) angle and φ the zy (polar) angle.
    Callers working in degrees must convert with np.radians first.
    """
    s = np.sin(zy_angle)
    return np.array(
        [length * s * np.cos(xy_angle), length * s * np.sin(xy_angle), length * np.cos(zy_angle)],
        dtype=np.float64,
    )


def xy_angle(v: np.ndarray) -> float:
    """Azimuthal angle of v in the XY plane, in (-π, π]. 0 at the origin."""
    return float(np.arctan2(v[1], v[0]))


def zy_angle(v: np.ndarray) -> float:
    """Polar angle of v from the +z axis, in [0, π]. 0 at the origin."""
    return float(np.arctan2(np.hypot(v[0], v[1]), v[2]))


def profiling_enabled() -> bool:
    """Check if automatic profiling is enabled via environment variable."""
    return os.environ.get("SPHERE_SIM_PROFILE", "0") == "1"
