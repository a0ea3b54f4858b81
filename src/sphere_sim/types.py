# MIT License (see LICENSE)
"""
Core type definitions for the sphere simulation.

Defines Body, the only simulated entity: a sphere with mass, position and
velocity. Its geometry is stored as a single radius; cross-sectional area
and volume are derived from it so the three can never disagree:
  area   = π r²
  volume = (4/3) π r³

The kinematic update integrates a constant force over one time slice:
  a  = F/m
  x' = x + v t + ½ a t²
  v' = v + a t
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import PI
from .errors import ZeroMassError
from .util import f64


@dataclass
class Body:
    """
    A sphere moving under an externally computed net force.

    Attributes:
        position: Centre position [x, y, z] in meters.
        velocity: Velocity [vx, vy, vz] in m/s.
        mass: Mass in kg. Not validated here; a zero mass fails in advance().
        radius: Sphere radius in meters. Use set_radius/set_area/set_volume
                to change geometry with validation.
        net_force: Force [Fx, Fy, Fz] applied by the most recent advance().
                   Carries no state between steps.
        id: Sequential identifier assigned by Scene.add_body().
    """
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    mass: float = 1.0
    radius: float = 0.0

    # Runtime state (not user-specified)
    net_force: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    id: int = -1

    def __post_init__(self) -> None:
        """Convert vectors to float64 arrays for consistent numerics."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.net_force = f64(self.net_force)
        self.radius = float(self.radius)

    @property
    def cross_section_area(self) -> float:
        """Frontal area presented to the air stream, π r² (m²)."""
        return PI * self.radius * self.radius

    @property
    def volume(self) -> float:
        """Sphere volume, (4/3) π r³ (m³)."""
        return (4.0 / 3.0) * PI * self.radius ** 3

    def set_radius(self, r: float) -> None:
        """Set the radius; area and volume follow."""
        if r < 0:
            raise ValueError(f"radius must be non-negative, got {r}")
        self.radius = float(r)

    def set_area(self, a: float) -> None:
        """Set the cross-sectional area; radius and volume follow."""
        if a < 0:
            raise ValueError(f"cross-section area must be non-negative, got {a}")
        self.radius = float(np.sqrt(a / PI))

    def set_volume(self, v: float) -> None:
        """Set the volume; radius and area follow."""
        if v < 0:
            raise ValueError(f"volume must be non-negative, got {v}")
        self.radius = float(np.cbrt(3.0 * v / (4.0 * PI)))

    def advance(self, time_slice: float, force: np.ndarray | None = None) -> None:
        """
        Advance position and velocity by one time slice.

        Treats the acceleration as constant over the slice, so the body
        follows a parabolic arc. Drag and gravity are not computed here;
        the caller supplies the net force.

        Args:
            time_slice: Duration in seconds.
            force: Net force for this slice. If omitted, the current
                   net_force is used.

        Raises:
            ZeroMassError: If mass is exactly zero. Nothing is modified.
        """
        if self.mass == 0:
            raise ZeroMassError(f"body {self.id} has zero mass")
        if force is not None:
            self.net_force = f64(force)

        t = time_slice
        a = self.net_force / self.mass
        self.position = self.position + self.velocity * t + 0.5 * a * t * t
        self.velocity = self.velocity + a * t
