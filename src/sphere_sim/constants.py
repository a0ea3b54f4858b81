# MIT License (see LICENSE)
"""
Physical constants used throughout the simulation.

All values are SI. Downstream code compares against these literals, so
they must not be rounded or recomputed.
"""
from __future__ import annotations

# Newtonian constant of gravitation, G
# Value: 6.67430 × 10⁻¹¹ m³·kg⁻¹·s⁻²
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?bg
G: float = 6.67430e-11

PI: float = 3.14159265358979323846

# ISA sea-level air density at 15 °C, kg/m³
STANDARD_AIR_DENSITY: float = 1.225

# Standard acceleration of free fall, g₀ (exact by definition), m/s²
STANDARD_GRAVITY: float = 9.80665

# Drag coefficient of a smooth sphere in the subcritical Reynolds regime.
SPHERE_DRAG_COEFFICIENT: float = 0.47
