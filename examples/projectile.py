# examples/projectile.py
import numpy as np

from sphere_sim import Body, Scene, Status
from sphere_sim.util import from_length_and_angles

# 30 m/s at 45 degrees, once in still air and once in vacuum
for density in (1.225, 0.0):
    scene = Scene(air_density=density)
    ball = Body(
        position=(0.0, 1.0, 0.0),
        velocity=from_length_and_angles(30.0, np.radians(45.0), np.pi / 2),
        mass=0.43,
        radius=0.11,
    )
    scene.add_body(ball)

    while ball.position[1] > 0.0:
        status = scene.step(1e-3)
        if status is not Status.OK:
            raise SystemExit(f"simulation failed: {status}")

    print(f"density={density:5.3f}  t={scene.elapsed_time:6.3f} s  range={ball.position[0]:7.2f} m")
