# examples/two_body_orbit.py
import numpy as np

from sphere_sim import G, Body, Profiler, Scene
from sphere_sim.core import gravitational_potential_energy, kinetic_energy

M, r = 1.0e13, 100.0
v = np.sqrt(G * M / r)

scene = Scene(air_density=0.0, external_acceleration=(0, 0, 0), mutual_gravity=True, profiler=Profiler())
sun = Body(position=(0, 0, 0), mass=M, radius=1.0)
sat = Body(position=(r, 0, 0), velocity=(0, v, 0), mass=1.0, radius=0.1)
scene.add_body(sun)
scene.add_body(sat)

e0 = kinetic_energy(scene.bodies) + gravitational_potential_energy(scene.bodies)
for _ in range(10):
    status = scene.run(step_time=0.01, steps=2400)
    e = kinetic_energy(scene.bodies) + gravitational_potential_energy(scene.bodies)
    print(f"t={scene.elapsed_time:7.1f}  r={np.linalg.norm(sat.position):8.3f}  dE/E={(e - e0) / abs(e0):+.2e}  {status.name}")

for name, stats in scene.profiler.stats.summary().items():
    print(" ", name, stats)
