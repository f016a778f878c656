#!/usr/bin/env python3
"""
Demo: Orbit of a Vector Around a Tilted Axis

Demonstrates linalg3 rotations:
- Rodrigues rotation matrix from an axis and an angle
- Repeated rotation traces a circle around the axis
- Composition: R(a) @ R(b) = R(a + b), R⁻¹ = Rᵀ

Application: camera orbits, joint kinematics, attitude updates.
"""

import numpy as np
import matplotlib.pyplot as plt

from linalg3 import Matrix, Vector, setup_logging


def trace_orbit(start: Vector, axis: Vector, n_steps: int = 72):
    """Positions of start rotated around axis in equal steps over a full turn."""
    step = Matrix.rotation_degree(360.0 / n_steps, axis)
    points = [start.copy()]
    current = start.copy()
    for _ in range(n_steps):
        current = step @ current
        points.append(current)
    return points


def main():
    setup_logging()

    print("=" * 60)
    print("ORBIT AROUND A TILTED AXIS")
    print("=" * 60)

    axis = Vector(1.0, 1.0, 2.0).normalize()
    start = Vector(2.0, 0.0, 0.0)
    print(f"Axis:  {axis}")
    print(f"Start: {start}")

    points = trace_orbit(start, axis)
    drift = (points[-1] - points[0]).magnitude()
    print(f"Closure error after full turn: {drift:.2e}")

    # Composition and inverse
    a = Matrix.rotation(0.4, axis)
    b = Matrix.rotation(1.1, axis)
    print(f"R(0.4) @ R(1.1) == R(1.5): {(a @ b).allclose(Matrix.rotation(1.5, axis))}")
    print(f"R⁻¹ == Rᵀ: {a.inverse().allclose(a.transpose())}")
    print(f"Angle between start and axis: {np.degrees(start.angle(axis)):.2f}°")

    # Plot
    arr = np.array([p.to_array() for p in points])
    fig = plt.figure(figsize=(6, 6))
    ax = fig.add_subplot(111, projection='3d')
    ax.plot(arr[:, 0], arr[:, 1], arr[:, 2], 'b-', label='orbit')
    ax.quiver(0, 0, 0, *(2.5 * axis.to_array()), color='r', label='axis')
    ax.scatter(*start.to_array(), c='k', s=30, label='start')
    ax.set_title('Rotation orbit')
    ax.legend()

    plt.tight_layout()
    plt.savefig('demo_rotation_orbit.png', dpi=150)
    print("\nPlot saved: demo_rotation_orbit.png")
    plt.show()


if __name__ == "__main__":
    main()
