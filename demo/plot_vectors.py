#!/usr/bin/env -S uv run --script
import logging
import os

import matplotlib.pyplot as plt

from vec3 import ZERO, Vector3

logger = logging.getLogger("vec3.demo")


def draw_arrow(ax, start: Vector3, vector: Vector3, colour, label):
    ax.quiver(*start, *vector, color=colour, label=label, arrow_length_ratio=0.1)


def plot_vectors(a: Vector3, b: Vector3, steps: int = 10):
    """Plot a, b, their cross product and the lerp path between their tips."""
    fig = plt.figure()
    ax = fig.add_subplot(111, projection="3d")

    cross = a.cross(b)
    draw_arrow(ax, ZERO, a, "red", f"a {a}")
    draw_arrow(ax, ZERO, b, "green", f"b {b}")
    draw_arrow(ax, ZERO, cross, "blue", f"a x b {cross}")

    path = [a.lerp(b, i / steps) for i in range(steps + 1)]
    ax.plot([p.x for p in path], [p.y for p in path], [p.z for p in path], "k.--", label="lerp(a, b, t)")

    limit = max(a.magnitude(), b.magnitude(), cross.magnitude())
    ax.set_xlim([-limit, limit])
    ax.set_ylim([-limit, limit])
    ax.set_zlim([-limit, limit])
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.legend()
    plt.title(f"angle(a, b) = {a.angle_deg(b):.1f} degrees")
    plt.show()


def main():
    logging.basicConfig(level=os.getenv("VEC3_LOG_LEVEL", "INFO").upper())
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(3.0, 1.0, 2.0)
    logger.info("plotting %r and %r", a, b)
    plot_vectors(a, b)


if __name__ == "__main__":
    main()
