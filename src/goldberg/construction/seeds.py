"""Built-in seed polyhedra.

Each seed is a 3-valent Platonic solid inscribed in the unit sphere,
with faces wound counter-clockwise when viewed from outside.  The
seed's face arity becomes the primary arity of every shape grown
from it.
"""

from __future__ import annotations

from collections.abc import Callable
from math import sqrt

import numpy as np

from goldberg.construction.centroids import project_to_sphere
from goldberg.model import Shape


def tetrahedron() -> Shape:
    """Tetrahedron seed: 4 vertices, 4 triangles (arity 3)."""
    s = sqrt(2.0)
    vertices = [
        (-s, 0.0, -1.0),
        (s, 0.0, -1.0),
        (0.0, -s, 1.0),
        (0.0, s, 1.0),
    ]
    faces = [
        (0, 3, 1),
        (0, 1, 2),
        (0, 2, 3),
        (1, 3, 2),
    ]
    return Shape(project_to_sphere(np.array(vertices)), faces, arity=3)


def cube() -> Shape:
    """Cube seed: 8 vertices, 6 squares (arity 4).

    Vertex ``i`` sits at ``(±1, ±1, ±1)`` with the sign of x, y and z
    taken from bits 2, 1 and 0 of ``i``.
    """
    vertices = [
        (1.0 if i & 4 else -1.0, 1.0 if i & 2 else -1.0, 1.0 if i & 1 else -1.0)
        for i in range(8)
    ]
    faces = [
        (0, 1, 3, 2),
        (0, 4, 5, 1),
        (0, 2, 6, 4),
        (1, 5, 7, 3),
        (2, 3, 7, 6),
        (4, 6, 7, 5),
    ]
    return Shape(project_to_sphere(np.array(vertices)), faces, arity=4)


def dodecahedron() -> Shape:
    """Dodecahedron seed: 20 vertices, 12 pentagons (arity 5)."""
    c = (3.0 + sqrt(5.0)) / 4.0
    vertices = [
        (0.0, 0.5, c), (0.0, 0.5, -c), (0.0, -0.5, c), (0.0, -0.5, -c),
        (c, 0.0, 0.5), (c, 0.0, -0.5), (-c, 0.0, 0.5), (-c, 0.0, -0.5),
        (0.5, c, 0.0), (0.5, -c, 0.0), (-0.5, c, 0.0), (-0.5, -c, 0.0),
        (1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (1.0, -1.0, 1.0), (1.0, -1.0, -1.0),
        (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0),
    ]
    faces = [
        (0, 2, 14, 4, 12),
        (0, 12, 8, 10, 16),
        (0, 16, 6, 18, 2),
        (6, 16, 10, 17, 7),
        (1, 3, 19, 7, 17),
        (6, 7, 19, 11, 18),
        (3, 15, 9, 11, 19),
        (4, 14, 9, 15, 5),
        (2, 18, 11, 9, 14),
        (1, 17, 10, 8, 13),
        (4, 5, 13, 8, 12),
        (1, 13, 5, 15, 3),
    ]
    return Shape(project_to_sphere(np.array(vertices)), faces, arity=5)


#: Seed factories by name.
SEEDS: dict[str, Callable[[], Shape]] = {
    "tetrahedron": tetrahedron,
    "cube": cube,
    "dodecahedron": dodecahedron,
}


def get_seed(name: str) -> Shape:
    """Build the seed called *name*.

    Raises:
        ValueError: If *name* is not a key of :data:`SEEDS`.
    """
    try:
        factory = SEEDS[name]
    except KeyError:
        raise ValueError(
            f"unknown seed {name!r}; choose from {sorted(SEEDS)}"
        ) from None
    return factory()
