from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from goldberg.model._util import _face_array, _frozen_array


@dataclass(frozen=True, eq=False)
class TriangleMesh:
    """A triangulated vertex/index buffer pair.

    Unpacks as ``vertices, triangles = mesh`` so that callers wanting
    plain arrays need not know about the class.

    Attributes:
        vertices: Vertex coordinates, shape ``(n_vertices, 3)``.
        triangles: Zero-based vertex indices, shape ``(n_triangles, 3)``,
            wound counter-clockwise when viewed from outside.
    """

    vertices: np.ndarray
    triangles: np.ndarray

    def __post_init__(self) -> None:
        vertices = _frozen_array(self.vertices, dtype=float, label="vertices")
        if vertices.ndim != 2 or vertices.shape[1] != 3:
            raise ValueError(
                f"vertices must have shape (n_vertices, 3), got {vertices.shape}"
            )
        triangles = _face_array(self.triangles, 3, "triangles")
        if triangles.size and (
            triangles.min() < 0 or triangles.max() >= len(vertices)
        ):
            raise ValueError(
                f"triangles reference vertices outside [0, {len(vertices)})"
            )
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "triangles", triangles)

    def __iter__(self) -> Iterator[np.ndarray]:
        yield self.vertices
        yield self.triangles

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_triangles(self) -> int:
        return len(self.triangles)
