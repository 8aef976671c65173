"""Dual transform: faces become vertices, vertices become triangles."""

from __future__ import annotations

import numpy as np

from goldberg.construction.adjacency import AdjacencyIndex
from goldberg.construction.centroids import face_centroids
from goldberg.model import DualShape, Shape, TopologyError


def orientation(points: np.ndarray) -> np.ndarray:
    """Signed volume ``a . (b x c)`` of each triangle ``(a, b, c)``.

    For a triangle on the unit sphere the sign is positive when its
    vertices run counter-clockwise as seen from outside.

    Args:
        points: Array of shape ``(n, 3, 3)``.

    Returns:
        Array of shape ``(n,)``.
    """
    a, b, c = points[:, 0], points[:, 1], points[:, 2]
    return np.einsum("ij,ij->i", a, np.cross(b, c))


def dual_vertices(shape: Shape) -> np.ndarray:
    """Sphere-projected face centroids, primary faces first."""
    return np.concatenate([
        face_centroids(shape.vertices, shape.primary_faces),
        face_centroids(shape.vertices, shape.hex_faces),
    ])


def dual(shape: Shape) -> DualShape:
    """Compute the all-triangle dual of a 3-valent shape.

    Dual vertex ``i`` is the centroid of face ``i`` (face ids count
    primary faces first, then hexagons), projected onto the unit
    sphere.  Dual triangle ``v`` joins the three faces around vertex
    ``v`` in the order the cycle walk visits them; a triangle whose
    signed volume comes out negative is flipped so every triangle
    faces outwards.

    Args:
        shape: A 3-valent, consistently wound shape.

    Returns:
        The dual, carrying *shape*'s primary arity.

    Raises:
        TopologyError: If a vertex does not touch exactly three faces
            or its faces cannot be walked into a cycle.
    """
    index = AdjacencyIndex.from_faces(shape.n_vertices, shape.face_blocks())
    vertices = dual_vertices(shape)

    triangles = np.empty((shape.n_vertices, 3), dtype=int)
    for v in range(shape.n_vertices):
        n_faces = index.valence(v)
        if n_faces != 3:
            raise TopologyError(
                f"vertex {v} touches {n_faces} faces; the dual transform "
                "requires exactly 3"
            )
        triangles[v] = [corner.face for corner in index.cycle(v)]

    flip = orientation(vertices[triangles]) < 0
    triangles[flip] = triangles[flip][:, [0, 2, 1]]

    return DualShape(vertices=vertices, triangles=triangles, arity=shape.arity)
