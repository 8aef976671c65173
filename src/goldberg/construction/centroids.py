"""Face centroids and unit-sphere projection."""

from __future__ import annotations

import numpy as np

# Below this norm a point is treated as the origin and cannot be projected.
_MIN_NORM = 1e-12


def project_to_sphere(points: np.ndarray) -> np.ndarray:
    """Scale each row of *points* to unit length.

    Args:
        points: Array of shape ``(n, 3)``.

    Returns:
        A new array of shape ``(n, 3)`` whose rows have norm 1.

    Raises:
        ValueError: If any point lies at (or numerically at) the origin.
    """
    points = np.asarray(points, dtype=float)
    norms = np.linalg.norm(points, axis=-1, keepdims=True)
    if np.any(norms < _MIN_NORM):
        raise ValueError("cannot project a point at the origin onto the sphere")
    return points / norms


def face_centroids(
    vertices: np.ndarray,
    faces: np.ndarray,
    *,
    project: bool = True,
) -> np.ndarray:
    """Mean position of each face's vertices.

    Args:
        vertices: Vertex coordinates, shape ``(n_vertices, 3)``.
        faces: Faces of a single arity, shape ``(n_faces, arity)``.
        project: Whether to push each centroid back onto the unit
            sphere.  Dual vertices are projected; fan hubs are not.

    Returns:
        Array of shape ``(n_faces, 3)`` in face order.
    """
    faces = np.asarray(faces, dtype=int)
    if len(faces) == 0:
        return np.empty((0, 3), dtype=float)
    centres = vertices[faces].mean(axis=1)
    return project_to_sphere(centres) if project else centres
