"""Fan triangulation of a finished shape's faces."""

from __future__ import annotations

import numpy as np

from goldberg.construction.centroids import face_centroids
from goldberg.model import Shape, TriangleMesh


def _fan(faces: np.ndarray, first_hub: int) -> np.ndarray:
    """Triangles ``(f[i], f[i+1], hub)`` for each face, face by face."""
    hubs = np.arange(first_hub, first_hub + len(faces))
    return np.stack([
        faces,
        np.roll(faces, -1, axis=1),
        np.broadcast_to(hubs[:, np.newaxis], faces.shape),
    ], axis=-1).reshape(-1, 3)


def cap_faces(
    shape: Shape,
    *,
    fan_triangles: bool = False,
    project_hubs: bool = False,
) -> TriangleMesh:
    """Triangulate every face of *shape* around a hub vertex.

    Each face of ``n`` vertices gains a hub at the mean of its
    vertices and is replaced by ``n`` triangles sharing that hub, in
    the face's own winding.  Hubs are appended after the existing
    vertices, primary faces first and then hexagons, one per face in
    face order.  Triangular primary faces are already renderable and
    are passed through unchanged unless *fan_triangles* is set.

    Hubs are left inside the sphere by default: they only serve to
    triangulate flat polygons.

    Args:
        shape: The shape to triangulate.
        fan_triangles: Also fan triangular primary faces.
        project_hubs: Push hubs onto the unit sphere.

    Returns:
        The triangulated mesh.
    """
    vertices = [shape.vertices]
    triangles = []
    next_hub = shape.n_vertices

    for faces in shape.face_blocks():
        if len(faces) == 0:
            continue
        if faces.shape[1] == 3 and not fan_triangles:
            triangles.append(faces)
            continue
        vertices.append(
            face_centroids(shape.vertices, faces, project=project_hubs)
        )
        triangles.append(_fan(faces, next_hub))
        next_hub += len(faces)

    return TriangleMesh(
        vertices=np.concatenate(vertices),
        triangles=np.concatenate(triangles) if triangles else (),
    )
