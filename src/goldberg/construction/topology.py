"""Structural checks for shapes and meshes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

import numpy as np

from goldberg.model import Shape, TopologyError

#: Default tolerance for unit-sphere checks.
SPHERE_TOLERANCE = 1e-5


def directed_edges(faces: Iterable[np.ndarray]) -> Counter[tuple[int, int]]:
    """Count each directed edge ``(a, b)`` over the boundaries of *faces*."""
    counts: Counter[tuple[int, int]] = Counter()
    for face in faces:
        row = [int(v) for v in face]
        counts.update(zip(row, row[1:] + row[:1]))
    return counts


def edge_face_counts(faces: Iterable[np.ndarray]) -> Counter[tuple[int, int]]:
    """Number of faces sharing each undirected edge ``(min, max)``."""
    counts: Counter[tuple[int, int]] = Counter()
    for (a, b), n in directed_edges(faces).items():
        counts[(min(a, b), max(a, b))] += n
    return counts


def vertex_valences(shape: Shape) -> np.ndarray:
    """Number of faces touching each vertex of *shape*."""
    valence = np.zeros(shape.n_vertices, dtype=int)
    for faces in shape.face_blocks():
        np.add.at(valence, faces.ravel(), 1)
    return valence


def check_closed(faces: Iterable[np.ndarray]) -> None:
    """Require a closed, consistently wound surface.

    Every edge must be shared by exactly two faces which traverse it in
    opposite directions.

    Raises:
        TopologyError: On the first edge that breaks the rule.
    """
    directed = directed_edges(faces)
    for (a, b), n in directed.items():
        if n != 1:
            raise TopologyError(
                f"edge ({a}, {b}) is traversed {n} times in the same direction"
            )
        if (b, a) not in directed:
            raise TopologyError(f"edge ({a}, {b}) borders only one face")


def face_normals(vertices: np.ndarray, faces: np.ndarray) -> np.ndarray:
    """Unnormalised Newell normal of each face in *faces*.

    Args:
        vertices: Vertex coordinates, shape ``(n_vertices, 3)``.
        faces: Faces of one arity, shape ``(n_faces, arity)``.

    Returns:
        Array of shape ``(n_faces, 3)``.
    """
    loops = vertices[faces]
    return np.cross(loops, np.roll(loops, -1, axis=1)).sum(axis=1)


def check_outward(shape: Shape) -> None:
    """Require every face of *shape* to run counter-clockwise from outside.

    A face passes when its normal points away from the sphere centre,
    i.e. has a positive dot product with the face's mean position.

    Raises:
        TopologyError: On the first face wound the other way.
    """
    first_id = 0
    for faces in shape.face_blocks():
        if len(faces):
            centres = shape.vertices[faces].mean(axis=1)
            facing = np.einsum(
                "ij,ij->i", face_normals(shape.vertices, faces), centres,
            )
            bad = np.flatnonzero(facing <= 0)
            if len(bad):
                raise TopologyError(
                    f"face {first_id + int(bad[0])} is wound clockwise as "
                    f"seen from outside ({len(bad)} faces in its block); "
                    "faces must run counter-clockwise"
                )
        first_id += len(faces)


def check_simple(shape: Shape) -> None:
    """Require *shape* to be a closed, outward-wound 3-valent polyhedron.

    Raises:
        TopologyError: If the shape has no faces, a vertex does not
            touch exactly three faces, the faces do not form a closed,
            consistently wound surface, or they are wound clockwise as
            seen from outside.
    """
    if shape.n_faces == 0:
        raise TopologyError("shape has no faces")
    valence = vertex_valences(shape)
    bad = np.flatnonzero(valence != 3)
    if len(bad):
        v = int(bad[0])
        raise TopologyError(
            f"vertex {v} touches {valence[v]} faces; every vertex must "
            f"touch exactly 3 ({len(bad)} vertices fail)"
        )
    check_closed(shape.faces())
    check_outward(shape)


def check_unit_sphere(
    vertices: np.ndarray,
    tol: float = SPHERE_TOLERANCE,
) -> None:
    """Require every row of *vertices* to have unit length.

    Raises:
        ValueError: If any norm differs from 1 by more than *tol*.
    """
    norms = np.linalg.norm(np.asarray(vertices, dtype=float), axis=1)
    off = np.flatnonzero(np.abs(norms - 1.0) > tol)
    if len(off):
        raise ValueError(
            f"{len(off)} vertices are off the unit sphere "
            f"(first: index {off[0]}, norm {norms[off[0]]:.6g})"
        )
