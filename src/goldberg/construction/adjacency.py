"""Vertex-to-face adjacency and the cycle walk around a vertex.

Faces are stored as flat index rows with no explicit edge table.  The
:class:`AdjacencyIndex` recovers, for every vertex, the faces that
touch it together with the vertex's neighbours inside each face.
:func:`walk_cycle` then orders those faces radially by following
shared edges: the face after ``f`` is the one that enters the vertex
along the edge ``f`` leaves by.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from goldberg.model import TopologyError


class Corner(NamedTuple):
    """One occurrence of a vertex inside a face.

    Attributes:
        face: Face id (position in the shape's face ordering).
        previous: The vertex before this one in the face's winding.
        next: The vertex after this one in the face's winding.
    """

    face: int
    previous: int
    next: int


@dataclass(frozen=True)
class AdjacencyIndex:
    """Per-vertex corner lists for a set of faces.

    Built once per shape so that every vertex's corners are a direct
    lookup instead of a scan over all faces.

    Attributes:
        corners: ``corners[v]`` lists the corners of vertex ``v`` in
            face-id order.
    """

    corners: tuple[tuple[Corner, ...], ...]

    @classmethod
    def from_faces(
        cls,
        n_vertices: int,
        blocks: Iterable[np.ndarray],
    ) -> AdjacencyIndex:
        """Index the faces in *blocks*.

        Args:
            n_vertices: Number of vertices the faces refer to.
            blocks: Face arrays, each of shape ``(n_faces, arity)``.
                Face ids run consecutively across the blocks in the
                order given.

        Returns:
            The populated index.
        """
        table: list[list[Corner]] = [[] for _ in range(n_vertices)]
        face_id = 0
        for block in blocks:
            for row in np.asarray(block, dtype=int).tolist():
                n = len(row)
                for k, v in enumerate(row):
                    table[v].append(Corner(face_id, row[k - 1], row[(k + 1) % n]))
                face_id += 1
        return cls(corners=tuple(tuple(c) for c in table))

    def __len__(self) -> int:
        return len(self.corners)

    def valence(self, vertex: int) -> int:
        """Number of faces touching *vertex*."""
        return len(self.corners[vertex])

    def cycle(self, vertex: int) -> list[Corner]:
        """Corners of *vertex* in radial order (see :func:`walk_cycle`)."""
        return walk_cycle(vertex, self.corners[vertex])


def walk_cycle(vertex: int, corners: tuple[Corner, ...] | list[Corner]) -> list[Corner]:
    """Order the corners of *vertex* around it.

    Starting from ``corners[0]``, the next corner is the one whose
    ``next`` vertex equals the current corner's ``previous`` vertex,
    i.e. the face sharing the edge the current face enters the
    vertex by.  The walk ends when it arrives back at ``corners[0]``.

    Args:
        vertex: The vertex being walked around (used in messages).
        corners: Every corner of *vertex*, in any order.

    Returns:
        The same corners, reordered into a closed cycle starting with
        ``corners[0]``.

    Raises:
        TopologyError: If the vertex has no faces, the faces around it
            are not consistently wound, or they do not form exactly one
            closed fan.
    """
    if not corners:
        raise TopologyError(f"vertex {vertex} is not used by any face")

    by_next: dict[int, int] = {}
    for i, corner in enumerate(corners):
        if corner.next in by_next:
            raise TopologyError(
                f"edge ({vertex}, {corner.next}) is used twice in the same "
                "direction; faces are not consistently wound"
            )
        by_next[corner.next] = i

    cycle = [corners[0]]
    current = corners[0]
    while True:
        i = by_next.get(current.previous)
        if i is None:
            raise TopologyError(
                f"no face follows edge ({current.previous}, {vertex}); "
                f"cannot close the cycle around vertex {vertex}"
            )
        if i == 0:
            break
        current = corners[i]
        cycle.append(current)
        if len(cycle) > len(corners):
            raise TopologyError(f"cycle around vertex {vertex} does not close")

    if len(cycle) != len(corners):
        raise TopologyError(
            f"vertex {vertex} joins {len(corners)} faces but only "
            f"{len(cycle)} form a closed cycle around it"
        )
    return cycle
