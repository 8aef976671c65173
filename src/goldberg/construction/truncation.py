"""Truncation transform: cut every corner of an all-triangle dual."""

from __future__ import annotations

import numpy as np

from goldberg.construction.adjacency import AdjacencyIndex
from goldberg.construction.centroids import project_to_sphere
from goldberg.model import DualShape, Shape, TopologyError

# New vertices sit this far along each dual edge from its source end.
_CUT_FRACTION = 1.0 / 3.0


def truncate(dual: DualShape) -> Shape:
    """Truncate every vertex of *dual*.

    Each dual vertex ``v`` is replaced by a ring of new vertices, one a
    third of the way along each edge leaving ``v``, emitted in the
    order of the cycle walk around ``v``.  The ring becomes a primary
    face when ``v`` has ``dual.arity`` neighbours and a hexagon when it
    has six.  Each dual triangle ``(a, b, c)`` then shrinks to the
    hexagon ``[ac, ab, ba, bc, cb, ca]``, where ``st`` is the ring
    vertex of ``s`` on the edge towards ``t``.

    Output order: vertices ring by ring in dual-vertex order; primary
    faces in dual-vertex order; hexagons from rings first, then one
    per dual triangle in triangle order.

    Args:
        dual: An all-triangle shape from :func:`~goldberg.construction.dual.dual`.

    Returns:
        A 3-valent shape with the same number of primary faces as
        *dual* has vertices of degree ``dual.arity``.

    Raises:
        TopologyError: If a dual vertex has a degree other than
            ``dual.arity`` or 6, or its triangles do not form a cycle.
    """
    index = AdjacencyIndex.from_faces(dual.n_vertices, [dual.triangles])

    sources: list[int] = []
    targets: list[int] = []
    primary: list[list[int]] = []
    hexagons: list[list[int]] = []

    for v in range(dual.n_vertices):
        cycle = index.cycle(v)
        ring = list(range(len(sources), len(sources) + len(cycle)))
        for corner in cycle:
            sources.append(v)
            targets.append(corner.next)
        if len(cycle) == dual.arity:
            primary.append(ring)
        elif len(cycle) == 6:
            hexagons.append(ring)
        else:
            raise TopologyError(
                f"dual vertex {v} has degree {len(cycle)}; expected "
                f"{dual.arity} or 6"
            )

    # Directed dual edge (s, t) -> the ring vertex of s cut towards t.
    cut = {edge: i for i, edge in enumerate(zip(sources, targets))}
    for a, b, c in dual.triangles.tolist():
        hexagons.append([
            cut[a, c], cut[a, b],
            cut[b, a], cut[b, c],
            cut[c, b], cut[c, a],
        ])

    start = dual.vertices[sources]
    end = dual.vertices[targets]
    vertices = project_to_sphere(start + (end - start) * _CUT_FRACTION)

    return Shape(
        vertices=vertices,
        primary_faces=np.array(primary, dtype=int).reshape(-1, dual.arity),
        hex_faces=np.array(hexagons, dtype=int).reshape(-1, 6),
        arity=dual.arity,
    )
