"""The dual/truncation pipeline from seed to triangle mesh."""

from __future__ import annotations

import logging

from goldberg.construction.capping import cap_faces
from goldberg.construction.dual import dual
from goldberg.construction.seeds import cube, dodecahedron, tetrahedron
from goldberg.construction.settings import GenerationSettings
from goldberg.construction.topology import check_simple
from goldberg.construction.truncation import truncate
from goldberg.model import Shape, TriangleMesh

logger = logging.getLogger(__name__)


def _check_inputs(seed: Shape, complexity: int) -> None:
    if not isinstance(seed, Shape):
        raise TypeError(f"seed must be a Shape, got {type(seed).__name__}")
    if isinstance(complexity, bool) or not isinstance(complexity, int):
        raise TypeError(
            f"complexity must be an int, got {type(complexity).__name__}"
        )
    if complexity < 0:
        raise ValueError(f"complexity must be non-negative, got {complexity}")


def dual_truncate(shape: Shape) -> Shape:
    """Apply one dual/truncation iteration to *shape*.

    The result keeps every primary face of *shape* (as a smaller face
    of the same arity) and adds one hexagon per vertex of *shape*,
    while tripling the vertex count.
    """
    return truncate(dual(shape))


def iterate(seed: Shape, complexity: int) -> Shape:
    """Apply *complexity* dual/truncation iterations to *seed*.

    The seed is checked before the first iteration, so an invalid seed
    fails fast instead of producing a malformed shape.

    Args:
        seed: A closed, 3-valent shape wound counter-clockwise as
            seen from outside.
        complexity: Number of iterations; 0 returns *seed* itself.

    Returns:
        The final, uncapped shape.

    Raises:
        TypeError: If *seed* is not a Shape or *complexity* is not an
            int.
        ValueError: If *complexity* is negative.
        TopologyError: If *seed* is not a simple polyhedron or is
            wound clockwise as seen from outside.
    """
    _check_inputs(seed, complexity)
    check_simple(seed)

    shape = seed
    for i in range(complexity):
        shape = dual_truncate(shape)
        logger.debug(
            "iteration %d/%d: %d vertices, %d primary faces, %d hexagons",
            i + 1, complexity, shape.n_vertices, shape.n_primary, shape.n_hex,
        )
    return shape


def generate(
    seed: Shape,
    complexity: int,
    *,
    fan_triangles: bool = False,
    project_hubs: bool = False,
) -> TriangleMesh:
    """Grow a geodesic sphere from *seed* and triangulate it.

    Example usage::

        from goldberg import dodecahedron, generate

        vertices, triangles = generate(dodecahedron(), 2)

    Args:
        seed: A closed, 3-valent shape wound counter-clockwise as
            seen from outside, such as one of the built-in seeds.
        complexity: Number of dual/truncation iterations.  Mesh size
            grows by roughly a factor of three per iteration.
        fan_triangles: Fan triangular primary faces around a hub
            instead of emitting them unchanged.
        project_hubs: Project fan hubs onto the unit sphere.

    Returns:
        The triangulated mesh.

    Raises:
        TypeError: If *seed* is not a Shape or *complexity* is not an
            int.
        ValueError: If *complexity* is negative.
        TopologyError: If *seed* is not a simple polyhedron or is
            wound clockwise as seen from outside.
    """
    shape = iterate(seed, complexity)
    mesh = cap_faces(
        shape, fan_triangles=fan_triangles, project_hubs=project_hubs,
    )
    logger.debug(
        "capped mesh: %d vertices, %d triangles",
        mesh.n_vertices, mesh.n_triangles,
    )
    return mesh


def generate_from_settings(settings: GenerationSettings) -> TriangleMesh:
    """Run :func:`generate` with the values held in *settings*."""
    return generate(
        settings.resolve_seed(),
        settings.complexity,
        fan_triangles=settings.fan_triangles,
        project_hubs=settings.project_hubs,
    )


def generate_tetrahedral(complexity: int) -> TriangleMesh:
    """Sphere with 4 evenly spaced triangles among the hexagons."""
    return generate(tetrahedron(), complexity)


def generate_cubic(complexity: int) -> TriangleMesh:
    """Sphere with 6 evenly spaced squares among the hexagons."""
    return generate(cube(), complexity)


def generate_dodecahedral(complexity: int) -> TriangleMesh:
    """Sphere with 12 evenly spaced pentagons among the hexagons."""
    return generate(dodecahedron(), complexity)
