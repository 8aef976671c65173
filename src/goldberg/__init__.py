"""Goldberg: geodesic spheres by repeated dual and truncation transforms.

A seed polyhedron (tetrahedron, cube or dodecahedron) is alternately
dualised and truncated.  Each iteration keeps the seed's primary faces
and adds hexagons, and the finished polyhedron is fan-triangulated into
a renderable vertex/index buffer pair.

Example usage::

    from goldberg import dodecahedron, generate

    mesh = generate(dodecahedron(), complexity=2)
    vertices, triangles = mesh
"""

from goldberg.construction import (
    SEEDS,
    GenerationSettings,
    cap_faces,
    check_simple,
    cube,
    dodecahedron,
    dual,
    get_seed,
    load_settings,
    save_settings,
    tetrahedron,
    truncate,
)
from goldberg.generator import (
    dual_truncate,
    generate,
    generate_cubic,
    generate_dodecahedral,
    generate_from_settings,
    generate_tetrahedral,
    iterate,
)
from goldberg.model import DualShape, Shape, TopologyError, TriangleMesh
from goldberg.rendering import render_mpl

__all__ = [
    "DualShape",
    "GenerationSettings",
    "SEEDS",
    "Shape",
    "TopologyError",
    "TriangleMesh",
    "cap_faces",
    "check_simple",
    "cube",
    "dodecahedron",
    "dual",
    "dual_truncate",
    "generate",
    "generate_cubic",
    "generate_dodecahedral",
    "generate_from_settings",
    "generate_tetrahedral",
    "get_seed",
    "iterate",
    "load_settings",
    "render_mpl",
    "save_settings",
    "tetrahedron",
    "truncate",
]
