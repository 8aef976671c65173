"""Shape construction: seeds, the dual and truncation transforms, capping."""

from goldberg.construction.adjacency import AdjacencyIndex, Corner, walk_cycle
from goldberg.construction.capping import cap_faces
from goldberg.construction.centroids import face_centroids, project_to_sphere
from goldberg.construction.dual import dual, orientation
from goldberg.construction.seeds import (
    SEEDS,
    cube,
    dodecahedron,
    get_seed,
    tetrahedron,
)
from goldberg.construction.settings import (
    GenerationSettings,
    load_settings,
    save_settings,
)
from goldberg.construction.topology import (
    check_closed,
    check_outward,
    check_simple,
    check_unit_sphere,
    edge_face_counts,
    face_normals,
    vertex_valences,
)
from goldberg.construction.truncation import truncate

__all__ = [
    "AdjacencyIndex",
    "Corner",
    "GenerationSettings",
    "SEEDS",
    "cap_faces",
    "check_closed",
    "check_outward",
    "check_simple",
    "check_unit_sphere",
    "cube",
    "dodecahedron",
    "dual",
    "edge_face_counts",
    "face_centroids",
    "face_normals",
    "get_seed",
    "load_settings",
    "orientation",
    "project_to_sphere",
    "save_settings",
    "tetrahedron",
    "truncate",
    "vertex_valences",
    "walk_cycle",
]
