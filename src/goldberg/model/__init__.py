"""Core data model for goldberg: shapes, meshes and error types.

Everything is re-exported here so that ``from goldberg.model import
Shape`` works regardless of which submodule defines the type.
"""

from goldberg.model.errors import TopologyError
from goldberg.model.mesh import TriangleMesh
from goldberg.model.shape import PRIMARY_ARITIES, DualShape, Shape

__all__ = [
    "DualShape",
    "PRIMARY_ARITIES",
    "Shape",
    "TopologyError",
    "TriangleMesh",
]
