from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from goldberg.model._util import _face_array, _frozen_array

#: Primary face arities supported by the dual/truncation engine.
PRIMARY_ARITIES = frozenset({3, 4, 5})


def _check_vertices(vertices: np.ndarray) -> None:
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError(
            f"vertices must have shape (n_vertices, 3), got {vertices.shape}"
        )


def _check_indices(faces: np.ndarray, n_vertices: int, label: str) -> None:
    if faces.size and (faces.min() < 0 or faces.max() >= n_vertices):
        raise ValueError(
            f"{label} reference vertices outside [0, {n_vertices})"
        )


@dataclass(frozen=True, eq=False)
class Shape:
    """A 3-valent polyhedron made of primary faces and hexagons.

    Faces are stored one per row, in a winding that is
    counter-clockwise when viewed from outside the sphere.  Face ids
    used by the transforms enumerate *primary_faces* first and then
    *hex_faces*, each in row order; this ordering is part of the
    contract between pipeline stages.

    All arrays are copied on construction and marked read-only, so a
    ``Shape`` can be shared freely between stages.

    Attributes:
        vertices: Unit-sphere coordinates, shape ``(n_vertices, 3)``.
        primary_faces: Faces of arity *arity*, shape
            ``(n_primary, arity)``.  A flat sequence of concatenated
            faces is also accepted.
        hex_faces: Hexagonal faces, shape ``(n_hex, 6)``.  A flat
            sequence is also accepted.
        arity: Number of vertices in each primary face (3, 4 or 5).

    Raises:
        ValueError: If an array has the wrong shape, a flat face list
            does not divide evenly by its arity, or a face references
            a vertex that does not exist.
    """

    vertices: np.ndarray
    primary_faces: np.ndarray
    hex_faces: np.ndarray = ()
    arity: int = 3

    def __post_init__(self) -> None:
        if self.arity not in PRIMARY_ARITIES:
            raise ValueError(
                f"arity must be one of {sorted(PRIMARY_ARITIES)}, "
                f"got {self.arity}"
            )
        vertices = _frozen_array(self.vertices, dtype=float, label="vertices")
        _check_vertices(vertices)
        primary = _face_array(self.primary_faces, self.arity, "primary_faces")
        hexes = _face_array(self.hex_faces, 6, "hex_faces")
        _check_indices(primary, len(vertices), "primary_faces")
        _check_indices(hexes, len(vertices), "hex_faces")
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "primary_faces", primary)
        object.__setattr__(self, "hex_faces", hexes)

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_primary(self) -> int:
        return len(self.primary_faces)

    @property
    def n_hex(self) -> int:
        return len(self.hex_faces)

    @property
    def n_faces(self) -> int:
        return self.n_primary + self.n_hex

    def face_blocks(self) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(primary_faces, hex_faces)`` in face-id order."""
        return self.primary_faces, self.hex_faces

    def faces(self) -> list[np.ndarray]:
        """Return every face as a 1-D index array, indexed by face id."""
        return list(self.primary_faces) + list(self.hex_faces)

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        ``hex_faces`` is omitted when the shape has none, which is the
        case for every seed.
        """
        d: dict = {
            "arity": self.arity,
            "vertices": self.vertices.tolist(),
            "primary_faces": self.primary_faces.tolist(),
        }
        if self.n_hex:
            d["hex_faces"] = self.hex_faces.tolist()
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Shape:
        """Deserialise from a dictionary."""
        return cls(
            vertices=d["vertices"],
            primary_faces=d["primary_faces"],
            hex_faces=d.get("hex_faces", ()),
            arity=d["arity"],
        )


@dataclass(frozen=True, eq=False)
class DualShape:
    """The all-triangle dual of a :class:`Shape`.

    Vertex ``i`` is the sphere-projected centroid of face ``i`` of the
    source shape (primary faces first, then hexagons), and triangle
    ``j`` stands in for vertex ``j`` of the source shape.

    Attributes:
        vertices: Unit-sphere coordinates, shape ``(n_vertices, 3)``.
        triangles: Triangles, shape ``(n_triangles, 3)``.
        arity: Primary face arity of the shape this dual came from.
            Dual vertices with this many incident triangles become
            primary faces again on truncation.
    """

    vertices: np.ndarray
    triangles: np.ndarray
    arity: int

    def __post_init__(self) -> None:
        if self.arity not in PRIMARY_ARITIES:
            raise ValueError(
                f"arity must be one of {sorted(PRIMARY_ARITIES)}, "
                f"got {self.arity}"
            )
        vertices = _frozen_array(self.vertices, dtype=float, label="vertices")
        _check_vertices(vertices)
        triangles = _face_array(self.triangles, 3, "triangles")
        _check_indices(triangles, len(vertices), "triangles")
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "triangles", triangles)

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)
