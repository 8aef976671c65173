"""Tests for goldberg.construction.seeds."""

import numpy as np
import pytest

from goldberg.construction.seeds import SEEDS, get_seed


@pytest.mark.parametrize("name, n_vertices, n_faces, arity", [
    ("tetrahedron", 4, 4, 3),
    ("cube", 8, 6, 4),
    ("dodecahedron", 20, 12, 5),
])
def test_seed_sizes(name, n_vertices, n_faces, arity):
    seed = get_seed(name)
    assert seed.n_vertices == n_vertices
    assert seed.n_primary == n_faces
    assert seed.n_hex == 0
    assert seed.arity == arity


class TestSeeds:
    def test_vertices_on_unit_sphere(self, seed):
        np.testing.assert_allclose(np.linalg.norm(seed.vertices, axis=1), 1.0)

    def test_faces_wound_outward(self, seed):
        for face in seed.primary_faces:
            a, b, c = seed.vertices[face[:3]]
            assert np.dot(a, np.cross(b, c)) > 0

    def test_regular(self, seed):
        # All edges of a Platonic solid have the same length.
        lengths = [
            np.linalg.norm(seed.vertices[a] - seed.vertices[b])
            for face in seed.primary_faces
            for a, b in zip(face, np.roll(face, -1))
        ]
        np.testing.assert_allclose(lengths, lengths[0])

    def test_fresh_shape_each_call(self):
        assert get_seed("cube") is not get_seed("cube")

    def test_registry_names(self):
        assert sorted(SEEDS) == ["cube", "dodecahedron", "tetrahedron"]

    def test_unknown_seed_raises(self):
        with pytest.raises(ValueError, match="unknown seed 'icosahedron'"):
            get_seed("icosahedron")
