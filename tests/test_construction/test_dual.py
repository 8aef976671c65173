"""Tests for goldberg.construction.dual."""

import numpy as np
import pytest

from goldberg.construction.centroids import face_centroids
from goldberg.construction.dual import dual, orientation
from goldberg.construction.seeds import cube, tetrahedron
from goldberg.construction.topology import check_closed, check_unit_sphere
from goldberg.construction.truncation import truncate
from goldberg.model import TopologyError


class TestOrientation:
    def test_counter_clockwise_from_outside_is_positive(self):
        tri = np.array([[[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]])
        assert orientation(tri)[0] == pytest.approx(1.0)

    def test_reversed_is_negative(self):
        tri = np.array([[[1.0, 0.0, 0.0], [0.0, 0.0, 1.0], [0.0, 1.0, 0.0]]])
        assert orientation(tri)[0] == pytest.approx(-1.0)


class TestDual:
    def test_one_vertex_per_face_and_triangle_per_vertex(self, seed):
        d = dual(seed)
        assert d.n_vertices == seed.n_faces
        assert d.triangles.shape == (seed.n_vertices, 3)
        assert d.arity == seed.arity

    def test_dual_vertices_on_unit_sphere(self, seed):
        check_unit_sphere(dual(seed).vertices)

    def test_dual_is_closed_and_outward(self, seed):
        d = dual(seed)
        check_closed(d.triangles)
        assert np.all(orientation(d.vertices[d.triangles]) > 0)

    def test_cube_dual_is_octahedron(self):
        d = dual(cube())
        assert d.n_vertices == 6
        assert len(d.triangles) == 8
        degrees = np.bincount(d.triangles.ravel(), minlength=6)
        np.testing.assert_array_equal(degrees, [4] * 6)

    def test_cube_vertex_zero_triangle(self):
        # Vertex 0 touches faces 0 (x=-1), 2 (z=-1) and 1 (y=-1).
        np.testing.assert_array_equal(dual(cube()).triangles[0], [0, 2, 1])

    def test_tetrahedron_dual_vertices_oppose_seed_vertices(self):
        seed = tetrahedron()
        d = dual(seed)
        # Face i of the seed omits exactly one vertex; its centre is the
        # antipode of that vertex.
        for i, face in enumerate(seed.primary_faces):
            (missing,) = set(range(4)) - set(face.tolist())
            np.testing.assert_allclose(d.vertices[i], -seed.vertices[missing])

    def test_primary_faces_numbered_before_hexagons(self):
        shape = truncate(dual(tetrahedron()))
        d = dual(shape)
        np.testing.assert_allclose(
            d.vertices[:shape.n_primary],
            face_centroids(shape.vertices, shape.primary_faces),
        )
        np.testing.assert_allclose(
            d.vertices[shape.n_primary:],
            face_centroids(shape.vertices, shape.hex_faces),
        )

    def test_four_valent_vertex_raises(self, octahedron):
        with pytest.raises(TopologyError, match="touches 4 faces"):
            dual(octahedron)

    def test_input_not_modified(self):
        seed = cube()
        before = seed.vertices.copy()
        dual(seed)
        np.testing.assert_array_equal(seed.vertices, before)
