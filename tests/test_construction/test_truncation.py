"""Tests for goldberg.construction.truncation."""

import numpy as np
import pytest

from goldberg.construction.adjacency import AdjacencyIndex
from goldberg.construction.centroids import project_to_sphere
from goldberg.construction.dual import dual
from goldberg.construction.seeds import cube, dodecahedron, tetrahedron
from goldberg.construction.topology import check_simple, check_unit_sphere
from goldberg.construction.truncation import truncate
from goldberg.model import DualShape, TopologyError


def _outward(shape):
    """Whether every face of *shape* winds counter-clockwise from outside."""
    for face in shape.faces():
        loop = shape.vertices[face]
        normal = np.cross(loop, np.roll(loop, -1, axis=0)).sum(axis=0)
        if np.dot(normal, loop.mean(axis=0)) <= 0:
            return False
    return True


class TestTruncate:
    @pytest.mark.parametrize("factory, n_vertices, n_primary, n_hex", [
        (tetrahedron, 12, 4, 4),
        (cube, 24, 6, 8),
        (dodecahedron, 60, 12, 20),
    ])
    def test_truncated_seed_counts(self, factory, n_vertices, n_primary, n_hex):
        shape = truncate(dual(factory()))
        assert shape.n_vertices == n_vertices
        assert shape.n_primary == n_primary
        assert shape.n_hex == n_hex
        assert shape.arity == factory().arity

    def test_result_is_simple(self, seed):
        check_simple(truncate(dual(seed)))

    def test_result_on_unit_sphere(self, seed):
        check_unit_sphere(truncate(dual(seed)).vertices)

    def test_result_wound_outward(self, seed):
        assert _outward(truncate(dual(seed)))

    def test_rings_are_emitted_in_dual_vertex_order(self):
        shape = truncate(dual(tetrahedron()))
        np.testing.assert_array_equal(
            shape.primary_faces, np.arange(12).reshape(4, 3),
        )

    def test_cut_a_third_along_the_first_edge(self):
        d = dual(tetrahedron())
        shape = truncate(d)
        first = AdjacencyIndex.from_faces(4, [d.triangles]).cycle(0)[0]
        expected = project_to_sphere(
            (d.vertices[0] + (d.vertices[first.next] - d.vertices[0]) / 3.0)[np.newaxis]
        )[0]
        np.testing.assert_allclose(shape.vertices[0], expected)

    def test_triangle_hexagons_take_two_vertices_per_corner(self):
        d = dual(cube())
        shape = truncate(d)
        # Every octahedron vertex has degree 4, so ring i is 4i..4i+3.
        ring_of = np.arange(shape.n_vertices) // 4
        triangle_hexagons = shape.hex_faces[-len(d.triangles):]
        for (a, b, c), hexagon in zip(d.triangles, triangle_hexagons):
            assert ring_of[hexagon].tolist() == [a, a, b, b, c, c]

    def test_octahedron_as_square_dual(self, octahedron):
        d = DualShape(octahedron.vertices, octahedron.primary_faces, arity=4)
        shape = truncate(d)
        assert shape.n_vertices == 24
        assert shape.n_primary == 6
        assert shape.n_hex == 8
        check_simple(shape)

    def test_degree_outside_arity_and_six_raises(self, octahedron):
        d = DualShape(octahedron.vertices, octahedron.primary_faces, arity=3)
        with pytest.raises(TopologyError, match="degree 4"):
            truncate(d)

    def test_open_surface_raises(self):
        d = DualShape(np.eye(3), [[0, 1, 2]], arity=3)
        with pytest.raises(TopologyError):
            truncate(d)
