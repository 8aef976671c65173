"""Tests for goldberg.construction.centroids."""

import numpy as np
import pytest

from goldberg.construction.centroids import face_centroids, project_to_sphere
from goldberg.construction.seeds import cube


class TestProjectToSphere:
    def test_rows_have_unit_norm(self):
        points = np.array([[3.0, 0.0, 4.0], [0.0, -2.0, 0.0]])
        projected = project_to_sphere(points)
        np.testing.assert_allclose(projected, [[0.6, 0.0, 0.8], [0.0, -1.0, 0.0]])

    def test_input_not_modified(self):
        points = np.array([[2.0, 0.0, 0.0]])
        project_to_sphere(points)
        np.testing.assert_array_equal(points, [[2.0, 0.0, 0.0]])

    def test_origin_raises(self):
        with pytest.raises(ValueError, match="origin"):
            project_to_sphere(np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 0.0]]))


class TestFaceCentroids:
    def test_cube_face_centres_are_axis_directions(self):
        shape = cube()
        centres = face_centroids(shape.vertices, shape.primary_faces)
        np.testing.assert_allclose(centres, [
            [-1.0, 0.0, 0.0],
            [0.0, -1.0, 0.0],
            [0.0, 0.0, -1.0],
            [0.0, 0.0, 1.0],
            [0.0, 1.0, 0.0],
            [1.0, 0.0, 0.0],
        ], atol=1e-12)

    def test_unprojected_is_plain_mean(self):
        shape = cube()
        centres = face_centroids(shape.vertices, shape.primary_faces, project=False)
        np.testing.assert_allclose(
            np.linalg.norm(centres, axis=1), 1.0 / np.sqrt(3.0),
        )

    def test_no_faces(self):
        centres = face_centroids(cube().vertices, np.empty((0, 6), dtype=int))
        assert centres.shape == (0, 3)
