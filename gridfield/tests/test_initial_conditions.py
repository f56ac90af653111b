"""Tests for gridfield.initial_conditions module."""

import numpy as np
import numpy.testing as npt
import pytest

from gridfield import Grid, SizeMismatchError, Vector
from gridfield.initial_conditions import (
    CompositeIC,
    CustomFieldIC,
    LinearScalarField,
    LinearVectorField,
    UniformValue,
)


class TestUniformValue:
    def test_scalar(self):
        grid = Grid((3, 4), 0.5)
        UniformValue(2.5).apply(grid)
        npt.assert_array_equal(grid.to_array(), np.full((3, 4), 2.5))

    def test_vector(self):
        grid = Grid((3, 4), 0.5, value_type=Vector)
        UniformValue(Vector([1.0, -1.0])).apply(grid)
        for _, value in grid:
            assert value == Vector([1.0, -1.0])


class TestLinearScalarField:
    def test_values(self):
        grid = Grid((5, 8), 0.2)
        LinearScalarField(0.3, [-0.1, 0.4]).apply(grid)
        for (i, j), value in grid:
            npt.assert_allclose(value, 0.3 - 0.1 * i * 0.2 + 0.4 * j * 0.2)

    def test_slope_length_checked(self):
        with pytest.raises(SizeMismatchError):
            LinearScalarField(0.0, [1.0, 2.0, 3.0]).apply(Grid((3, 3), 1.0))


class TestLinearVectorField:
    def test_values(self):
        grid = Grid((3, 3), 0.5, value_type=Vector)
        LinearVectorField([[0.3, -0.1], [0.9, -0.4]]).apply(grid)
        npt.assert_allclose(grid[(2, 1)], [0.3 * 1.0 - 0.1 * 0.5, 0.9 * 1.0 - 0.4 * 0.5])

    def test_matrix_shape_checked(self):
        with pytest.raises(SizeMismatchError):
            LinearVectorField(np.eye(3)).apply(Grid((3, 3), 1.0, value_type=Vector))


class TestComposite:
    def test_later_overrides_earlier(self):
        grid = Grid((4, 4), 1.0)
        CompositeIC(
            UniformValue(1.0),
            CustomFieldIC(lambda p: 5.0 if p[0] > 1.5 else 1.0),
        ).apply(grid)
        assert grid[(0, 0)] == 1.0
        assert grid[(3, 2)] == 5.0
