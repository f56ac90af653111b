"""Tests for gridfield.operators: differential operators, registry and sweeps."""

import numpy as np
import numpy.testing as npt
import pytest

from gridfield import Coord, Grid, OutOfGridError, Vector
from gridfield.initial_conditions import CustomFieldIC, LinearScalarField, LinearVectorField

M, N = 5, 8
DELTA = 0.2


# Fixtures

@pytest.fixture
def linear_scalar():
    """f(x, y) = h0 + px x + py y on a 5 x 8 grid."""
    h0, px, py = 0.3, -0.1, 0.4
    grid = Grid((M, N), DELTA)
    LinearScalarField(h0, [px, py]).apply(grid)
    return grid, px, py


@pytest.fixture
def linear_vector():
    """u(x, y) = (kxx x + kxy y, kyx x + kyy y) on a 5 x 8 grid."""
    kxx, kxy, kyx, kyy = 0.3, -0.1, 0.9, -0.4
    grid = Grid((M, N), DELTA, value_type=Vector)
    LinearVectorField([[kxx, kxy], [kyx, kyy]]).apply(grid)
    return grid, kxx, kyy


# Registry tests

class TestMethodRegistry:
    def test_register_and_retrieve(self):
        from gridfield.operators import MethodRegistry
        reg = MethodRegistry("test")
        reg.register("center", lambda grid, coord: grid[coord])
        grid = Grid((2, 2), 1.0)
        grid[(1, 0)] = 6.0
        assert reg["center"](grid, (1, 0)) == 6.0

    def test_unknown_key_raises(self):
        from gridfield.operators import MethodRegistry
        reg = MethodRegistry("test")
        with pytest.raises(KeyError, match="Unknown test method"):
            reg["nonexistent"]

    def test_available(self):
        from gridfield.operators import MethodRegistry
        reg = MethodRegistry("test")
        reg.register("a", lambda grid, coord: 0.0)
        reg.register("b", lambda grid, coord, scale=1.0: scale)
        assert set(reg.available()) == {"a", "b"}

    def test_duplicate_needs_replace(self):
        from gridfield.operators import MethodRegistry
        reg = MethodRegistry("test")
        reg.register("a", lambda grid, coord: 0.0)
        with pytest.raises(KeyError, match="already registered"):
            reg.register("a", lambda grid, coord: 1.0)
        reg.register("a", lambda grid, coord: 1.0, replace=True)
        assert reg["a"](None, None) == 1.0

    @pytest.mark.parametrize("fn", [
        lambda: None,
        lambda grid: None,
        lambda grid, coord, dt: None,
        "laplacian",
    ])
    def test_rejects_wrong_signature(self, fn):
        from gridfield.operators import MethodRegistry
        reg = MethodRegistry("test")
        with pytest.raises(TypeError, match="fn\\(grid, coord"):
            reg.register("bad", fn)
        assert "bad" not in reg

    def test_accepts_extra_keyword_arguments(self):
        from gridfield.operators import MethodRegistry, advect
        reg = MethodRegistry("test")
        reg.register("star", lambda *args, **kwargs: None)
        reg.register("scaled", lambda grid, coord, *, factor: factor)
        assert "star" in reg and "scaled" in reg
        with pytest.raises(TypeError):
            reg.register("advect", advect)

    def test_builtin_field_operators(self):
        from gridfield.operators import field_operators
        assert {"gradient", "divergence", "laplacian"} <= set(field_operators.available())
        assert "advect" not in field_operators


# Gradient

class TestGradient:
    def test_linear_field(self, linear_scalar):
        grid, px, py = linear_scalar
        for i in range(M):
            for j in range(N):
                expected_px = px / 2.0 if i in (0, M - 1) else px
                expected_py = py / 2.0 if j in (0, N - 1) else py
                grad = grid.gradient(Coord((i, j)))
                assert isinstance(grad, Vector)
                npt.assert_allclose(grad, [expected_px, expected_py], atol=1e-10,
                                    err_msg=f"at {(i, j)}")

    def test_uniform_field_zero_gradient(self):
        grid = Grid((4, 4, 4), 0.5)
        grid.fill(3.0)
        for coord, _ in grid:
            npt.assert_allclose(grid.gradient(coord), np.zeros(3), atol=1e-14)

    def test_1d(self):
        grid = Grid((4,), 0.5)
        CustomFieldIC(lambda x: 2.0 * x[0]).apply(grid)
        npt.assert_allclose(grid.gradient((1,)), [2.0])
        npt.assert_allclose(grid.gradient((3,)), [1.0])

    def test_center_must_exist(self, linear_scalar):
        grid, _, _ = linear_scalar
        with pytest.raises(OutOfGridError):
            grid.gradient((M, 0))
        with pytest.raises(OutOfGridError):
            grid.gradient((-1, 0))

    def test_vector_field_rejected(self, linear_vector):
        grid, _, _ = linear_vector
        with pytest.raises(TypeError):
            grid.gradient((1, 1))


# Divergence

class TestDivergence:
    def test_linear_field(self, linear_vector):
        grid, kxx, kyy = linear_vector
        for i in range(M):
            for j in range(N):
                expected_kxx = kxx / 2.0 if i in (0, M - 1) else kxx
                expected_kyy = kyy / 2.0 if j in (0, N - 1) else kyy
                npt.assert_allclose(grid.divergence((i, j)), expected_kxx + expected_kyy,
                                    atol=1e-10, err_msg=f"at {(i, j)}")

    def test_solid_rotation_divergence_free(self):
        grid = Grid((6, 6), 0.1, value_type=Vector)
        LinearVectorField([[0.0, -1.0], [1.0, 0.0]]).apply(grid)
        for coord, _ in grid:
            assert abs(grid.divergence(coord)) < 1e-12

    def test_center_must_exist(self, linear_vector):
        grid, _, _ = linear_vector
        with pytest.raises(OutOfGridError):
            grid.divergence((0, N))

    def test_scalar_field_rejected(self, linear_scalar):
        grid, _, _ = linear_scalar
        with pytest.raises(TypeError):
            grid.divergence((1, 1))


# Laplacian

class TestLaplacian:
    def test_quadratic_interior(self):
        a, b = 0.7, -0.3
        grid = Grid((M, N), DELTA)
        CustomFieldIC(lambda p: a * p[0] ** 2 * p[1] + b * p[1] ** 2).apply(grid)

        for i in range(1, M - 1):
            for j in range(1, N - 1):
                y = j * DELTA
                npt.assert_allclose(grid.laplacian((i, j)), 2.0 * a * y + 2.0 * b,
                                    atol=1e-10, err_msg=f"at {(i, j)}")

    def test_linear_field_zero_everywhere(self, linear_scalar):
        # with substitution a linear field is harmonic in the interior only
        grid, _, _ = linear_scalar
        for i in range(1, M - 1):
            for j in range(1, N - 1):
                assert abs(grid.laplacian((i, j))) < 1e-10

    def test_edge_uses_center_for_missing_neighbor(self):
        grid = Grid((3,), 1.0)
        for i, value in enumerate([1.0, 4.0, 9.0]):
            grid[(i,)] = value
        # (4 + 1) - 2 * 1
        assert grid.laplacian((0,)) == pytest.approx(3.0)
        # (9 + 4) - 2 * 9
        assert grid.laplacian((2,)) == pytest.approx(-5.0)

    def test_vector_field(self):
        grid = Grid((5, 5), 0.5, value_type=Vector)
        CustomFieldIC(lambda p: Vector([p[0] ** 2, p[1] ** 2 + p[0]])).apply(grid)
        lap = grid.laplacian((2, 2))
        assert isinstance(lap, Vector)
        npt.assert_allclose(lap, [2.0, 2.0], atol=1e-10)

    def test_2d_edge_cells(self):
        # f = x^2 + y with delta = 1: the interior Laplacian is 2
        grid = Grid((3, 3), 1.0)
        CustomFieldIC(lambda p: p[0] ** 2 + p[1]).apply(grid)
        assert grid.laplacian((1, 1)) == pytest.approx(2.0)
        # edge (0, 1): x-minus neighbor takes the center value
        # (f(1,1) + f(0,1)) + (f(0,2) + f(0,0)) - 4 f(0,1) = (2 + 1) + (2 + 0) - 4
        assert grid.laplacian((0, 1)) == pytest.approx(1.0)
        # corner (0, 0): both minus neighbors take the center value
        assert grid.laplacian((0, 0)) == pytest.approx(2.0)
        # corner (2, 2): both plus neighbors take the center value
        # (6 + f(1,2)) + (6 + f(2,1)) - 4 * 6 = (6 + 3) + (6 + 5) - 24
        assert grid.laplacian((2, 2)) == pytest.approx(-4.0)

    def test_center_must_exist(self):
        with pytest.raises(OutOfGridError):
            Grid((3, 3), 1.0).laplacian((3, 3))


# Full-grid sweeps

class TestApplyOperator:
    def test_gradient_sweep(self, linear_scalar):
        from gridfield.operators import apply_operator

        grid, px, py = linear_scalar
        grad = apply_operator(grid, "gradient")
        assert grad.is_vector_field
        assert grad.size == grid.size
        assert grad.delta == grid.delta
        npt.assert_allclose(grad[(2, 3)], [px, py], atol=1e-10)
        npt.assert_allclose(grad[(0, 0)], [px / 2, py / 2], atol=1e-10)

    def test_divergence_sweep(self, linear_vector):
        from gridfield.operators import apply_operator

        grid, kxx, kyy = linear_vector
        div = apply_operator(grid, "divergence")
        assert not div.is_vector_field
        npt.assert_allclose(div[(2, 3)], kxx + kyy, atol=1e-10)

    def test_matches_pointwise(self, linear_scalar):
        from gridfield.operators import apply_operator, laplacian

        grid, _, _ = linear_scalar
        lap = apply_operator(grid, laplacian)
        for coord, value in lap:
            assert value == grid.laplacian(coord)

    def test_unknown_operator(self, linear_scalar):
        from gridfield.operators import apply_operator

        grid, _, _ = linear_scalar
        with pytest.raises(KeyError, match="Unknown field operator method"):
            apply_operator(grid, "curl")
