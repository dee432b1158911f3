"""Test the Gaussian elimination solver."""

import numpy as np
import pytest

from specfit.core.algorithms.linear_algebra import solve_gaussian_elimination


class TestSolveGaussianElimination:
    """Tests for solve_gaussian_elimination."""

    def test_matches_numpy_on_well_conditioned_system(self):
        """Solution should agree with numpy.linalg.solve."""
        rng = np.random.default_rng(42)
        a = rng.normal(size=(5, 5)) + 5 * np.eye(5)
        b = rng.normal(size=5)
        x = solve_gaussian_elimination(a, b, 1e-15)
        np.testing.assert_allclose(x, np.linalg.solve(a, b), rtol=1e-10)

    def test_requires_pivoting(self):
        """A zero leading entry should be handled by row exchange."""
        a = np.array([[0.0, 1.0], [1.0, 0.0]])
        b = np.array([2.0, 3.0])
        x = solve_gaussian_elimination(a, b, 1e-15)
        np.testing.assert_allclose(x, [3.0, 2.0])

    def test_singular_pivot_gives_zero(self):
        """Unknowns with a singular pivot should be set to zero."""
        a = np.array([[1.0, 0.0], [0.0, 0.0]])
        b = np.array([4.0, 1.0])
        x = solve_gaussian_elimination(a, b, 1e-15)
        assert x[0] == pytest.approx(4.0)
        assert x[1] == 0.0

    def test_inputs_not_modified(self):
        """The matrix and right-hand side should be left untouched."""
        a = np.array([[2.0, 1.0], [1.0, 3.0]])
        b = np.array([1.0, 2.0])
        a_copy, b_copy = a.copy(), b.copy()
        solve_gaussian_elimination(a, b, 1e-15)
        np.testing.assert_array_equal(a, a_copy)
        np.testing.assert_array_equal(b, b_copy)
