"""Test peak profile functions and the PeakShape dispatch."""

import numpy as np
import pytest

from specfit.core.domain.peaks import PeakParameters
from specfit.core.lineshapes import (
    PeakShape,
    evaluate_profile,
    gaussian,
    gaussian_area,
    lorentzian,
    lorentzian_area,
    profile_area,
    pseudo_voigt,
    pseudo_voigt_area,
)
from specfit.core.shared.exceptions import ConfigError


class TestGaussian:
    """Tests for the Gaussian profile."""

    def test_peak_value_at_center(self):
        """Gaussian should equal its height at x0."""
        assert gaussian(50.0, 10.0, 50.0, 5.0) == pytest.approx(10.0, abs=1e-10)

    def test_half_maximum_at_half_width(self):
        """Gaussian should be half height at x0 +/- FWHM/2."""
        assert gaussian(52.5, 10.0, 50.0, 5.0) == pytest.approx(5.0, abs=1e-5)
        assert gaussian(47.5, 10.0, 50.0, 5.0) == pytest.approx(5.0, abs=1e-5)

    def test_area_matches_numerical_integration(self):
        """Closed-form area should match a Riemann sum."""
        dx = 0.01
        x = np.arange(-100.0, 200.0, dx)
        numerical = np.sum(gaussian(x, 10.0, 50.0, 5.0)) * dx
        assert numerical == pytest.approx(gaussian_area(10.0, 5.0), abs=0.05)

    def test_accepts_arrays(self):
        """Array input should give an array of the same shape."""
        x = np.linspace(0, 100, 11)
        assert gaussian(x, 1.0, 50.0, 5.0).shape == x.shape


class TestLorentzian:
    """Tests for the Lorentzian profile."""

    def test_peak_value_at_center(self):
        """Lorentzian should equal its height at x0."""
        assert lorentzian(50.0, 10.0, 50.0, 5.0) == pytest.approx(10.0, abs=1e-10)

    def test_half_maximum_at_half_width(self):
        """Lorentzian should be half height at x0 +/- FWHM/2."""
        assert lorentzian(52.5, 10.0, 50.0, 5.0) == pytest.approx(5.0, abs=1e-5)

    def test_area_matches_numerical_integration(self):
        """Closed-form area should match a wide Riemann sum (slow tails)."""
        dx = 0.01
        x = np.arange(-500.0, 600.0, dx)
        numerical = np.sum(lorentzian(x, 10.0, 50.0, 5.0)) * dx
        assert numerical == pytest.approx(lorentzian_area(10.0, 5.0), abs=0.5)


class TestPseudoVoigt:
    """Tests for the pseudo-Voigt profile."""

    def test_eta_zero_is_gaussian(self):
        """eta=0 should give the pure Gaussian."""
        assert pseudo_voigt(45.0, 10.0, 50.0, 5.0, 0.0) == pytest.approx(
            gaussian(45.0, 10.0, 50.0, 5.0), abs=1e-10
        )

    def test_eta_one_is_lorentzian(self):
        """eta=1 should give the pure Lorentzian."""
        assert pseudo_voigt(45.0, 10.0, 50.0, 5.0, 1.0) == pytest.approx(
            lorentzian(45.0, 10.0, 50.0, 5.0), abs=1e-10
        )

    def test_area_interpolates(self):
        """Area should mix the Gaussian and Lorentzian areas linearly."""
        eta = 0.3
        expected = eta * lorentzian_area(10.0, 5.0) + (1 - eta) * gaussian_area(10.0, 5.0)
        assert pseudo_voigt_area(10.0, 5.0, eta) == pytest.approx(expected, abs=1e-10)


class TestPeakShape:
    """Tests for shape resolution and dispatch."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("gaussian", PeakShape.GAUSSIAN),
            ("Lorentzian", PeakShape.LORENTZIAN),
            ("pseudo_voigt", PeakShape.PSEUDO_VOIGT),
            ("pvoigt", PeakShape.PSEUDO_VOIGT),
            ("pseudoVoigt", PeakShape.PSEUDO_VOIGT),
        ],
    )
    def test_from_name(self, name, expected):
        """Names and aliases should resolve case-insensitively."""
        assert PeakShape.from_name(name) is expected

    def test_unknown_name_raises(self):
        """Unknown shape names should raise ConfigError."""
        with pytest.raises(ConfigError, match="Unknown peak shape"):
            PeakShape.from_name("voigt2")

    def test_n_params(self):
        """Only pseudo-Voigt carries a free eta."""
        assert PeakShape.GAUSSIAN.n_params == 3
        assert PeakShape.LORENTZIAN.n_params == 3
        assert PeakShape.PSEUDO_VOIGT.n_params == 4

    def test_evaluate_ignores_eta_for_gaussian(self):
        """eta should not change Gaussian or Lorentzian values."""
        x = np.linspace(40, 60, 21)
        a = PeakShape.GAUSSIAN.evaluate(x, 10.0, 50.0, 5.0, eta=0.0)
        b = PeakShape.GAUSSIAN.evaluate(x, 10.0, 50.0, 5.0, eta=1.0)
        np.testing.assert_allclose(a, b)

    def test_profile_helpers_use_parameters(self):
        """evaluate_profile and profile_area should read PeakParameters."""
        params = PeakParameters(x0=50.0, height=10.0, fwhm=5.0, eta=0.3)
        shape = PeakShape.PSEUDO_VOIGT
        assert evaluate_profile(50.0, params, shape) == pytest.approx(10.0)
        assert profile_area(params, shape) == pytest.approx(pseudo_voigt_area(10.0, 5.0, 0.3))
