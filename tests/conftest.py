"""Pytest fixtures for SpecFit tests."""

import numpy as np
import pytest

from specfit.core.domain.spectrum import Spectrum
from specfit.core.lineshapes import gaussian
from specfit.ui import logging as ui_logging


def make_gaussian_spectrum(peaks, x_range=(0.0, 100.0), n=500, noise=0.0, seed=42):
    """Sum of Gaussian peaks ``(x0, height, fwhm)`` on a uniform grid."""
    x = np.linspace(x_range[0], x_range[1], n)
    y = np.zeros(n)
    for x0, height, fwhm in peaks:
        y += gaussian(x, height, x0, fwhm)
    if noise:
        rng = np.random.default_rng(seed)
        y += rng.normal(0, noise, n)
    return Spectrum.from_arrays(x, y)


@pytest.fixture
def gaussian_spectrum():
    """Factory building Gaussian-sum spectra, see make_gaussian_spectrum."""
    return make_gaussian_spectrum


@pytest.fixture
def single_peak_spectrum():
    """One noiseless Gaussian peak at x=50 (height 10, FWHM 5) on 300 points."""
    return make_gaussian_spectrum([(50.0, 10.0, 5.0)], n=300)


@pytest.fixture
def three_peak_spectrum():
    """Three well-separated noiseless Gaussian peaks on 500 points."""
    return make_gaussian_spectrum([(25.0, 10.0, 3.0), (50.0, 15.0, 5.0), (75.0, 8.0, 4.0)])


@pytest.fixture
def sloped_spectrum():
    """Two Gaussian peaks on a linear background with mild noise."""
    peaks = [(30.0, 20.0, 4.0), (70.0, 12.0, 6.0)]
    spectrum = make_gaussian_spectrum(peaks, n=400, noise=0.05)
    background = 0.2 * spectrum.x + 5.0
    return spectrum.with_y(spectrum.y + background), peaks


@pytest.fixture
def spectrum_csv(tmp_path, sloped_spectrum):
    """Write the sloped spectrum to a comma-separated file with a header."""
    spectrum, _ = sloped_spectrum
    lines = ["wavenumber,intensity"]
    lines += [f"{x:.6f},{y:.6f}" for x, y in zip(spectrum.x, spectrum.y, strict=True)]
    path = tmp_path / "spectrum.csv"
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def temp_output_dir(tmp_path):
    """Create a temporary output directory."""
    output_dir = tmp_path / "test_output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture(autouse=True)
def _reset_logging():
    """Leave the package logger unconfigured between tests."""
    yield
    ui_logging.close_logging()
