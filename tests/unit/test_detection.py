"""Test peak detection."""

import numpy as np
import pytest

from specfit.core.detection import detect_peaks, estimate_fwhm, prominence
from specfit.core.domain.config import DetectConfig
from specfit.core.domain.spectrum import Spectrum


class TestDetectPeaks:
    """Tests for detect_peaks."""

    def test_finds_single_peak(self, gaussian_spectrum):
        """A single Gaussian should give one peak at its center."""
        peaks = detect_peaks(gaussian_spectrum([(50.0, 10.0, 5.0)]))
        assert len(peaks) == 1
        assert peaks[0].x == pytest.approx(50.0, abs=1.0)

    def test_finds_multiple_peaks_sorted(self, three_peak_spectrum):
        """Three separated peaks should all be found, in ascending x."""
        peaks = detect_peaks(three_peak_spectrum)
        assert len(peaks) == 3
        xs = [p.x for p in peaks]
        assert xs == sorted(xs)
        assert xs == pytest.approx([25.0, 50.0, 75.0], abs=1.0)

    def test_estimates_fwhm(self, gaussian_spectrum):
        """FWHM estimate should be close to the true width."""
        peaks = detect_peaks(gaussian_spectrum([(50.0, 10.0, 6.0)]))
        assert len(peaks) == 1
        assert peaks[0].estimated_fwhm == pytest.approx(6.0, abs=1.5)

    def test_noise_peaks_filtered(self, gaussian_spectrum):
        """Prominence and threshold filters should suppress noise bumps."""
        spectrum = gaussian_spectrum([(50.0, 100.0, 5.0)], noise=0.5)
        peaks = detect_peaks(spectrum, DetectConfig(noise_multiplier=5))
        assert len(peaks) < 10
        assert any(abs(p.x - 50.0) < 2 for p in peaks)

    def test_left_edge_peak(self, gaussian_spectrum):
        """A peak centered on the first sample should be reported at index 0."""
        spectrum = gaussian_spectrum([(0.0, 10.0, 6.0)], n=400)
        peaks = detect_peaks(spectrum)
        edge = [p for p in peaks if p.index == 0]
        assert edge
        assert edge[0].estimated_fwhm > 0

    def test_right_edge_peak(self, gaussian_spectrum):
        """A peak centered on the last sample should be reported."""
        spectrum = gaussian_spectrum([(100.0, 10.0, 6.0)], n=400)
        peaks = detect_peaks(spectrum)
        edge = [p for p in peaks if p.index == len(spectrum) - 1]
        assert edge
        assert edge[0].estimated_fwhm > 0

    def test_edges_can_be_disabled(self, gaussian_spectrum):
        """detect_edges=False should never report the first or last sample."""
        spectrum = gaussian_spectrum([(0.0, 10.0, 6.0)], n=400)
        peaks = detect_peaks(spectrum, DetectConfig(detect_edges=False))
        assert all(0 < p.index < len(spectrum) - 1 for p in peaks)

    def test_flat_top_reported_once(self):
        """A plateau should be reported once, at its right-most sample."""
        y = np.array([0.0, 1.0, 5.0, 5.0, 5.0, 1.0, 0.0, 0.0, 0.0, 0.0])
        spectrum = Spectrum.from_arrays(np.arange(10.0), y)
        peaks = detect_peaks(spectrum, DetectConfig(detect_edges=False))
        assert [p.index for p in peaks] == [4]

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_short_series_returns_empty(self, n):
        """Fewer than three points should give no peaks."""
        spectrum = Spectrum.from_arrays(np.arange(float(n)), np.ones(n))
        assert detect_peaks(spectrum) == []

    def test_input_not_modified(self, three_peak_spectrum):
        """Detection should not touch the input arrays."""
        y_before = three_peak_spectrum.y.copy()
        detect_peaks(three_peak_spectrum)
        np.testing.assert_array_equal(three_peak_spectrum.y, y_before)

    def test_repeated_calls_are_identical(self, gaussian_spectrum):
        """Detection should be a pure function of its inputs."""
        spectrum = gaussian_spectrum([(30.0, 12.0, 4.0), (100.0, 6.0, 5.0)], noise=0.2)
        config = DetectConfig(noise_multiplier=3)
        first = detect_peaks(spectrum, config)
        assert first
        assert first == detect_peaks(spectrum, config)


class TestPeakShapeMeasures:
    """Tests for prominence and FWHM helpers."""

    def test_prominence_uses_higher_valley(self):
        """Prominence should be measured above the higher of the two valleys."""
        y = np.array([0.0, 10.0, 4.0, 8.0, 2.0])
        # Peak 1 has no taller sample to its right, so the scan runs to the end
        assert prominence(y, 1) == pytest.approx(8.0)
        assert prominence(y, 3) == pytest.approx(4.0)

    def test_fwhm_by_interpolation(self):
        """Half-maximum crossings should be linearly interpolated."""
        x = np.arange(5.0)
        y = np.array([0.0, 5.0, 10.0, 5.0, 0.0])
        # Crossings exactly at x=1 and x=3
        assert estimate_fwhm(x, y, 2) == pytest.approx(2.0)

    def test_fwhm_boundary_fallback(self):
        """An unresolved side should use twice the distance to the boundary."""
        x = np.arange(4.0)
        y = np.array([8.0, 9.0, 10.0, 4.0])
        # Left side never drops to 5: 2 * (2 - 0) = 4; right crossing at 2 + 5/6
        assert estimate_fwhm(x, y, 2) == pytest.approx(4.0 + 5.0 / 6.0)
