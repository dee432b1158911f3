"""Test the analysis pipeline service."""

import json

import numpy as np
import pytest

from specfit.core.domain.config import BaselineConfig, FitConfig, SpecFitConfig
from specfit.core.domain.peaks import PeakParameters
from specfit.core.lineshapes import PeakShape
from specfit.services import AnalysisPipeline, write_outputs


class TestAnalysisPipeline:
    """Tests for AnalysisPipeline.run."""

    def test_without_baseline(self, three_peak_spectrum):
        """Default configuration should fit the spectrum as read."""
        result = AnalysisPipeline().run(three_peak_spectrum)

        assert result.baseline is None
        assert result.corrected is three_peak_spectrum
        assert len(result.detected) == 3
        assert len(result.fit.peaks) == 3
        assert result.fit.r_squared > 0.99

    def test_with_baseline(self, sloped_spectrum):
        """A linear baseline should be removed before detection."""
        spectrum, true_peaks = sloped_spectrum
        config = SpecFitConfig(baseline=BaselineConfig(method="linear"))

        result = AnalysisPipeline(config).run(spectrum)

        assert result.baseline is not None
        assert result.baseline.shape == spectrum.y.shape
        np.testing.assert_allclose(result.corrected.y, spectrum.y - result.baseline)
        positions = sorted(p.x0 for p in result.fit.peaks)
        assert positions == pytest.approx([p[0] for p in true_peaks], abs=0.5)

    def test_initial_peaks_override_detection(self, single_peak_spectrum):
        """Caller-supplied peaks should seed the fit instead of detections."""
        initial = [PeakParameters(45.0, 5.0, 8.0), PeakParameters(60.0, 1.0, 4.0)]
        result = AnalysisPipeline().run(single_peak_spectrum, initial_peaks=initial)

        assert len(result.detected) == 1
        assert len(result.fit.peaks) == 2

    def test_metrics(self, single_peak_spectrum):
        """Metrics should follow the fitted peaks and configured shape."""
        config = SpecFitConfig(fitting=FitConfig(shape="pseudo_voigt"))
        result = AnalysisPipeline(config).run(single_peak_spectrum)

        (metric,) = result.metrics
        assert metric.peak_number == 1
        assert metric.shape is PeakShape.PSEUDO_VOIGT
        assert metric.eta is not None

    def test_nothing_detected(self, gaussian_spectrum):
        """A flat spectrum should give an empty fit rather than an error."""
        spectrum = gaussian_spectrum([], n=50)
        result = AnalysisPipeline().run(spectrum)

        assert result.detected == ()
        assert result.fit.peaks == ()
        assert result.fit.iterations == 0


class TestWriteOutputs:
    """Tests for write_outputs."""

    def test_all_formats(self, single_peak_spectrum, temp_output_dir):
        """csv and json should write three files."""
        result = AnalysisPipeline().run(single_peak_spectrum)
        written = write_outputs(result, temp_output_dir, ["csv", "json"], {"input_file": "x.csv"})

        assert [p.name for p in written] == ["peaks.csv", "fitted_curve.csv", "fit_summary.json"]
        assert all(p.exists() for p in written)
        data = json.loads((temp_output_dir / "fit_summary.json").read_text())
        assert data["metadata"]["input_file"] == "x.csv"
        assert len(data["detected_peaks"]) == 1

    def test_duplicate_formats_written_once(self, single_peak_spectrum, temp_output_dir):
        """Repeated formats should not write files twice."""
        result = AnalysisPipeline().run(single_peak_spectrum)
        written = write_outputs(result, temp_output_dir, ["json", "json"])
        assert len(written) == 1

    def test_creates_directory(self, single_peak_spectrum, tmp_path):
        """A missing output directory should be created."""
        result = AnalysisPipeline().run(single_peak_spectrum)
        target = tmp_path / "a" / "b"
        write_outputs(result, target, ["csv"])
        assert (target / "peaks.csv").exists()
