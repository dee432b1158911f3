"""Integration tests using synthetic data."""

import json

import numpy as np
import pytest

from specfit.core.baseline import correct_baseline
from specfit.core.detection import detect_peaks
from specfit.core.domain.config import BaselineConfig, SpecFitConfig
from specfit.core.domain.spectrum import Spectrum
from specfit.core.fitting import fit_peaks
from specfit.core.lineshapes import gaussian
from specfit.io.readers import load_spectrum
from specfit.services import AnalysisPipeline, write_outputs


class TestSyntheticWorkflow:
    """End-to-end baseline, detection and fitting on generated spectra."""

    def test_file_to_results(self, spectrum_csv, temp_output_dir):
        """Reading, analysing and writing should recover the generated peaks."""
        spectrum = load_spectrum(spectrum_csv)
        config = SpecFitConfig(baseline=BaselineConfig(method="linear"))

        result = AnalysisPipeline(config).run(spectrum)
        write_outputs(result, temp_output_dir, config.output.formats)

        metrics = sorted(result.metrics, key=lambda m: m.position)
        assert [m.position for m in metrics] == pytest.approx([30.0, 70.0], abs=0.5)
        assert [m.height for m in metrics] == pytest.approx([20.0, 12.0], abs=1.0)
        assert [m.fwhm for m in metrics] == pytest.approx([4.0, 6.0], abs=0.5)

        summary = json.loads((temp_output_dir / "fit_summary.json").read_text())
        assert summary["fit"]["r_squared"] > 0.99
        assert len(summary["metrics"]) == 2

    def test_manual_chain_matches_pipeline(self, sloped_spectrum):
        """Calling the core steps by hand should match the pipeline."""
        spectrum, _ = sloped_spectrum
        baseline_config = BaselineConfig(method="linear")

        corrected = correct_baseline(spectrum, baseline_config)
        detected = detect_peaks(corrected)
        manual = fit_peaks(corrected, [peak.to_parameters() for peak in detected])

        pipeline = AnalysisPipeline(SpecFitConfig(baseline=baseline_config)).run(spectrum)

        assert manual.peaks == pipeline.fit.peaks
        np.testing.assert_array_equal(manual.fitted_y, pipeline.fit.fitted_y)

    def test_curved_background_with_asls(self):
        """AsLS correction should let two peaks on a parabola be fitted."""
        x = np.arange(240, dtype=float)
        background = 0.0015 * (x - 120) ** 2 + 5
        y = background + gaussian(x, 24.0, 70.0, 9.0) + gaussian(x, 18.0, 168.0, 12.0)

        config = SpecFitConfig(
            baseline=BaselineConfig(method="asls", lam=1e5, p=0.001, iterations=12)
        )
        result = AnalysisPipeline(config).run(Spectrum.from_arrays(x, y))

        for position, height in [(70.0, 24.0), (168.0, 18.0)]:
            assert any(
                abs(m.position - position) < 1.5 and m.height > 0.5 * height
                for m in result.metrics
            )
