"""Analysis pipeline coordinating baseline, detection and fitting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from specfit.core.baseline import compute_baseline
from specfit.core.detection import detect_peaks
from specfit.core.domain.config import SpecFitConfig
from specfit.core.fitting import fit_peaks
from specfit.core.results.metrics import PeakMetric, extract_metrics
from specfit.ui.logging import log, log_dict, log_section

if TYPE_CHECKING:
    from specfit.core.domain.peaks import DetectedPeak, PeakParameters
    from specfit.core.domain.spectrum import Spectrum
    from specfit.core.fitting.results import FitResult
    from specfit.core.shared.typing import FloatArray


@dataclass(frozen=True)
class AnalysisResult:
    """Everything produced by one pipeline run.

    ``baseline`` is None when background subtraction was skipped, in which
    case ``corrected`` is the input spectrum.
    """

    spectrum: Spectrum
    baseline: FloatArray | None
    corrected: Spectrum
    detected: tuple[DetectedPeak, ...]
    fit: FitResult

    @property
    def metrics(self) -> list[PeakMetric]:
        """Per-peak metrics of the fit."""
        return extract_metrics(self.fit)


@dataclass
class AnalysisPipeline:
    """Run baseline correction, peak detection and fitting on one spectrum."""

    config: SpecFitConfig = field(default_factory=SpecFitConfig)

    def correct(self, spectrum: Spectrum) -> tuple[FloatArray | None, Spectrum]:
        """Subtract the configured baseline, if any."""
        if self.config.baseline is None:
            log("Baseline correction disabled")
            return None, spectrum

        baseline = compute_baseline(spectrum, self.config.baseline)
        corrected = spectrum.with_y(spectrum.y - baseline)
        log_dict(
            {
                "Method": self.config.baseline.method,
                "Baseline range": f"{baseline.min():.4g} .. {baseline.max():.4g}"
                if baseline.size
                else "empty",
            }
        )
        return baseline, corrected

    def run(
        self,
        spectrum: Spectrum,
        initial_peaks: Sequence[PeakParameters] | None = None,
    ) -> AnalysisResult:
        """Analyze ``spectrum``.

        Args:
            spectrum: Raw input spectrum
            initial_peaks: Starting parameters for the fit. When None, the
                detected peaks seed the fit.

        Returns
        -------
        AnalysisResult
            Input, baseline, corrected spectrum, detected peaks and fit.
        """
        log_section("Baseline")
        log(f"Spectrum: {len(spectrum)} points")
        baseline, corrected = self.correct(spectrum)

        log_section("Detection")
        detected = detect_peaks(corrected, self.config.detection)
        log(f"Detected {len(detected)} peak(s)")
        for peak in detected:
            log(f"  x={peak.x:.4f} y={peak.y:.4f} fwhm~{peak.estimated_fwhm:.4f}", level="debug")

        if initial_peaks is None:
            initial_peaks = [peak.to_parameters() for peak in detected]
        else:
            log(f"Using {len(initial_peaks)} caller-supplied initial peak(s)")

        log_section("Fitting")
        fit = fit_peaks(corrected, initial_peaks, self.config.fitting)
        log_dict(
            {
                "Shape": fit.shape.value,
                "Peaks": len(fit.peaks),
                "Iterations": fit.iterations,
                "R²": f"{fit.r_squared:.6f}",
            }
        )

        return AnalysisResult(
            spectrum=spectrum,
            baseline=baseline,
            corrected=corrected,
            detected=tuple(detected),
            fit=fit,
        )


__all__ = ["AnalysisPipeline", "AnalysisResult"]
