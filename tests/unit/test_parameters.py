"""Test packing and unpacking of fit parameters."""

import numpy as np
import pytest

from specfit.core.domain.peaks import PeakParameters
from specfit.core.fitting import clamp_eta, pack_parameters, unpack_parameters
from specfit.core.lineshapes import PeakShape


class TestPackParameters:
    """Tests for pack_parameters."""

    def test_three_per_peak_for_gaussian(self):
        """Gaussian peaks should pack x0, height and fwhm only."""
        peaks = [PeakParameters(10.0, 2.0, 3.0), PeakParameters(20.0, 4.0, 5.0)]
        values = pack_parameters(peaks, PeakShape.GAUSSIAN)
        np.testing.assert_array_equal(values, [10.0, 2.0, 3.0, 20.0, 4.0, 5.0])

    def test_four_per_peak_for_pseudo_voigt(self):
        """Pseudo-Voigt peaks should also pack eta."""
        peaks = [PeakParameters(10.0, 2.0, 3.0, eta=0.2)]
        values = pack_parameters(peaks, PeakShape.PSEUDO_VOIGT)
        np.testing.assert_array_equal(values, [10.0, 2.0, 3.0, 0.2])

    def test_empty(self):
        """No peaks should give an empty vector."""
        assert pack_parameters([], PeakShape.LORENTZIAN).size == 0


class TestUnpackParameters:
    """Tests for unpack_parameters."""

    def test_height_and_fwhm_floored(self):
        """Negative or tiny heights and widths should be raised to 0.001."""
        (peak,) = unpack_parameters(np.array([5.0, -3.0, 0.0]), PeakShape.GAUSSIAN)
        assert peak.x0 == 5.0
        assert peak.height == pytest.approx(0.001)
        assert peak.fwhm == pytest.approx(0.001)

    def test_center_not_bounded(self):
        """Peak centers may move anywhere."""
        (peak,) = unpack_parameters(np.array([-250.0, 1.0, 1.0]), PeakShape.LORENTZIAN)
        assert peak.x0 == -250.0

    @pytest.mark.parametrize(("raw", "expected"), [(-0.5, 0.0), (0.4, 0.4), (1.7, 1.0)])
    def test_eta_clamped_for_pseudo_voigt(self, raw, expected):
        """Pseudo-Voigt eta should be clamped to [0, 1]."""
        (peak,) = unpack_parameters(np.array([0.0, 1.0, 1.0, raw]), PeakShape.PSEUDO_VOIGT)
        assert peak.eta == pytest.approx(expected)

    def test_fixed_eta_used_for_gaussian(self):
        """Shapes without a free eta should carry the caller's eta, clamped."""
        values = np.array([1.0, 1.0, 1.0, 2.0, 1.0, 1.0])
        peaks = unpack_parameters(values, PeakShape.GAUSSIAN, fixed_eta=[0.3, 2.0])
        assert [p.eta for p in peaks] == pytest.approx([0.3, 1.0])

    def test_default_eta(self):
        """Without fixed_eta, eta should default to 0.5."""
        (peak,) = unpack_parameters(np.array([1.0, 1.0, 1.0]), PeakShape.GAUSSIAN)
        assert peak.eta == 0.5

    def test_round_trip_within_bounds(self):
        """In-bounds parameters should survive pack then unpack unchanged."""
        peaks = [PeakParameters(10.0, 2.0, 3.0, eta=0.25), PeakParameters(40.0, 7.0, 1.5, eta=0.9)]
        values = pack_parameters(peaks, PeakShape.PSEUDO_VOIGT)
        assert unpack_parameters(values, PeakShape.PSEUDO_VOIGT) == peaks


def test_clamp_eta():
    """clamp_eta should bound to the closed unit interval."""
    assert clamp_eta(-1.0) == 0.0
    assert clamp_eta(0.5) == 0.5
    assert clamp_eta(3.0) == 1.0
