"""Numeric policy constants for SpecFit.

These values are fixed policy rather than user options. They are kept in one
place so that baseline, detection and fitting results stay reproducible.
"""

# =============================================================================
# Shared Parameter Floors
# =============================================================================

PARAM_FLOOR = 0.001
"""Lower bound applied to peak height and FWHM whenever parameters are unpacked."""

ETA_MIN = 0.0
ETA_MAX = 1.0
"""Closed interval for the pseudo-Voigt Lorentzian fraction."""

DEFAULT_ETA = 0.5
"""Mixing fraction assumed when the caller does not provide one."""

# =============================================================================
# Polynomial Baseline
# =============================================================================

POLY_PIVOT_TOL = 1e-15
"""Pivots smaller than this are singular; the matching coefficient becomes 0."""

AUTO_BASELINE_FRACTION = 0.2
"""Fraction of lowest-intensity points used as automatic baseline basis."""

AUTO_BASELINE_MIN_POINTS = 2

DEFAULT_POLY_DEGREE = 2

# =============================================================================
# Asymmetric Least Squares Baseline
# =============================================================================

ASLS_MIN_POINTS = 3
"""Series shorter than this are returned unchanged by AsLS."""

ASLS_DEFAULT_LAMBDA = 1e5
ASLS_MIN_LAMBDA = 1.0

ASLS_DEFAULT_P = 0.001
ASLS_MIN_P = 1e-6
ASLS_MAX_P = 0.499

ASLS_DEFAULT_ITERATIONS = 10
ASLS_MIN_ITERATIONS = 1

CG_MIN_ITERATIONS = 60
CG_MAX_ITERATIONS = 500
"""Inner conjugate-gradient cap is ``min(max(CG_MIN_ITERATIONS, n), CG_MAX_ITERATIONS)``."""

CG_RESIDUAL_TOL = 1e-8
"""CG stops once ``||r|| / sqrt(n)`` drops below this value."""

CG_DENOM_TOL = 1e-20
"""CG stops when the curvature ``p^T A p`` (or the initial ``r^T r``) vanishes."""

# =============================================================================
# Peak Detection
# =============================================================================

MAD_TO_SIGMA = 1.4826
"""Scale factor converting a median absolute deviation to a Gaussian sigma."""

DEFAULT_NOISE_MULTIPLIER = 3.0
DEFAULT_MIN_PROMINENCE_FRACTION = 0.05
DETECTION_MIN_POINTS = 3

# =============================================================================
# Levenberg-Marquardt Fitting
# =============================================================================

LM_DEFAULT_MAX_ITERATIONS = 200
LM_DEFAULT_TOLERANCE = 1e-6

LM_INITIAL_DAMPING = 1e-3
LM_DAMPING_DECREASE = 0.5
"""Damping multiplier after an accepted step."""

LM_DAMPING_INCREASE = 5.0
"""Damping multiplier after a rejected step."""

LM_PIVOT_TOL = 1e-20
"""Pivot threshold for the damped normal equations."""

LM_CHI2_EPS = 1e-20
"""Added to chi-squared when computing the relative improvement."""

JACOBIAN_STEP = 1e-7
"""Forward-difference step is ``max(JACOBIAN_STEP, |param| * JACOBIAN_STEP)``."""
