"""Domain configuration models for SpecFit."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from specfit.core.constants import (
    ASLS_DEFAULT_ITERATIONS,
    ASLS_DEFAULT_LAMBDA,
    ASLS_DEFAULT_P,
    DEFAULT_MIN_PROMINENCE_FRACTION,
    DEFAULT_NOISE_MULTIPLIER,
    DEFAULT_POLY_DEGREE,
    LM_DEFAULT_MAX_ITERATIONS,
    LM_DEFAULT_TOLERANCE,
)
from specfit.core.lineshapes import PeakShape
from specfit.core.shared.exceptions import ConfigError

BaselineMethod = Literal["linear", "polynomial", "asls"]
OutputFormat = Literal["csv", "json"]
LogFormat = Literal["text", "json"]


class BaselineConfig(BaseModel):
    """Configuration for background estimation.

    Polynomial family (``linear`` / ``polynomial``):
        [baseline]
        method = "polynomial"
        degree = 3
        anchor_indices = [0, 120, 499]   # optional, >= 2 entries

    Asymmetric least squares (``asls``):
        [baseline]
        method = "asls"
        lambda = 1e5
        p = 0.001
        iterations = 10

    ``lambda``, ``p`` and ``iterations`` are floored/clamped by the algorithm
    (lambda >= 1, 1e-6 <= p <= 0.499, iterations >= 1) rather than rejected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    method: BaselineMethod = Field(
        default="linear",
        description="Baseline family: linear, polynomial or asls.",
    )
    degree: Annotated[int, Field(ge=0)] = Field(
        default=DEFAULT_POLY_DEGREE,
        description="Polynomial degree (polynomial method only; linear uses 1).",
    )
    anchor_indices: list[int] | None = Field(
        default=None,
        description="Explicit basis-point indices. Lowest 20% of points if omitted.",
    )
    lam: float = Field(
        default=ASLS_DEFAULT_LAMBDA,
        alias="lambda",
        description="AsLS smoothness weight (floored at 1).",
    )
    p: float = Field(
        default=ASLS_DEFAULT_P,
        description="AsLS asymmetry (clamped to [1e-6, 0.499]).",
    )
    iterations: int = Field(
        default=ASLS_DEFAULT_ITERATIONS,
        description="AsLS outer reweighting passes (floored at 1).",
    )

    @field_validator("anchor_indices")
    @classmethod
    def validate_anchor_count(cls, v: list[int] | None) -> list[int] | None:
        """Require at least two anchors when anchors are given."""
        if v is not None and len(v) < 2:
            msg = "anchor_indices requires at least 2 indices"
            raise ValueError(msg)
        return v

    @property
    def effective_degree(self) -> int:
        """Polynomial degree actually fitted by the polynomial family."""
        return 1 if self.method == "linear" else self.degree


class DetectConfig(BaseModel):
    """Configuration for peak detection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    noise_multiplier: float = Field(
        default=DEFAULT_NOISE_MULTIPLIER,
        description="Peaks below noise * noise_multiplier are rejected.",
    )
    min_prominence_fraction: float = Field(
        default=DEFAULT_MIN_PROMINENCE_FRACTION,
        description="Minimum prominence as a fraction of the maximum intensity.",
    )
    detect_edges: bool = Field(
        default=True,
        description="Allow the first and last samples to be reported as peaks.",
    )


class FitConfig(BaseModel):
    """Configuration for Levenberg-Marquardt peak fitting."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    shape: PeakShape = Field(
        default=PeakShape.GAUSSIAN,
        description="Peak profile: gaussian, lorentzian or pseudo_voigt.",
    )
    max_iterations: Annotated[int, Field(gt=0)] = Field(
        default=LM_DEFAULT_MAX_ITERATIONS,
        description="Maximum Levenberg-Marquardt iterations.",
    )
    tolerance: Annotated[float, Field(gt=0)] = Field(
        default=LM_DEFAULT_TOLERANCE,
        description="Relative chi-squared improvement that counts as converged.",
    )

    @field_validator("shape", mode="before")
    @classmethod
    def resolve_shape(cls, v: object) -> object:
        """Accept shape aliases such as 'pvoigt'."""
        if isinstance(v, str):
            try:
                return PeakShape.from_name(v)
            except ConfigError as exc:
                raise ValueError(str(exc)) from exc
        return v


class OutputConfig(BaseModel):
    """Configuration for output file generation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    directory: Path = Field(default=Path("Results"), description="Output directory for results.")
    formats: list[OutputFormat] = Field(
        default=["csv", "json"],
        description="Output formats for results.",
    )
    log_format: LogFormat = Field(
        default="text",
        description="Format for log file: text (human-readable) or json (structured).",
    )


class SpecFitConfig(BaseModel):
    """Top-level SpecFit configuration.

    Example TOML configuration:
        [baseline]
        method = "asls"
        lambda = 1e5
        p = 0.001

        [detection]
        noise_multiplier = 3.0
        min_prominence_fraction = 0.05

        [fitting]
        shape = "gaussian"
        max_iterations = 200
        tolerance = 1e-6

        [output]
        directory = "Results"
        formats = ["csv", "json"]

    Omitting the ``[baseline]`` table skips background subtraction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    baseline: BaselineConfig | None = Field(
        default=None,
        description="Background estimation. None disables baseline correction.",
    )
    detection: DetectConfig = Field(default_factory=DetectConfig)
    fitting: FitConfig = Field(default_factory=FitConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


__all__ = [
    "BaselineConfig",
    "BaselineMethod",
    "DetectConfig",
    "FitConfig",
    "LogFormat",
    "OutputConfig",
    "OutputFormat",
    "SpecFitConfig",
]
