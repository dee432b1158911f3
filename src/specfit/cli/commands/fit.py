"""Fit command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated, Any

import typer

from specfit.cli.callbacks import exit_on_error
from specfit.core.domain.config import SpecFitConfig
from specfit.io.config import load_config
from specfit.io.readers import load_spectrum
from specfit.services import AnalysisPipeline, write_outputs
from specfit.ui import (
    Verbosity,
    close_logging,
    get_verbosity,
    info,
    log_dict,
    print_detected_peaks,
    print_metrics,
    print_summary,
    set_verbosity,
    setup_logging,
    show_header,
    spacer,
    success,
    warning,
)

NO_BASELINE = "none"


def _apply_overrides(config: SpecFitConfig, overrides: dict[str, Any]) -> SpecFitConfig:
    """Return a validated copy of ``config`` with CLI values merged in."""
    data = config.model_dump(by_alias=True, exclude_none=True)
    for section, values in overrides.items():
        if values is None:
            data.pop(section, None)
            continue
        data[section] = {**data.get(section, {}), **values}
    return SpecFitConfig.model_validate(data)


def _default_log_file(config: SpecFitConfig) -> pathlib.Path:
    suffix = ".json" if config.output.log_format == "json" else ".log"
    return config.output.directory / f"specfit{suffix}"


def fit_command(
    spectrum: Annotated[
        pathlib.Path,
        typer.Argument(
            help="Path to two-column spectrum file (CSV, TSV or semicolon-separated)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    config: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to TOML configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    shape: Annotated[
        str | None,
        typer.Option("--shape", "-s", help="Peak shape: gaussian, lorentzian, pseudo_voigt"),
    ] = None,
    baseline: Annotated[
        str | None,
        typer.Option(
            "--baseline",
            "-b",
            help="Baseline method: linear, polynomial, asls, or 'none' to skip",
        ),
    ] = None,
    output: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for results",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    max_iterations: Annotated[
        int | None,
        typer.Option("--max-iterations", help="Maximum Levenberg-Marquardt iterations"),
    ] = None,
    tolerance: Annotated[
        float | None,
        typer.Option("--tolerance", help="Relative chi-squared improvement for convergence"),
    ] = None,
    formats: Annotated[
        list[str] | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format(s): csv, json. Can be specified multiple times.",
        ),
    ] = None,
    log_file: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--log-file",
            help="Log file (default: specfit.log in the output directory)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo the log to the console"),
    ] = False,
) -> None:
    """Detect and fit peaks in a spectrum.

    Runs baseline correction (if configured), peak detection and
    Levenberg-Marquardt fitting, then writes the results.

    Examples
    --------
    Basic usage:
        $ specfit fit spectrum.csv --output results

    Lorentzian peaks on an AsLS-corrected spectrum:
        $ specfit fit spectrum.csv --shape lorentzian --baseline asls

    Using a configuration file:
        $ specfit fit spectrum.csv --config specfit.toml
    """
    set_verbosity(Verbosity.VERBOSE if verbose else Verbosity.NORMAL)

    overrides: dict[str, Any] = {"fitting": {}, "output": {}}
    if shape is not None:
        overrides["fitting"]["shape"] = shape
    if max_iterations is not None:
        overrides["fitting"]["max_iterations"] = max_iterations
    if tolerance is not None:
        overrides["fitting"]["tolerance"] = tolerance
    if output is not None:
        overrides["output"]["directory"] = output
    if formats:
        overrides["output"]["formats"] = formats
    if baseline is not None:
        overrides["baseline"] = None if baseline.lower() == NO_BASELINE else {"method": baseline}

    with exit_on_error("Configuration"):
        base_config = load_config(config) if config is not None else SpecFitConfig()
        fit_config = _apply_overrides(base_config, overrides)

    setup_logging(
        log_file or _default_log_file(fit_config),
        verbose=verbose,
        log_format=fit_config.output.log_format,
    )

    try:
        show_header("SpecFit")
        with exit_on_error("Fitting process"):
            data = load_spectrum(spectrum)
            info(f"Loaded [path]{spectrum.name}[/path] ({len(data)} points)")
            log_dict(
                {
                    "Baseline": fit_config.baseline.method if fit_config.baseline else "none",
                    "Shape": fit_config.fitting.shape.value,
                    "Max iterations": fit_config.fitting.max_iterations,
                    "Tolerance": fit_config.fitting.tolerance,
                }
            )

            result = AnalysisPipeline(fit_config).run(data)

            if not result.detected:
                warning("No peaks detected; nothing to fit")

            if get_verbosity() >= Verbosity.VERBOSE and result.detected:
                print_detected_peaks(result.detected)
                spacer()

            print_summary(
                {
                    "Baseline": fit_config.baseline.method if fit_config.baseline else "none",
                    "Detected peaks": len(result.detected),
                    "Shape": result.fit.shape.value,
                    "Iterations": result.fit.iterations,
                    "R²": f"{result.fit.r_squared:.6f}",
                },
                title="Fit Summary",
            )
            if result.metrics:
                print_metrics(result.metrics)

            written = write_outputs(
                result,
                fit_config.output.directory,
                fit_config.output.formats,
                metadata={"input_file": spectrum, "config_file": config},
            )

        for path in written:
            success(f"Wrote [path]{path}[/path]", do_log=False)
    finally:
        close_logging()
