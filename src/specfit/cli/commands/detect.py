"""Detect command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer

from specfit.cli.callbacks import exit_on_error
from specfit.core.detection import detect_peaks, estimate_noise
from specfit.core.domain.config import DetectConfig
from specfit.io.readers import load_spectrum
from specfit.ui import info, print_detected_peaks, warning


def detect_command(
    spectrum: Annotated[
        pathlib.Path,
        typer.Argument(
            help="Path to two-column spectrum file (CSV, TSV or semicolon-separated)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    noise_multiplier: Annotated[
        float,
        typer.Option("--noise-multiplier", "-n", help="Threshold as a multiple of the noise"),
    ] = 3.0,
    min_prominence: Annotated[
        float,
        typer.Option(
            "--min-prominence",
            "-p",
            help="Minimum prominence as a fraction of the maximum intensity",
        ),
    ] = 0.05,
    edges: Annotated[
        bool,
        typer.Option("--edges/--no-edges", help="Allow peaks at the first and last samples"),
    ] = True,
) -> None:
    """Detect candidate peaks in a spectrum.

    The spectrum is used as read; run ``specfit baseline`` first if it has
    a sloping background.

    Examples
    --------
      $ specfit detect spectrum.csv --noise-multiplier 5 --no-edges
    """
    with exit_on_error("Peak detection"):
        config = DetectConfig(
            noise_multiplier=noise_multiplier,
            min_prominence_fraction=min_prominence,
            detect_edges=edges,
        )
        data = load_spectrum(spectrum)

    peaks = detect_peaks(data, config)
    info(f"Noise estimate: {estimate_noise(data.y):.4g}")

    if not peaks:
        warning("No peaks detected")
        return

    print_detected_peaks(peaks)
