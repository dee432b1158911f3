"""Baseline command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer

from specfit.cli.callbacks import exit_on_error
from specfit.core.baseline import compute_baseline
from specfit.core.domain.config import BaselineConfig
from specfit.io.readers import load_spectrum
from specfit.io.writers import write_baseline_csv
from specfit.ui import print_summary, success


def baseline_command(
    spectrum: Annotated[
        pathlib.Path,
        typer.Argument(
            help="Path to two-column spectrum file (CSV, TSV or semicolon-separated)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    method: Annotated[
        str,
        typer.Option("--method", "-m", help="Baseline method: linear, polynomial, asls"),
    ] = "linear",
    degree: Annotated[
        int,
        typer.Option("--degree", "-d", help="Polynomial degree (polynomial method only)"),
    ] = 2,
    anchors: Annotated[
        list[int] | None,
        typer.Option(
            "--anchor",
            "-a",
            help="Basis-point index (repeat for several; at least 2). "
            "Lowest 20% of points if omitted.",
        ),
    ] = None,
    lam: Annotated[
        float,
        typer.Option("--lambda", help="AsLS smoothness weight"),
    ] = 1e5,
    p: Annotated[
        float,
        typer.Option("--p", help="AsLS asymmetry"),
    ] = 0.001,
    iterations: Annotated[
        int,
        typer.Option("--iterations", help="AsLS reweighting passes"),
    ] = 10,
    output: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output CSV file (default: <spectrum>_baseline.csv next to the input)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    """Estimate and subtract the background of a spectrum.

    Writes a CSV with columns x, y_raw, baseline and corrected.

    Examples
    --------
      Linear baseline through the lowest 20% of points:
        $ specfit baseline spectrum.csv

      Asymmetric least squares:
        $ specfit baseline spectrum.csv --method asls --lambda 1e6 --p 0.01
    """
    output = output or spectrum.with_name(f"{spectrum.stem}_baseline.csv")

    with exit_on_error("Baseline correction"):
        config = BaselineConfig.model_validate(
            {
                "method": method,
                "degree": degree,
                "anchor_indices": anchors or None,
                "lambda": lam,
                "p": p,
                "iterations": iterations,
            }
        )
        data = load_spectrum(spectrum)
        baseline = compute_baseline(data, config)
        corrected = data.y - baseline
        write_baseline_csv(data, baseline, corrected, output)

    print_summary(
        {
            "Spectrum": spectrum.name,
            "Points": len(data),
            "Method": config.method,
            "Baseline min": f"{baseline.min():.4f}",
            "Baseline max": f"{baseline.max():.4f}",
        },
        title="Baseline",
    )
    success(f"Wrote [path]{output}[/path]")
