"""Init command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from specfit.io.config import generate_default_config
from specfit.ui import console, error, info, success


def init_command(
    path: Annotated[
        Path,
        typer.Argument(
            help="Path for new configuration file",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = Path("specfit.toml"),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
) -> None:
    """Generate a default configuration file.

    Creates a TOML configuration file with default settings that can be customized.

    Examples
    --------
      Create default config:
        $ specfit init

      Create config with custom name:
        $ specfit init my_analysis.toml

      Overwrite existing config:
        $ specfit init --force
    """
    if path.exists() and not force:
        error(f"File already exists: [path]{path}[/path]")
        info("Use [code]--force[/code] to overwrite")
        raise typer.Exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_default_config(), encoding="utf-8")

    success(f"Created configuration file: [path]{path}[/path]")

    console.print("\n[header]Configuration includes:[/header]")
    console.print("  • [green]Baseline[/] (linear, polynomial or asls)")
    console.print("  • [green]Detection thresholds[/] (noise multiplier, prominence)")
    console.print("  • [green]Fitting parameters[/] (shape, iterations, tolerance)")
    console.print("  • [green]Output preferences[/] (formats, directory)")
    console.print(f"\nRun fitting: [code]specfit fit spectrum.csv --config {path}[/code]")
