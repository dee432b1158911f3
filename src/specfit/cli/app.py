"""Main Typer application for SpecFit.

Creates the Typer application and registers the commands from the
``commands`` subpackage.
"""

from typing import Annotated

import typer

from specfit.cli.callbacks import version_callback
from specfit.cli.commands import baseline_command, detect_command, fit_command, init_command

app = typer.Typer(
    name="specfit",
    help="SpecFit - Baseline correction, peak detection and peak fitting for 1-D spectra",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """SpecFit - Peak analysis for 1-D spectra.

    Subtract backgrounds, detect peaks and fit Gaussian, Lorentzian or
    pseudo-Voigt profiles to two-column spectrum files.
    """


app.command(name="init")(init_command)
app.command(name="baseline")(baseline_command)
app.command(name="detect")(detect_command)
app.command(name="fit")(fit_command)
