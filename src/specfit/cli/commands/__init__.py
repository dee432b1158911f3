"""CLI command modules for SpecFit.

Each module exports one command function carrying its Typer annotations;
``specfit.cli.app`` registers them.
"""

from specfit.cli.commands.baseline import baseline_command
from specfit.cli.commands.detect import detect_command
from specfit.cli.commands.fit import fit_command
from specfit.cli.commands.init import init_command

__all__ = [
    "baseline_command",
    "detect_command",
    "fit_command",
    "init_command",
]
