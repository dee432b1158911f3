"""Command-line interface for SpecFit."""

from specfit.cli.app import app

__all__ = ["app"]
