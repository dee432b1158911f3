"""Application service layer for orchestrating SpecFit workflows.

This module provides high-level facades that the CLI and other adapters can
use without knowing core implementation details.
"""

from specfit.services.pipeline import AnalysisPipeline, AnalysisResult
from specfit.services.writer import write_outputs

__all__ = ["AnalysisPipeline", "AnalysisResult", "write_outputs"]
