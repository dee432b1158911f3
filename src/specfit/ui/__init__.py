"""UI and terminal output styling for SpecFit.

Submodules:
- console: Theme and console instance
- logging: File and console logging utilities
- messages: Status messages (success, error, warning, etc.)
- tables: Table display utilities
"""

from specfit.ui.console import (
    SPECFIT_THEME,
    VERSION,
    Verbosity,
    console,
    get_verbosity,
    icon,
    set_verbosity,
)
from specfit.ui.logging import close_logging, log, log_dict, log_section, setup_logging
from specfit.ui.messages import (
    error,
    info,
    show_header,
    show_version,
    spacer,
    success,
    warning,
)
from specfit.ui.tables import create_table, print_detected_peaks, print_metrics, print_summary

__all__ = [
    "SPECFIT_THEME",
    "VERSION",
    "Verbosity",
    "close_logging",
    "console",
    "create_table",
    "error",
    "get_verbosity",
    "icon",
    "info",
    "log",
    "log_dict",
    "log_section",
    "print_detected_peaks",
    "print_metrics",
    "print_summary",
    "set_verbosity",
    "setup_logging",
    "show_header",
    "show_version",
    "spacer",
    "success",
    "warning",
]
