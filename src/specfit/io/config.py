"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w

from specfit.core.domain.config import SpecFitConfig
from specfit.core.shared.exceptions import ConfigError


def load_config(path: Path) -> SpecFitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        SpecFitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the file is not valid TOML.
        pydantic.ValidationError: If the configuration values are invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise ConfigError(msg) from exc

    return SpecFitConfig.model_validate(data)


def save_config(config: SpecFitConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.
    """
    data = config.model_dump(mode="json", exclude_none=True, by_alias=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# SpecFit Configuration File
# Generated automatically - edit as needed

# Remove this table to fit the raw (uncorrected) spectrum.
[baseline]
method = "linear"  # linear, polynomial, asls
degree = 2  # polynomial only
# anchor_indices = [0, 250, 499]  # Uncomment to set explicit basis points
lambda = 1e5  # asls only
p = 0.001  # asls only
iterations = 10  # asls only

[detection]
noise_multiplier = 3.0
min_prominence_fraction = 0.05
detect_edges = true

[fitting]
shape = "gaussian"  # gaussian, lorentzian, pseudo_voigt
max_iterations = 200
tolerance = 1e-6

[output]
directory = "Results"
formats = ["csv", "json"]
log_format = "text"  # text or json
"""
