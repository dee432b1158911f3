"""Reading of two-column spectrum text files.

Accepted input is delimited text with x in the first column and y in the
second. The delimiter is picked from the first line (tab, then semicolon,
then comma). A first line whose first field is not a finite number is
treated as a header and supplies the axis labels. Rows without two finite
numbers are skipped.
"""

from __future__ import annotations

import io
import re
from pathlib import Path

import numpy as np
import pandas as pd

from specfit.core.domain.spectrum import Spectrum
from specfit.core.shared.exceptions import DataIOError

_LINE_SPLIT = re.compile(r"\r?\n")
_DELIMITERS = ("\t", ";")
_DEFAULT_DELIMITER = ","


def detect_delimiter(line: str) -> str:
    """Return the column delimiter used by ``line``."""
    for delimiter in _DELIMITERS:
        if delimiter in line:
            return delimiter
    return _DEFAULT_DELIMITER


def _label(value: object, default: str) -> str:
    if pd.isna(value):
        return default
    return str(value).strip() or default


def _finite(column: pd.Series) -> pd.Series:
    """Parse a text column as floats; anything non-finite becomes NaN."""
    numbers = pd.to_numeric(column.astype(str).str.strip(), errors="coerce").astype(float)
    return numbers.where(np.isfinite(numbers))


def parse_spectrum_text(text: str) -> Spectrum:
    """Parse delimited text into a :class:`Spectrum` sorted by x.

    Args:
        text: File contents; ``\\n`` or ``\\r\\n`` line endings

    Returns
    -------
        Spectrum with points sorted ascending by x (stable for equal x) and
        labels taken from the header, ``"x"``/``"y"`` otherwise.

    Raises
    ------
    DataIOError
        If the text has no non-blank lines or no valid data rows.
    """
    lines = [line for line in _LINE_SPLIT.split(text.strip()) if line.strip()]
    if not lines:
        msg = "Input is empty"
        raise DataIOError(msg)

    delimiter = detect_delimiter(lines[0])
    # Quoted delimiters only overestimate the width; missing fields become NaN
    width = max(2, *(line.count(delimiter) + 1 for line in lines))

    try:
        df = pd.read_csv(
            io.StringIO("\n".join(lines)),
            sep=delimiter,
            header=None,
            names=list(range(width)),
            dtype=str,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.ParserError as exc:
        msg = f"Malformed delimited text: {exc}"
        raise DataIOError(msg) from exc

    values = df[[0, 1]].apply(_finite)

    x_label, y_label = "x", "y"
    if pd.isna(values.iat[0, 0]):
        x_label = _label(df.iat[0, 0], "x")
        y_label = _label(df.iat[0, 1], "y")
        values = values.iloc[1:]

    values = values.dropna().sort_values(by=0, kind="stable")
    if values.empty:
        msg = "No valid data points found"
        raise DataIOError(msg)

    return Spectrum.from_arrays(
        values[0].to_numpy(dtype=float),
        values[1].to_numpy(dtype=float),
        x_label=x_label,
        y_label=y_label,
    )


def load_spectrum(path: Path) -> Spectrum:
    """Read and parse a spectrum file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    DataIOError
        If the file holds no usable data.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Spectrum file not found: {path}"
        raise FileNotFoundError(msg)
    return parse_spectrum_text(path.read_text(encoding="utf-8"))


__all__ = ["detect_delimiter", "load_spectrum", "parse_spectrum_text"]
