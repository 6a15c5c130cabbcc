"""Static defaults for record files and index construction."""

from __future__ import annotations

from pathlib import Path

# Default location used by the Typer CLI; callers may override it.
DEFAULT_DATA_PATH = Path("data/programming_languages.csv")

# ---------------------------------------------------------------------------
# Column layout of the two-column record files.

YEAR_COLUMN = "year"
LANGUAGE_COLUMN = "language"
DEFAULT_DELIMITER = ","

DEFAULT_BACKEND = "grouped"


__all__ = [
    "DEFAULT_BACKEND",
    "DEFAULT_DATA_PATH",
    "DEFAULT_DELIMITER",
    "LANGUAGE_COLUMN",
    "YEAR_COLUMN",
]
