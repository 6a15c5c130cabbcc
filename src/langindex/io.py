"""Read and write two-column ``year,language`` delimited files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

import pandas as pd

from .backends.base import RecordLike
from .backends.tabular import records_to_frame
from .config import DEFAULT_DELIMITER, LANGUAGE_COLUMN, YEAR_COLUMN
from .records import InvalidRecord, Record, RecordSourceError, coerce_records


def _resolve_columns(frame: pd.DataFrame, path: Path) -> Tuple[str, str]:
    """Pick the year/language columns by name, falling back to the first two columns."""
    by_name = {str(col).strip().lower(): col for col in frame.columns}
    if YEAR_COLUMN in by_name and LANGUAGE_COLUMN in by_name:
        return by_name[YEAR_COLUMN], by_name[LANGUAGE_COLUMN]
    if len(frame.columns) >= 2:
        return frame.columns[0], frame.columns[1]
    raise RecordSourceError(f"{path}: expected two columns (year, language), found {list(frame.columns)}")


def read_records(
    path: Path,
    *,
    drop_missing: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
) -> List[Record]:
    """Parse a delimited file with a header row into records, in file order.

    Rows with an empty field raise :class:`RecordSourceError` unless
    ``drop_missing`` is set, in which case they are skipped.
    """
    path = Path(path)
    if not path.is_file():
        raise RecordSourceError(f"Record file not found: {path}")
    try:
        raw = pd.read_csv(path, sep=delimiter, dtype=str, skipinitialspace=True)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise RecordSourceError(f"Could not parse {path}: {exc}") from exc

    year_col, language_col = _resolve_columns(raw, path)
    frame = raw[[year_col, language_col]]

    missing = frame.isna().any(axis=1)
    if missing.any():
        n_missing = int(missing.sum())
        if not drop_missing:
            # +2: header row plus one-based line numbers
            first_line = int(missing.to_numpy().nonzero()[0][0]) + 2
            raise RecordSourceError(
                f"{path}: {n_missing} row(s) with missing values (first on line {first_line}); "
                "pass drop_missing=True to skip them."
            )
        frame = frame.loc[~missing]
        print(f"[io] Dropped {n_missing} row(s) with missing values from {path}")

    try:
        records = coerce_records(frame.itertuples(index=False, name=None))
    except InvalidRecord as exc:
        raise RecordSourceError(f"{path}: {exc}") from exc

    print(f"[io] Loaded {len(records)} records from {path}")
    return records


def read_frame(
    path: Path,
    *,
    drop_missing: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
) -> pd.DataFrame:
    """Same as :func:`read_records` but returns the normalized two-column frame."""
    return records_to_frame(read_records(path, drop_missing=drop_missing, delimiter=delimiter))


def write_records(
    records: Iterable[RecordLike],
    path: Path,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> Path:
    """Write records with a ``year,language`` header row."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    records_to_frame(coerce_records(records)).to_csv(path, sep=delimiter, index=False)
    return path


__all__ = ["read_frame", "read_records", "write_records"]
