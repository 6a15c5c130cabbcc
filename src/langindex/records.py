"""Record type, coercion helpers, and the error hierarchy for the language index."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import numpy as np


class LanguageIndexError(Exception):
    """Base class for every error raised by the language index."""


class InvalidRecord(LanguageIndexError, ValueError):
    """Raised when a record cannot be interpreted as ``(year, language)``."""

    def __init__(self, message: str, *, record: Any = None, position: Optional[int] = None) -> None:
        if position is not None:
            message = f"record {position}: {message}"
        super().__init__(message)
        self.record = record
        self.position = position


class NotFound(LanguageIndexError, KeyError):
    """Raised when no record carries the requested language."""

    def __init__(self, language: str) -> None:
        super().__init__(language)
        self.language = language

    def __str__(self) -> str:
        return f"Language {self.language!r} not found."


class RecordSourceError(LanguageIndexError):
    """Raised when a delimited record source cannot be read or parsed."""


@dataclass(frozen=True)
class Record:
    """One ``(year, language)`` observation."""

    year: int
    language: str


_YEAR_TEXT = re.compile(r"(?P<whole>[+-]?[0-9]+)(?:\.0*)?")

# Years must fit the int64 column of the tabular layout.
_YEAR_MIN = int(np.iinfo(np.int64).min)
_YEAR_MAX = int(np.iinfo(np.int64).max)


def _in_range(year: int, value: Any) -> int:
    if not _YEAR_MIN <= year <= _YEAR_MAX:
        raise ValueError(f"Year {value!r} is outside the 64-bit integer range")
    return year


def to_year(value: Any) -> int:
    """Convert integer-like values (ints, integral floats, digit strings) to ``int``.

    Strings must be optionally signed ASCII digits, optionally followed by a
    zero fraction (``"2003"``, ``" -44 "``, ``"2003.0"``).
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        raise ValueError(f"Cannot interpret {value!r} as a year")
    if isinstance(value, (int, np.integer)):
        return _in_range(int(value), value)
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value) or not float(value).is_integer():
            raise ValueError(f"Cannot interpret {value!r} as a year")
        return _in_range(int(value), value)
    if isinstance(value, str):
        match = _YEAR_TEXT.fullmatch(value.strip())
        if match is None:
            raise ValueError(f"Cannot interpret {value!r} as a year")
        return _in_range(int(match.group("whole")), value)
    raise ValueError(f"Cannot interpret {value!r} as a year")


def to_language(value: Any) -> str:
    """Return the language name unchanged, rejecting blank or non-string values."""
    if not isinstance(value, str):
        raise ValueError(f"Language must be a string, received {type(value).__name__}")
    if not value.strip():
        raise ValueError("Language must be a non-empty string")
    return value


def coerce_record(raw: Any, position: Optional[int] = None) -> Record:
    """Interpret ``raw`` as a :class:`Record`.

    Accepts an existing ``Record``, a mapping with ``year``/``language`` keys,
    or any two-element sequence ``(year, language)``.
    """
    if isinstance(raw, Record):
        year_raw, language_raw = raw.year, raw.language
    elif isinstance(raw, Mapping):
        if "year" not in raw or "language" not in raw:
            raise InvalidRecord("mapping needs 'year' and 'language' keys", record=raw, position=position)
        year_raw, language_raw = raw["year"], raw["language"]
    elif isinstance(raw, (Sequence, np.ndarray)) and not isinstance(raw, str):
        if len(raw) != 2:
            raise InvalidRecord(f"expected 2 fields, received {len(raw)}", record=raw, position=position)
        year_raw, language_raw = raw[0], raw[1]
    else:
        raise InvalidRecord(f"unsupported record type {type(raw).__name__}", record=raw, position=position)

    try:
        return Record(year=to_year(year_raw), language=to_language(language_raw))
    except ValueError as exc:
        raise InvalidRecord(str(exc), record=raw, position=position) from exc


def coerce_records(raw_records: Iterable[Any]) -> List[Record]:
    """Coerce every record up front; the first bad record aborts the whole batch."""
    return [coerce_record(raw, position=idx) for idx, raw in enumerate(raw_records)]


__all__ = [
    "InvalidRecord",
    "LanguageIndexError",
    "NotFound",
    "Record",
    "RecordSourceError",
    "coerce_record",
    "coerce_records",
    "to_language",
    "to_year",
]
