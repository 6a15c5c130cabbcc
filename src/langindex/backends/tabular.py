"""Tabular backend: records held as parallel ``year`` / ``language`` DataFrame columns."""

from __future__ import annotations

from typing import Iterable, List, Sequence

import pandas as pd

from ..config import LANGUAGE_COLUMN, YEAR_COLUMN
from ..records import NotFound, Record, RecordSourceError, coerce_record, coerce_records
from .base import RecordLike, first_occurrences


def records_to_frame(records: Sequence[Record]) -> pd.DataFrame:
    """Lay records out as an ``int64`` year column and an ``object`` language column."""
    return pd.DataFrame(
        {
            YEAR_COLUMN: pd.Series([record.year for record in records], dtype="int64"),
            LANGUAGE_COLUMN: pd.Series([record.language for record in records], dtype=object),
        }
    )


class TabularIndex:
    """Answer queries by filtering the language column or mask-counting the year column."""

    def __init__(self, frame: pd.DataFrame) -> None:
        self._frame = frame.reset_index(drop=True)

    @classmethod
    def build(cls, records: Iterable[RecordLike]) -> "TabularIndex":
        return cls(records_to_frame(coerce_records(records)))

    @classmethod
    def from_frame(cls, frame: pd.DataFrame) -> "TabularIndex":
        """Build from any frame carrying ``year`` and ``language`` columns."""
        missing = [col for col in (YEAR_COLUMN, LANGUAGE_COLUMN) if col not in frame.columns]
        if missing:
            raise RecordSourceError(f"Frame is missing column(s): {', '.join(missing)}")
        rows = frame[[YEAR_COLUMN, LANGUAGE_COLUMN]].itertuples(index=False, name=None)
        return cls.build(rows)

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    def year_created(self, language: str) -> int:
        matches = self._frame.loc[self._frame[LANGUAGE_COLUMN] == language, YEAR_COLUMN]
        if matches.empty:
            raise NotFound(language)
        return int(matches.iloc[0])

    def count_created_in_year(self, year: int) -> int:
        return int((self._frame[YEAR_COLUMN] == year).sum())

    def add(self, record: RecordLike) -> None:
        row = records_to_frame([coerce_record(record, position=len(self))])
        if self._frame.empty:
            self._frame = row
        else:
            self._frame = pd.concat([self._frame, row], ignore_index=True)

    def to_records(self) -> List[Record]:
        return [
            Record(year=int(year), language=str(language))
            for year, language in self._frame[[YEAR_COLUMN, LANGUAGE_COLUMN]].itertuples(index=False, name=None)
        ]

    def languages(self) -> List[str]:
        return first_occurrences(self._frame[LANGUAGE_COLUMN].astype(str))

    def __len__(self) -> int:
        return len(self._frame)


__all__ = ["TabularIndex", "records_to_frame"]
