"""Grouped backend: the year -> languages mapping precomputed once at construction."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from ..grouping import GroupStrategy, YearGroups, group_records
from ..records import NotFound, Record, coerce_record, coerce_records
from .base import RecordLike


def _first_years(records: Sequence[Record]) -> Dict[str, int]:
    first: Dict[str, int] = {}
    for record in records:
        first.setdefault(record.language, record.year)
    return first


class GroupedIndex:
    """Year-keyed mapping with an O(1) count and a language -> first-year reverse lookup.

    The reverse lookup keeps the year of the first record (in input order) for
    each language, so a language filed under two years resolves the same way
    as a linear scan would.
    """

    def __init__(self, groups: YearGroups, first_years: Dict[str, int]) -> None:
        self._groups = groups
        self._first_years = first_years

    @classmethod
    def build(cls, records: Iterable[RecordLike], strategy: GroupStrategy = "auto") -> "GroupedIndex":
        coerced = coerce_records(records)
        return cls(group_records(coerced, strategy=strategy), _first_years(coerced))

    def year_created(self, language: str) -> int:
        try:
            return self._first_years[language]
        except KeyError:
            raise NotFound(language) from None

    def count_created_in_year(self, year: int) -> int:
        return len(self._groups.get(year, ()))

    def add(self, record: RecordLike) -> None:
        coerced = coerce_record(record, position=len(self))
        self._groups.setdefault(coerced.year, []).append(coerced.language)
        self._first_years.setdefault(coerced.language, coerced.year)

    def grouped(self) -> YearGroups:
        """Copy of the year -> languages mapping."""
        return {year: list(names) for year, names in self._groups.items()}

    def years(self) -> List[int]:
        return list(self._groups)

    def to_records(self) -> List[Record]:
        # Grouped layout only keeps input order within a year.
        return [Record(year=year, language=name) for year, names in self._groups.items() for name in names]

    def languages(self) -> List[str]:
        return list(self._first_years)

    def __len__(self) -> int:
        return sum(len(names) for names in self._groups.values())


__all__ = ["GroupedIndex"]
