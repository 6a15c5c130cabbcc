"""Common index interface and shared typing aliases."""

from __future__ import annotations

from typing import Any, Iterable, List, Literal, Protocol, Type, TypeVar

from ..records import Record

BackendKey = Literal["flat", "tabular", "grouped"]
RecordLike = Any

IndexT = TypeVar("IndexT", bound="YearLanguageIndex")


class YearLanguageIndex(Protocol):
    """Protocol describing the query surface shared by every backing representation."""

    @classmethod
    def build(cls: Type[IndexT], records: Iterable[RecordLike]) -> IndexT: ...

    def year_created(self, language: str) -> int: ...

    def count_created_in_year(self, year: int) -> int: ...

    def add(self, record: RecordLike) -> None: ...

    def to_records(self) -> List[Record]: ...

    def languages(self) -> List[str]: ...

    def __len__(self) -> int: ...


def first_occurrences(languages: Iterable[str]) -> List[str]:
    """Distinct names in first-occurrence order."""
    return list(dict.fromkeys(languages))


__all__ = ["BackendKey", "RecordLike", "YearLanguageIndex", "first_occurrences"]
