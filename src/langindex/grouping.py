"""Folds that group ``(year, language)`` records into a year -> languages mapping."""

from __future__ import annotations

from functools import reduce
from typing import Dict, List, Literal, Optional, Sequence, Tuple

from .records import Record

GroupStrategy = Literal["auto", "sequential", "insert"]
YearGroups = Dict[int, List[str]]

_SequentialState = Tuple[YearGroups, Optional[int]]


def is_sorted_by_year(records: Sequence[Record]) -> bool:
    """Return True when years never decrease along ``records``."""
    return all(prev.year <= nxt.year for prev, nxt in zip(records, records[1:]))


def _sequential_step(state: _SequentialState, record: Record) -> _SequentialState:
    groups, current_year = state
    if record.year == current_year:
        groups[record.year].append(record.language)
        return groups, current_year
    if record.year in groups:
        raise ValueError(
            f"Year {record.year} reappears after {current_year}; sequential grouping needs year-sorted records."
        )
    groups[record.year] = [record.language]
    return groups, record.year


def group_sequential(records: Sequence[Record]) -> YearGroups:
    """Single pass over year-sorted records, opening a new group whenever the year changes."""
    groups, _ = reduce(_sequential_step, records, ({}, None))
    return groups


def group_by_insert(records: Sequence[Record]) -> YearGroups:
    """Group records in any order by looking up (or creating) each year's list."""
    groups: YearGroups = {}
    for record in records:
        groups.setdefault(record.year, []).append(record.language)
    return groups


def group_records(records: Sequence[Record], strategy: GroupStrategy = "auto") -> YearGroups:
    """Group ``records`` with the requested strategy; ``auto`` picks sequential for sorted input."""
    if strategy == "auto":
        strategy = "sequential" if is_sorted_by_year(records) else "insert"
    if strategy == "sequential":
        return group_sequential(records)
    if strategy == "insert":
        return group_by_insert(records)
    raise ValueError(f"Unknown grouping strategy '{strategy}'. Available: auto, sequential, insert")


__all__ = [
    "GroupStrategy",
    "YearGroups",
    "group_by_insert",
    "group_records",
    "group_sequential",
    "is_sorted_by_year",
]
