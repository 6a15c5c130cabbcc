"""Cross-check and time the backing representations against each other."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Literal, Optional, Sequence, Tuple

from .backends import BackendKey, YearLanguageIndex
from .records import NotFound, Record, coerce_records
from .backends.base import RecordLike
from .registry import REGISTRY, build_index

QueryName = Literal["year_created", "count_created_in_year"]


@dataclass(frozen=True)
class Disagreement:
    """One probe for which the backends did not return the same answer."""

    query: QueryName
    probe: object
    answers: Dict[BackendKey, Optional[int]]


@dataclass(frozen=True)
class AgreementReport:
    """Outcome of running every probe against every backend."""

    backends: Tuple[BackendKey, ...]
    n_records: int
    n_probes: int
    disagreements: Tuple[Disagreement, ...] = field(default_factory=tuple)

    @property
    def agrees(self) -> bool:
        return not self.disagreements


@dataclass(frozen=True)
class BackendTiming:
    """Best-of-``repeat`` wall-clock timings in seconds."""

    build: float
    year_created: float
    count_created_in_year: float


def _year_or_none(index: YearLanguageIndex, language: str) -> Optional[int]:
    try:
        return index.year_created(language)
    except NotFound:
        return None


def compare_backends(
    records: Iterable[RecordLike],
    languages: Sequence[str] = (),
    years: Sequence[int] = (),
) -> AgreementReport:
    """Build every registered backend and collect probes where their answers differ.

    Probes cover every language and year present in ``records`` plus the extra
    ``languages`` / ``years`` given (useful for absent values).
    """
    coerced = coerce_records(records)
    indexes: Dict[BackendKey, YearLanguageIndex] = {key: build_index(coerced, key) for key in REGISTRY}

    language_probes = list(dict.fromkeys([record.language for record in coerced] + list(languages)))
    year_probes = list(dict.fromkeys([record.year for record in coerced] + list(years)))

    disagreements: List[Disagreement] = []
    for language in language_probes:
        answers = {key: _year_or_none(index, language) for key, index in indexes.items()}
        if len(set(answers.values())) > 1:
            disagreements.append(Disagreement("year_created", language, answers))
    for year in year_probes:
        counts = {key: index.count_created_in_year(year) for key, index in indexes.items()}
        if len(set(counts.values())) > 1:
            disagreements.append(Disagreement("count_created_in_year", year, counts))

    return AgreementReport(
        backends=tuple(indexes),
        n_records=len(coerced),
        n_probes=len(language_probes) + len(year_probes),
        disagreements=tuple(disagreements),
    )


def _best_of(repeat: int, fn) -> float:
    best = float("inf")
    for _ in range(repeat):
        t0 = time.perf_counter()
        fn()
        best = min(best, time.perf_counter() - t0)
    return best


def time_backends(
    records: Iterable[RecordLike],
    language: str,
    year: int,
    repeat: int = 5,
) -> Dict[BackendKey, BackendTiming]:
    """Time construction and both queries for every backend."""
    if repeat <= 0:
        raise ValueError("repeat must be a positive integer.")
    coerced: List[Record] = coerce_records(records)

    timings: Dict[BackendKey, BackendTiming] = {}
    for key in REGISTRY:
        index = build_index(coerced, key)
        timings[key] = BackendTiming(
            build=_best_of(repeat, lambda: build_index(coerced, key)),
            year_created=_best_of(repeat, lambda: _year_or_none(index, language)),
            count_created_in_year=_best_of(repeat, lambda: index.count_created_in_year(year)),
        )
    return timings


__all__ = [
    "AgreementReport",
    "BackendTiming",
    "Disagreement",
    "compare_backends",
    "time_backends",
]
