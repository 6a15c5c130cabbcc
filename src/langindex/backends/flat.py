"""Flat-scan backend: records kept as a raw ``n x 2`` matrix with no precomputed structure."""

from __future__ import annotations

from typing import Iterable, List, Sequence

import numpy as np

from ..records import NotFound, Record, coerce_record, coerce_records
from .base import RecordLike, first_occurrences


def _to_matrix(records: Sequence[Record]) -> np.ndarray:
    matrix = np.empty((len(records), 2), dtype=object)
    matrix[:, 0] = [record.year for record in records]
    matrix[:, 1] = [record.language for record in records]
    return matrix


class FlatScanIndex:
    """Answer both queries by scanning the columns of a delimited-file style matrix."""

    def __init__(self, matrix: np.ndarray) -> None:
        if matrix.ndim != 2 or matrix.shape[1] != 2:
            raise ValueError(f"Expected an (n, 2) matrix, received shape {matrix.shape}")
        self._matrix = matrix

    @classmethod
    def build(cls, records: Iterable[RecordLike]) -> "FlatScanIndex":
        return cls(_to_matrix(coerce_records(records)))

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> "FlatScanIndex":
        """Build from a raw matrix such as one read with ``np.genfromtxt(..., dtype=object)``."""
        return cls.build(list(np.asarray(matrix, dtype=object)))

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    def year_created(self, language: str) -> int:
        hits = np.flatnonzero(self._matrix[:, 1] == language)
        if hits.size == 0:
            raise NotFound(language)
        return int(self._matrix[hits[0], 0])

    def count_created_in_year(self, year: int) -> int:
        return int(np.count_nonzero(self._matrix[:, 0] == year))

    def add(self, record: RecordLike) -> None:
        row = _to_matrix([coerce_record(record, position=len(self))])
        self._matrix = np.vstack([self._matrix, row])

    def to_records(self) -> List[Record]:
        return [Record(year=int(year), language=str(language)) for year, language in self._matrix]

    def languages(self) -> List[str]:
        return first_occurrences(str(language) for language in self._matrix[:, 1])

    def __len__(self) -> int:
        return int(self._matrix.shape[0])


__all__ = ["FlatScanIndex"]
