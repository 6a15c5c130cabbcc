"""Backend registry for building year -> languages indexes.

Each key names one backing representation. All of them answer
``year_created`` and ``count_created_in_year`` identically for the same
records, so callers pick a backend purely on cost.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Type

from .backends import BackendKey, FlatScanIndex, GroupedIndex, TabularIndex, YearLanguageIndex
from .backends.base import RecordLike

REGISTRY: Dict[BackendKey, Type[Any]] = {
    "flat": FlatScanIndex,
    "tabular": TabularIndex,
    "grouped": GroupedIndex,
}


def get_backend(key: BackendKey) -> Type[Any]:
    """Return the index class registered under ``key``."""
    try:
        return REGISTRY[key]
    except KeyError as exc:
        raise ValueError(f"Unknown index backend '{key}'. Available: {list(REGISTRY)}") from exc


def build_index(
    records: Iterable[RecordLike],
    backend: BackendKey = "grouped",
    **options: Any,
) -> YearLanguageIndex:
    """Build an index over ``records`` with the requested backend.

    Extra keyword options are forwarded to the backend's ``build`` (for example
    ``strategy`` for the grouped backend).
    """
    return get_backend(backend).build(records, **options)


__all__ = ["REGISTRY", "build_index", "get_backend"]
