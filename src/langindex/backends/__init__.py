"""Backing representations for the year -> languages index."""

from .base import BackendKey, RecordLike, YearLanguageIndex
from .flat import FlatScanIndex
from .grouped import GroupedIndex
from .tabular import TabularIndex, records_to_frame

__all__ = [
    "BackendKey",
    "RecordLike",
    "YearLanguageIndex",
    "FlatScanIndex",
    "GroupedIndex",
    "TabularIndex",
    "records_to_frame",
]
