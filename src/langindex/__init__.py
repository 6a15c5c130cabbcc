"""Year -> languages index with interchangeable backing representations."""

from .backends import FlatScanIndex, GroupedIndex, TabularIndex, YearLanguageIndex
from .compare import AgreementReport, compare_backends, time_backends
from .grouping import group_by_insert, group_records, group_sequential
from .io import read_frame, read_records, write_records
from .records import InvalidRecord, LanguageIndexError, NotFound, Record, RecordSourceError
from .registry import build_index, get_backend

__all__ = [
    "AgreementReport",
    "FlatScanIndex",
    "GroupedIndex",
    "InvalidRecord",
    "LanguageIndexError",
    "NotFound",
    "Record",
    "RecordSourceError",
    "TabularIndex",
    "YearLanguageIndex",
    "build_index",
    "compare_backends",
    "get_backend",
    "group_by_insert",
    "group_records",
    "group_sequential",
    "read_frame",
    "read_records",
    "time_backends",
    "write_records",
]
