"""Tests for record coercion and the error hierarchy."""

from __future__ import annotations

import math
from pathlib import Path
import sys

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.langindex.records import (
    InvalidRecord,
    LanguageIndexError,
    NotFound,
    Record,
    coerce_record,
    coerce_records,
    to_year,
)


def test_to_year_accepts_integer_like_values() -> None:
    assert to_year(2003) == 2003
    assert to_year(2003.0) == 2003
    assert to_year(np.int64(1995)) == 1995
    assert to_year(" 2011 ") == 2011
    assert to_year("-44") == -44
    assert to_year("+7") == 7
    assert to_year("2003.0") == 2003
    assert to_year(2**63 - 1) == 2**63 - 1
    assert to_year(-(2**63)) == -(2**63)


@pytest.mark.parametrize(
    "value",
    [
        None,
        True,
        "unknown",
        "20.5",
        "2_003",
        "\u0662\u0660\u0660\u0663",
        "1e3",
        "",
        2003.5,
        math.nan,
        2**63,
        -(2**63) - 1,
        1e19,
        "9223372036854775808",
        object(),
    ],
)
def test_to_year_rejects_non_integers(value: object) -> None:
    with pytest.raises(ValueError):
        to_year(value)


def test_coerce_record_from_supported_shapes() -> None:
    expected = Record(year=2012, language="Julia")
    assert coerce_record((2012, "Julia")) == expected
    assert coerce_record([2012.0, "Julia"]) == expected
    assert coerce_record({"year": "2012", "language": "Julia"}) == expected
    assert coerce_record(np.array([2012, "Julia"], dtype=object)) == expected
    assert coerce_record(expected) == expected


@pytest.mark.parametrize(
    "raw",
    [
        ("unknown", "Foo"),
        (2003, ""),
        (2003, None),
        (2003,),
        (2003, "Scala", "extra"),
        {"year": 2003},
        "2003,Scala",
        42,
    ],
)
def test_coerce_record_rejects_malformed_input(raw: object) -> None:
    with pytest.raises(InvalidRecord):
        coerce_record(raw)


def test_coerce_records_reports_position_and_aborts() -> None:
    with pytest.raises(InvalidRecord) as excinfo:
        coerce_records([(2003, "Scala"), (2003, "Groovy"), ("n/a", "Foo")])
    assert excinfo.value.position == 2
    assert excinfo.value.record == ("n/a", "Foo")
    assert "record 2" in str(excinfo.value)


def test_error_hierarchy() -> None:
    assert issubclass(InvalidRecord, ValueError)
    assert issubclass(InvalidRecord, LanguageIndexError)
    assert issubclass(NotFound, KeyError)
    err = NotFound("Python")
    assert err.language == "Python"
    assert "Python" in str(err)


def test_coerce_record_keeps_language_unchanged() -> None:
    assert coerce_record((2000, "Go ")).language == "Go "
    assert coerce_record((2000, " C#")).language == " C#"
    with pytest.raises(InvalidRecord):
        coerce_record((2000, " \t "))
