"""Tests for the Typer command-line entry point."""

from __future__ import annotations

from pathlib import Path
import sys
from types import SimpleNamespace

import pytest
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import main
from main import app

runner = CliRunner()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "programming_languages.csv"
    path.write_text(
        "year,language\n1991,Python\n1995,Java\n1995,Ruby\n2003,Scala\n2003,Groovy\n2012,Julia\n",
        encoding="utf-8",
    )
    return path


def _last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


@pytest.mark.parametrize("backend", ["flat", "tabular", "grouped"])
def test_year_created(data_file: Path, backend: str) -> None:
    result = runner.invoke(app, ["year-created", "Julia", "--data", str(data_file), "--backend", backend])
    assert result.exit_code == 0, result.output
    assert _last_line(result.output) == "2012"


def test_year_created_not_found(data_file: Path) -> None:
    result = runner.invoke(app, ["year-created", "Elixir", "--data", str(data_file)])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_unknown_backend(data_file: Path) -> None:
    result = runner.invoke(app, ["year-created", "Julia", "--data", str(data_file), "--backend", "btree"])
    assert result.exit_code == 2


def test_count(data_file: Path) -> None:
    result = runner.invoke(app, ["count", "1995", "--data", str(data_file)])
    assert result.exit_code == 0, result.output
    assert _last_line(result.output) == "2"

    result = runner.invoke(app, ["count", "1990", "--data", str(data_file), "--backend", "flat"])
    assert _last_line(result.output) == "0"


def test_missing_data_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["count", "1995", "--data", str(tmp_path / "missing.csv")])
    assert result.exit_code == 2


def test_drop_missing_flag(tmp_path: Path) -> None:
    path = tmp_path / "gappy.csv"
    path.write_text("year,language\n2003,Scala\n,Groovy\n", encoding="utf-8")

    result = runner.invoke(app, ["count", "2003", "--data", str(path)])
    assert result.exit_code == 2

    result = runner.invoke(app, ["count", "2003", "--data", str(path), "--drop-missing"])
    assert result.exit_code == 0, result.output
    assert _last_line(result.output) == "1"


def test_summary(data_file: Path) -> None:
    result = runner.invoke(app, ["summary", "--data", str(data_file), "--top", "2"])
    assert result.exit_code == 0, result.output
    assert "records: 6" in result.output
    assert "years: 4" in result.output
    assert "1995: 2" in result.output


def test_compare(data_file: Path) -> None:
    result = runner.invoke(app, ["compare", "--data", str(data_file)])
    assert result.exit_code == 0, result.output
    assert "All backends agree." in result.output


def test_benchmark(data_file: Path) -> None:
    result = runner.invoke(app, ["benchmark", "Julia", "2003", "--data", str(data_file), "--repeat", "1"])
    assert result.exit_code == 0, result.output
    for key in ("flat", "tabular", "grouped"):
        assert key in result.output


def test_pick(data_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_fuzzy(message: str, choices: list) -> SimpleNamespace:
        seen["choices"] = choices
        return SimpleNamespace(execute=lambda: "Scala")

    monkeypatch.setattr(main, "inquirer", SimpleNamespace(fuzzy=fake_fuzzy))
    result = runner.invoke(app, ["pick", "--data", str(data_file)])
    assert result.exit_code == 0, result.output
    assert _last_line(result.output) == "Scala: 2003"
    assert seen["choices"] == ["Python", "Java", "Ruby", "Scala", "Groovy", "Julia"]


def test_pick_cancelled(data_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def cancelled_fuzzy(message: str, choices: list) -> SimpleNamespace:
        return SimpleNamespace(execute=lambda: None)

    monkeypatch.setattr(main, "inquirer", SimpleNamespace(fuzzy=cancelled_fuzzy))
    result = runner.invoke(app, ["pick", "--data", str(data_file)])
    assert result.exit_code == 1
    assert "No language selected." in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
