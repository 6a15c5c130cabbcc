from collections import Counter
from pathlib import Path
from typing import List

import typer
from InquirerPy import inquirer

from src.langindex import (
    LanguageIndexError,
    NotFound,
    Record,
    build_index,
    compare_backends,
    read_records,
    time_backends,
)
from src.langindex.config import DEFAULT_BACKEND, DEFAULT_DATA_PATH

app = typer.Typer()

DATA_OPTION = typer.Option(
    DEFAULT_DATA_PATH,
    "--data",
    exists=False,
    file_okay=True,
    dir_okay=False,
    help="Two-column year,language CSV file with a header row.",
)


def _load(data: Path, drop_missing: bool = False) -> List[Record]:
    try:
        return read_records(data, drop_missing=drop_missing)
    except LanguageIndexError as exc:
        raise typer.BadParameter(str(exc), param_hint="--data") from exc


def _build(records: List[Record], backend: str):
    try:
        return build_index(records, backend)  # type: ignore[arg-type]
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--backend") from exc


@app.command("year-created")
def year_created(
    language: str = typer.Argument(..., help="Exact, case-sensitive language name."),
    data: Path = DATA_OPTION,
    backend: str = typer.Option(DEFAULT_BACKEND, "--backend", help="flat, tabular or grouped."),
    drop_missing: bool = typer.Option(False, "--drop-missing", help="Skip rows with empty fields."),
) -> None:
    """
    Print the year the given language was created.
    """
    index = _build(_load(data, drop_missing), backend)
    try:
        year = index.year_created(language)
    except NotFound as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(year)


@app.command("count")
def count(
    year: int = typer.Argument(..., help="Year to count languages for."),
    data: Path = DATA_OPTION,
    backend: str = typer.Option(DEFAULT_BACKEND, "--backend", help="flat, tabular or grouped."),
    drop_missing: bool = typer.Option(False, "--drop-missing", help="Skip rows with empty fields."),
) -> None:
    """
    Print how many languages were created in the given year.
    """
    index = _build(_load(data, drop_missing), backend)
    typer.echo(index.count_created_in_year(year))


@app.command()
def summary(
    data: Path = DATA_OPTION,
    top: int = typer.Option(5, "--top", help="Number of busiest years to list."),
    drop_missing: bool = typer.Option(False, "--drop-missing", help="Skip rows with empty fields."),
) -> None:
    records = _load(data, drop_missing)
    per_year = Counter(record.year for record in records)
    typer.echo(f"records: {len(records)}")
    typer.echo(f"years: {len(per_year)}")
    for year, n in per_year.most_common(top):
        typer.echo(f"{year}: {n}")


@app.command()
def compare(
    data: Path = DATA_OPTION,
    drop_missing: bool = typer.Option(False, "--drop-missing", help="Skip rows with empty fields."),
) -> None:
    """
    Check that every backend answers every probe identically.
    """
    report = compare_backends(_load(data, drop_missing))
    print(f"[index] Compared {', '.join(report.backends)} on {report.n_probes} probes ({report.n_records} records).")
    if report.agrees:
        typer.echo("All backends agree.")
        return
    for item in report.disagreements:
        typer.echo(f"{item.query}({item.probe!r}): {item.answers}")
    raise typer.Exit(code=1)


@app.command()
def benchmark(
    language: str = typer.Argument(..., help="Language to look up."),
    year: int = typer.Argument(..., help="Year to count."),
    data: Path = DATA_OPTION,
    repeat: int = typer.Option(5, "--repeat", min=1, help="Runs per measurement; the best is kept."),
) -> None:
    timings = time_backends(_load(data), language, year, repeat=repeat)
    for key, timing in timings.items():
        typer.echo(
            f"{key:<8} build={timing.build * 1e6:9.1f}us  "
            f"year_created={timing.year_created * 1e6:9.1f}us  "
            f"count={timing.count_created_in_year * 1e6:9.1f}us"
        )


@app.command()
def pick(data: Path = DATA_OPTION):
    """
    Fuzzy-pick a language interactively and print its year.
    """
    index = build_index(_load(data), "grouped")
    choice = inquirer.fuzzy(message="Language:", choices=index.languages()).execute()
    if choice is None:
        typer.echo("No language selected.", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{choice}: {index.year_created(choice)}")


if __name__ == "__main__":
    app()
