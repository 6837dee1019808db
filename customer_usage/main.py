from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer

from customer_usage.config import get_settings
from customer_usage.domain.models import LoadResult, LoadStatus
from customer_usage.errors import CustomerDataError
from customer_usage.menu import run_menu
from customer_usage.pipeline import run_pipeline
from customer_usage.processing.search import find_by_id
from customer_usage.reporter import print_customers, print_diagnostics
from customer_usage.storage.binary import load_binary, save_binary
from customer_usage.storage.text_source import append_customer, export_customers, load_customers
from customer_usage.utils.logging import configure_logging

app = typer.Typer(help="Customer water usage ledger CLI.")

SOURCE_OPTION_HELP = "Backing source CSV (default from settings)."


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def _source(source: Optional[Path]) -> Path:
    return source or Path(get_settings().data_file)


def _load_or_fail(source: Path) -> LoadResult:
    result = load_customers(source)
    if result.status is LoadStatus.FAILED:
        typer.echo(f"Error: could not load {source}: {result.error}", err=True)
        raise typer.Exit(code=1)
    print_diagnostics(result.diagnostics)
    return result


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"data={settings.data_file} | report={settings.report_file} | "
        f"export={settings.export_file} | binary={settings.binary_file} | "
        f"threshold={settings.usage_threshold:g}"
    )


@app.command()
def view(
    source: Optional[Path] = typer.Option(None, "--source", "-s", help=SOURCE_OPTION_HELP),
) -> None:
    """
    Show every customer in file order.
    """
    path = _source(source)
    result = _load_or_fail(path)
    print_customers(
        result.records,
        title=f"Customers ({path})",
        threshold=get_settings().usage_threshold,
    )


@app.command()
def add(
    customer_id: int = typer.Argument(..., help="Customer identifier."),
    name: str = typer.Argument(..., help="Customer name."),
    address: str = typer.Argument(..., help="Customer address."),
    usage: float = typer.Argument(..., help="Water usage in cubic meters."),
    source: Optional[Path] = typer.Option(None, "--source", "-s", help=SOURCE_OPTION_HELP),
) -> None:
    """
    Append one customer to the backing source.
    """
    path = _source(source)
    try:
        append_customer(path, customer_id, name, address, usage)
    except CustomerDataError as exc:
        _fail(exc)
    typer.echo(f"Customer {customer_id} added to {path}.")


@app.command()
def process(
    source: Optional[Path] = typer.Option(None, "--source", "-s", help=SOURCE_OPTION_HELP),
    report: Optional[Path] = typer.Option(
        None,
        "--report",
        "-r",
        help="Processed report destination (default from settings).",
    ),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        "-t",
        help="Qualifying usage in m3 (default from settings).",
    ),
) -> None:
    """
    Sort customers by usage, keep those at or above the threshold and write the report.
    """
    path = _source(source)
    try:
        result = run_pipeline(path, report_path=report, threshold=threshold)
    except CustomerDataError as exc:
        _fail(exc)
    if result.load.status is LoadStatus.FAILED:
        typer.echo(f"Error: could not load {path}: {result.load.error}", err=True)
        raise typer.Exit(code=1)
    print_diagnostics(result.load.diagnostics)
    print_customers(
        result.processed,
        title="Processed Customer Data",
        caption="Sorted by usage (descending)",
    )
    typer.echo(f"Report written to {result.report_path} ({len(result.processed)} customer(s)).")


@app.command()
def search(
    customer_id: int = typer.Argument(..., help="Customer identifier to find."),
    source: Optional[Path] = typer.Option(None, "--source", "-s", help=SOURCE_OPTION_HELP),
) -> None:
    """
    Show the first customer with the given ID.
    """
    result = _load_or_fail(_source(source))
    customer = find_by_id(result.records, customer_id)
    if customer is None:
        typer.echo(f"No customer found with ID {customer_id}.")
        return
    typer.echo(customer.full_form())


@app.command()
def export(
    source: Optional[Path] = typer.Option(None, "--source", "-s", help=SOURCE_OPTION_HELP),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Text export destination (default from settings).",
    ),
) -> None:
    """
    Rewrite the loaded customers to a text file in backing-source format.
    """
    result = _load_or_fail(_source(source))
    destination = output or Path(get_settings().export_file)
    try:
        count = export_customers(result.records, destination)
    except CustomerDataError as exc:
        _fail(exc)
    typer.echo(f"Exported {count} customer(s) to {destination}.")


@app.command("save-binary")
def save_binary_command(
    source: Optional[Path] = typer.Option(None, "--source", "-s", help=SOURCE_OPTION_HELP),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Binary destination (default from settings).",
    ),
) -> None:
    """
    Persist the loaded customers to a binary file.
    """
    result = _load_or_fail(_source(source))
    destination = output or Path(get_settings().binary_file)
    try:
        count = save_binary(result.records, destination)
    except CustomerDataError as exc:
        _fail(exc)
    typer.echo(f"Saved {count} customer(s) to {destination}.")


@app.command("load-binary")
def load_binary_command(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Binary file to read (default from settings).",
    ),
) -> None:
    """
    Show the customers persisted in a binary file.
    """
    path = input_path or Path(get_settings().binary_file)
    try:
        customers = load_binary(path)
    except CustomerDataError as exc:
        _fail(exc)
    print_customers(
        customers,
        title=f"Customers ({path})",
        threshold=get_settings().usage_threshold,
    )


@app.command("open")
def open_command(
    source: Optional[Path] = typer.Option(None, "--source", "-s", help=SOURCE_OPTION_HELP),
) -> None:
    """
    Open the backing source in the default application.
    """
    path = _source(source)
    if not path.exists():
        typer.echo(f"Error: {path} does not exist.", err=True)
        raise typer.Exit(code=1)
    typer.launch(str(path))


@app.command()
def menu(
    source: Optional[Path] = typer.Option(None, "--source", "-s", help=SOURCE_OPTION_HELP),
) -> None:
    """
    Start the interactive menu.
    """
    run_menu(_source(source))


def main() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
