"""
Interactive menu over the customer ledger.

A thin dispatcher: each numbered option prompts for what it needs and calls the
core operations. Failures are reported and the loop carries on; only the exit
option ends it. A blank answer to any prompt skips the current operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import typer

from customer_usage.config import Settings, get_settings
from customer_usage.domain.models import Customer, CustomerFactory, LoadStatus
from customer_usage.errors import CustomerDataError
from customer_usage.pipeline import process_customers, write_report
from customer_usage.processing.search import find_by_id
from customer_usage.reporter import print_customers, print_diagnostics
from customer_usage.storage.binary import load_binary, save_binary
from customer_usage.storage.text_source import append_customer, load_customers, parse_row
from customer_usage.utils.logging import get_logger

log = get_logger(__name__)

EXIT_CHOICE = "0"


@dataclass
class MenuSession:
    """State shared by menu actions: the backing source and the working sequence."""

    source: Path
    settings: Settings
    customers: List[Customer] = field(default_factory=list)


def _ask(label: str, strip: bool = True) -> str:
    answer = typer.prompt(label, default="", show_default=False)
    return answer.strip() if strip else answer


def reload_source(session: MenuSession) -> None:
    result = load_customers(session.source)
    if result.status is LoadStatus.FAILED:
        typer.echo(f"Could not load {session.source}: {result.error}", err=True)
        return
    print_diagnostics(result.diagnostics)
    session.customers = result.records
    typer.echo(f"Loaded {len(session.customers)} customer(s) from {session.source}.")


def add_customer(session: MenuSession) -> None:
    raw_id = _ask("Customer ID (blank to cancel)")
    if not raw_id:
        typer.echo("Cancelled.")
        return
    name = _ask("Name", strip=False)
    address = _ask("Address", strip=False)
    raw_usage = _ask("Water usage (m3)")
    try:
        customer = parse_row([raw_id, name, address, raw_usage], CustomerFactory())
    except ValueError as exc:
        typer.echo(f"Invalid customer: {exc}", err=True)
        return
    append_customer(session.source, customer.id, customer.name, customer.address, customer.usage)
    typer.echo(f"Customer {customer.id} added to {session.source}. Reload to include it in the list.")


def view_customers(session: MenuSession) -> None:
    print_customers(
        session.customers,
        title=f"Customers ({session.source})",
        threshold=session.settings.usage_threshold,
    )


def sort_and_filter(session: MenuSession) -> None:
    threshold = session.settings.usage_threshold
    processed = process_customers(session.customers, threshold)
    print_customers(
        processed,
        title=f"Customers using at least {threshold:g} m3",
        caption="Sorted by usage (descending)",
    )
    path = _ask(f"Report file (blank to skip, e.g. {session.settings.report_file})")
    if path:
        count = write_report(processed, path)
        typer.echo(f"Wrote {count} customer(s) to {path}.")


def save_to_binary(session: MenuSession) -> None:
    path = _ask(f"Binary file (blank to cancel, e.g. {session.settings.binary_file})")
    if not path:
        typer.echo("Cancelled.")
        return
    count = save_binary(session.customers, path)
    typer.echo(f"Saved {count} customer(s) to {path}.")


def load_from_binary(session: MenuSession) -> None:
    path = _ask(f"Binary file (blank to cancel, e.g. {session.settings.binary_file})")
    if not path:
        typer.echo("Cancelled.")
        return
    session.customers = load_binary(path)
    typer.echo(f"Loaded {len(session.customers)} customer(s) from {path}.")


def search_customer(session: MenuSession) -> None:
    raw_id = _ask("Customer ID to find (blank to cancel)")
    if not raw_id:
        typer.echo("Cancelled.")
        return
    try:
        customer_id = int(raw_id)
    except ValueError:
        typer.echo(f"Invalid customer ID {raw_id!r}.", err=True)
        return
    customer = find_by_id(session.customers, customer_id)
    if customer is None:
        typer.echo(f"No customer found with ID {customer_id}.")
    else:
        typer.echo(f"Found: {customer.full_form()}")


def open_source(session: MenuSession) -> None:
    if not session.source.exists():
        typer.echo(f"{session.source} does not exist.", err=True)
        return
    typer.launch(str(session.source))


MenuAction = Callable[[MenuSession], None]

MENU_OPTIONS: Dict[str, Tuple[str, MenuAction]] = {
    "1": ("Add customer", add_customer),
    "2": ("View customers", view_customers),
    "3": ("Sort and filter by usage", sort_and_filter),
    "4": ("Save customers to binary file", save_to_binary),
    "5": ("Load customers from binary file", load_from_binary),
    "6": ("Search customer by ID", search_customer),
    "7": ("Open data file", open_source),
    "8": ("Reload data file", reload_source),
}


def _print_options() -> None:
    typer.echo("")
    typer.echo("===== Customer Menu =====")
    for key, (label, _) in MENU_OPTIONS.items():
        typer.echo(f"{key}. {label}")
    typer.echo(f"{EXIT_CHOICE}. Exit")


def dispatch(session: MenuSession, choice: str) -> bool:
    """
    Run the action for `choice`. Returns False once the operator chose to exit.
    """
    choice = choice.strip()
    if choice == EXIT_CHOICE:
        return False
    option = MENU_OPTIONS.get(choice)
    if option is None:
        typer.echo(f"Invalid selection {choice!r}; choose 0-{len(MENU_OPTIONS)}.", err=True)
        return True
    label, action = option
    try:
        action(session)
    except CustomerDataError as exc:
        log.warning(f"{label} failed: {exc}", extra={"action": label})
        typer.echo(f"Error: {exc}", err=True)
    return True


def run_menu(source: Path | str | None = None, settings: Optional[Settings] = None) -> MenuSession:
    """Load the backing source and loop over the menu until the operator exits."""
    settings = settings or get_settings()
    session = MenuSession(source=Path(source or settings.data_file), settings=settings)
    reload_source(session)
    while True:
        _print_options()
        if not dispatch(session, typer.prompt("Select an option", default="", show_default=False)):
            break
    typer.echo("Goodbye.")
    return session


__all__ = ["MENU_OPTIONS", "MenuSession", "dispatch", "run_menu"]
