from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from customer_usage.domain.models import Customer, LineDiagnostic


def build_customer_table(
    customers: Iterable[Customer],
    title: str = "Customers",
    caption: Optional[str] = None,
    threshold: Optional[float] = None,
) -> Table:
    """
    Build a rich table with one row per customer, in the given order.

    When `threshold` is set, usage figures at or above it are highlighted.
    """
    table = Table(title=title, box=box.ROUNDED, caption=caption)

    table.add_column("ID", justify="right", style="cyan", no_wrap=True)
    table.add_column("Name", style="magenta")
    table.add_column("Address")
    table.add_column("Usage (m3)", justify="right", style="green")

    for customer in customers:
        usage_str = f"{customer.usage:.1f}"
        if threshold is not None and customer.usage >= threshold:
            usage_str = f"[bold red]{usage_str}[/bold red]"
        table.add_row(str(customer.id), escape(customer.name), escape(customer.address), usage_str)

    return table


def print_customers(
    customers: Sequence[Customer],
    title: str = "Customers",
    caption: Optional[str] = None,
    threshold: Optional[float] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render customers as a rich table.
    """
    console = console or Console()

    if not customers:
        console.print("[yellow]No customers to display.[/yellow]")
        return

    console.print(build_customer_table(customers, title=title, caption=caption, threshold=threshold))


def print_diagnostics(diagnostics: Sequence[LineDiagnostic], console: Optional[Console] = None) -> None:
    """List skipped backing-source lines, if any."""
    if not diagnostics:
        return
    console = console or Console()
    console.print(f"[yellow]Skipped {len(diagnostics)} malformed line(s):[/yellow]")
    for diagnostic in diagnostics:
        console.print(f"  line {diagnostic.line_number}: {diagnostic.message}", markup=False)


__all__ = ["build_customer_table", "print_customers", "print_diagnostics"]
