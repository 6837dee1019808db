"""
Sample data generation script for the customer water usage ledger.

Writes a deterministic pseudo-random backing source (header + customers) that
the CLI and the menu can load.
"""

from __future__ import annotations

import random
import sys
import time
from pathlib import Path
from typing import List

import typer

from customer_usage.domain.models import Customer, CustomerFactory
from customer_usage.storage.text_source import export_customers

app = typer.Typer(help="Generate a synthetic customer backing source (CSV).")

NAMES = ["Henrie", "joe", "lorem", "ipsum", "Mwila", "Chanda", "Bupe", "Natasha", "Kondwani"]
ADDRESSES = ["Makeni", "kafue", "lsk", "kabwe", "Ndola", "Kitwe", "Chipata", "Livingstone"]


def _generate_customers(rows: int, seed: int, max_usage: float = 60.0) -> List[Customer]:
    rng = random.Random(seed)
    factory = CustomerFactory()
    return [
        factory.create(
            rng.randint(2000, 2999),
            rng.choice(NAMES),
            rng.choice(ADDRESSES),
            round(rng.uniform(0, max_usage), 1),
        )
        for _ in range(rows)
    ]


def _generate_rows_csv(csv_path: Path, rows: int, seed: int) -> int:
    return export_customers(_generate_customers(rows, seed), csv_path)


@app.command()
def main(
    rows: int = typer.Option(
        20,
        "--rows",
        "-r",
        help="Number of customers to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("customer.csv"),
        "--output",
        "-o",
        help="CSV output path.",
    ),
) -> None:
    """
    Generate synthetic customers and write them as a backing source.
    """
    start = time.perf_counter()
    output.parent.mkdir(parents=True, exist_ok=True)

    typer.echo(f"Generating {rows:,} customers -> {output} (seed={seed})")
    written = _generate_rows_csv(output, rows=rows, seed=seed)
    typer.echo(f"Wrote {written:,} customers in {time.perf_counter() - start:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
