"""
Backing-source (delimited text) access: load, append and export.

The backing source is a comma-delimited file whose first line is a header:

    ID,Name,Address,Usage
    2023,Henrie,Makeni,30.5

Writers quote a field only when it contains a comma, a quote or a newline,
and the loader honours that quoting. Unquoted files read exactly as a plain
split on commas would. Every physical line is one record: quoted fields
spanning several lines are not supported.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from customer_usage.domain.models import (
    Customer,
    CustomerFactory,
    LineDiagnostic,
    LoadResult,
    LoadStatus,
)
from customer_usage.errors import DestinationNotWritableError
from customer_usage.utils.logging import get_logger

log = get_logger(__name__)

HEADER = ("ID", "Name", "Address", "Usage")
FIELD_COUNT = len(HEADER)


def _writer(handle):
    return csv.writer(handle, delimiter=",", lineterminator="\n", quoting=csv.QUOTE_MINIMAL)


def parse_row(row: Sequence[str], factory: CustomerFactory) -> Customer:
    """
    Turn one split line into a Customer.

    Raises ValueError for a wrong field count or a non-numeric id/usage.
    """
    if len(row) != FIELD_COUNT:
        raise ValueError(f"expected {FIELD_COUNT} fields, got {len(row)}")
    raw_id, name, address, raw_usage = row
    try:
        customer_id = int(raw_id)
    except ValueError:
        raise ValueError(f"non-numeric id {raw_id!r}") from None
    try:
        usage = float(raw_usage)
    except ValueError:
        raise ValueError(f"non-numeric usage {raw_usage!r}") from None
    return factory.create(customer_id, name, address, usage)


def _skip_line(
    diagnostics: List[LineDiagnostic], source: Path, line_number: int, message: str, raw: str
) -> None:
    diagnostics.append(LineDiagnostic(line_number=line_number, message=message, raw=raw))
    log.warning(
        f"Skipping malformed line {line_number} in {source}: {message}",
        extra={"source": str(source), "line_number": line_number},
    )


def load_customers(path: Path | str, factory: Optional[CustomerFactory] = None) -> LoadResult:
    """
    Load the backing source into an ordered list of customers.

    The first line is always discarded as a header. Each physical line is
    decoded and split on its own, so a malformed line (bad field count,
    non-numeric id/usage, unbalanced quote, invalid UTF-8) costs only itself:
    it is reported in `LoadResult.diagnostics` and loading carries on with the
    next line. A missing or unreadable source yields a FAILED result with no
    records. Never raises for data or I/O problems.
    """
    source = Path(path)
    factory = factory or CustomerFactory()
    records: List[Customer] = []
    diagnostics: List[LineDiagnostic] = []

    try:
        with source.open("rb") as f:
            for line_number, raw_line in enumerate(f, start=1):
                if line_number == 1:
                    continue
                raw_line = raw_line.rstrip(b"\r\n")
                if not raw_line:
                    continue
                try:
                    line = raw_line.decode("utf-8")
                except UnicodeDecodeError as exc:
                    text = raw_line.decode("utf-8", errors="replace")
                    message = f"not valid UTF-8: {exc.reason}"
                    _skip_line(diagnostics, source, line_number, message, text)
                    continue
                try:
                    row = next(csv.reader([line], delimiter=",", strict=True))
                    records.append(parse_row(row, factory))
                except csv.Error as exc:
                    _skip_line(diagnostics, source, line_number, f"unreadable line: {exc}", line)
                except ValueError as exc:
                    _skip_line(diagnostics, source, line_number, str(exc), line)
    except OSError as exc:
        log.error(f"Could not read {source}: {exc}", extra={"source": str(source)})
        return LoadResult(
            source=str(source),
            status=LoadStatus.FAILED,
            records=[],
            diagnostics=[],
            created=factory.created,
            error=str(exc),
        )

    status = LoadStatus.PARTIAL if diagnostics else LoadStatus.COMPLETE
    log.info(
        f"Loaded {len(records)} customer(s) from {source}",
        extra={"source": str(source), "records": len(records), "skipped": len(diagnostics)},
    )
    return LoadResult(
        source=str(source),
        status=status,
        records=records,
        diagnostics=diagnostics,
        created=factory.created,
    )


def _needs_leading_newline(path: Path) -> bool:
    with path.open("rb") as f:
        f.seek(-1, 2)
        return f.read(1) not in (b"\n", b"\r")


def append_customer(
    path: Path | str,
    customer_id: int | str,
    name: str,
    address: str,
    usage: float | str,
) -> None:
    """
    Append one `id,name,address,usage` line to the backing source.

    A missing destination is created with a header line first. Loaded
    in-memory sequences are not touched; reload to see the new record.
    """
    destination = Path(path)
    row = [str(customer_id), str(name), str(address), str(usage)]
    try:
        is_new = not destination.exists() or destination.stat().st_size == 0
        lead_newline = not is_new and _needs_leading_newline(destination)
        with destination.open("a", newline="", encoding="utf-8") as f:
            if lead_newline:
                f.write("\n")
            writer = _writer(f)
            if is_new:
                writer.writerow(HEADER)
            writer.writerow(row)
    except OSError as exc:
        raise DestinationNotWritableError(destination, reason=exc.strerror or str(exc)) from exc

    log.info(
        f"Appended customer {customer_id} to {destination}",
        extra={"destination": str(destination), "customer_id": str(customer_id)},
    )


def export_customers(customers: Iterable[Customer], path: Path | str) -> int:
    """
    Overwrite `path` with a header and one backing-source line per customer.

    Returns the number of customers written. The export can be loaded back with
    `load_customers`.
    """
    destination = Path(path)
    count = 0
    try:
        with destination.open("w", newline="", encoding="utf-8") as f:
            writer = _writer(f)
            writer.writerow(HEADER)
            for customer in customers:
                writer.writerow(
                    [str(customer.id), customer.name, customer.address, str(customer.usage)]
                )
                count += 1
    except OSError as exc:
        raise DestinationNotWritableError(destination, reason=exc.strerror or str(exc)) from exc

    log.info(
        f"Exported {count} customer(s) to {destination}",
        extra={"destination": str(destination), "records": count},
    )
    return count


__all__ = ["FIELD_COUNT", "HEADER", "append_customer", "export_customers", "load_customers", "parse_row"]
