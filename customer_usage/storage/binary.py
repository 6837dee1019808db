"""
Binary persistence of a customer sequence.

Each customer is pickled one after another into the destination; loading
unpickles until the stream is exhausted, so the number of records read back
always equals the number written. Only load files this tool wrote: unpickling
untrusted data can execute arbitrary code.
"""

from __future__ import annotations

import pickle
from pathlib import Path
from typing import Iterable, List

from customer_usage.domain.models import Customer
from customer_usage.errors import (
    DestinationNotWritableError,
    MalformedRecordError,
    SourceNotFoundError,
)
from customer_usage.utils.logging import get_logger

log = get_logger(__name__)

# What pickle.load raises on garbage or truncated input, besides a clean EOFError.
_CORRUPT_STREAM_ERRORS = (
    pickle.UnpicklingError,
    AttributeError,
    ImportError,
    IndexError,
    KeyError,
    ValueError,
)


def save_binary(customers: Iterable[Customer], path: Path | str) -> int:
    """Persist customers to `path`, replacing its contents. Returns the count written."""
    destination = Path(path)
    count = 0
    try:
        with destination.open("wb") as f:
            for customer in customers:
                pickle.dump(customer, f, protocol=pickle.HIGHEST_PROTOCOL)
                count += 1
    except OSError as exc:
        raise DestinationNotWritableError(destination, reason=exc.strerror or str(exc)) from exc

    log.info(
        f"Saved {count} customer(s) to {destination}",
        extra={"destination": str(destination), "records": count},
    )
    return count


def load_binary(path: Path | str) -> List[Customer]:
    """Read back every customer persisted by `save_binary`, in order."""
    source = Path(path)
    customers: List[Customer] = []
    try:
        with source.open("rb") as f:
            while True:
                try:
                    item = pickle.load(f)
                except EOFError:
                    break
                except _CORRUPT_STREAM_ERRORS as exc:
                    raise MalformedRecordError(
                        f"corrupt binary record #{len(customers) + 1} in {source}: {exc}"
                    ) from exc
                if not isinstance(item, Customer):
                    raise MalformedRecordError(
                        f"unexpected {type(item).__name__} at record #{len(customers) + 1} in {source}"
                    )
                customers.append(item)
    except OSError as exc:
        raise SourceNotFoundError(source, reason=exc.strerror or str(exc)) from exc

    log.info(
        f"Loaded {len(customers)} customer(s) from {source}",
        extra={"source": str(source), "records": len(customers)},
    )
    return customers


__all__ = ["load_binary", "save_binary"]
