"""
Storage package for the customer water usage ledger.

Re-exports the backing-source (text) operations and the binary persistence
helpers so callers can import from `customer_usage.storage` directly.
"""

from customer_usage.storage.binary import load_binary, save_binary
from customer_usage.storage.text_source import (
    HEADER,
    append_customer,
    export_customers,
    load_customers,
)

__all__ = [
    # Backing source
    "HEADER",
    "append_customer",
    "export_customers",
    "load_customers",
    # Binary persistence
    "load_binary",
    "save_binary",
]
