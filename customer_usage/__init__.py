"""
Customer Water Usage Ledger - manage customer water usage records.

Customer records (ID, name, address, usage in cubic meters) live in a
comma-delimited backing source. This package provides:

- Loading the backing source with per-line diagnostics
- Appending customers and exporting the working sequence
- A stable descending sort by usage and a usage threshold filter
- Search by customer ID
- Binary persistence of a customer sequence
- A processed report, a CLI and an interactive menu
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from customer_usage.config import USAGE_THRESHOLD, Settings, get_settings
from customer_usage.domain.models import (
    Customer,
    CustomerFactory,
    LineDiagnostic,
    LoadResult,
    LoadStatus,
)
from customer_usage.errors import (
    CustomerDataError,
    DestinationNotWritableError,
    MalformedRecordError,
    SourceNotFoundError,
)
from customer_usage.pipeline import PipelineResult, process_customers, run_pipeline, write_report
from customer_usage.processing import filter_by_usage, find_by_id, sort_by_usage
from customer_usage.storage import (
    append_customer,
    export_customers,
    load_binary,
    load_customers,
    save_binary,
)
from customer_usage.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "USAGE_THRESHOLD",
    "get_settings",
    # Domain
    "Customer",
    "CustomerFactory",
    "LineDiagnostic",
    "LoadResult",
    "LoadStatus",
    # Errors
    "CustomerDataError",
    "DestinationNotWritableError",
    "MalformedRecordError",
    "SourceNotFoundError",
    # Storage
    "append_customer",
    "export_customers",
    "load_binary",
    "load_customers",
    "save_binary",
    # Processing
    "filter_by_usage",
    "find_by_id",
    "sort_by_usage",
    # Pipeline
    "PipelineResult",
    "process_customers",
    "run_pipeline",
    "write_report",
    # Logging
    "configure_logging",
    "get_logger",
]
