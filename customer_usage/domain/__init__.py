"""
Domain package for the customer water usage ledger.

Exports the core domain models used across storage, processing and the CLI.
Keep this package focused on data definitions.
"""

from customer_usage.domain.models import (
    Customer,
    CustomerFactory,
    LineDiagnostic,
    LoadResult,
    LoadStatus,
)

__all__ = [
    "Customer",
    "CustomerFactory",
    "LineDiagnostic",
    "LoadResult",
    "LoadStatus",
]
