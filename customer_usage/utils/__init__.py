"""
Utilities package for the customer water usage ledger.

Exports shared helpers for cross-cutting concerns such as logging.
Keep this package lightweight and free of domain-specific logic.
"""

from customer_usage.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
