from __future__ import annotations

from typing import Iterable, List

from customer_usage.config import USAGE_THRESHOLD
from customer_usage.domain.models import Customer


def filter_by_usage(
    customers: Iterable[Customer], threshold: float = USAGE_THRESHOLD
) -> List[Customer]:
    """Return a new list of the customers using at least `threshold`, in input order."""
    return [customer for customer in customers if customer.usage >= threshold]


__all__ = ["filter_by_usage"]
