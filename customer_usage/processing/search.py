from __future__ import annotations

from typing import Iterable, Optional

from customer_usage.domain.models import Customer


def find_by_id(customers: Iterable[Customer], customer_id: int) -> Optional[Customer]:
    """
    Return the first customer whose id equals `customer_id`, or None.

    Ids are not unique; later customers sharing the id are never returned.
    """
    for customer in customers:
        if customer.id == customer_id:
            return customer
    return None


__all__ = ["find_by_id"]
