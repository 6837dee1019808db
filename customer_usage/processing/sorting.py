"""
Descending sort of a customer sequence by water usage.
"""

from __future__ import annotations

from typing import List

from customer_usage.domain.models import Customer


def sort_by_usage(customers: List[Customer]) -> List[Customer]:
    """
    Sort `customers` in place, highest usage first, and return the same list.

    Insertion sort: each customer is shifted left past predecessors whose usage
    is strictly lower. Customers with equal usage keep their relative order.
    O(n) on input that is already descending, O(n^2) in the worst case.
    """
    for i in range(1, len(customers)):
        current = customers[i]
        j = i - 1
        while j >= 0 and customers[j].usage < current.usage:
            customers[j + 1] = customers[j]
            j -= 1
        customers[j + 1] = current
    return customers


__all__ = ["sort_by_usage"]
