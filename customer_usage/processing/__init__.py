"""
Processing package: pure transformations over a customer sequence.

Sorting and filtering are composed by `customer_usage.pipeline` as
`filter_by_usage(sort_by_usage(customers))`.
"""

from customer_usage.processing.filtering import filter_by_usage
from customer_usage.processing.search import find_by_id
from customer_usage.processing.sorting import sort_by_usage

__all__ = [
    "filter_by_usage",
    "find_by_id",
    "sort_by_usage",
]
