"""
Domain models for the customer water usage ledger.

Defines the customer record schema aligned with the backing source columns
(`ID,Name,Address,Usage`) together with the load result contract returned by
the text loader.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from customer_usage.errors import MalformedRecordError, SourceNotFoundError


class Customer(BaseModel):
    """
    Representation of a single line of the backing source.
    """

    id: int = Field(..., description="Customer identifier (not guaranteed unique).")
    name: str = Field(..., description="Customer name.")
    address: str = Field(..., description="Customer address.")
    usage: float = Field(..., description="Water usage in cubic meters.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def full_form(self) -> str:
        """Every field, comma separated."""
        return f"{self.id}, {self.name}, {self.address}, {self.usage}"

    def compact_form(self) -> str:
        """Fixed-width name and a single-decimal usage figure, used by reports."""
        return f"{self.id} | {self.name:<20} | {self.usage:.1f} m3"

    def __str__(self) -> str:
        return self.full_form()


class CustomerFactory:
    """
    Builds Customer instances and counts how many it has created.

    The counter is informational only; nothing orders or filters by it.
    """

    def __init__(self) -> None:
        self.created = 0

    def create(self, customer_id: int, name: str, address: str, usage: float) -> Customer:
        self.created += 1
        return Customer(id=customer_id, name=name, address=address, usage=usage)


class LoadStatus(str, Enum):
    COMPLETE = "complete"
    PARTIAL = "partial"
    FAILED = "failed"


class LineDiagnostic(BaseModel):
    """A backing-source line that was skipped during a load."""

    line_number: int = Field(..., description="1-based physical line number.")
    message: str = Field(..., description="Why the line was skipped.")
    raw: str = Field("", description="The offending line as read.")

    model_config = {"frozen": True}


class LoadResult(BaseModel):
    """
    Outcome of loading a backing source.

    `records` always holds whatever could be parsed, so callers choose their own
    policy: use the partial data, inspect `diagnostics`, or call
    `raise_for_status()` to treat anything but a complete load as an error.
    """

    source: str
    status: LoadStatus
    records: List[Customer] = Field(default_factory=list)
    diagnostics: List[LineDiagnostic] = Field(default_factory=list)
    created: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.COMPLETE

    def raise_for_status(self) -> None:
        if self.status is LoadStatus.FAILED:
            raise SourceNotFoundError(self.source, reason=self.error)
        if self.status is LoadStatus.PARTIAL:
            first = self.diagnostics[0]
            raise MalformedRecordError(first.message, line_number=first.line_number)


__all__ = ["Customer", "CustomerFactory", "LineDiagnostic", "LoadResult", "LoadStatus"]
