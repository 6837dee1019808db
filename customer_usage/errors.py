"""
Exception types for the customer water usage ledger.

Storage and pipeline code raise these; the CLI and the interactive menu catch
`CustomerDataError` at the boundary of each command and report the message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class CustomerDataError(Exception):
    """Base class for data and I/O failures reported to the operator."""


class SourceNotFoundError(CustomerDataError):
    def __init__(self, path: Path | str, reason: Optional[str] = None) -> None:
        self.path = str(path)
        self.reason = reason
        message = f"Source not found or unreadable: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class MalformedRecordError(CustomerDataError):
    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class DestinationNotWritableError(CustomerDataError):
    def __init__(self, path: Path | str, reason: Optional[str] = None) -> None:
        self.path = str(path)
        self.reason = reason
        message = f"Cannot write to {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


__all__ = [
    "CustomerDataError",
    "DestinationNotWritableError",
    "MalformedRecordError",
    "SourceNotFoundError",
]
