"""
Processing pipeline: load the backing source, sort by usage, keep the customers
at or above the usage threshold and write the processed report.

Usage (example from CLI):
    from customer_usage.pipeline import run_pipeline

    result = run_pipeline("customer.csv", report_path="processed_customers.txt")
    print(len(result.processed))

The report looks like:

    ===== Processed Customer Data =====
    2023 | lorem                | 30.8 m3
    2023 | Henrie               | 30.5 m3
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from customer_usage.config import get_settings
from customer_usage.domain.models import Customer, LoadResult, LoadStatus
from customer_usage.errors import DestinationNotWritableError
from customer_usage.processing.filtering import filter_by_usage
from customer_usage.processing.sorting import sort_by_usage
from customer_usage.storage.text_source import load_customers
from customer_usage.utils.logging import get_logger

log = get_logger(__name__)

REPORT_TITLE = "===== Processed Customer Data ====="


@dataclass
class PipelineResult:
    """
    Outcome of a pipeline run.
    """

    load: LoadResult
    processed: List[Customer] = field(default_factory=list)
    report_path: Optional[str] = None


def process_customers(customers: List[Customer], threshold: Optional[float] = None) -> List[Customer]:
    """
    Sort `customers` by descending usage, then keep those at or above `threshold`.

    `customers` itself ends up sorted; the returned list is new.
    """
    if threshold is None:
        threshold = get_settings().usage_threshold
    return filter_by_usage(sort_by_usage(customers), threshold)


def write_report(customers: Iterable[Customer], path: Path | str) -> int:
    """
    Write the processed report, one compact line per customer.

    Returns the number of customer lines written.
    """
    destination = Path(path)
    count = 0
    try:
        with destination.open("w", encoding="utf-8") as f:
            f.write(REPORT_TITLE + "\n")
            for customer in customers:
                f.write(customer.compact_form() + "\n")
                count += 1
    except OSError as exc:
        raise DestinationNotWritableError(destination, reason=exc.strerror or str(exc)) from exc

    log.info(
        "Report written",
        extra={"destination": str(destination), "records": count},
    )
    return count


def run_pipeline(
    source: Path | str | None = None,
    report_path: Path | str | None = None,
    threshold: Optional[float] = None,
) -> PipelineResult:
    """
    Load, process and report in one go.

    Parameters
    ----------
    source : Path | str | None
        Backing source to load. Defaults to settings.data_file.
    report_path : Path | str | None
        Where to write the processed report. Defaults to settings.report_file.
    threshold : float | None
        Qualifying usage. Defaults to settings.usage_threshold.

    Returns
    -------
    PipelineResult
        The load result, the qualifying customers and the report location.
        A FAILED load produces no report.
    """
    settings = get_settings()
    source = source or settings.data_file
    report_path = report_path or settings.report_file
    threshold = settings.usage_threshold if threshold is None else threshold

    log.info(f"[PIPELINE START] {source}", extra={"source": str(source), "threshold": threshold})
    load = load_customers(source)
    if load.status is LoadStatus.FAILED:
        log.error(f"[PIPELINE FAILED] {source}", extra={"source": str(source)})
        return PipelineResult(load=load)

    processed = process_customers(load.records, threshold)
    write_report(processed, report_path)
    log.info(
        f"[PIPELINE COMPLETE] {len(processed)}/{len(load.records)} customer(s) qualified",
        extra={
            "source": str(source),
            "loaded": len(load.records),
            "qualified": len(processed),
            "skipped": len(load.diagnostics),
            "report": str(report_path),
        },
    )
    return PipelineResult(load=load, processed=processed, report_path=str(report_path))


__all__ = [
    "PipelineResult",
    "REPORT_TITLE",
    "process_customers",
    "run_pipeline",
    "write_report",
]
