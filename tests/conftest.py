"""
Pytest configuration for the customer water usage ledger.

Provides fixtures for:
- The reference customer sequence
- Backing-source files written to a temporary directory
- Settings isolation (cache clearing and environment overrides)
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator, List

import pytest

from customer_usage.config import Settings, get_settings
from customer_usage.domain.models import Customer

SAMPLE_ROWS = [
    (2023, "Henrie", "Makeni", 30.5),
    (2073, "joe", "kafue", 0.5),
    (2023, "lorem", "lsk", 30.8),
    (2073, "ipsum", "kabwe", 8.5),
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Point every settings-driven path at the test's temporary directory.
    """
    for var in ("USAGE_THRESHOLD", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("CUSTOMER_DATA_FILE", str(tmp_path / "customer.csv"))
    monkeypatch.setenv("CUSTOMER_REPORT_FILE", str(tmp_path / "processed_customers.txt"))
    monkeypatch.setenv("CUSTOMER_EXPORT_FILE", str(tmp_path / "customer.txt"))
    monkeypatch.setenv("CUSTOMER_BINARY_FILE", str(tmp_path / "customers.bin"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        data_file=str(tmp_path / "customer.csv"),
        report_file=str(tmp_path / "processed_customers.txt"),
        export_file=str(tmp_path / "customer.txt"),
        binary_file=str(tmp_path / "customers.bin"),
        log_level="DEBUG",
    )


@pytest.fixture
def sample_customers() -> List[Customer]:
    """
    The four-customer reference sequence, in its original order.
    """
    return [
        Customer(id=customer_id, name=name, address=address, usage=usage)
        for customer_id, name, address, usage in SAMPLE_ROWS
    ]


def write_source(path: Path, lines: List[str], header: str = "ID,Name,Address,Usage") -> Path:
    path.write_text("\n".join([header, *lines]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """
    A well-formed backing source holding the reference customers.
    """
    lines = [f"{i},{n},{a},{u}" for i, n, a, u in SAMPLE_ROWS]
    return write_source(tmp_path / "customer.csv", lines)


@pytest.fixture
def make_source(tmp_path: Path):
    """
    Factory writing a backing source with a header and the given data lines.
    """

    def _make(lines: List[str], name: str = "customer.csv", header: str = "ID,Name,Address,Usage") -> Path:
        return write_source(tmp_path / name, lines, header=header)

    return _make
