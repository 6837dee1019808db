"""
Configuration settings for the customer water usage ledger.

Uses Pydantic Settings to load environment variables for file locations,
the usage threshold and logging.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

USAGE_THRESHOLD = 30.0


class Settings(BaseSettings):
    # Files
    data_file: str = Field("customer.csv", alias="CUSTOMER_DATA_FILE")
    report_file: str = Field("processed_customers.txt", alias="CUSTOMER_REPORT_FILE")
    export_file: str = Field("customer.txt", alias="CUSTOMER_EXPORT_FILE")
    binary_file: str = Field("customers.bin", alias="CUSTOMER_BINARY_FILE")

    # Processing
    usage_threshold: float = Field(USAGE_THRESHOLD, alias="USAGE_THRESHOLD")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "USAGE_THRESHOLD", "get_settings"]
