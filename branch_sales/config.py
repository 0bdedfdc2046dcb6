"""
Configuration settings for the branch sales analysis.

Uses Pydantic Settings to load environment variables for the workbook location,
worker pool size, per-product profit table and logging. The orchestrator never
reads settings directly; it receives an immutable AnalysisConfig built from them.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from branch_sales.domain.models import PRODUCT_COUNT

DEFAULT_PRODUCT_PROFITS: Tuple[float, ...] = (1.10, 1.50, 2.10, 1.60, 1.80, 3.90)
DEFAULT_WORKER_COUNT = 8


def _check_profit_table(value: Tuple[float, ...]) -> Tuple[float, ...]:
    if len(value) != PRODUCT_COUNT:
        raise ValueError(f"expected {PRODUCT_COUNT} product profits, got {len(value)}")
    if any(profit < 0 for profit in value):
        raise ValueError("product profits must be non-negative")
    return value


class AnalysisConfig(BaseModel):
    """
    Immutable inputs of one analysis run: pool size and per-unit profits.
    """

    worker_count: int = Field(DEFAULT_WORKER_COUNT, ge=1, description="Fixed worker pool size.")
    product_profits: Tuple[float, ...] = Field(
        DEFAULT_PRODUCT_PROFITS, description="Per-unit profit of products A-F."
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("product_profits")
    @classmethod
    def validate_product_profits(cls, value: Tuple[float, ...]) -> Tuple[float, ...]:
        return _check_profit_table(value)


class Settings(BaseSettings):
    # Data source
    data_path: str = Field("sales_records.xlsx", alias="SALES_DATA_PATH")

    # Analysis
    worker_count: int = Field(DEFAULT_WORKER_COUNT, ge=1, alias="SALES_WORKER_COUNT")
    product_profits: Tuple[float, ...] = Field(
        DEFAULT_PRODUCT_PROFITS, alias="SALES_PRODUCT_PROFITS"
    )

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("product_profits")
    @classmethod
    def validate_product_profits(cls, value: Tuple[float, ...]) -> Tuple[float, ...]:
        return _check_profit_table(value)

    def analysis_config(self, worker_count: int | None = None) -> AnalysisConfig:
        """
        Freeze the analysis-related settings, optionally overriding the pool size.
        """
        return AnalysisConfig(
            worker_count=worker_count if worker_count is not None else self.worker_count,
            product_profits=self.product_profits,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["AnalysisConfig", "Settings", "get_settings", "DEFAULT_PRODUCT_PROFITS"]
