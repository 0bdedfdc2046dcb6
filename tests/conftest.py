"""
Pytest configuration for the branch sales analysis.

Provides fixtures for:
- Small hand-checked datasets
- The default analysis configuration
- Settings isolation (cache reset around env overrides)
- Workbooks written to a temporary directory
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator, List, Tuple

import pytest

from branch_sales.config import DEFAULT_PRODUCT_PROFITS, AnalysisConfig, get_settings
from branch_sales.infrastructure.loader import write_sales_workbook


@pytest.fixture
def sample_dataset() -> List[Tuple[int, ...]]:
    return [
        (5, 10, 15, 20, 25, 30),
        (3, 6, 9, 12, 15, 18),
        (4, 8, 12, 16, 20, 24),
    ]


@pytest.fixture
def single_record_dataset() -> List[Tuple[int, ...]]:
    return [(10, 20, 30, 40, 50, 60)]


@pytest.fixture
def analysis_config() -> AnalysisConfig:
    return AnalysisConfig(worker_count=8, product_profits=DEFAULT_PRODUCT_PROFITS)


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """
    Clear the cached Settings before and after the test so env overrides apply.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_workbook(tmp_path: Path, sample_dataset: List[Tuple[int, ...]]) -> Path:
    return write_sales_workbook(tmp_path / "sales_records.xlsx", sample_dataset)
