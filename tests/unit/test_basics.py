from time import sleep

import pytest
from pydantic import ValidationError

from branch_sales import config
from branch_sales.config import DEFAULT_PRODUCT_PROFITS, AnalysisConfig, Settings
from branch_sales.utils import profiler

EXPECTED_DEFAULT_WORKERS = 8
EXPECTED_ENV_WORKERS = 3


def test_get_settings_defaults(fresh_settings, monkeypatch):
    for name in ("SALES_DATA_PATH", "SALES_WORKER_COUNT", "SALES_PRODUCT_PROFITS"):
        monkeypatch.delenv(name, raising=False)
    settings = config.get_settings()
    assert settings.data_path == "sales_records.xlsx"
    assert settings.worker_count == EXPECTED_DEFAULT_WORKERS
    assert settings.product_profits == DEFAULT_PRODUCT_PROFITS


def test_settings_read_environment(fresh_settings, monkeypatch):
    monkeypatch.setenv("SALES_WORKER_COUNT", str(EXPECTED_ENV_WORKERS))
    monkeypatch.setenv("SALES_PRODUCT_PROFITS", "[1, 2, 3, 4, 5, 6]")
    monkeypatch.setenv("SALES_DATA_PATH", "/data/branches.xlsx")

    settings = config.get_settings()

    assert settings.worker_count == EXPECTED_ENV_WORKERS
    assert settings.product_profits == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    assert settings.data_path == "/data/branches.xlsx"


def test_get_settings_is_cached(fresh_settings):
    assert config.get_settings() is config.get_settings()


def test_analysis_config_from_settings_honours_override():
    settings = Settings(worker_count=4)
    assert settings.analysis_config().worker_count == 4
    assert settings.analysis_config(worker_count=2).worker_count == 2
    assert settings.analysis_config().product_profits == DEFAULT_PRODUCT_PROFITS


def test_analysis_config_is_frozen():
    analysis = AnalysisConfig()
    with pytest.raises(ValidationError):
        analysis.worker_count = 2  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"worker_count": 0},
        {"product_profits": (1.0, 2.0)},
        {"product_profits": (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0)},
        {"product_profits": (1.0, -2.0, 3.0, 4.0, 5.0, 6.0)},
    ],
)
def test_invalid_analysis_config_is_rejected(kwargs):
    with pytest.raises(ValidationError):
        AnalysisConfig(**kwargs)


def test_invalid_worker_count_in_environment_is_rejected(fresh_settings, monkeypatch):
    monkeypatch.setenv("SALES_WORKER_COUNT", "0")
    with pytest.raises(ValidationError):
        config.get_settings()


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.label == "sleep"
    assert stats.duration_seconds >= 0.05
    assert stats.peak_rss_bytes is not None and stats.peak_rss_bytes > 0
    assert isinstance(stats.cpu_percent, float)


def test_profile_block_fills_stats_when_block_raises():
    with pytest.raises(RuntimeError):
        with profiler.profile_block("boom") as stats:
            raise RuntimeError("boom")
    assert stats.end_ts >= stats.start_ts > 0
