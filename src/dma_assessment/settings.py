"""Service settings loaded from the environment.

All settings use the DMA_ env prefix, e.g. DMA_LOG_LEVEL=DEBUG or
DMA_BENCHMARK_TABLE_PATH=/etc/dma/benchmarks.json.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the Digital Maturity Assessment service.

    Environment variable prefix: DMA_
    """

    service_name: str = "dma-assessment"
    version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Benchmarks: path to a JSON snapshot produced by the benchmark job.
    # When unset the shipped default table is used.
    benchmark_table_path: str | None = None

    # Cohort aggregation
    cohort_min_sample_size: int = 3
    leaderboard_default_limit: int = 50

    model_config = SettingsConfigDict(
        env_prefix="DMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
