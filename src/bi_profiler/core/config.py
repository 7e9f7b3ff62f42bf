"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the packaged config directory.

    The YAML pattern files ship inside the package: src/bi_profiler/config/.
    """
    # config.py -> core/ -> bi_profiler/
    return Path(__file__).resolve().parent.parent / "config"


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: BI_PROFILER_
    """

    model_config = SettingsConfigDict(
        env_prefix="BI_PROFILER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (value patterns)",
    )

    # Relationship detection
    relationship_min_strength: float = Field(
        default=0.3,
        description="Minimum |r| for a correlation to be reported as a relationship",
    )
    relationship_min_samples: int = Field(
        default=3,
        description="Minimum number of paired numeric values needed to correlate two columns",
    )
    dependency_min_confidence: float = Field(
        default=0.95,
        description="Minimum share of determinant values mapping to a single dependent value",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
