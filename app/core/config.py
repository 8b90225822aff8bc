from functools import lru_cache
from pathlib import Path

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Admissions Competitiveness API")
    environment: Literal["dev", "test", "staging", "prod"] = Field(default="dev")
    debug: bool = Field(default=False)

    reference_statistics_path: Optional[Path] = Field(
        default=None,
        description="Override for the bundled reference quartile YAML",
    )

    default_weight_test: float = Field(default=0.5, ge=0.0)
    default_weight_gpa: float = Field(default=0.5, ge=0.0)
    default_n_applicants: int = Field(default=10_000, ge=1)
    default_locale: Literal["en", "ko"] = Field(default="en")

    i18n_preload_enabled: bool = Field(default=True, description="Preload i18n resources at startup to avoid disk I/O per request")
    metrics_enabled: bool = Field(default=True)

    @field_validator("reference_statistics_path", mode="before")
    @classmethod
    def _normalize_blank_path(cls, value: object) -> Optional[str | Path]:
        if value in (None, "", b""):
            return None
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None
        if isinstance(value, Path):
            return value
        raise TypeError("REFERENCE_STATISTICS_PATH must be a filesystem path")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
