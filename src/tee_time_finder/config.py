"""Configuration objects and helpers for the tee time finder."""

from __future__ import annotations

from typing import Optional

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .course_names import PREFIX_STRATEGY, STRATEGIES, CourseNameNormalizer, build_normalizer
from .metros import get_metro


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    base_url: HttpUrl = Field("http://localhost:8080", validation_alias="TEE_FINDER_BASE_URL")
    default_metro: str = Field("denver", validation_alias="TEE_FINDER_DEFAULT_METRO")
    timeout_seconds: float = Field(15.0, gt=0, validation_alias="TEE_FINDER_TIMEOUT_SECONDS")
    retry_attempts: int = Field(3, ge=1, validation_alias="TEE_FINDER_RETRY_ATTEMPTS")
    retry_backoff_seconds: float = Field(1.0, ge=0, validation_alias="TEE_FINDER_RETRY_BACKOFF_SECONDS")
    course_strategy: str = Field(PREFIX_STRATEGY, validation_alias="TEE_FINDER_COURSE_STRATEGY")
    course_prefixes: str = Field(
        "",
        validation_alias="TEE_FINDER_COURSE_PREFIXES",
        description="Comma-separated canonical course names; empty keeps the built-in table.",
    )

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("course_strategy", mode="before")
    @classmethod
    def check_strategy(cls, value: str) -> str:
        """Only the strategies the normaliser knows are accepted."""
        key = str(value or "").strip().lower()
        if key not in STRATEGIES:
            raise ValueError(f"course_strategy must be one of {', '.join(STRATEGIES)}")
        return key

    @field_validator("default_metro", mode="after")
    @classmethod
    def check_metro(cls, value: str) -> str:
        return get_metro(value).slug

    @property
    def api_base(self) -> str:
        return str(self.base_url).rstrip("/")

    @property
    def prefix_table(self) -> Optional[list[str]]:
        parts = [part.strip() for part in self.course_prefixes.split(",")]
        return [part for part in parts if part] or None

    def normalizer(self) -> CourseNameNormalizer:
        """Build the course name normaliser selected for this deployment."""
        return build_normalizer(self.course_strategy, self.prefix_table)
