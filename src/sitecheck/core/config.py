# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Application configuration via environment variables and .env files."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SITECHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Scan service
    scan_service_url: str = "https://sitecheck.sucuri.net/"
    scan_timeout: float = 60.0  # remote scans take ~20s, sometimes far more
    scan_force_fresh: bool = True
    max_scan_attempts: int = 1  # per render

    # Site identity
    site_domain: str = ""
    platform_version: str = "unknown"

    # Cache
    cache_backend: str = "memory"  # "memory", "file" or "redis"
    cache_lifetime: int = 1200  # seconds
    cache_dir: Path = Path(".sitecheck-cache")
    redis_url: str = "redis://localhost:6379/0"

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    api_keys: list[str] = []

    @field_validator("api_keys", mode="before")
    @classmethod
    def _parse_api_keys(cls, v: object) -> list[str]:
        if isinstance(v, str):
            return [k.strip() for k in v.split(",") if k.strip()]
        return v if isinstance(v, list) else []

    @field_validator("max_scan_attempts")
    @classmethod
    def _check_max_scan_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_scan_attempts must be at least 1")
        return v

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"


def get_settings() -> Settings:
    return Settings()
