"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class ValidationConfig(BaseSettings):
    """Defaults applied when a caller does not choose validation options."""

    model_config = {"env_prefix": "CNPCHECK_VALIDATION_"}

    allow_future_dates: bool = True  # the original form starts with the box ticked


class ApiConfig(BaseSettings):
    """HTTP front end configuration."""

    model_config = {"env_prefix": "CNPCHECK_API_"}

    title: str = "CNP Validator"
    host: str = "127.0.0.1"
    port: int = 8000


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CNPCHECK_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    validation: ValidationConfig = ValidationConfig()
    api: ApiConfig = ApiConfig()
