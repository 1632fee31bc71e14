"""
Library-wide configuration using Pydantic Settings.
Upstream API settings and logging defaults live here.
"""
from typing import Optional

from pydantic_settings import BaseSettings


class APIConfig(BaseSettings):
    base_url: str = "https://api.openf1.org/v1"
    timeout: Optional[float] = None  # seconds; None disables the timeout

    model_config = {"env_prefix": "OPENF1_"}


class LogConfig(BaseSettings):
    level: str = "INFO"

    model_config = {"env_prefix": "F1CHARTS_LOG_"}


class Config:
    """Unified library configuration."""

    api: APIConfig = APIConfig()
    log: LogConfig = LogConfig()


# Singleton instance
cfg = Config()
