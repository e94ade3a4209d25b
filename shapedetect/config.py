"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    model_config = {
        "env_prefix": "SHAPEDETECT_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()
