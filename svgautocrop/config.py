"""Process configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # Multipass host defaults
    multipass: bool = True
    max_passes: int = 10
    pretty: bool = False

    model_config = {"env_prefix": "SVGAUTOCROP_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
