from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ETF_MATCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = "https://etfmatcher.com/data/"
    manifest_filename: str = "ticker_vector_configs.toml"
    symbol_map_filename: str = "ticker_symbol_map.flatbuffers.bin"
    http_timeout_seconds: float = Field(default=10.0, gt=0)
    log_level: str = "WARNING"


settings = Settings()
