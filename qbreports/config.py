"""
Application configuration using pydantic-settings.

Loads parser tuning and logging options from environment variables
(prefixed with ``QBR_``) with defaults matching standard QuickBooks exports.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QBR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    # Header heuristics
    header_scan_rows: int = 10
    data_start_scan_rows: int = 15
    data_start_fallback_row: int = 5

    # Report output
    top_vendor_count: int = 5

    # Input
    csv_encoding: str = "utf-8-sig"
    max_upload_size_mb: int = 10

    @property
    def max_upload_size_bytes(self) -> int:
        """Get maximum upload size in bytes."""
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
