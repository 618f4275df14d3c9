from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MockgenSettings(BaseSettings):
    """
    Mockgen settings.

    Environment variables use the MOCKGEN_ prefix.
    Example: MOCKGEN_LOG_LEVEL=DEBUG, MOCKGEN_GOFMT_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOCKGEN_",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    # Generated files
    mock_package: str = "mocks"
    mock_dir_marker: str = "mock"
    search_parent_for_mock_dir: bool = True

    # Interface search
    search_root: str = "."
    source_suffix: str = ".go"
    excluded_dirs: list[str] = Field(default_factory=lambda: [".git", "vendor", "node_modules"])
    max_workers: int = Field(default=8, ge=1)

    # External formatter
    gofmt_enabled: bool = True
    gofmt_binary: str = "gofmt"

    # HTTP server
    host: str = "localhost"
    port: int = 8080
    cors_allow_origin_regex: str = r"http://localhost.*"


@lru_cache(maxsize=1)
def get_settings() -> MockgenSettings:
    """Process-wide settings instance."""
    return MockgenSettings()
