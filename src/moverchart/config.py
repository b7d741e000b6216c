"""Configuration values for the moverchart package."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    page_capacity: int = Field(7, ge=1, description="Maximum movers drawn per page")

    wrap_max_line_length: int = Field(
        30, ge=1, description="Characters per wrapped driver line"
    )
    wrap_max_lines: int = Field(4, ge=1, description="Maximum driver lines per row")
    wrap_max_total_length: int = Field(
        200, ge=1, description="Driver text is cut to this length before wrapping"
    )
    name_max_length: int = Field(
        12, ge=1, description="Company names longer than this get an ellipsis"
    )

    background_image: str | None = Field(
        None, description="URL or file path of the page background art"
    )
    asset_timeout: float = Field(10.0, gt=0, description="Image fetch timeout (s)")
    asset_workers: int = Field(8, ge=1, description="Parallel logo fetches per page")

    output_dir: str = Field("output", description="Default directory for exports")

    log_level: str = Field("INFO", description="Log level")

    sentry_dsn: str | None = Field(None, description="Sentry DSN (disabled if unset)")
    sentry_environment: str = Field("production", description="Sentry environment")
    sentry_traces_sample_rate: float = Field(
        0.0, ge=0.0, le=1.0, description="Sentry traces sample rate"
    )


settings = Settings()
