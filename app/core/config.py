"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_TEMPLATE_DIR = str(Path(__file__).resolve().parent.parent / "templates")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. url_prefix is validated in
    validate_url_prefix.
    """

    # App
    app_name: str = "vantage"
    app_version: str = "1.0.0"
    debug: bool = False

    # Mount point of the front end (e.g. "/vantage"); empty serves from root.
    url_prefix: str = ""

    # Rendering
    template_dir: str = _DEFAULT_TEMPLATE_DIR

    # Catalog and library seeds (JSON); loaded once at startup when set.
    catalog_seed_path: str | None = None
    library_seed_path: str | None = None

    # Stats: number of threads walking catalog origins (1 = serial walk).
    stats_max_workers: int = 1

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_url_prefix(self) -> "Settings":
        """Validate url_prefix and worker count.

        - url_prefix: empty, or starts with '/' and has no trailing '/'.
        - stats_max_workers: at least 1.
        """
        if self.url_prefix:
            if not self.url_prefix.startswith("/"):
                raise ValueError(
                    f"URL_PREFIX must start with '/', got: {self.url_prefix!r}"
                )
            if self.url_prefix.endswith("/"):
                raise ValueError(
                    f"URL_PREFIX must not end with '/', got: {self.url_prefix!r}"
                )
        if self.stats_max_workers < 1:
            raise ValueError(
                f"STATS_MAX_WORKERS must be >= 1, got: {self.stats_max_workers}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
