"""Centralized configuration for serp-interactions using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Values are validated at startup. Unknown variables are ignored so the
    settings can share an environment with the rest of the results page stack.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Backend endpoints
    backend_url: str = Field(default="http://127.0.0.1:8000", description="Base URL of the results page backend")
    vote_path: str = Field(default="/vote", description="Path of the vote endpoint")
    autocomplete_path: str = Field(default="/autocomplete", description="Path of the autocomplete endpoint")

    # HTTP/Request settings
    http_timeout: int = Field(default=10, ge=1, description="HTTP request timeout in seconds")

    # Autocomplete widget
    autocomplete_delay_ms: int = Field(default=75, ge=0, description="Debounce delay before fetching suggestions")
    autocomplete_min_length: int = Field(default=1, ge=1, description="Minimum term length before fetching")

    # Highlighting
    emphasis_tag: str = Field(default="em", pattern=r"^[a-z][a-z0-9]*$", description="Tag wrapped around matches")

    # Server settings
    server_host: str = Field(default="127.0.0.1", description="Vote backend host")
    server_port: int = Field(default=8000, ge=1, le=65535, description="Vote backend port")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @field_validator("backend_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("vote_path", "autocomplete_path")
    @classmethod
    def _require_leading_slash(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("endpoint paths must start with '/'")
        return value

    def vote_url(self) -> str:
        """Absolute URL of the vote endpoint."""
        return self.backend_url + self.vote_path

    def autocomplete_url(self) -> str:
        """Absolute URL of the autocomplete endpoint."""
        return self.backend_url + self.autocomplete_path
