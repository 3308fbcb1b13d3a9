"""Configuration management - environment settings and form field mapping."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Entry identifiers of the published meal form, used when the YAML omits them
DEFAULT_FORM_FIELDS = {
    "date": "entry.567462734",
    "lunch": "entry.1160662286",
    "dinner": "entry.1287640030",
}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Google Sheets / Forms
    sheet_id: str = Field(default="", description="Spreadsheet ID holding form responses")
    form_id: str = Field(default="", description="Published form ID used for writes")
    sheet_name: str = Field(default="Sheet1", description="Sheet exported as CSV")
    forms_base_url: str = Field(default="https://docs.google.com", description="Forms host")
    sheets_base_url: str = Field(default="https://docs.google.com", description="Sheets host")

    # Store behaviour
    submit_delay_seconds: float = Field(
        default=1.0,
        description="Wait after a form submission so the sheet can catch up",
    )
    request_timeout_seconds: float = Field(default=30.0, description="HTTP timeout")
    confirm_writes: bool = Field(
        default=False,
        description="Re-read the export after submitting to confirm the write",
    )
    enforce_unique_dates: bool = Field(
        default=False,
        description="Reject a new entry when one already exists for its date",
    )

    config_dir: Path | None = Field(default=None, description="Directory with form_fields.yaml")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def uses_sheets(self) -> bool:
        return bool(self.sheet_id and self.form_id)


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


@lru_cache
def get_form_fields(config_dir_str: str = "") -> dict[str, str]:
    """Form entry identifiers keyed by record field (date, lunch, dinner)."""
    if not config_dir_str:
        config_dir = Path(__file__).parent.parent.parent / "config"
    else:
        config_dir = Path(config_dir_str)
    data = load_yaml_config(config_dir / "form_fields.yaml")
    fields = data.get("fields") or {}
    return {name: str(fields.get(name) or default) for name, default in DEFAULT_FORM_FIELDS.items()}
