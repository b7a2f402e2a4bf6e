"""
NoteBox configuration.

Two sources, both under <project root>/config/:

    .env               DB_PASSWORD (copy from .env.example; never committed)
    settings/*.yaml    application, database, logging

Environment variables win over .env, so deployments can inject the
password without a file on disk.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from notebox.backend.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)

ROOT_MARKER = ".project_root"

# AppConfig attribute -> (schema, file under config/settings/)
SECTIONS: dict[str, tuple[type[BaseModel], str]] = {
    "application": (ApplicationSchema, "application.yaml"),
    "database": (DatabaseSchema, "database.yaml"),
    "logging": (LoggingSchema, "logging.yaml"),
}


def find_project_root() -> Path:
    """Walk up from the working directory to the folder holding .project_root."""
    for candidate in (Path.cwd(), *Path.cwd().parents):
        if (candidate / ROOT_MARKER).exists():
            return candidate
    raise RuntimeError(f"Project root not found. Ensure {ROOT_MARKER} file exists.")


def validate_project_root() -> Path:
    """Same as find_project_root, but exits the process for CLI entry points."""
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def _config_dir() -> Path:
    return find_project_root() / "config"


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Read config/settings/<filename>. An empty file yields {}."""
    path = _config_dir() / "settings" / filename
    if not path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


class Settings(BaseSettings):
    """Database credentials. Nothing else belongs here."""

    db_password: str

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type[BaseModel], filename: str) -> Any:
    try:
        return schema_cls(**load_yaml_config(filename))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {filename}:\n{e}") from e


class AppConfig:
    """
    Validated view of config/settings/.

    Every section is parsed when the object is built, so a broken YAML
    file fails at startup rather than on first use.
    """

    application: ApplicationSchema
    database: DatabaseSchema
    logging: LoggingSchema

    def __init__(self) -> None:
        for attr, (schema_cls, filename) in SECTIONS.items():
            setattr(self, attr, _load_validated(schema_cls, filename))


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=_config_dir() / ".env")


@lru_cache
def get_app_config() -> AppConfig:
    return AppConfig()


def get_database_url() -> str:
    """postgresql+asyncpg://<user>:<password>@<host>:<port>/<name>"""
    db = get_app_config().database
    return (
        f"{db.driver}://{db.user}:{get_settings().db_password}"
        f"@{db.host}:{db.port}/{db.name}"
    )


def get_server_base_url() -> str:
    server = get_app_config().application.server
    return f"http://{server.host}:{server.port}"
