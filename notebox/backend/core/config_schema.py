"""
Shapes of the files under config/settings/.

    application.yaml -> ApplicationSchema
    database.yaml    -> DatabaseSchema
    logging.yaml     -> LoggingSchema

Unknown keys are rejected, so a typo in a YAML file stops the app at
startup.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

Port = Annotated[int, Field(ge=1, le=65535)]


class _StrictBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


# application.yaml


class ServerSchema(_StrictBase):
    host: str
    port: Port


class CorsSchema(_StrictBase):
    origins: list[str]


class ApplicationSchema(_StrictBase):
    """Identity shown in /docs and by ``cli.py --service info``."""

    name: str
    version: str
    description: str
    environment: str
    debug: bool
    api_prefix: str
    docs_enabled: bool
    server: ServerSchema
    cors: CorsSchema


# database.yaml


class DatabaseSchema(_StrictBase):
    """Connection and pool settings; DB_PASSWORD comes from Settings."""

    driver: str
    host: str
    port: Port
    name: str
    user: str
    pool_size: PositiveInt
    max_overflow: NonNegativeInt
    pool_timeout: PositiveInt
    pool_recycle: int
    echo: bool


# logging.yaml


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: PositiveInt
    backup_count: NonNegativeInt


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["json", "console"]
    handlers: HandlersSchema
