#!/usr/bin/env python3
"""
NoteBox command line.

    python cli.py --service info
    python cli.py --service config
    python cli.py --service server --port 8099 --reload
    python cli.py --service migrate --migrate-action upgrade
"""

import subprocess
import sys
from pathlib import Path

import click
import structlog

from notebox.backend.core.config import validate_project_root
from notebox.backend.core.logging import get_logger, log_with_source, setup_logging

ALEMBIC_INI = Path("notebox") / "backend" / "migrations" / "alembic.ini"

# --migrate-action -> (alembic arguments, banner); "{rev}" is the --revision value
MIGRATE_ACTIONS = {
    "upgrade": (["upgrade", "{rev}"], "Upgrading database to revision: {rev}"),
    "downgrade": (["downgrade", "{rev}"], "Downgrading database to revision: {rev}"),
    "current": (["current"], "Current database revision:"),
    "history": (["history", "--verbose"], "Migration history:"),
    "sql": (["upgrade", "{rev}", "--sql"], "DDL up to revision: {rev}"),
}


def _fail(logger, event: str, message: str, code: int = 1, **fields) -> None:
    logger.error(event, extra=fields)
    click.echo(click.style(message, fg="red"), err=True)
    sys.exit(code)


def _app_config(logger):
    from notebox.backend.core.config import get_app_config

    try:
        return get_app_config()
    except (FileNotFoundError, ValueError) as e:
        _fail(logger, "Configuration invalid", f"Error loading configuration: {e}", error=str(e))


@click.command()
@click.option(
    "--service", "-s",
    type=click.Choice(["info", "config", "server", "migrate"]),
    default="info",
    help="What to run.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log at INFO level.")
@click.option("--debug", "-d", is_flag=True, help="Log at DEBUG level.")
@click.option("--host", default=None, help="Bind address (server).")
@click.option("--port", default=None, type=int, help="Bind port (server).")
@click.option("--reload", is_flag=True, help="Restart on code changes (server).")
@click.option(
    "--migrate-action",
    type=click.Choice(sorted(MIGRATE_ACTIONS)),
    default="current",
    help="Alembic operation (migrate).",
)
@click.option("--revision", default="head", help="Target revision (migrate).")
def main(
    service: str,
    verbose: bool,
    debug: bool,
    host: str | None,
    port: int | None,
    reload: bool,
    migrate_action: str,
    revision: str,
) -> None:
    """Run a NoteBox service: info, config, server or migrate."""
    root = validate_project_root()

    level = "DEBUG" if debug else "INFO" if verbose else "WARNING"
    setup_logging(level=level, format_type="console")
    structlog.contextvars.bind_contextvars(source="cli")
    logger = get_logger(__name__)
    logger.debug("CLI invoked", extra={"service": service, "log_level": level})

    if service == "info":
        show_info(logger)
    elif service == "config":
        show_config(logger)
    elif service == "server":
        run_server(logger, root, host, port, reload)
    else:
        run_migrations(logger, root, migrate_action, revision)


def show_info(logger) -> None:
    from notebox.backend.core.config import get_server_base_url

    application = _app_config(logger).application
    click.echo(f"{application.name} {application.version}")
    click.echo(application.description)
    click.echo(f"API: {get_server_base_url()}{application.api_prefix}")
    click.echo()
    click.echo("Services: info, config, server, migrate (see --help)")


def show_config(logger) -> None:
    """Print every validated YAML section, one key per line."""
    config = _app_config(logger)

    for title, section in (
        ("Application", config.application),
        ("Database", config.database),
        ("Logging", config.logging),
    ):
        click.echo(f"{title} Settings (from YAML):")
        _echo_mapping(section.model_dump(), indent=1)
        click.echo()

    logger.info("Configuration displayed")


def _echo_mapping(values: dict, indent: int) -> None:
    pad = "  " * indent
    for key, value in values.items():
        if isinstance(value, dict):
            click.echo(f"{pad}{key}:")
            _echo_mapping(value, indent + 1)
        else:
            click.echo(f"{pad}{key}: {value}")


def run_server(logger, root: Path, host: str | None, port: int | None, reload: bool) -> None:
    """Serve notebox.backend.main:app with uvicorn in a child process."""
    server = _app_config(logger).application.server
    host = host or server.host
    port = port or server.port

    cmd = [
        sys.executable, "-m", "uvicorn", "notebox.backend.main:app",
        "--host", host, "--port", str(port),
    ]
    if reload:
        cmd.append("--reload")

    logger.info("Starting server", extra={"host": host, "port": port, "reload": reload})
    click.echo(f"Serving on http://{host}:{port} (Ctrl+C to stop)")

    try:
        subprocess.run(cmd, check=True, cwd=root)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except subprocess.CalledProcessError as e:
        _fail(logger, "Server exited", "Server exited with an error.", e.returncode,
              exit_code=e.returncode)


def run_migrations(logger, root: Path, action: str, revision: str) -> None:
    """Apply or inspect the Alembic migrations for the note schema."""
    ini = root / ALEMBIC_INI
    if not ini.exists():
        _fail(logger, "Alembic config missing", f"Error: {ALEMBIC_INI} not found.")

    args, banner = MIGRATE_ACTIONS[action]
    log_with_source(logger, "cli", "info", "Running migrations", action=action, revision=revision)
    click.echo(banner.format(rev=revision))

    result = subprocess.run(
        [sys.executable, "-m", "alembic", "-c", str(ini)]
        + [arg.format(rev=revision) for arg in args],
        cwd=root,
    )
    if result.returncode != 0:
        _fail(logger, "Migration failed", "Migration failed.", result.returncode,
              exit_code=result.returncode)
    logger.info("Migration completed", extra={"action": action})


if __name__ == "__main__":
    main()
