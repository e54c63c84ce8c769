"""Operator CLI for inspecting backend locations and stdin sources."""

import logging
import sys

import click

from .backends import BackendConfigError, EnvironmentApplier, default_registry
from .config import Settings
from .fs import O_RDONLY, EmptySourceError, ReaderFS

READ_CHUNK_SIZE = 1 << 20

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: $LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """backupsrc - backup source and backend configuration tools."""
    settings = Settings.from_env()
    level = (log_level or settings.log_level).upper()
    if level not in LOG_LEVELS:
        raise click.BadParameter(
            f"{settings.log_level!r} is not one of {', '.join(LOG_LEVELS)}",
            param_hint="LOG_LEVEL",
        )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"settings": settings, "registry": default_registry()}


@cli.command()
@click.argument("location")
@click.pass_obj
def redact(obj: dict, location: str):
    """Print LOCATION with any embedded password masked."""
    click.echo(obj["registry"].strip_password(location))


@cli.command("show-config")
@click.argument("location", required=False)
@click.pass_obj
def show_config(obj: dict, location: str | None):
    """Parse LOCATION (default: $BACKUP_REPOSITORY) and print the resolved config."""
    settings: Settings = obj["settings"]
    registry = obj["registry"]
    location = location or settings.repository
    if not location:
        raise click.UsageError("no location given and BACKUP_REPOSITORY is not set")

    try:
        config = registry.parse(location)
    except BackendConfigError as e:
        raise click.ClickException(str(e)) from e

    if isinstance(config, EnvironmentApplier):
        config.apply_environment(settings.env_prefix)

    click.echo(f"endpoint: {config.url.redacted()}")
    click.echo(f"connections: {config.connections}")


@cli.command()
@click.pass_obj
def options(obj: dict):
    """List the options every backend accepts."""
    for option in obj["registry"].options():
        click.echo(f"{option.key:<24} {option.help}")


@cli.command()
@click.option("--stdin-filename", default=None, help="Name of the file inside the virtual tree")
@click.option("--allow-empty", is_flag=True, help="Accept empty input")
@click.pass_obj
def stdin(obj: dict, stdin_filename: str | None, allow_empty: bool):
    """Read standard input through the virtual filesystem and report it."""
    settings: Settings = obj["settings"]
    if stdin_filename:
        settings = settings.model_copy(update={"stdin_filename": stdin_filename})
    allow_empty = allow_empty or settings.allow_empty_file

    fs = ReaderFS(settings.stdin_path, sys.stdin.buffer, allow_empty_file=allow_empty)

    for name in ["/", *fs.ancestors()]:
        info = fs.lstat(name)
        click.echo(f"dir  {name} ({info.mode:o})")

    fi = fs.lstat(fs.name)
    total = 0
    try:
        with fs.open_file(fs.name, O_RDONLY) as f:
            while True:
                chunk = f.read(READ_CHUNK_SIZE)
                if not chunk:
                    break
                total += len(chunk)
    except EmptySourceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    node = fs.node_from_fileinfo(fs.name, fi)
    click.echo(f"file {fs.name} ({total} bytes, uid={node.uid}, gid={node.gid})")


if __name__ == "__main__":
    cli()
