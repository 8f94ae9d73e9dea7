"""Emit command - write one log line from the shell.

A thin adapter between click and ``ConsoleLogger``: it loads the config,
applies the command-line overrides and performs a single emit operation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

import click

from ...config import ConfigLoader
from ...domain.entities.log_options import LogOptions
from ...domain.entities.severity import Severity
from ...infrastructure.logging.console_logger import ConsoleLogger


@dataclass(frozen=True)
class EmitCommandOptions:
    severity: Severity
    message: str
    config_file: Path | None
    level: str | None
    allow: tuple[str, ...]
    noconvert: bool
    prefix: bool | None
    dateformat: str | None

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> EmitCommandOptions:
        return cls(
            severity=Severity(cast("str", options["severity"])),
            message=cast("str", options["message"]),
            config_file=cast("Path | None", options.get("config_file")),
            level=cast("str | None", options.get("level")),
            allow=cast("tuple[str, ...]", options.get("allow") or ()),
            noconvert=cast("bool", options["noconvert"]),
            prefix=cast("bool | None", options.get("prefix")),
            dateformat=cast("str | None", options.get("dateformat")),
        )


@click.command()
@click.argument(
    "severity", type=click.Choice([severity.value for severity in Severity])
)
@click.argument("message")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a prologger.toml config file (default: ./prologger.toml)",
)
@click.option("--level", help="Named level this line belongs to")
@click.option(
    "--allow",
    multiple=True,
    help="Allow a named level (repeatable; added to the configured levels)",
)
@click.option(
    "--noconvert",
    is_flag=True,
    default=False,
    help="Write MESSAGE without a timestamp",
)
@click.option(
    "--prefix/--no-prefix",
    default=None,
    help="Force or suppress the severity tag (default: from config)",
)
@click.option("--dateformat", help="Date mask for the timestamp")
def emit_command(**kwargs: object) -> None:
    """Write MESSAGE through the logger with the given SEVERITY."""
    options = EmitCommandOptions.from_kwargs(kwargs)
    config = ConfigLoader.load(options.config_file)
    if options.allow:
        config = replace(config, levels=(*config.levels, *options.allow))
    if options.dateformat:
        config = replace(config, dateformat=options.dateformat)
    if options.prefix is not None:
        config = replace(config, noprefix=not options.prefix)
    logger = ConsoleLogger.from_config(config)
    emit = getattr(logger, options.severity.value)
    emit(
        options.message,
        LogOptions(level=options.level, noconvert=options.noconvert),
    )
