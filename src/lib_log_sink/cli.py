"""Click command line for operators and smoke tests.

Contents
--------
* :func:`cli` - command group with ``info``, ``emit``, and ``prepare``.
* :func:`main` - runner delegating exit-code mapping to ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .adapters import prepare_logs_dir
from .domain import LogOptions, Severity
from .runtime import build_facility, build_facility_settings

_SEVERITY_NAMES = [severity.name.lower() for severity in Severity]


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show the full Python traceback when a command fails.",
)
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool, traceback: bool, version: bool) -> None:
    """Write severity-leveled log records from the shell."""

    if ctx.get_parameter_source("traceback") is not click.core.ParameterSource.DEFAULT:
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback
    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()
    if version:
        click.echo(__init__conf__.version)
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print distribution metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("emit")
@click.argument("severity", type=click.Choice(_SEVERITY_NAMES, case_sensitive=False))
@click.argument("message")
@click.option("--file", "target_file", default=None, help="Explicit log file stem.")
@click.option("--id", "instance_id", default=None, help="Suffix appended to the log file name.")
@click.option("--webhook/--no-webhook", "forward_to_webhook", default=False, help="Force webhook forwarding on or off.")
@click.option("--logs-dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="Directory receiving log files.")
@click.option("--site-name", default="", help="Site name used in alert subjects.")
@click.option("--admin-email", default="", help="Fallback alert recipient.")
@click.pass_context
def emit_command(
    ctx: click.Context,
    severity: str,
    message: str,
    target_file: str | None,
    instance_id: str | None,
    forward_to_webhook: bool,
    logs_dir: Path | None,
    site_name: str,
    admin_email: str,
) -> None:
    """Log MESSAGE at SEVERITY using LOG_SINK_* settings."""

    settings = build_facility_settings(logs_dir=logs_dir, site_name=site_name, admin_email=admin_email)
    facility = build_facility(settings)
    forward: bool | None = None
    if ctx.get_parameter_source("forward_to_webhook") is not click.core.ParameterSource.DEFAULT:
        forward = forward_to_webhook
    options = LogOptions(instance_id=instance_id, target_file=target_file, forward_to_webhook=forward)
    getattr(facility, severity.lower())(message, options)


@cli.command("prepare")
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path))
def prepare_command(directory: Path) -> None:
    """Create DIRECTORY with web-server protection files."""

    if prepare_logs_dir(directory):
        click.echo(f"created {directory}")
    else:
        click.echo(f"{directory} already exists; left untouched")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group through ``lib_cli_exit_tools`` and return its exit code.

    Traceback preferences changed by ``--traceback`` only last for this run.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    1...
    0
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
