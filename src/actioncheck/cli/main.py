# src/actioncheck/cli/main.py

"""
Main CLI entry point for actioncheck using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click

from actioncheck.cli.exec_cmds import exec_cli
from actioncheck.cli.invoke_cmds import invoke_cli
from actioncheck.cli.utils import logging_options, setup_logging_from_context
from actioncheck.config import RunnerConfig
from actioncheck.telemetry import StructLogger, get_logger

try:
    __version__ = version("actioncheck")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="actioncheck")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    Actioncheck: run an action once and judge its outcome.

    Each command builds a single test case from its options, executes it,
    and exits 0 when every expectation holds, 1 on mismatches and 2 when the
    action could not be run at all.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False
    ctx.obj["RUNNER_CONFIG"] = RunnerConfig(log_level=log_level or "WARNING")

    setup_logging_from_context(ctx, default_log_level="WARNING")
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(exec_cli)
cli.add_command(invoke_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
