# src/actioncheck/cli/utils.py

import logging
from typing import Any

import click

from actioncheck.telemetry import get_logger, setup_logging as core_setup_logging

log = get_logger("cli.utils")

LOG_LEVEL_CHOICES = click.Choice(list(logging.getLevelNamesMapping().keys()), case_sensitive=False)

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def logging_options(f):
    """Decorator to add logging options to any command."""
    f = click.option(
        "-l",
        "--log-level",
        type=LOG_LEVEL_CHOICES,
        default=None,
        envvar="ACTIONCHECK_LOG_LEVEL",
        help="Set the logging level.",
    )(f)
    f = click.option(
        "--log-file",
        type=click.Path(dir_okay=False, writable=True, resolve_path=True),
        default=None,
        envvar="ACTIONCHECK_LOG_FILE",
        help="Path to write logs to a file (JSON format).",
    )(f)
    f = click.option(
        "--json-logs",
        is_flag=True,
        default=None,
        envvar="ACTIONCHECK_JSON_LOGS",
        help="Output console logs as JSON.",
    )(f)
    return f


def setup_logging_from_context(
    ctx: click.Context,
    default_log_level: str = "WARNING",
) -> None:
    """
    Setup logging using the values stored on the context by the main group.
    """
    log_level_str = ctx.obj.get("LOG_LEVEL") or default_log_level
    log_file_path = ctx.obj.get("LOG_FILE")
    use_json_logs = bool(ctx.obj.get("JSON_LOGS", False))

    numeric_level = logging.getLevelNamesMapping().get(log_level_str.upper(), logging.INFO)

    core_setup_logging(
        level=numeric_level,
        json_logs=use_json_logs,
        log_file=log_file_path,
    )

    log.debug(
        "CLI logging initialized via utils",
        level=log_level_str,
        file=log_file_path or "console",
        json=use_json_logs,
    )


def parse_key_values(pairs: tuple[str, ...], option_name: str) -> dict[str, str]:
    """Turns repeated KEY=VALUE options into a dict."""
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got '{pair}'", param_hint=option_name)
        parsed[key] = value
    return parsed


def exit_code_for(summary: Any) -> int:
    if summary.errored:
        return EXIT_ERROR
    return EXIT_PASSED if summary.ok else EXIT_FAILED

# ⚙️🛠️
