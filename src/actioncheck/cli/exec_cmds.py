# src/actioncheck/cli/exec_cmds.py

from pathlib import Path

import click
from rich.console import Console

from actioncheck.cases import ProcessContext
from actioncheck.cli.report import render_summary
from actioncheck.cli.utils import exit_code_for, parse_key_values
from actioncheck.runner import TestRunner
from actioncheck.telemetry import get_logger

log = get_logger("cli.exec")


@click.command(name="exec", context_settings={"ignore_unknown_options": True})
@click.argument("command")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("-d", "--description", default="", help="Label shown for this test case.")
@click.option("--expect-exit-code", type=int, default=None, help="Expected exit code.")
@click.option("--expect-stdout", default=None, help="Expected standard output, compared exactly.")
@click.option("--expect-stderr", default=None, help="Expected standard error, compared exactly.")
@click.option("--stdin", "stdin_text", default=None, help="Text to feed on standard input.")
@click.option("-e", "--env", "env_pairs", multiple=True, metavar="KEY=VALUE", help="Environment variable for the process.")
@click.option("--inherit-env/--no-inherit-env", default=False, show_default=True, help="Start from the current environment.")
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Working directory for the process.",
)
@click.pass_context
def exec_cli(
    ctx: click.Context,
    command: str,
    args: tuple[str, ...],
    description: str,
    expect_exit_code: int | None,
    expect_stdout: str | None,
    expect_stderr: str | None,
    stdin_text: str | None,
    env_pairs: tuple[str, ...],
    inherit_env: bool,
    cwd: Path | None,
):
    """Run COMMAND with ARGS and check its exit code and output."""
    env = parse_key_values(env_pairs, "--env")

    context = ProcessContext.default().with_inherited_environment(inherit_env)
    test_case = context.run(command, description).with_args(*args).with_env_vars(env)
    if stdin_text is not None:
        test_case.with_stdin(stdin_text)
    if cwd is not None:
        test_case.with_working_dir(cwd)
    if expect_exit_code is not None:
        test_case.expect_exit_code(expect_exit_code)
    if expect_stdout is not None:
        test_case.expect_stdout(expect_stdout)
    if expect_stderr is not None:
        test_case.expect_stderr(expect_stderr)

    log.debug("Running exec test case", target=test_case.target)
    summary = TestRunner(ctx.obj["RUNNER_CONFIG"]).run([test_case])
    render_summary(summary, Console())
    ctx.exit(exit_code_for(summary))

# ⚙️🛠️
