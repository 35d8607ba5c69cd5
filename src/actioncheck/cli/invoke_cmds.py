# src/actioncheck/cli/invoke_cmds.py

import json
from typing import Any

import click
from rich.console import Console

from actioncheck.cases import FunctionContext
from actioncheck.cli.report import render_summary
from actioncheck.cli.utils import exit_code_for
from actioncheck.runner import TestRunner
from actioncheck.telemetry import get_logger

log = get_logger("cli.invoke")


def _json_option(ctx: click.Context, param: click.Parameter, value: str | None) -> Any:
    """Parses an option as JSON, falling back to the raw string."""
    if value is None:
        return None
    try:
        return json.loads(value)
    except ValueError:
        return value


@click.command(name="invoke")
@click.argument("function_id")
@click.option("-d", "--description", default="", help="Label shown for this test case.")
@click.option("-p", "--payload", default=None, help="Request payload, sent as given.")
@click.option("--qualifier", default=None, help="Version or alias to invoke.")
@click.option("--dry-run", is_flag=True, default=False, help="Validate the request without running the function.")
@click.option("--expect-status", type=int, default=None, help="Expected status code.")
@click.option(
    "--expect-payload",
    default=None,
    callback=_json_option,
    help="Expected response payload as JSON; non-JSON text is compared as a string.",
)
@click.option("--exact", is_flag=True, default=False, help="Require the payload to match exactly, not as a subset.")
@click.option("--expect-version", default=None, help="Expected executed version.")
@click.option("--expect-function-error", default=None, help="Expected function error message.")
@click.option("--region", default=None, envvar="AWS_REGION", help="AWS region of the function.")
@click.pass_context
def invoke_cli(
    ctx: click.Context,
    function_id: str,
    description: str,
    payload: str | None,
    qualifier: str | None,
    dry_run: bool,
    expect_status: int | None,
    expect_payload: Any,
    exact: bool,
    expect_version: str | None,
    expect_function_error: str | None,
    region: str | None,
):
    """Invoke the AWS Lambda function FUNCTION_ID (name or ARN) and check the response."""
    client_kwargs = {"region_name": region} if region else {}
    context = FunctionContext.default(**client_kwargs)

    test_case = context.invoke(function_id, description)
    if payload is not None:
        test_case.with_payload(payload)
    if qualifier:
        test_case.with_qualifier(qualifier)
    if dry_run:
        test_case.as_dry_run()
    if expect_status is not None:
        test_case.expect_status(expect_status)
    if expect_payload is not None:
        if exact:
            test_case.expect_exact_payload(expect_payload)
        else:
            test_case.expect_payload(expect_payload)
    if expect_version is not None:
        test_case.expect_version(expect_version)
    if expect_function_error is not None:
        test_case.expect_function_error(expect_function_error)

    log.debug("Running invoke test case", target=test_case.target)
    summary = TestRunner(ctx.obj["RUNNER_CONFIG"]).run([test_case])
    render_summary(summary, Console())
    ctx.exit(exit_code_for(summary))

# ⚙️🛠️
