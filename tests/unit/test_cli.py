#
# tests/unit/test_cli.py
#
"""
Tests for the command line interface.
"""

import io
import sys
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError
from click.testing import CliRunner

from actioncheck.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestMainCLI:
    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "exec" in result.output
        assert "invoke" in result.output

    def test_invalid_log_level(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--log-level", "INVALID", "exec", "--help"])
        assert result.exit_code != 0

    def test_json_logs_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--json-logs", "exec", "--help"])
        assert result.exit_code == 0


class TestExecCommand:
    def test_passing_command(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "exec",
                sys.executable,
                "-c",
                "print('Hello, World!')",
                "--expect-exit-code",
                "0",
                "--expect-stdout",
                "Hello, World!\n",
                "--expect-stderr",
                "",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "PASS" in result.output
        assert "1 passed" in result.output

    def test_mismatch_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["exec", sys.executable, "-c", "raise SystemExit(4)", "--expect-exit-code", "0"],
        )

        assert result.exit_code == 1
        assert "expected exit code 0, got 4" in result.output

    def test_missing_binary_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["exec", "/bin/does-not-exist"])

        assert result.exit_code == 1
        assert "no such file or directory" in result.output

    def test_env_and_stdin(self, runner: CliRunner) -> None:
        script = "import os, sys; print(sys.stdin.read(), os.environ['WHO'])"
        result = runner.invoke(
            cli,
            [
                "exec",
                sys.executable,
                "-c",
                script,
                "--env",
                "WHO=world",
                "--stdin",
                "hello",
                "--expect-stdout",
                "hello world\n",
            ],
        )
        assert result.exit_code == 0, result.output

    def test_bad_env_pair(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["exec", "echo", "--env", "NOEQUALS"])
        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output


class TestInvokeCommand:
    @pytest.fixture
    def lambda_client(self) -> MagicMock:
        client = MagicMock()
        client.invoke.return_value = {
            "StatusCode": 200,
            "Payload": io.BytesIO(b'"Hello Bob!"'),
            "ExecutedVersion": "$LATEST",
        }
        return client

    def test_passing_invocation(self, runner: CliRunner, lambda_client: MagicMock) -> None:
        with patch("actioncheck.cases.function.boto3.client", return_value=lambda_client):
            result = runner.invoke(
                cli,
                [
                    "invoke",
                    "testFunction",
                    "--payload",
                    '{"name": "Bob"}',
                    "--expect-status",
                    "200",
                    "--expect-payload",
                    "Hello Bob!",
                    "--exact",
                    "--expect-version",
                    "$LATEST",
                ],
            )

        assert result.exit_code == 0, result.output
        kwargs = lambda_client.invoke.call_args.kwargs
        assert kwargs["Payload"] == b'{"name": "Bob"}'

    def test_status_mismatch(self, runner: CliRunner, lambda_client: MagicMock) -> None:
        with patch("actioncheck.cases.function.boto3.client", return_value=lambda_client):
            result = runner.invoke(cli, ["invoke", "testFunction", "--expect-status", "404"])

        assert result.exit_code == 1
        assert "expected status 404, got 200" in result.output

    def test_json_payload_expectation(self, runner: CliRunner, lambda_client: MagicMock) -> None:
        lambda_client.invoke.return_value["Payload"] = io.BytesIO(b'{"message": "hi", "extra": 1}')
        with patch("actioncheck.cases.function.boto3.client", return_value=lambda_client):
            result = runner.invoke(cli, ["invoke", "testFunction", "--expect-payload", '{"message": "hi"}'])

        assert result.exit_code == 0, result.output

    def test_region_and_dry_run(self, runner: CliRunner, lambda_client: MagicMock) -> None:
        with patch("actioncheck.cases.function.boto3.client", return_value=lambda_client) as factory:
            result = runner.invoke(cli, ["invoke", "testFunction", "--dry-run", "--region", "eu-west-1"])

        assert result.exit_code == 0, result.output
        factory.assert_called_once_with("lambda", region_name="eu-west-1")
        assert lambda_client.invoke.call_args.kwargs["InvocationType"] == "DryRun"

    def test_missing_function(self, runner: CliRunner, lambda_client: MagicMock) -> None:
        lambda_client.invoke.side_effect = ClientError(
            {
                "Error": {"Code": "ResourceNotFoundException", "Message": "Function not found: doesNotExist"},
                "ResponseMetadata": {"HTTPStatusCode": 404},
            },
            "Invoke",
        )
        with patch("actioncheck.cases.function.boto3.client", return_value=lambda_client):
            result = runner.invoke(cli, ["invoke", "doesNotExist", "--expect-status", "404"])

        assert result.exit_code == 0, result.output
