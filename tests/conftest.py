import io
import shutil
from typing import Any
from unittest.mock import MagicMock

import pytest

from actioncheck.cases import FunctionContext, ProcessContext


def lambda_response(
    payload: bytes = b"",
    status: int = 200,
    function_error: str | None = None,
    version: str | None = "$LATEST",
) -> dict[str, Any]:
    """Builds a dict shaped like a boto3 Lambda invoke response."""
    response: dict[str, Any] = {
        "StatusCode": status,
        "Payload": io.BytesIO(payload),
        "ResponseMetadata": {"HTTPStatusCode": status},
    }
    if function_error is not None:
        response["FunctionError"] = function_error
    if version is not None:
        response["ExecutedVersion"] = version
    return response


@pytest.fixture
def lambda_client() -> MagicMock:
    """Provides a mock Lambda client returning a successful empty response."""
    client = MagicMock()
    client.invoke.return_value = lambda_response()
    return client


@pytest.fixture
def function_context(lambda_client: MagicMock) -> FunctionContext:
    return FunctionContext(lambda_client)


@pytest.fixture
def process_context() -> ProcessContext:
    return ProcessContext.default()


@pytest.fixture
def echo() -> str:
    """Skips the test when there is no echo binary to run."""
    if shutil.which("echo") is None:
        pytest.skip("echo is not available")
    return "echo"


@pytest.fixture
def make_response():
    """Returns a factory for boto3-shaped invoke responses."""
    return lambda_response
