#
# src/actioncheck/cases/function.py
#
"""
Test cases that invoke an AWS Lambda function, remotely by name or ARN or
locally through an in-process handler.
"""

from collections.abc import Mapping
from typing import Any, Self, TypeAlias

import boto3
from attrs import define
from botocore.exceptions import BotoCoreError, ClientError

from actioncheck.cases.base import ActionTestCase
from actioncheck.exceptions import ConfigurationError
from actioncheck.handler import Handler, HandlerAdapter, LambdaContext, handler_name
from actioncheck.protocols import ActionKind, LambdaAPI
from actioncheck.telemetry import get_logger
from actioncheck.validation import InvocationFailure, Outcome

log = get_logger("cases.function")

VERSION_LATEST = "$LATEST"
HANDLER_STATUS = 200

INVOCATION_REQUEST_RESPONSE = "RequestResponse"
INVOCATION_DRY_RUN = "DryRun"


@define(frozen=True, slots=True)
class FunctionTarget:
    function_id: str

    def __str__(self) -> str:
        target = self.function_id.replace("arn:aws:lambda:", ":::", 1)
        target = target.replace(":function:", "::", 1)
        return f"AWS Lambda ({target})"


@define(frozen=True, slots=True)
class HandlerTarget:
    handler: Handler

    def __str__(self) -> str:
        return f"AWS Lambda handler ({handler_name(self.handler)})"


Target: TypeAlias = FunctionTarget | HandlerTarget


class FunctionContext:
    """
    Holds the Lambda client shared by the test cases created through it.

    A context without a client can only be used for handler test cases.
    """

    def __init__(self, client: LambdaAPI | None = None):
        self.client = client

    @classmethod
    def default(cls, **client_kwargs: Any) -> "FunctionContext":
        """A context using a boto3 Lambda client built from the default credential chain."""
        return cls(boto3.client("lambda", **client_kwargs))

    @classmethod
    def empty(cls) -> "FunctionContext":
        """A context with no client, suitable only for local handlers."""
        return cls()

    def invoke(self, function_id: str, *description: str) -> "FunctionTestCase":
        return FunctionTestCase(self, function_id=function_id, description=" ".join(description))

    def handle(self, handler: Handler, *description: str) -> "FunctionTestCase":
        return FunctionTestCase(self, handler=handler, description=" ".join(description))


class FunctionTestCase(ActionTestCase):
    """
    Invokes a function and checks its status, payload, version and function error.

    Exactly one of `function_id` and `handler` must be set when the test case
    is executed.
    """

    def __init__(
        self,
        context: FunctionContext,
        function_id: str | None = None,
        handler: Handler | None = None,
        description: str = "",
    ):
        super().__init__(description)
        self.function_id = function_id
        self.handler = handler
        self.invocation_type = INVOCATION_REQUEST_RESPONSE
        self.qualifier: str | None = None
        self._client = context.client

    @property
    def action(self) -> ActionKind:
        return ActionKind.INVOKE if self.function_id else ActionKind.HANDLE

    @property
    def target(self) -> str:
        if self.function_id:
            return str(FunctionTarget(self.function_id))
        if self.handler is not None:
            return str(HandlerTarget(self.handler))
        return "AWS Lambda (unconfigured)"

    def _default_description(self) -> str:
        verb = "Invoke" if self.function_id else "Call"
        return f"{verb} {self.target}"

    # --- Builder methods ---
    def with_payload(self, payload: Any) -> Self:
        self._set_payload(payload)
        return self

    def with_qualifier(self, qualifier: str) -> Self:
        """Invokes a specific version or alias."""
        self.qualifier = qualifier
        return self

    def as_dry_run(self) -> Self:
        """Validates parameters and permissions without running the function."""
        self.invocation_type = INVOCATION_DRY_RUN
        return self

    def expect_status(self, status: int) -> Self:
        self.expectations.status = status
        return self

    def expect_payload(self, payload: Any) -> Self:
        self.expectations.payload = payload
        return self

    def expect_exact_payload(self, payload: Any) -> Self:
        self.expectations.payload = payload
        self.expectations.exact_payload = True
        return self

    def expect_version(self, version: str) -> Self:
        self.expectations.version = version
        return self

    def expect_function_error(self, message: str) -> Self:
        self.expectations.function_error = message
        return self

    # --- Execution ---
    def _resolve_target(self) -> Target:
        if self.function_id and self.handler is not None:
            raise ConfigurationError("FunctionTestCase must specify either function_id or handler, not both")
        if self.function_id:
            return FunctionTarget(self.function_id)
        if self.handler is not None:
            return HandlerTarget(self.handler)
        raise ConfigurationError("FunctionTestCase must specify a function_id or a handler")

    def _perform(self) -> Outcome:
        target = self._resolve_target()
        if isinstance(target, FunctionTarget):
            return self._invoke(target)
        return self._handle(target)

    def _invoke(self, target: FunctionTarget) -> Outcome:
        if self._client is None:
            raise ConfigurationError("no AWS Lambda client provided", target=str(target))

        request: dict[str, Any] = {
            "FunctionName": target.function_id,
            "InvocationType": self.invocation_type,
            "Payload": self.encoded_payload(),
        }
        if self.qualifier:
            request["Qualifier"] = self.qualifier

        try:
            response = self._client.invoke(**request)
        except ClientError as e:
            error = e.response.get("Error", {})
            status = e.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
            log.debug("Invocation rejected", target=str(target), status=status, code=error.get("Code"))
            return Outcome(
                status=status,
                invocation_error=InvocationFailure(message=error.get("Message") or str(e), code=error.get("Code")),
            )
        except BotoCoreError as e:
            log.debug("Invocation could not be sent", target=str(target), error=str(e))
            return Outcome(invocation_error=InvocationFailure(message=str(e)), launched=False)

        return Outcome(
            status=response.get("StatusCode"),
            payload=_read_payload(response),
            function_error=response.get("FunctionError"),
            version=response.get("ExecutedVersion"),
        )

    def _handle(self, target: HandlerTarget) -> Outcome:
        adapter = HandlerAdapter(target.handler)
        payload = self.encoded_payload()
        response = adapter.invoke(payload, LambdaContext.for_handler(target.handler))
        return Outcome(status=HANDLER_STATUS, payload=response)


def _read_payload(response: Mapping[str, Any]) -> bytes:
    body = response.get("Payload")
    if body is None:
        return b""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    # botocore StreamingBody
    try:
        return body.read()
    finally:
        body.close()


# 🔼⚙️
