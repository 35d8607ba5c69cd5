#
# src/actioncheck/handler.py
#
"""
Calls an in-process Lambda-style handler the way the Lambda runtime would.

The request bytes are decoded as the JSON event, the handler is called with
`(event, context)`, and its return value is encoded back to JSON bytes.
"""

import json
import time
import uuid
from collections.abc import Callable
from typing import Any

from attrs import define, field

from actioncheck.exceptions import ExecutionError
from actioncheck.telemetry import get_logger

log = get_logger("handler")

Handler = Callable[[Any, Any], Any]


def handler_name(handler: Handler) -> str:
    """Returns a dotted, human-readable name for a handler callable."""
    module = getattr(handler, "__module__", None)
    qualname = getattr(handler, "__qualname__", None) or type(handler).__qualname__
    return f"{module}.{qualname}" if module else qualname


@define(slots=True)
class LambdaContext:
    """A stand-in for the context object the Lambda runtime passes to handlers."""

    function_name: str
    function_version: str = "$LATEST"
    invoked_function_arn: str = ""
    memory_limit_in_mb: int = 128
    aws_request_id: str = field(factory=lambda: str(uuid.uuid4()))
    log_group_name: str = ""
    log_stream_name: str = ""
    timeout_seconds: float = 3.0
    _started: float = field(factory=time.monotonic, init=False, repr=False)

    @classmethod
    def for_handler(cls, handler: Handler) -> "LambdaContext":
        name = handler_name(handler)
        return cls(
            function_name=name,
            invoked_function_arn=f"arn:aws:lambda:local:000000000000:function:{name}",
            log_group_name=f"/aws/lambda/{name}",
        )

    def get_remaining_time_in_millis(self) -> int:
        elapsed = time.monotonic() - self._started
        return max(0, int((self.timeout_seconds - elapsed) * 1000))


class HandlerAdapter:
    """Wraps a handler so it can be driven with raw payload bytes."""

    def __init__(self, handler: Handler):
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {type(handler).__name__}")
        self.handler = handler
        self.name = handler_name(handler)

    def invoke(self, payload: bytes, context: Any) -> bytes:
        """
        Calls the handler with the decoded event and returns the encoded response.

        Raises:
            ExecutionError: if the event cannot be decoded, the handler raises,
                or the return value cannot be encoded.
        """
        try:
            event = json.loads(payload) if payload else None
        except ValueError as e:
            raise ExecutionError("handler event is not valid JSON", target=self.name, details=e) from e

        log.debug("Calling handler", handler=self.name)
        try:
            response = self.handler(event, context)
        except Exception as e:
            raise ExecutionError(f"handler raised {type(e).__name__}: {e}", target=self.name, details=e) from e

        if isinstance(response, (bytes, bytearray)):
            return bytes(response)
        try:
            return json.dumps(response).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ExecutionError("handler response is not JSON serializable", target=self.name, details=e) from e


# 🔼⚙️
