#
# src/actioncheck/payload.py
#
"""
Request payload encoding and response payload decoding.

A request payload can be supplied in several representations (raw bytes, text,
a producer function, a fallible producer function or any JSON-serializable
value). Each representation is a small attrs class with a `resolve()` method.
`RequestPayload` wraps one of them and caches the resolved bytes so that
producer functions run at most once per test case.

Responses are decoded by `decode_response`, which tries an ordered list of
parse attempts and returns the first that succeeds.
"""

import json
import threading
from collections.abc import Callable
from typing import Any, TypeAlias

import attrs
from attrs import define, field, mutable

from actioncheck.exceptions import EncodingError
from actioncheck.telemetry import get_logger

log = get_logger("payload")

ERROR_MESSAGE_FIELD = "errorMessage"
ERROR_TYPE_FIELD = "errorType"
_ERROR_RECORD_FIELDS = frozenset({ERROR_MESSAGE_FIELD, ERROR_TYPE_FIELD})


# --- Request payload variants ---
@define(frozen=True, slots=True)
class EmptyPayload:
    """No payload at all; resolves to empty bytes."""

    def resolve(self) -> bytes:
        return b""


@define(frozen=True, slots=True)
class RawPayload:
    data: bytes = field(converter=bytes)

    def resolve(self) -> bytes:
        return self.data


@define(frozen=True, slots=True)
class TextPayload:
    text: str
    encoding: str = "utf-8"

    def resolve(self) -> bytes:
        return self.text.encode(self.encoding)


@define(frozen=True, slots=True)
class FallibleProducerPayload:
    """Wraps a zero-argument callable returning a `(bytes, error)` pair."""

    producer: Callable[[], tuple[bytes | None, Exception | None]]

    def resolve(self) -> bytes:
        return _unpack_fallible(_call_producer(self.producer))


@define(frozen=True, slots=True)
class ProducerPayload:
    """
    Wraps a zero-argument callable returning bytes.

    A producer that returns a `(bytes, error)` pair is treated like a
    FallibleProducerPayload. Exceptions raised by the producer are reported
    as EncodingError.
    """

    producer: Callable[[], Any]

    def resolve(self) -> bytes:
        produced = _call_producer(self.producer)
        if isinstance(produced, tuple) and len(produced) == 2:
            return _unpack_fallible(produced)
        return _coerce_bytes(produced)


@define(frozen=True, slots=True)
class StructuredPayload:
    """Any value serialized as compact JSON. attrs instances are converted first."""

    value: Any

    def resolve(self) -> bytes:
        value = self.value
        if attrs.has(type(value)):
            value = attrs.asdict(value)
        try:
            return json.dumps(value, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"request body: {e}", details=e) from e


Payload: TypeAlias = (
    EmptyPayload
    | RawPayload
    | TextPayload
    | ProducerPayload
    | FallibleProducerPayload
    | StructuredPayload
)
_PAYLOAD_TYPES = (
    EmptyPayload,
    RawPayload,
    TextPayload,
    ProducerPayload,
    FallibleProducerPayload,
    StructuredPayload,
)


def _call_producer(producer: Callable[[], Any]) -> Any:
    try:
        return producer()
    except Exception as e:
        raise EncodingError(f"request body: {e}", details=e) from e


def _unpack_fallible(produced: Any) -> bytes:
    try:
        data, error = produced
    except (TypeError, ValueError) as e:
        raise EncodingError("request body: producer did not return a (bytes, error) pair", details=e) from e
    if error is not None:
        raise EncodingError(f"request body: {error}", details=error) from error
    return _coerce_bytes(data)


def _coerce_bytes(data: Any) -> bytes:
    if data is None:
        return b""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    raise EncodingError(f"request body: producer returned {type(data).__name__}, expected bytes")


def payload_from(value: Any) -> Payload:
    """Classifies a loosely-typed input value into a payload variant."""
    if value is None:
        return EmptyPayload()
    if isinstance(value, _PAYLOAD_TYPES):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawPayload(value)
    if isinstance(value, str):
        return TextPayload(value)
    if callable(value):
        return ProducerPayload(value)
    return StructuredPayload(value)


@mutable(slots=True)
class RequestPayload:
    """Holds one payload variant and memoizes its resolved bytes, or the encoding failure."""

    source: Payload = field(factory=EmptyPayload, converter=payload_from)
    _encoded: bytes | None = field(default=None, init=False, repr=False)
    _error: EncodingError | None = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(factory=threading.Lock, init=False, repr=False, eq=False)

    def encode(self) -> bytes:
        with self._lock:
            if self._error is not None:
                raise self._error
            if self._encoded is None:
                try:
                    self._encoded = self.source.resolve()
                except EncodingError as e:
                    # A failed producer is not retried.
                    self._error = e
                    raise
                log.debug(
                    "Encoded request payload",
                    variant=type(self.source).__name__,
                    size=len(self._encoded),
                )
            return self._encoded


# --- Response decoding ---
@define(frozen=True, slots=True)
class FunctionError:
    """A response reporting that the function ran but raised an error."""

    message: str
    type: str

    def as_dict(self) -> dict[str, str]:
        return {ERROR_MESSAGE_FIELD: self.message, ERROR_TYPE_FIELD: self.type}


@define(frozen=True, slots=True)
class ParseAttempt:
    ok: bool
    value: Any = None


_FAILED = ParseAttempt(ok=False)


def _load_json(body: bytes) -> ParseAttempt:
    try:
        return ParseAttempt(ok=True, value=json.loads(body))
    except ValueError:
        # Covers JSONDecodeError and UnicodeDecodeError.
        return _FAILED


def _parse_function_error(body: bytes) -> ParseAttempt:
    loaded = _load_json(body)
    if not loaded.ok or not isinstance(loaded.value, dict):
        return _FAILED
    record = loaded.value
    if set(record) != _ERROR_RECORD_FIELDS:
        return _FAILED
    message, error_type = record[ERROR_MESSAGE_FIELD], record[ERROR_TYPE_FIELD]
    if not isinstance(message, str) or not isinstance(error_type, str):
        return _FAILED
    return ParseAttempt(ok=True, value=FunctionError(message=message, type=error_type))


def _parse_object(body: bytes) -> ParseAttempt:
    loaded = _load_json(body)
    if loaded.ok and isinstance(loaded.value, dict):
        return loaded
    return _FAILED


def _parse_array(body: bytes) -> ParseAttempt:
    loaded = _load_json(body)
    if loaded.ok and isinstance(loaded.value, list):
        return loaded
    return _FAILED


def _parse_text(body: bytes) -> ParseAttempt:
    text = body.decode("utf-8", errors="replace")
    return ParseAttempt(ok=True, value=text.removeprefix('"').removesuffix('"'))


# Order matters: the error record must be tried before generic objects.
RESPONSE_PARSERS: tuple[Callable[[bytes], ParseAttempt], ...] = (
    _parse_function_error,
    _parse_object,
    _parse_array,
    _parse_text,
)


def decode_response(body: bytes | None) -> Any:
    """
    Decodes a response body into a FunctionError, dict, list or str.

    Returns None for an empty body.
    """
    if not body:
        return None
    for parser in RESPONSE_PARSERS:
        attempt = parser(body)
        if attempt.ok:
            return attempt.value
    return None


def parse_function_error(body: bytes | None) -> FunctionError | None:
    """Returns the error record carried by `body`, or None if it is not one."""
    if not body:
        return None
    attempt = _parse_function_error(body)
    return attempt.value if attempt.ok else None


# 🔼⚙️
