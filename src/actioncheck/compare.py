#
# src/actioncheck/compare.py
#
"""
Structural comparison of an expected value against an actual decoded value.

Returns every mismatch found rather than stopping at the first one.
"""

import json
from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any

import attrs

from actioncheck.payload import FunctionError


def _normalize(value: Any) -> Any:
    if isinstance(value, FunctionError):
        return value.as_dict()
    if attrs.has(type(value)):
        return attrs.asdict(value)
    if isinstance(value, tuple):
        return list(value)
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_array(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if _is_array(value):
        return "array"
    return type(value).__name__


def format_value(value: Any) -> str:
    """Renders a value the way it would appear in JSON."""
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(value)


def compare_values(name: str, expected: Any, actual: Any, exact: bool = False) -> list[str]:
    """
    Compares `actual` against `expected`, naming mismatches from `name` down.

    In subset mode (the default) only the fields and list items present in
    `expected` are checked. In exact mode extra fields and extra items are
    mismatches too.
    """
    expected = _normalize(expected)
    actual = _normalize(actual)

    if isinstance(expected, Mapping):
        if not isinstance(actual, Mapping):
            return [f"{name}: expected object, got {_kind(actual)} {format_value(actual)}"]
        return _compare_objects(name, expected, actual, exact)

    if _is_array(expected):
        if not _is_array(actual):
            return [f"{name}: expected array, got {_kind(actual)} {format_value(actual)}"]
        return _compare_arrays(name, expected, actual, exact)

    if _is_number(expected):
        if not _is_number(actual):
            return [f"{name}: expected number {format_value(expected)}, got {_kind(actual)} {format_value(actual)}"]
        if expected != actual:
            return [f"{name}: expected {format_value(expected)}, got {format_value(actual)}"]
        return []

    if _kind(expected) != _kind(actual):
        return [
            f"{name}: expected {_kind(expected)} {format_value(expected)}, "
            f"got {_kind(actual)} {format_value(actual)}"
        ]
    if expected != actual:
        return [f"{name}: expected {format_value(expected)}, got {format_value(actual)}"]
    return []


def _compare_objects(name: str, expected: Mapping, actual: Mapping, exact: bool) -> list[str]:
    errors: list[str] = []
    for key, expected_value in expected.items():
        path = f"{name}.{key}"
        if key not in actual:
            errors.append(f"{path}: expected field is missing")
            continue
        errors.extend(compare_values(path, expected_value, actual[key], exact))

    if exact:
        for key in actual:
            if key not in expected:
                errors.append(f"{name}.{key}: unexpected field with value {format_value(actual[key])}")
    return errors


def _compare_arrays(name: str, expected: Sequence, actual: Sequence, exact: bool) -> list[str]:
    errors: list[str] = []
    if exact and len(expected) != len(actual):
        errors.append(f"{name}: expected {len(expected)} items, got {len(actual)}")

    for index, expected_item in enumerate(expected):
        path = f"{name}[{index}]"
        if index >= len(actual):
            # Exact mode has already reported the length difference.
            if not exact:
                errors.append(f"{path}: expected item is missing")
            continue
        errors.extend(compare_values(path, expected_item, actual[index], exact))
    return errors


# 🔼⚙️
