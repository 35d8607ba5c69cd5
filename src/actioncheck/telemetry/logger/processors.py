# src/actioncheck/telemetry/logger/processors.py

"""
structlog processors used by the actioncheck logging pipeline.
"""

import logging
from typing import Any

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
    "pass": "✅",
    "fail": "🚫",
    "exec": "⚙️",
    "invoke": "☁️",
    "handle": "🧩",
}

# Keys that are only useful to processors earlier in the chain.
_INTERNAL_KEYS = ("emoji_key",)


def add_emoji_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Prefixes the event with an emoji chosen by `emoji_key` or the log level."""
    emoji_key = event_dict.get("emoji_key")
    if emoji_key is not None:
        emoji = LOG_EMOJIS.get(emoji_key)
    else:
        level = logging.getLevelName(event_dict.get("level", method_name).upper())
        emoji = LOG_EMOJIS.get(level)
    if emoji and isinstance(event_dict.get("event"), str):
        event_dict["event"] = f"{emoji} {event_dict['event']}"
    return event_dict


def remove_extra_keys_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for key in _INTERNAL_KEYS:
        event_dict.pop(key, None)
    return event_dict


# 🔼⚙️
