"""
Logging processors for structlog event processing.

This module provides processors for stripping narration markup from logged
text and adding correlation IDs to log entries.
"""

import re
import uuid
from typing import Any

# Inline emphasis/color tags used by narration (<b>, </red>, ...)
MARKUP_TAG_PATTERN = re.compile(r"</?(?:b|bold|red|green|yellow|blue|cyan|magenta|white)>")

# Fields that may carry rendered narration
_NARRATION_FIELDS = ("message", "text", "narration")


def strip_markup(text: str) -> str:
    """Remove inline markup tags from a narration string."""
    return MARKUP_TAG_PATTERN.sub("", text)


def strip_narration_markup(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Strip markup tags from narration fields in log entries.

    Narration is logged for debugging; the tags are meaningful only to the
    transport renderer and make log lines hard to read.

    Args:
        _logger: Logger instance (unused)
        _name: Logger name (unused)
        event_dict: Event dictionary to clean

    Returns:
        Event dictionary with plain-text narration fields
    """
    for field_name in _NARRATION_FIELDS:
        value = event_dict.get(field_name)
        if isinstance(value, str):
            event_dict[field_name] = strip_markup(value)
    return event_dict


def add_correlation_id(_logger: Any, _name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Add correlation ID to log entries if not already present.

    Args:
        _logger: Logger instance (unused)
        _name: Logger name (unused)
        event_dict: Event dictionary to enhance

    Returns:
        Enhanced event dictionary with correlation ID
    """
    if "correlation_id" not in event_dict:
        event_dict["correlation_id"] = str(uuid.uuid4())

    return event_dict
