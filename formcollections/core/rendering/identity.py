"""
Identity Sanitizer
==================

Derive element id fragments from an attribute name and an item value.
The fragment is the ``for`` target of a collection label and matches the
id the input primitives assign to the element they generate.
"""

import re
from typing import Any

_WHITESPACE = re.compile(r"\s+")
_NON_ID_CHARACTERS = re.compile(r"[^-\w]")


def to_param(value: Any) -> str:
    """Stringify a value the way it appears in markup."""
    if value is None:
        return ""
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def sanitize_value(value: Any) -> str:
    """Clean a value for use inside an element id."""
    cleaned = _WHITESPACE.sub("_", to_param(value))
    return _NON_ID_CHARACTERS.sub("", cleaned).lower()


def sanitize_attribute_name(attribute: str, value: Any) -> str:
    """
    Build the id fragment ``<attribute>_<cleaned value>``.

    Empty or all-punctuation values yield ``<attribute>_``; uniqueness
    across a collection is left to the caller.
    """
    return f"{attribute}_{sanitize_value(value)}"
