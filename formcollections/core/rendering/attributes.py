"""
Attribute Merger
================

Compute the final html attributes of one collection item by merging
caller options for ``checked``/``disabled`` with the item's own signals.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Dict, Optional

from formcollections.core.rendering.errors import InvalidOptionShapeError
from formcollections.models.schemas import HtmlAttributes, RenderOptions, ResolvedEntry

CONTROLLED_OPTIONS = ("checked", "disabled")

_SCALAR_TYPES = (str, bytes)


def same_value(value: Any, candidate: Any) -> bool:
    """Equality that keeps booleans apart from the integers 0 and 1."""
    return isinstance(value, bool) == isinstance(candidate, bool) and value == candidate


def option_accepts(option: str, rule: Any, item: Any, value: Any) -> bool:
    """
    Decide whether a checked/disabled rule accepts an item.

    Args:
        option: Option name, used in error messages
        rule: Predicate over the raw item, a single value or a collection of values
        item: Raw collection item
        value: Resolved item value

    Returns:
        True if the attribute should be set

    Raises:
        InvalidOptionShapeError: If the rule is a mapping
    """
    if callable(rule):
        return bool(rule(item))
    if isinstance(rule, Mapping):
        raise InvalidOptionShapeError(option, rule)
    if isinstance(rule, Iterable) and not isinstance(rule, _SCALAR_TYPES):
        return any(same_value(value, candidate) for candidate in rule)
    return same_value(value, rule)


def merge(
    item: Any,
    entry: ResolvedEntry,
    options: RenderOptions,
    html_options: Optional[HtmlAttributes] = None,
) -> Dict[str, Any]:
    """
    Build the html attributes for one item.

    Returns a copy of ``html_options`` with ``checked``/``disabled`` set when
    the caller's option accepts the item or the item reports the signal
    itself. Item-level signals only ever turn an attribute on.
    """
    attributes = dict(html_options or {})

    for option in CONTROLLED_OPTIONS:
        rule = getattr(options, option)
        if rule is None:
            continue
        if option_accepts(option, rule, item, entry.value):
            attributes[option] = True

    if entry.disabled:
        attributes["disabled"] = True
    if entry.checked:
        attributes["checked"] = True

    return attributes
