"""
Rendering Errors
================

Errors raised while rendering a collection. They propagate to the caller
and abort the whole render call.
"""

from typing import Any


class CollectionRenderError(Exception):
    """Base exception for collection rendering failures."""

    pass


class MissingAccessorError(CollectionRenderError, AttributeError):
    """Raised when a field accessor does not resolve on a collection item."""

    def __init__(self, accessor: Any, item: Any) -> None:
        self.accessor = accessor
        self.item = item
        super().__init__(f"Collection item {item!r} does not support accessor {accessor!r}")


class InvalidOptionShapeError(CollectionRenderError, TypeError):
    """Raised when a checked/disabled option is neither a predicate, a value, nor a set of values."""

    def __init__(self, option: str, rule: Any) -> None:
        self.option = option
        self.rule = rule
        super().__init__(
            f"Option {option!r} must be a predicate, a value or a collection of values, "
            f"got {type(rule).__name__}"
        )
