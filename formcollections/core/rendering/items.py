"""
Item Resolver
=============

Extract the value, label text and item-level checked/disabled signals
from a raw collection item.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from formcollections.core.rendering.errors import MissingAccessorError
from formcollections.models.schemas import Accessor, ResolvedEntry

_MISSING = object()


def read_field(item: Any, name: Any, default: Any = _MISSING) -> Any:
    """
    Read a named field from an item.

    Mapping items are read by key, other items by attribute; integer names
    index into sequences. A bound method found by name is invoked with no
    arguments.

    Raises:
        MissingAccessorError: If the item has no such field and no default
            was given
    """
    try:
        if isinstance(name, int):
            if isinstance(item, (str, bytes)) or not isinstance(item, Sequence):
                raise TypeError(f"{type(item).__name__} is not indexable by position")
            return item[name]
        if isinstance(item, Mapping):
            return item[name]
        found = getattr(item, name)
    except (AttributeError, KeyError, IndexError, TypeError):
        if default is not _MISSING:
            return default
        raise MissingAccessorError(name, item) from None

    return found() if callable(found) else found


def value_for_collection(item: Any, accessor: Accessor) -> Any:
    """Apply an accessor to an item."""
    if isinstance(accessor, bool):
        raise TypeError(f"Accessor must be callable, a field name or an index, got {accessor!r}")
    if isinstance(accessor, (str, int)):
        return read_field(item, accessor)
    if callable(accessor):
        return accessor(item)
    raise TypeError(f"Accessor must be callable, a field name or an index, got {accessor!r}")


def item_signal(item: Any, name: str) -> bool:
    """Probe an optional ``checked``/``disabled`` capability on an item."""
    if isinstance(item, Mapping):
        found = item.get(name, _MISSING)
    else:
        found = getattr(item, name, _MISSING)

    if found is _MISSING:
        return False
    return bool(found() if callable(found) else found)


def resolve(item: Any, value_accessor: Accessor, text_accessor: Accessor) -> ResolvedEntry:
    """Resolve one collection item into a ResolvedEntry."""
    return ResolvedEntry(
        value=value_for_collection(item, value_accessor),
        text=value_for_collection(item, text_accessor),
        checked=item_signal(item, "checked"),
        disabled=item_signal(item, "disabled"),
    )
