"""
Pydantic Models and Schemas
===========================

Data models for collection rendering: the options accepted by a render
call and the entry resolved for each collection item.
"""

from collections.abc import Iterable
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from formcollections.config.settings import TAG_NAME_PATTERN, Settings


# An accessor either computes a field from an item or names it.
# Strings name an attribute or mapping key, integers index into sequences.
AccessorFn = Callable[[Any], Any]
Accessor = Union[AccessorFn, str, int]


class RenderOptions(BaseModel):
    """Options for one collection render call."""

    # Predicate over the raw item, a single value, or a collection of values.
    checked: Any = Field(None, description="Value(s) or predicate marking items checked")
    disabled: Any = Field(None, description="Value(s) or predicate marking items disabled")
    collection_wrapper_tag: Optional[str] = Field(
        None, description="Tag wrapping the collection; None inherits, '' disables"
    )
    item_wrapper_tag: Optional[str] = Field(
        None, description="Tag wrapping each item; None inherits, '' disables"
    )

    model_config = ConfigDict(frozen=True, extra="ignore", arbitrary_types_allowed=True)

    @field_validator("checked", "disabled", mode="before")
    @classmethod
    def freeze_value_collections(cls, v: Any) -> Any:
        """Materialize one-shot iterables (generators, views, ranges) so every item sees them."""
        if v is None or callable(v) or isinstance(v, (str, bytes, Mapping)):
            return v
        if isinstance(v, (list, tuple, set, frozenset)):
            return v
        if isinstance(v, Iterable):
            return tuple(v)
        return v

    @field_validator("collection_wrapper_tag", "item_wrapper_tag", mode="before")
    @classmethod
    def validate_wrapper_tag(cls, v: Any) -> Optional[str]:
        """Accept a tag name, None, or an explicit opt-out (False or '')."""
        if v is None:
            return None
        if v is False:
            return ""
        if not isinstance(v, str):
            raise ValueError(f"Wrapper tag must be a string, got {type(v).__name__}")
        v = v.strip()
        if v and not TAG_NAME_PATTERN.match(v):
            raise ValueError(f"Invalid wrapper tag name: {v!r}")
        return v

    @classmethod
    def coerce(cls, options: Union["RenderOptions", Mapping[str, Any], None]) -> "RenderOptions":
        """Build options from an instance, a plain mapping, or nothing."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    def resolve_wrappers(self, settings: Settings) -> "WrapperTags":
        """Resolve wrapper tags against process-wide defaults."""
        return WrapperTags(
            collection=_resolve_tag(self.collection_wrapper_tag, settings.collection_wrapper_tag),
            item=_resolve_tag(self.item_wrapper_tag, settings.item_wrapper_tag),
        )


class WrapperTags(BaseModel):
    """Wrapper tags in effect for one render call."""

    collection: Optional[str] = None
    item: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class ResolvedEntry(BaseModel):
    """Value, label text and item-level signals derived from one collection item."""

    value: Any = Field(..., description="Resolved item value")
    text: Any = Field(..., description="Resolved label text")
    checked: bool = Field(False, description="Item reports itself as checked")
    disabled: bool = Field(False, description="Item reports itself as disabled")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


def _resolve_tag(option: Optional[str], default: Optional[str]) -> Optional[str]:
    if option is None:
        return default
    return option or None


HtmlAttributes = Dict[str, Any]
