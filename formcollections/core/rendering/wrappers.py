"""
Wrapper Policy
==============

Optionally enclose each rendered item, and the whole rendered collection,
in a single element.
"""

from typing import Iterable, Optional

from markupsafe import Markup

from formcollections.core.forms.tags import content_tag


def wrap_item(markup: Markup, item_wrapper_tag: Optional[str]) -> Markup:
    """Wrap one rendered item, or pass it through when no tag is set."""
    return content_tag(item_wrapper_tag, markup) if item_wrapper_tag else markup


def wrap_collection(markup: Markup, collection_wrapper_tag: Optional[str]) -> Markup:
    """Wrap the joined collection, or pass it through when no tag is set."""
    return content_tag(collection_wrapper_tag, markup) if collection_wrapper_tag else markup


def join_items(rendered_items: Iterable[Markup]) -> Markup:
    """Concatenate rendered items with no separator."""
    return Markup("").join(rendered_items)
