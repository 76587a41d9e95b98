"""
Collection Renderer
===================

Render an ordered collection into markup, one item at a time: resolve the
item, merge its html attributes, hand both to an item markup callback,
wrap the result, then join and wrap the collection.
"""

from typing import Any, Callable, Iterable, Mapping, Optional, Union

from markupsafe import Markup

from formcollections.config.logging import get_logger
from formcollections.config.settings import Settings, get_settings
from formcollections.core.rendering import attributes, items, wrappers
from formcollections.core.rendering.errors import (
    CollectionRenderError,
    InvalidOptionShapeError,
    MissingAccessorError,
)
from formcollections.models.schemas import Accessor, HtmlAttributes, RenderOptions

logger = get_logger(__name__)

# (value, text, html_attributes) -> markup for one item
ItemMarkupFn = Callable[[Any, Any, HtmlAttributes], Markup]

__all__ = [
    "CollectionRenderer",
    "CollectionRenderError",
    "InvalidOptionShapeError",
    "ItemMarkupFn",
    "MissingAccessorError",
]


class CollectionRenderer:
    """Shared engine behind the radio and checkbox collection helpers."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(component="collection_renderer")  # structlog.BoundLoggerBase

    def render(
        self,
        attribute: str,
        collection: Iterable[Any],
        value_accessor: Accessor,
        text_accessor: Accessor,
        options: Union[RenderOptions, Mapping[str, Any], None],
        html_options: Optional[HtmlAttributes],
        item_markup: ItemMarkupFn,
    ) -> Markup:
        """
        Render every item of a collection, in order.

        Args:
            attribute: Attribute name on the bound model
            collection: Ordered items to render
            value_accessor: Accessor producing each item's value
            text_accessor: Accessor producing each item's label text
            options: Render options or a plain mapping of them
            html_options: Base html attributes shared by every item; never mutated
            item_markup: Callback building one item's input and label markup

        Returns:
            Safe markup for the whole collection

        Raises:
            MissingAccessorError: If a field accessor does not resolve on an item
            InvalidOptionShapeError: If a checked/disabled option has an invalid shape
        """
        options = RenderOptions.coerce(options)
        wrapper_tags = options.resolve_wrappers(self.settings)

        try:
            rendered_items = []
            for item in collection:
                entry = items.resolve(item, value_accessor, text_accessor)
                item_html_options = attributes.merge(item, entry, options, html_options)
                rendered_item = item_markup(entry.value, entry.text, item_html_options)
                rendered_items.append(wrappers.wrap_item(Markup(rendered_item), wrapper_tags.item))
        except CollectionRenderError as e:
            self.logger.error("Collection rendering failed", attribute=attribute, error=str(e))
            raise

        rendered_collection = wrappers.wrap_collection(
            wrappers.join_items(rendered_items), wrapper_tags.collection
        )

        self.logger.debug(
            "Collection rendered",
            attribute=attribute,
            items=len(rendered_items),
            collection_wrapper_tag=wrapper_tags.collection,
            item_wrapper_tag=wrapper_tags.item,
        )

        return rendered_collection
