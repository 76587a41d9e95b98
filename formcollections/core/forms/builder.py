"""
Form Builder
============

Collection helpers available on every form builder: groups of radio
buttons or check boxes rendered from a collection, each associated with a
clickable label, and nested builders that keep these helpers available.
"""

from typing import Any, Iterable, Mapping, Optional, Type, Union

from markupsafe import Markup

from formcollections.config.settings import Settings
from formcollections.core.forms.base_builder import BaseFormBuilder
from formcollections.core.rendering.collection_renderer import CollectionRenderer
from formcollections.core.rendering.identity import sanitize_attribute_name, to_param
from formcollections.models.schemas import Accessor, HtmlAttributes, RenderOptions

Options = Union[RenderOptions, Mapping[str, Any], None]


class CollectionHelpersMixin:
    """Collection radio and check box helpers for a form builder."""

    settings: Settings

    def collection_radio(
        self,
        attribute: str,
        collection: Iterable[Any],
        value_method: Accessor,
        text_method: Accessor,
        options: Options = None,
        html_options: Optional[HtmlAttributes] = None,
    ) -> Markup:
        """
        Create a collection of radio inputs for the attribute.

        Each text/value option of the collection becomes a radio input
        associated with a label, using ``value_method`` and ``text_method``
        to convert items.

        Example:
            f = form_for("user")
            f.collection_radio("options", [(True, "Yes"), (False, "No")], 0, 1)

            <label class="collection_radio" for="user_options_true"><input id="user_options_true" name="user[options]" type="radio" value="true" />Yes</label>
            <label class="collection_radio" for="user_options_false"><input id="user_options_false" name="user[options]" type="radio" value="false" />No</label>

        Options:
            checked: value, values or predicate marking items checked
            disabled: value, values or predicate marking items disabled
            collection_wrapper_tag: tag wrapping the entire collection
            item_wrapper_tag: tag wrapping each item of the collection
        """

        def render_item(value: Any, text: Any, item_html_options: HtmlAttributes) -> Markup:
            radio = self.radio_button(attribute, value, item_html_options)
            collection_classes = ["collection_radio"]
            if item_html_options.get("disabled"):
                collection_classes.append("disabled")
            return self._collection_label(
                attribute, value, radio, text, {"class": " ".join(collection_classes)}
            )

        return self._collection_renderer().render(
            attribute, collection, value_method, text_method, options, html_options, render_item
        )

    def collection_check_boxes(
        self,
        attribute: str,
        collection: Iterable[Any],
        value_method: Accessor,
        text_method: Accessor,
        options: Options = None,
        html_options: Optional[HtmlAttributes] = None,
    ) -> Markup:
        """
        Create a check box for each item of the collection, associated with a
        clickable label. Every check box is preceded by an empty hidden field
        so an empty selection is still submitted.

        Example:
            f = form_for("user")
            f.collection_check_boxes("options", [(True, "Yes"), (False, "No")], 0, 1)

            <label class="collection_check_boxes" for="user_options_true"><input name="user[options][]" type="hidden" value="" /><input id="user_options_true" name="user[options][]" type="checkbox" value="true" />Yes</label>
            ...
        """

        def render_item(value: Any, text: Any, item_html_options: HtmlAttributes) -> Markup:
            item_html_options["multiple"] = True
            check_box = self.check_box(attribute, item_html_options, value, "")
            return self._collection_label(
                attribute, value, check_box, text, {"class": "collection_check_boxes"}
            )

        return self._collection_renderer().render(
            attribute, collection, value_method, text_method, options, html_options, render_item
        )

    def simple_fields_for(
        self, record_name: str, record_object: Any = None, **options: Any
    ) -> "FormBuilder":
        """
        Nested builder that is always a FormBuilder, whatever builder class
        the parent uses.

        Example:
            posts_form = f.simple_fields_for("posts")
            posts_form.collection_radio("status", statuses, "id", "name")
        """
        options["builder"] = FormBuilder
        return self.fields_for(record_name, record_object, **options)

    def _collection_renderer(self) -> CollectionRenderer:
        return CollectionRenderer(self.settings)

    def _collection_label(
        self, attribute: str, value: Any, component: Markup, text: Any, html_options: HtmlAttributes
    ) -> Markup:
        """Wrap the given component in a label, for better accessibility with collections."""
        label_text = text if hasattr(text, "__html__") else to_param(text)
        return self.label(
            sanitize_attribute_name(attribute, value), Markup(component) + label_text, html_options
        )


class FormBuilder(CollectionHelpersMixin, BaseFormBuilder):
    """Form builder with collection helpers."""

    pass


def form_for(
    object_name: Optional[str],
    obj: Any = None,
    builder: Type[BaseFormBuilder] = FormBuilder,
    settings: Optional[Settings] = None,
) -> BaseFormBuilder:
    """
    Create a form builder for a model object.

    Args:
        object_name: Name prefix for inputs, e.g. ``user``
        obj: Bound model object used for pre-checked state
        builder: Builder class
        settings: Settings overriding the process-wide defaults

    Returns:
        Form builder instance
    """
    return builder(object_name, obj, settings=settings)
