"""
Base Form Builder
=================

Single-input primitives bound to a model object: radio buttons, check
boxes, hidden fields and labels, plus nested builders via ``fields_for``.
"""

import re
from typing import Any, Dict, Optional, Type

from markupsafe import Markup

from formcollections.config.logging import get_logger
from formcollections.config.settings import Settings, get_settings
from formcollections.core.forms.tags import content_tag, tag
from formcollections.core.rendering.identity import sanitize_attribute_name, to_param
from formcollections.core.rendering.items import read_field
from formcollections.models.schemas import HtmlAttributes

logger = get_logger(__name__)

_OBJECT_NAME_SEPARATORS = re.compile(r"\]\[|[^-a-zA-Z0-9:.]")


class BaseFormBuilder:
    """Form builder bound to an object name and an optional model object."""

    def __init__(
        self,
        object_name: Optional[str],
        obj: Any = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.object_name = object_name or ""
        self.object = obj
        self.settings = settings or get_settings()
        self.logger: Any = logger.bind(builder=type(self).__name__, object_name=self.object_name)

    # Naming

    @property
    def sanitized_object_name(self) -> str:
        """Object name usable as an id prefix, e.g. ``user[posts][0]`` -> ``user_posts_0``."""
        return _OBJECT_NAME_SEPARATORS.sub("_", self.object_name).rstrip("_")

    def tag_name(self, method: str, multiple: bool = False) -> str:
        """Input name for an attribute: ``object[method]``, plus ``[]`` when multiple."""
        name = f"{self.object_name}[{method}]" if self.object_name else method
        return f"{name}[]" if multiple else name

    def tag_id(self, method: str, value: Any = None, with_value: bool = False) -> str:
        """Element id for an attribute, optionally suffixed with a sanitized value."""
        suffix = sanitize_attribute_name(method, value) if with_value else method
        prefix = self.sanitized_object_name
        return f"{prefix}_{suffix}" if prefix else suffix

    def value(self, method: str) -> Any:
        """Current value of an attribute on the bound object, or None."""
        if self.object is None:
            return None
        return read_field(self.object, method, default=None)

    # Inputs

    def radio_button(self, method: str, tag_value: Any, html_options: Optional[HtmlAttributes] = None) -> Markup:
        """Render a radio input, checked when the bound value matches ``tag_value``."""
        html_options = dict(html_options or {})
        if "checked" not in html_options:
            html_options["checked"] = (
                self.object is not None and to_param(self.value(method)) == to_param(tag_value)
            )

        attributes: Dict[str, Any] = {
            "type": "radio",
            "name": self.tag_name(method),
            "id": self.tag_id(method, tag_value, with_value=True),
            "value": to_param(tag_value),
        }
        attributes.update(html_options)
        return tag("input", attributes)

    def check_box(
        self,
        method: str,
        html_options: Optional[HtmlAttributes] = None,
        checked_value: Any = "1",
        unchecked_value: Any = "0",
    ) -> Markup:
        """
        Render a checkbox preceded by a hidden field carrying ``unchecked_value``.

        A ``multiple`` html option appends ``[]`` to the name and suffixes the
        id with the checked value. No hidden field is emitted when
        ``unchecked_value`` is None.
        """
        html_options = dict(html_options or {})
        multiple = bool(html_options.pop("multiple", False))
        if "checked" not in html_options:
            html_options["checked"] = self._is_checked(self.value(method), checked_value)

        name = self.tag_name(method, multiple)
        attributes: Dict[str, Any] = {
            "type": "checkbox",
            "name": name,
            "id": self.tag_id(method, checked_value, with_value=multiple),
            "value": to_param(checked_value),
        }
        attributes.update(html_options)
        check_box = tag("input", attributes)

        if unchecked_value is None:
            return check_box
        hidden = tag("input", {"type": "hidden", "name": name, "value": to_param(unchecked_value)})
        return hidden + check_box

    def hidden_field(self, method: str, html_options: Optional[HtmlAttributes] = None) -> Markup:
        """Render a hidden input holding the bound value."""
        attributes: Dict[str, Any] = {
            "type": "hidden",
            "name": self.tag_name(method),
            "id": self.tag_id(method),
            "value": to_param(self.value(method)),
        }
        attributes.update(html_options or {})
        return tag("input", attributes)

    def label(self, method: str, content: Any = None, html_options: Optional[HtmlAttributes] = None) -> Markup:
        """Render a label targeting the id of ``method``; content defaults to the humanized name."""
        attributes: Dict[str, Any] = {"for": self.tag_id(method)}
        attributes.update(html_options or {})
        if content is None:
            content = method.replace("_", " ").capitalize()
        return content_tag("label", content, attributes)

    # Nesting

    def fields_for(
        self,
        record_name: str,
        record_object: Any = None,
        builder: Optional[Type["BaseFormBuilder"]] = None,
        index: Any = None,
    ) -> "BaseFormBuilder":
        """
        Build a nested form builder for an associated record.

        The child is named ``parent[record]``, or ``parent[record_attributes]``
        when the bound object accepts nested attributes for the record. The
        child object defaults to the parent's value for ``record_name``.
        """
        builder = builder or type(self)
        if record_object is None:
            record_object = self.value(record_name)

        field_name = record_name
        if self.object is not None and hasattr(self.object, f"{record_name}_attributes"):
            field_name = f"{record_name}_attributes"

        child_name = f"{self.object_name}[{field_name}]" if self.object_name else field_name
        if index is not None:
            child_name = f"{child_name}[{index}]"

        self.logger.debug("Building nested form builder", child=child_name, builder=builder.__name__)
        return builder(child_name, record_object, settings=self.settings)

    def _is_checked(self, current: Any, checked_value: Any) -> bool:
        if isinstance(current, (list, tuple, set, frozenset)):
            return to_param(checked_value) in {to_param(v) for v in current}
        if isinstance(current, bool) and not isinstance(checked_value, bool):
            return current
        return current is not None and to_param(current) == to_param(checked_value)
