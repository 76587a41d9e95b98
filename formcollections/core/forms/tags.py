"""
Markup Primitives
=================

Element builders used by the form builders. Attribute values and text
content are escaped with markupsafe; content that is already ``Markup``
is trusted as is.
"""

from typing import Any, Dict, List, Optional

from markupsafe import Markup, escape

from formcollections.core.rendering.identity import to_param

BOOLEAN_ATTRIBUTES = frozenset(
    {"checked", "disabled", "multiple", "readonly", "required", "selected", "autofocus"}
)


def tag_attributes(attributes: Optional[Dict[str, Any]]) -> Markup:
    """Render an attribute map, sorted by name, with a leading space."""
    if not attributes:
        return Markup("")

    attr_pairs: List[Markup] = []
    for key in sorted(attributes):
        value = attributes[key]
        if value is None or value is False:
            continue
        if key in BOOLEAN_ATTRIBUTES:
            if value:
                attr_pairs.append(Markup('{0}="{0}"').format(key))
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(to_param(part) for part in value)
        attr_pairs.append(Markup('{}="{}"').format(key, to_param(value)))

    return Markup(" ") + Markup(" ").join(attr_pairs) if attr_pairs else Markup("")


def tag(name: str, attributes: Optional[Dict[str, Any]] = None) -> Markup:
    """Render a void element such as ``<input ... />``."""
    return Markup("<{}{} />").format(Markup(name), tag_attributes(attributes))


def content_tag(name: str, content: Any = "", attributes: Optional[Dict[str, Any]] = None) -> Markup:
    """Render ``<name ...>content</name>``, escaping content unless it is Markup."""
    return Markup("<{0}{1}>{2}</{0}>").format(Markup(name), tag_attributes(attributes), escape(content))
