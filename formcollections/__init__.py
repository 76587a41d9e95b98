"""
Form Collections
================

Form-building helpers that render collections of domain objects or
value/label pairs into groups of radio buttons and checkboxes, each paired
with an accessible label.

This package provides:
- Collection rendering engine (item resolution, attribute merging, ids, wrappers)
- Form builder primitives bound to a model object
- Nested form builder delegation
- Jinja2 template integration
"""

from formcollections.core.forms.builder import FormBuilder, form_for
from formcollections.core.rendering.collection_renderer import (
    CollectionRenderError,
    InvalidOptionShapeError,
    MissingAccessorError,
)
from formcollections.models.schemas import RenderOptions

__version__ = "1.0.0"

__all__ = [
    "FormBuilder",
    "form_for",
    "RenderOptions",
    "CollectionRenderError",
    "MissingAccessorError",
    "InvalidOptionShapeError",
]
