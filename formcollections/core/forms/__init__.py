"""
Forms Module
============

Form-building layer on top of the collection rendering engine.

Components:
- tags: Markup primitives (tag, content_tag)
- base_builder: Single-input primitives bound to a model object
- builder: Collection radio/checkbox helpers and nested builders
- jinja: Jinja2 environment integration
"""
