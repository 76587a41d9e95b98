"""
Core Business Logic
==================

Core modules for rendering form collections.

Modules:
- rendering: Collection rendering engine (items, attributes, ids, wrappers)
- forms: Markup primitives, form builders and template integration
"""
