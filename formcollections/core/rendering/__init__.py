"""
Rendering Module
===============

Collection rendering engine.

Components:
- identity: Element id fragments derived from attribute name and value
- items: Value/text extraction and item-level checked/disabled signals
- attributes: Per-item html attribute merging
- wrappers: Item and collection wrapper policy
- collection_renderer: Orchestration of the above
"""
