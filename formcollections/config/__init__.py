"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Process-wide defaults such as collection and item wrapper tags
- logging: Structured logging configuration
"""
