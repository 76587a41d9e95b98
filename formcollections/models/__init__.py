"""
Data Models
===========

Pydantic models shared by the rendering engine and the form builders.
"""
