"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the store so that the JSON representation
(camelCase field names) does not leak into Python attribute names.
"""
