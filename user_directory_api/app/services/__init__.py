"""
Service layer abstraction.

The store here keeps users in process memory.  Handlers receive it
through a dependency, so swapping it for a database‑backed
implementation does not touch the API layer.
"""
