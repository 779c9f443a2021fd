"""
Application package initializer.

The service is split into small pieces: ``core`` holds configuration,
logging, error handling and middleware, ``schemas`` the pydantic
payloads, ``services`` the in‑memory user store and ``api`` the HTTP
routes.
"""

from .main import app  # noqa: F401
