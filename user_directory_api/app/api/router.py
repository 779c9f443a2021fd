"""
Top‑level API router.

Aggregates domain routers.  Users are served from ``/users`` without a
version prefix, which is where existing clients already call them.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
