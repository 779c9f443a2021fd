"""
User endpoints.

CRUD routes over the in‑memory ``UserStore``.  The store is injected
with ``get_store`` so each application instance owns its own data.
Failures are raised, never rendered here: the handlers registered in
``core.errors`` produce the JSON error envelope.

The ``{user_id}`` segment is taken as a string and parsed by
``parse_user_id`` so that a non‑numeric id is reported as an unknown
user (404) instead of a request validation error.
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from user_directory_api.app.core.errors import UserNotFoundError, ValidationError
from user_directory_api.app.schemas.user import User, UserPayload
from user_directory_api.app.services.user_store import UserStore


router = APIRouter()

USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def get_store(request: Request) -> UserStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def parse_user_id(raw: str) -> int:
    """Convert a path segment to a user id or raise ``UserNotFoundError``.

    Only plain ASCII digits with an optional sign are ids; forms that
    ``int`` would also accept (``1_0``, non‑ASCII digits) are not.
    """
    candidate = raw.strip()
    if not USER_ID_PATTERN.fullmatch(candidate):
        raise UserNotFoundError(raw)
    return int(candidate)


async def validate_new_user(payload: Optional[UserPayload] = None) -> UserPayload:
    """Reject a create request unless all three fields are non‑empty."""
    if payload is None or not (payload.first_name and payload.last_name and payload.hobby):
        raise ValidationError("Full Name and hobby are required fields.")
    return payload


@router.get("", response_model=List[User])
async def list_users(store: UserStore = Depends(get_store)) -> List[User]:
    """Return every user in insertion order."""
    return store.list_users()


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: str, store: UserStore = Depends(get_store)) -> User:
    return store.get_user(parse_user_id(user_id))


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: UserPayload = Depends(validate_new_user),
    store: UserStore = Depends(get_store),
) -> User:
    return store.create_user(payload.first_name, payload.last_name, payload.hobby)


@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: str,
    payload: Optional[UserPayload] = None,
    store: UserStore = Depends(get_store),
) -> User:
    """Update the supplied fields of a user.

    Returns 404 for an unknown id and 400 when the body carries no
    non‑empty field.
    """
    changes = payload or UserPayload()
    return store.update_user(
        parse_user_id(user_id),
        first_name=changes.first_name,
        last_name=changes.last_name,
        hobby=changes.hobby,
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(user_id: str, store: UserStore = Depends(get_store)) -> None:
    store.delete_user(parse_user_id(user_id))
    return None
