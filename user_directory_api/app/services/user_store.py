"""
In‑memory storage for user records.

``UserStore`` keeps users in insertion order together with the next
identifier to hand out.  Identifiers only ever grow: a deleted user's
id is never issued again.  Failures are raised as ``UserNotFoundError``
or ``ValidationError`` and left for the error handlers to render.

All operations are synchronous and never await, so when they are
called from ``async`` route handlers each one runs to completion on
the event loop without interleaving with another request.
"""

import logging
from typing import Iterable, List, Optional

from ..core.errors import UserNotFoundError, ValidationError
from ..schemas.user import User


logger = logging.getLogger(__name__)

SEED_USERS = (
    {"id": 1, "first_name": "Anshika", "last_name": "Agarwal", "hobby": "Teaching"},
    {"id": 2, "first_name": "Hrudendu", "last_name": "Panigrahi", "hobby": "Singing"},
)


class UserStore:
    """Ordered collection of users plus the id counter."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: List[User] = list(users)
        self._next_id = max((user.id for user in self._users), default=0) + 1

    @classmethod
    def with_seed_data(cls) -> "UserStore":
        """Return a store holding the two demo users."""
        return cls(User(**record) for record in SEED_USERS)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> List[User]:
        """Return all users in insertion order."""
        return list(self._users)

    def _find_index(self, user_id: int) -> Optional[int]:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def get_user(self, user_id: int) -> User:
        index = self._find_index(user_id)
        if index is None:
            raise UserNotFoundError(user_id)
        return self._users[index]

    def create_user(self, first_name: str, last_name: str, hobby: str) -> User:
        """Append a new user and return it.

        The id comes from the counter, which is advanced afterwards.
        """
        user = User(id=self._next_id, first_name=first_name, last_name=last_name, hobby=hobby)
        self._users.append(user)
        self._next_id += 1
        logger.info("Created user %s", user.id)
        return user

    def update_user(
        self,
        user_id: int,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        hobby: Optional[str] = None,
    ) -> User:
        """Overwrite the non‑empty fields of an existing user in place.

        Existence is checked first, so an unknown id yields 404 even when
        no field was supplied.  Empty strings count as not supplied.
        """
        user = self.get_user(user_id)
        if not (first_name or last_name or hobby):
            raise ValidationError("At least one field is required for update.")

        if first_name:
            user.first_name = first_name
        if last_name:
            user.last_name = last_name
        if hobby:
            user.hobby = hobby
        logger.info("Updated user %s", user_id)
        return user

    def delete_user(self, user_id: int) -> None:
        index = self._find_index(user_id)
        if index is None:
            raise UserNotFoundError(user_id)
        del self._users[index]
        logger.info("Deleted user %s", user_id)
