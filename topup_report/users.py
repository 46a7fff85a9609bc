"""Active-user collection: loading, ordering, and the per-company join."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from . import config
from .errors import UsersFileNotFoundError, UsersInvalidJSONError
from .models import JoinedUser, User
from .sources import read_records
from .validation import parse_user

logger = logging.getLogger(__name__)

AnyUser = Union[User, JoinedUser]


class UserCollection:
    """Holds active users only; everything else is filtered out on the way in."""

    def __init__(self, users: Optional[Iterable[AnyUser]] = None) -> None:
        self._users: List[AnyUser] = [u for u in (users or []) if u.active_status]

    @classmethod
    def load(cls, source: Union[str, Path, None] = None) -> "UserCollection":
        collection = cls()
        collection.read_file(source)
        return collection

    def read_file(self, source: Union[str, Path, None] = None) -> None:
        """Replace the held users with the active users found in ``source``.

        Every record is validated before any is kept, so a bad record
        leaves the collection as it was.
        """
        path = Path(source) if source is not None else config.USERS_FILE
        records = read_records(path, UsersFileNotFoundError, UsersInvalidJSONError)

        users = [parse_user(record) for record in records]
        active = [user for user in users if user.active_status]

        logger.info(
            "Loaded %d active user(s) from %s (%d inactive dropped)",
            len(active),
            path,
            len(users) - len(active),
        )
        self._users = active

    def all(self) -> List[AnyUser]:
        return sorted(self._users, key=lambda user: user.last_name)

    def find_by_company(self, company_id: int, top_up: int) -> "UserCollection":
        """Join: users of ``company_id`` with ``top_up`` added to their balance."""
        return UserCollection(
            JoinedUser.top_up(_base(user), top_up)
            for user in self.all()
            if user.company_id == company_id
        )

    def count(self) -> int:
        return len(self.all())

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[AnyUser]:
        return iter(self.all())


def _base(user: AnyUser) -> User:
    return user.user if isinstance(user, JoinedUser) else user
