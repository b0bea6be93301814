from typing import Dict

from usercache.cache.accessor import UserStoreAccessor
from usercache.infra.logging_setup import get_logger
from usercache.model.user import User

log = get_logger(__name__)


class UserStore(UserStoreAccessor):
    """
    In-memory users keyed by ``User.id``.

    Adding a user whose id is already stored replaces the earlier entry.
    Enumeration order is not part of the contract.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}

    def add(self, user: User) -> None:
        if not isinstance(user, User):
            raise TypeError(f"Expected a User, got {type(user).__name__}")
        if user.id in self._users:
            log.debug(f"Overwriting cached user '{user.id}'")
        self._users[user.id] = user

    def get_all(self) -> list[User]:
        return list(self._users.values())

    def __len__(self):
        return len(self._users)
