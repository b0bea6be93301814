from typing import Dict

from usercache.cache.accessor import UserStoreAccessor
from usercache.model.user import User


class MockUserStore(UserStoreAccessor):
    """
    Test double for ``UserStoreAccessor``.

    Each ``add`` bumps ``user_counter`` and stores the user under the counter's
    text, not under the user's id, so a fresh instance never deduplicates.
    """

    def __init__(self):
        self.user_counter = 0
        self.mock_users: Dict[str, User] = {}

    def add(self, user: User) -> None:
        self.user_counter += 1
        self.mock_users[str(self.user_counter)] = user

    def get_all(self) -> list[User]:
        return list(self.mock_users.values())

    @property
    def added_users(self) -> list[User]:
        """Users in the order they were added."""
        return [self.mock_users[str(i)] for i in range(1, self.user_counter + 1)]
