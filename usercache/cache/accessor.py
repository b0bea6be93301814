from abc import ABC, abstractmethod

from usercache.model.user import User


class UserStoreAccessor(ABC):
    """
    Capability interface for anything a consumer can cache users in.

    Implementations backing production code must keep one user per id, the last
    ``add`` winning. Test fakes may key entries differently.
    """

    @abstractmethod
    def add(self, user: User) -> None: ...

    @abstractmethod
    def get_all(self) -> list[User]: ...
