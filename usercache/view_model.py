"""
Consumers of the user cache.

``ViewModel`` reaches the shared store through a global lookup on every call, so
it cannot be pointed at anything else. ``InjectedViewModel`` receives its store
at construction time and works the same against the shared store or a fake.
"""

from abc import ABC, abstractmethod

from usercache.cache.accessor import UserStoreAccessor
from usercache.cache.shared_user_store import get_shared_user_store
from usercache.model.user import User


class ViewModelInterface(ABC):
    @abstractmethod
    def cache(self, user: User) -> None: ...

    @abstractmethod
    def fetch_all(self) -> list[User]: ...


class ViewModel(ViewModelInterface):
    def cache(self, user: User) -> None:
        get_shared_user_store().add(user)

    def fetch_all(self) -> list[User]:
        return get_shared_user_store().get_all()


class InjectedViewModel(ViewModelInterface):
    def __init__(self, cache_manager: UserStoreAccessor):
        if not isinstance(cache_manager, UserStoreAccessor):
            raise TypeError(
                f"cache_manager must implement UserStoreAccessor, got {type(cache_manager).__name__}"
            )
        self.cache_manager = cache_manager

    def cache(self, user: User) -> None:
        self.cache_manager.add(user)

    def fetch_all(self) -> list[User]:
        return self.cache_manager.get_all()
