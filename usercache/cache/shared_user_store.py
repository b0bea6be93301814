from usercache.cache.accessor import UserStoreAccessor
from usercache.cache.user_store import UserStore
from usercache.infra.logging_setup import get_logger
from usercache.infra.singleton import Singleton
from usercache.model.user import User

log = get_logger(__name__)


class SharedUserStore(Singleton, UserStoreAccessor):
    """
    The process-wide user cache.

    The first construction creates the single instance and its ``UserStore``;
    every later construction returns that instance with its contents intact.
    Access is assumed to come from one thread; there is no locking.
    """

    def __init__(self):
        if hasattr(self, "_store"):
            return
        self._store = UserStore()
        log.debug("Created shared user store")

    @classmethod
    def reset(cls) -> None:
        """Forget the current instance so the next access starts empty."""
        cls._instance = None

    def add(self, user: User) -> None:
        self._store.add(user)

    def get_all(self) -> list[User]:
        return self._store.get_all()

    def __len__(self):
        return len(self._store)


def get_shared_user_store() -> SharedUserStore:
    return SharedUserStore()
