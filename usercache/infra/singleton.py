from typing import Any


class Singleton:
    """
    Base class for services that need a single process-wide instance.

    Every subclass gets its own instance, created lazily on first construction.
    ``__init__`` still runs on every call, so subclasses holding state must guard
    their initialisation (see ``SharedUserStore``).

    Not thread-safe: two threads constructing the class for the first time at
    once may both create an instance.
    """

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any):
        # look only at the class itself so subclasses never share a parent's instance
        if cls.__dict__.get("_instance") is None:
            cls._instance = super().__new__(cls)
        return cls._instance
