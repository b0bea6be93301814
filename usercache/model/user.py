import secrets
from typing import Optional


class User:
    """
    A cached user record.

    Users are immutable: ``id`` and ``name`` are read-only once constructed.

    Attributes:
        - id (str): Process-unique identifier, a random 128-bit hex token unless given.
        - name (str): Free-text label.
    """

    __slots__ = ("_id", "_name")

    def __init__(self, name: str, id: Optional[str] = None):
        if not isinstance(name, str):
            raise TypeError(f"User name must be a str, got {type(name).__name__}")
        if id is not None:
            id = str(id)
            if not id:
                raise ValueError("User id must not be empty")
        self._id = id if id is not None else secrets.token_hex(16)
        self._name = name

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return (self._id, self._name) == (other._id, other._name)

    def __hash__(self):
        return hash((self._id, self._name))

    def __repr__(self):
        return f"User(id={self._id!r}, name={self._name!r})"
