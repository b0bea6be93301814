import sys
from typing import Iterable, TextIO

from pandas import DataFrame

from usercache.model.user import User


def users_to_frame(users: Iterable[User]) -> DataFrame:
    """
    Tabulate users as a DataFrame with ``id`` and ``name`` columns.

    :param users: Users in the order they should appear.
    :return: One row per user; an empty frame keeps both columns.
    """
    return DataFrame(
        [(user.id, user.name) for user in users], columns=["id", "name"]
    )


def user_names(users: Iterable[User]) -> list[str]:
    return users_to_frame(users)["name"].tolist()


def render_names(label: str, users: Iterable[User], stream: TextIO = None) -> list[str]:
    """
    Write ``"<label> -> [names]"`` to ``stream`` (stdout by default).

    :return: The rendered names.
    """
    stream = stream if stream is not None else sys.stdout
    names = user_names(users)
    print(f"{label} -> {names}", file=stream)
    return names
