from typing import Optional, Sequence, TextIO

from usercache.cache.accessor import UserStoreAccessor
from usercache.cache.mock_user_store import MockUserStore
from usercache.infra.logging_setup import get_logger
from usercache.infra.report import render_names
from usercache.model.user import User
from usercache.view_model import InjectedViewModel, ViewModel, ViewModelInterface

log = get_logger(__name__)

DEFAULT_PRODUCTION_NAMES = ("User1", "User2", "User3")
DEFAULT_MOCK_NAMES = ("MockUser1", "MockUser2", "MockUser3")


def _cache_all(view_model: ViewModelInterface, names: Sequence[str]) -> None:
    for name in names:
        view_model.cache(User(name))


def run_demo(
    shared_store: UserStoreAccessor,
    stream: Optional[TextIO] = None,
    production_names: Sequence[str] = DEFAULT_PRODUCTION_NAMES,
    mock_names: Sequence[str] = DEFAULT_MOCK_NAMES,
) -> dict[str, list[str]]:
    """
    Cache users through the three wirings and print what each one sees.

    1) ``traditional``: ``ViewModel`` with its hard-wired global lookup.
    2) ``prod``: ``InjectedViewModel`` over ``shared_store``.
    3) ``testable``: ``InjectedViewModel`` over a fresh ``MockUserStore``.

    When ``shared_store`` is the process-wide store, the prod scenario also
    lists the users cached by the traditional one.

    :return: Rendered names keyed by scenario.
    """
    results = {}

    log.info("Running traditional singleton scenario")
    traditional = ViewModel()
    _cache_all(traditional, production_names)
    results["traditional"] = render_names(
        "Users from traditional version", traditional.fetch_all(), stream
    )

    log.info("Running injected scenario against the shared store")
    prod = InjectedViewModel(cache_manager=shared_store)
    _cache_all(prod, production_names)
    results["prod"] = render_names(
        "Users from prod version", prod.fetch_all(), stream
    )

    log.info("Running injected scenario against a mock store")
    mock = InjectedViewModel(cache_manager=MockUserStore())
    _cache_all(mock, mock_names)
    results["testable"] = render_names(
        "Users from testable version", mock.fetch_all(), stream
    )

    return results
