from __future__ import annotations

import asyncio

import pytest

from pyplaceholder.exceptions import NetworkError
from pyplaceholder.models import User
from pyplaceholder.repository import BoundedRepository
from pyplaceholder.state import ListViewModel, ViewState

USERS = [
    User(id=1, name="John Doe", email="john@example.com"),
    User(id=2, name="Jane Smith", email="jane@test.com"),
]


class _FakeUserSource:
    def __init__(self, users: list[User]) -> None:
        self.users = users
        self.calls = 0
        self.error: Exception | None = None

    async def fetch_all(self) -> list[User]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.users)


def _view_model(users: list[User] | None = None) -> tuple[ListViewModel[User], _FakeUserSource, list[ViewState]]:
    source = _FakeUserSource(USERS if users is None else users)
    view_model: ListViewModel[User] = ListViewModel(BoundedRepository(source.fetch_all))
    states: list[ViewState] = []
    view_model.subscribe(lambda: states.append(view_model.state))
    return view_model, source, states


def test_initial_state_is_idle() -> None:
    view_model, _source, states = _view_model()

    assert view_model.state == ViewState.IDLE
    assert view_model.records == ()
    assert view_model.error_message is None
    assert not view_model.has_data
    assert states == []


@pytest.mark.asyncio
async def test_load_success_notifies_loading_then_success() -> None:
    view_model, source, states = _view_model()

    await view_model.load()

    assert states == [ViewState.LOADING, ViewState.SUCCESS]
    assert view_model.records == tuple(USERS)
    assert view_model.has_data
    assert view_model.error_message is None
    assert source.calls == 1


@pytest.mark.asyncio
async def test_load_failure_becomes_error_with_empty_records() -> None:
    view_model, source, states = _view_model()
    await view_model.load()

    source.error = NetworkError("Network error: connection reset")
    await view_model.refresh()

    assert states == [ViewState.LOADING, ViewState.SUCCESS, ViewState.LOADING, ViewState.ERROR]
    assert view_model.has_error
    assert view_model.records == ()
    assert not view_model.has_data
    assert "connection reset" in (view_model.error_message or "")


@pytest.mark.asyncio
async def test_unexpected_exception_does_not_escape() -> None:
    view_model, source, _states = _view_model()
    source.error = RuntimeError("boom")

    await view_model.load()

    assert view_model.state == ViewState.ERROR
    assert view_model.error_message == "Unexpected error: boom"


@pytest.mark.asyncio
async def test_load_uses_cache_on_second_call() -> None:
    view_model, source, _states = _view_model()

    await view_model.load()
    await view_model.load()

    assert source.calls == 1


@pytest.mark.asyncio
async def test_refresh_refetches_even_when_cached() -> None:
    view_model, source, states = _view_model()
    await view_model.load()
    states.clear()

    await view_model.refresh()

    assert source.calls == 2
    assert states == [ViewState.LOADING, ViewState.SUCCESS]


@pytest.mark.asyncio
async def test_error_message_cleared_when_loading_again() -> None:
    view_model, source, _states = _view_model()
    source.error = NetworkError("offline")
    await view_model.load()
    assert view_model.error_message == "offline"

    source.error = None
    await view_model.load()

    assert view_model.error_message is None
    assert view_model.state == ViewState.SUCCESS


@pytest.mark.asyncio
async def test_search_matches_name_case_insensitively() -> None:
    view_model, _source, states = _view_model()
    await view_model.load()
    notified = len(states)

    results = view_model.search("john")

    assert results == (USERS[0],)
    assert len(states) == notified
    assert view_model.records == tuple(USERS)


@pytest.mark.asyncio
async def test_search_matches_email_and_substrings() -> None:
    users = USERS + [User(id=3, name="Bob Johnson", email="bob@example.com")]
    view_model, _source, _states = _view_model(users)
    await view_model.load()

    assert [u.id for u in view_model.search("JOHN")] == [1, 3]
    assert [u.id for u in view_model.search("test.com")] == [2]
    assert view_model.search("nobody") == ()


@pytest.mark.asyncio
async def test_empty_query_returns_all_records() -> None:
    view_model, _source, _states = _view_model()
    await view_model.load()

    assert view_model.search("") == tuple(USERS)


@pytest.mark.asyncio
async def test_custom_search_fields() -> None:
    source = _FakeUserSource(USERS)
    view_model: ListViewModel[User] = ListViewModel(BoundedRepository(source.fetch_all), search_fields=("email",))
    await view_model.load()

    assert view_model.search("jane smith") == ()
    assert view_model.search("jane@") == (USERS[1],)


@pytest.mark.asyncio
async def test_superseded_load_result_is_discarded() -> None:
    release = asyncio.Event()
    calls = 0

    async def _fetch_all() -> list[User]:
        nonlocal calls
        calls += 1
        if calls == 1:
            await release.wait()
            return [USERS[0]]
        return list(USERS)

    repo: BoundedRepository[User] = BoundedRepository(_fetch_all)
    view_model: ListViewModel[User] = ListViewModel(repo)
    states: list[ViewState] = []
    view_model.subscribe(lambda: states.append(view_model.state))

    stale = asyncio.create_task(view_model.load())
    await asyncio.sleep(0)
    await view_model.refresh()
    release.set()
    await stale

    assert view_model.records == tuple(USERS)
    assert states == [ViewState.LOADING, ViewState.LOADING, ViewState.SUCCESS]
    assert await repo.get_all() == tuple(USERS)
    assert calls == 2
