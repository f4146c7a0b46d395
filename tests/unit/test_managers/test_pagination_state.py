"""Tests for PaginationState."""

import asyncio

import pytest


def _run(coro):
    return asyncio.run(coro)


def test_pagination_state_initial_state():
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()

    assert state.items == []
    assert state.current_page == 1
    assert state.total_pages == 1
    assert state.is_loading is False
    assert state.error is None
    assert state.has_error is False
    assert state.has_more_pages is True


def test_first_page_scenario(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    state.set_initial_page(1)
    state.set_total_pages(3)

    _run(state.load_next_page(page_source))

    assert len(state.items) == 10
    assert state.current_page == 2
    assert state.has_more_pages is True
    assert state.is_loading is False
    assert page_source.calls == [1]


def test_pages_advance_one_per_success(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    state.set_initial_page(4)
    state.set_total_pages(10)

    async def load_three():
        for _ in range(3):
            await state.load_next_page(page_source)

    _run(load_three())

    assert state.current_page == 7
    assert page_source.calls == [4, 5, 6]
    assert state.items[0] == "item-4-0"
    assert state.items[-1] == "item-6-9"


def test_failed_fetch_keeps_page_and_items(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    page_source.failures[2] = Exception("network down")
    state = PaginationState()
    state.set_total_pages(3)

    async def load_two():
        await state.load_next_page(page_source)
        await state.load_next_page(page_source)

    _run(load_two())

    assert len(state.items) == 10
    assert state.current_page == 2
    assert state.error == "network down"
    assert state.has_error is True
    assert state.is_loading is False


def test_retry_after_failure_appends_and_clears_error(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    page_source.failures[1] = ConnectionError("timeout")
    state = PaginationState()
    state.set_total_pages(3)

    _run(state.load_next_page(page_source))
    assert state.current_page == 1
    assert state.error == "timeout"

    _run(state.load_next_page(page_source))

    assert page_source.calls == [1, 1]
    assert state.current_page == 2
    assert state.error is None
    assert len(state.items) == 10


def test_no_fetch_past_total_pages(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    state.set_total_pages(1)
    state.set_initial_page(2)
    notifications = []
    state.add_listener(lambda: notifications.append(1))

    _run(state.load_next_page(page_source))

    assert page_source.calls == []
    assert notifications == []
    assert state.current_page == 2
    assert state.items == []
    assert state.has_more_pages is False


def test_exhaustion_stops_after_last_page(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    state.set_total_pages(2)

    async def load_many():
        for _ in range(5):
            await state.load_next_page(page_source)

    _run(load_many())

    assert page_source.calls == [1, 2]
    assert state.current_page == 3
    assert state.has_more_pages is False


def test_raising_total_pages_resumes_loading(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    _run(state.load_next_page(page_source))
    assert state.has_more_pages is False

    state.set_total_pages(2)
    _run(state.load_next_page(page_source))

    assert page_source.calls == [1, 2]
    assert len(state.items) == 20


def test_load_ignored_while_loading():
    from paginated_list.managers.pagination_state import PaginationState

    async def scenario():
        state = PaginationState()
        state.set_total_pages(3)
        release = asyncio.Event()
        calls = []

        async def slow_fetch(page):
            calls.append(page)
            await release.wait()
            return ["a", "b"]

        first = asyncio.create_task(state.load_next_page(slow_fetch))
        await asyncio.sleep(0)
        assert state.is_loading is True

        notifications = []
        state.add_listener(lambda: notifications.append(1))
        await state.load_next_page(slow_fetch)

        assert calls == [1]
        assert notifications == []
        assert state.is_loading is True
        assert state.current_page == 1

        release.set()
        await first
        return state, calls

    state, calls = _run(scenario())

    assert calls == [1]
    assert state.items == ["a", "b"]
    assert state.current_page == 2
    assert state.is_loading is False


def test_load_notifies_start_and_end(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    seen = []
    state.add_listener(lambda: seen.append((state.is_loading, len(state.items))))

    _run(state.load_next_page(page_source))

    assert seen == [(True, 0), (False, 10)]


def test_failed_load_notifies_start_and_end():
    from paginated_list.managers.pagination_state import PaginationState

    async def failing_fetch(page):
        raise RuntimeError("boom")

    state = PaginationState()
    seen = []
    state.add_listener(lambda: seen.append((state.is_loading, state.error)))

    _run(state.load_next_page(failing_fetch))

    assert seen == [(True, None), (False, "boom")]


def test_synchronous_raise_is_captured():
    from paginated_list.managers.pagination_state import PaginationState

    def broken_fetch(page):
        raise ValueError("bad page")

    state = PaginationState()

    _run(state.load_next_page(broken_fetch))

    assert state.error == "bad page"
    assert state.is_loading is False
    assert state.current_page == 1


def test_plain_function_fetch_is_accepted():
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()

    _run(state.load_next_page(lambda page: (page, page * 10)))

    assert state.items == [1, 10]
    assert state.current_page == 2


def test_empty_error_message_uses_exception_name():
    from paginated_list.managers.pagination_state import PaginationState

    async def failing_fetch(page):
        raise KeyError()

    state = PaginationState()

    _run(state.load_next_page(failing_fetch))

    assert state.error == "KeyError"


def test_none_result_is_a_failure():
    from paginated_list.managers.pagination_state import PaginationState

    async def fetch_nothing(page):
        return None

    state = PaginationState()

    _run(state.load_next_page(fetch_nothing))

    assert state.has_error is True
    assert state.current_page == 1
    assert state.items == []


def test_fetch_timeout_records_error():
    from paginated_list.managers.pagination_state import PaginationState

    async def hung_fetch(page):
        await asyncio.sleep(5)
        return ["never"]

    state = PaginationState(fetch_timeout=0.01)

    _run(state.load_next_page(hung_fetch))

    assert state.error == "Fetching page 1 timed out after 0.01s"
    assert state.is_loading is False
    assert state.current_page == 1


def test_cancelled_load_clears_loading_flag():
    from paginated_list.managers.pagination_state import PaginationState

    async def scenario():
        state = PaginationState()

        async def hung_fetch(page):
            await asyncio.sleep(5)
            return []

        task = asyncio.create_task(state.load_next_page(hung_fetch))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        return state

    state = _run(scenario())

    assert state.is_loading is False
    assert state.current_page == 1
    assert state.error is None


def test_reset_restores_defaults(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    page_source.failures[4] = Exception("down")
    state = PaginationState()
    state.set_initial_page(3)
    state.set_total_pages(8)

    async def load_two():
        await state.load_next_page(page_source)
        await state.load_next_page(page_source)

    _run(load_two())
    assert state.has_error is True

    notifications = []
    state.add_listener(lambda: notifications.append(1))
    state.reset()

    assert state.items == []
    assert state.current_page == 1
    assert state.total_pages == 1
    assert state.is_loading is False
    assert state.error is None
    assert notifications == [1]


def test_reset_during_fetch_discards_result():
    from paginated_list.managers.pagination_state import PaginationState

    async def scenario():
        state = PaginationState()
        state.set_total_pages(3)
        release = asyncio.Event()

        async def slow_fetch(page):
            await release.wait()
            return ["stale"]

        task = asyncio.create_task(state.load_next_page(slow_fetch))
        await asyncio.sleep(0)
        state.reset()

        notifications = []
        state.add_listener(lambda: notifications.append(1))
        release.set()
        await task
        return state, notifications

    state, notifications = _run(scenario())

    assert state.items == []
    assert state.current_page == 1
    assert state.is_loading is False
    assert notifications == []


def test_reset_during_failing_fetch_discards_error():
    from paginated_list.managers.pagination_state import PaginationState

    async def scenario():
        state = PaginationState()
        release = asyncio.Event()

        async def failing_fetch(page):
            await release.wait()
            raise RuntimeError("late failure")

        task = asyncio.create_task(state.load_next_page(failing_fetch))
        await asyncio.sleep(0)
        state.reset()
        release.set()
        await task
        return state

    state = _run(scenario())

    assert state.error is None
    assert state.is_loading is False


def test_set_total_pages_notifies_even_if_unchanged():
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    notifications = []
    state.add_listener(lambda: notifications.append(state.total_pages))

    state.set_total_pages(1)
    state.set_total_pages(1)
    state.set_total_pages(0)

    assert notifications == [1, 1, 0]
    assert state.has_more_pages is False


def test_set_initial_page_notifies():
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    notifications = []
    state.add_listener(lambda: notifications.append(state.current_page))

    state.set_initial_page(5)

    assert notifications == [5]
    assert state.current_page == 5


def test_remove_listener_stops_notifications():
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    notifications = []

    def listener():
        notifications.append(1)

    state.add_listener(listener)
    state.set_total_pages(2)
    state.remove_listener(listener)
    state.remove_listener(listener)
    state.set_total_pages(3)

    assert notifications == [1]


def test_failing_listener_does_not_block_others(page_source):
    from paginated_list.managers.pagination_state import PaginationState

    state = PaginationState()
    seen = []

    def broken_listener():
        raise RuntimeError("listener bug")

    state.add_listener(broken_listener)
    state.add_listener(lambda: seen.append(state.is_loading))

    _run(state.load_next_page(page_source))

    assert seen == [True, False]
    assert state.current_page == 2


def test_stale_fetch_does_not_end_newer_load():
    from paginated_list.managers.pagination_state import PaginationState

    async def scenario():
        state = PaginationState()
        state.set_total_pages(3)
        release_stale = asyncio.Event()
        release_fresh = asyncio.Event()

        async def stale_fetch(page):
            await release_stale.wait()
            return ["stale"]

        async def fresh_fetch(page):
            await release_fresh.wait()
            return [f"fresh-{page}"]

        stale = asyncio.create_task(state.load_next_page(stale_fetch))
        await asyncio.sleep(0)
        state.reset()
        fresh = asyncio.create_task(state.load_next_page(fresh_fetch))
        await asyncio.sleep(0)
        assert state.is_loading is True

        notifications = []
        state.add_listener(lambda: notifications.append(state.is_loading))
        release_stale.set()
        await stale

        mid = (state.is_loading, list(state.items), list(notifications))

        release_fresh.set()
        await fresh
        return state, mid, notifications

    state, mid, notifications = asyncio.run(scenario())

    assert mid == (True, [], [])
    assert state.items == ["fresh-1"]
    assert state.current_page == 2
    assert state.is_loading is False
    assert notifications == [False]
