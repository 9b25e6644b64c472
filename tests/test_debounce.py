import asyncio

import pytest

from coin_scanner.debounce import Debouncer


def make_recorder():
    received = []

    async def callback(value):
        received.append(value)

    return received, callback


def test_only_last_value_in_window_is_dispatched():
    received, callback = make_recorder()

    async def run():
        debouncer = Debouncer(callback, delay=0.05)
        for value in ["b", "bi", "bit", "bitc"]:
            debouncer.submit(value)
        await debouncer.wait()

    asyncio.run(run())

    assert received == ["bitc"]


def test_separate_windows_dispatch_separately():
    received, callback = make_recorder()

    async def run():
        debouncer = Debouncer(callback, delay=0.02)
        debouncer.submit("bit")
        await asyncio.sleep(0.1)
        debouncer.submit("")
        await debouncer.wait()

    asyncio.run(run())

    assert received == ["bit", ""]


def test_nothing_dispatched_before_delay():
    received, callback = make_recorder()

    async def run():
        debouncer = Debouncer(callback, delay=0.2)
        debouncer.submit("bit")
        await asyncio.sleep(0.05)
        assert debouncer.pending
        debouncer.cancel()

    asyncio.run(run())

    assert received == []


def test_running_dispatch_is_not_cancelled_by_new_input():
    started = []
    finished = []

    async def slow(value):
        started.append(value)
        await asyncio.sleep(0.1)
        finished.append(value)

    async def run():
        debouncer = Debouncer(slow, delay=0.01)
        debouncer.submit("bit")
        await asyncio.sleep(0.05)
        assert not debouncer.pending
        debouncer.submit("eth")
        await debouncer.wait()
        await asyncio.sleep(0.1)

    asyncio.run(run())

    assert started == ["bit", "eth"]
    assert finished == ["bit", "eth"]


def test_wait_without_submission_returns():
    received, callback = make_recorder()
    asyncio.run(Debouncer(callback).wait())
    assert received == []


def test_wait_reraises_callback_error():
    async def boom(value):
        raise RuntimeError(value)

    async def run():
        debouncer = Debouncer(boom, delay=0)
        debouncer.submit("bit")
        await debouncer.wait()

    with pytest.raises(RuntimeError, match="bit"):
        asyncio.run(run())
