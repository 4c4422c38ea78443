"""Unit tests for the circuit breaker state machine."""

import asyncio

import pytest

from flowdocs.services.circuit_breaker import CircuitState
from flowdocs.services.errors import CircuitOpenError


class Work:
    """Counts invocations and fails while `failing` is set."""

    def __init__(self, failing: bool = False) -> None:
        self.failing = failing
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.failing:
            raise RuntimeError("boom")
        return "ok"


async def _fail_times(breaker, work, n: int) -> None:
    for _ in range(n):
        with pytest.raises(RuntimeError):
            await breaker.execute(work)


async def test_success_passes_result_through(breaker):
    assert await breaker.execute(Work()) == "ok"
    assert breaker.state == CircuitState.CLOSED


async def test_opens_after_threshold_and_rejects_without_running_work(breaker):
    work = Work(failing=True)
    await _fail_times(breaker, work, 3)

    assert breaker.state == CircuitState.OPEN
    assert breaker.consecutive_failures == 3

    with pytest.raises(CircuitOpenError) as exc_info:
        await breaker.execute(work)
    assert work.calls == 3
    assert exc_info.value.reset_after_seconds == pytest.approx(60.0)


async def test_success_resets_failure_count(breaker):
    work = Work(failing=True)
    await _fail_times(breaker, work, 2)

    work.failing = False
    await breaker.execute(work)
    assert breaker.consecutive_failures == 0

    work.failing = True
    await _fail_times(breaker, work, 2)
    assert breaker.state == CircuitState.CLOSED


async def test_trial_after_cooldown_closes_on_success(breaker, clock):
    work = Work(failing=True)
    await _fail_times(breaker, work, 3)

    clock.advance(seconds=60)
    assert breaker.state == CircuitState.OPEN

    work.failing = False
    assert await breaker.execute(work) == "ok"
    assert breaker.state == CircuitState.CLOSED
    assert breaker.consecutive_failures == 0


async def test_trial_failure_reopens(breaker, clock):
    work = Work(failing=True)
    await _fail_times(breaker, work, 3)

    clock.advance(seconds=61)
    await _fail_times(breaker, work, 1)
    assert breaker.state == CircuitState.OPEN
    assert breaker.last_failure_time == clock.now

    with pytest.raises(CircuitOpenError):
        await breaker.execute(work)
    assert work.calls == 4


async def test_rejects_before_cooldown_elapses(breaker, clock):
    work = Work(failing=True)
    await _fail_times(breaker, work, 3)

    clock.advance(seconds=59)
    with pytest.raises(CircuitOpenError):
        await breaker.execute(work)
    assert breaker.get_time_until_reset() == pytest.approx(1.0)


async def test_half_open_admits_a_single_trial(breaker, clock):
    await _fail_times(breaker, Work(failing=True), 3)
    clock.advance(seconds=60)

    release = asyncio.Event()
    started = asyncio.Event()

    async def slow_trial() -> str:
        started.set()
        await release.wait()
        return "recovered"

    trial = asyncio.create_task(breaker.execute(slow_trial))
    await started.wait()
    assert breaker.state == CircuitState.HALF_OPEN

    second = Work()
    with pytest.raises(CircuitOpenError):
        await breaker.execute(second)
    assert second.calls == 0

    release.set()
    assert await trial == "recovered"
    assert breaker.state == CircuitState.CLOSED


async def test_cancelled_trial_frees_the_slot(breaker, clock):
    await _fail_times(breaker, Work(failing=True), 3)
    clock.advance(seconds=60)

    started = asyncio.Event()

    async def hang() -> None:
        started.set()
        await asyncio.Event().wait()

    trial = asyncio.create_task(breaker.execute(hang))
    await started.wait()
    trial.cancel()
    with pytest.raises(asyncio.CancelledError):
        await trial

    assert breaker.consecutive_failures == 3
    assert await breaker.execute(Work()) == "ok"
    assert breaker.state == CircuitState.CLOSED


async def test_reading_state_never_transitions(breaker, clock):
    await _fail_times(breaker, Work(failing=True), 3)
    clock.advance(minutes=10)

    assert breaker.state == CircuitState.OPEN
    assert breaker.get_status()["state"] == "OPEN"


async def test_manual_reset(breaker):
    await _fail_times(breaker, Work(failing=True), 3)
    breaker.reset()

    assert breaker.state == CircuitState.CLOSED
    assert breaker.get_status()["consecutive_failures"] == 0
    assert breaker.get_time_until_reset() is None


async def test_call_admitted_while_closed_cannot_settle_the_trial(breaker, clock):
    release_slow = asyncio.Event()
    slow_started = asyncio.Event()

    async def slow_call() -> str:
        slow_started.set()
        await release_slow.wait()
        return "late"

    slow = asyncio.create_task(breaker.execute(slow_call))
    await slow_started.wait()

    await _fail_times(breaker, Work(failing=True), 3)
    assert breaker.state == CircuitState.OPEN
    clock.advance(seconds=60)

    release_trial = asyncio.Event()
    trial_started = asyncio.Event()

    async def failing_trial() -> None:
        trial_started.set()
        await release_trial.wait()
        raise RuntimeError("still down")

    trial = asyncio.create_task(breaker.execute(failing_trial))
    await trial_started.wait()
    assert breaker.state == CircuitState.HALF_OPEN

    release_slow.set()
    assert await slow == "late"
    assert breaker.state == CircuitState.HALF_OPEN

    blocked = Work()
    with pytest.raises(CircuitOpenError):
        await breaker.execute(blocked)
    assert blocked.calls == 0

    release_trial.set()
    with pytest.raises(RuntimeError):
        await trial
    assert breaker.state == CircuitState.OPEN


async def test_failure_admitted_before_opening_is_ignored(breaker):
    release = asyncio.Event()
    started = asyncio.Event()

    async def slow_failure() -> None:
        started.set()
        await release.wait()
        raise RuntimeError("late failure")

    slow = asyncio.create_task(breaker.execute(slow_failure))
    await started.wait()

    await _fail_times(breaker, Work(failing=True), 3)
    opened_at = breaker.last_failure_time
    generation = breaker.generation

    release.set()
    with pytest.raises(RuntimeError):
        await slow

    assert breaker.state == CircuitState.OPEN
    assert breaker.consecutive_failures == 3
    assert breaker.last_failure_time == opened_at
    assert breaker.generation == generation


async def test_every_transition_advances_generation(breaker, clock):
    assert breaker.generation == 0

    await _fail_times(breaker, Work(failing=True), 3)
    assert breaker.generation == 1

    clock.advance(seconds=60)
    await breaker.execute(Work())
    assert breaker.generation == 3

    breaker.reset()
    assert breaker.get_status()["generation"] == 4
