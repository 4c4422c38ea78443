"""Pytest configuration for the flowdocs test suite."""

from datetime import datetime, timedelta

import pytest

from flowdocs.services.cache import CacheManager
from flowdocs.services.circuit_breaker import CircuitBreaker, CircuitBreakerConfig
from flowdocs.services.dispatcher import RequestDispatcher


class FakeClock:
    """Manually advanced clock injected wherever datetime.now would be used."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> CacheManager:
    return CacheManager(max_size=500, clock=clock)


@pytest.fixture
def breaker(clock: FakeClock) -> CircuitBreaker:
    return CircuitBreaker(
        "test",
        CircuitBreakerConfig(failure_threshold=3, reset_timeout=timedelta(seconds=60)),
        clock=clock,
    )


@pytest.fixture
def dispatcher(cache: CacheManager, breaker: CircuitBreaker) -> RequestDispatcher:
    return RequestDispatcher(cache=cache, breaker=breaker)
