"""
CircuitBreaker - Stops invoking a failing unit of work for a cooldown window.

States:
- CLOSED: Normal operation, calls pass through
- OPEN: Work is failing, calls are rejected without running
- HALF_OPEN: A single trial call is testing recovery

Transitions:
- CLOSED → OPEN: When consecutive failures reach failure_threshold
- OPEN → HALF_OPEN: On the first call attempted after reset_timeout
- HALF_OPEN → CLOSED: Trial call succeeded
- HALF_OPEN → OPEN: Trial call failed
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

from loguru import logger

from flowdocs.services.errors import CircuitOpenError

T = TypeVar("T")


class CircuitState(str, Enum):
    """Circuit breaker states."""

    CLOSED = "CLOSED"  # Normal operation
    OPEN = "OPEN"  # Blocking calls
    HALF_OPEN = "HALF_OPEN"  # Testing recovery


@dataclass
class CircuitBreakerConfig:
    """Configuration for circuit breaker."""

    failure_threshold: int = 5  # Consecutive failures before opening
    reset_timeout: timedelta = timedelta(seconds=60)  # Cooldown before a trial call


@dataclass(frozen=True)
class Admission:
    """How a call was let through: the state generation and whether it is the trial."""

    generation: int
    is_trial: bool = False


class CircuitBreaker:
    """
    Circuit breaker guarding a single call boundary.

    Usage:
        cb = CircuitBreaker("handlers")

        result = await cb.execute(lambda: handler(params, cache))

    execute() raises CircuitOpenError without running the work while the
    circuit is open. Exceptions raised by the work are counted and re-raised.

    Every state transition bumps a generation counter. A call's outcome is
    judged by the Admission it received, so a call admitted before a
    transition cannot close or reopen the circuit after it.
    """

    def __init__(
        self,
        breaker_id: str,
        config: CircuitBreakerConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.breaker_id = breaker_id
        self.config = config or CircuitBreakerConfig()
        self._clock = clock

        self._state = CircuitState.CLOSED
        self._generation = 0
        self._consecutive_failures = 0
        self._last_failure_time: datetime | None = None
        self._trial_in_flight = False
        self._lock = asyncio.Lock()

    @property
    def state(self) -> CircuitState:
        """Current state. Reading it never triggers a transition."""
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def consecutive_failures(self) -> int:
        return self._consecutive_failures

    @property
    def last_failure_time(self) -> datetime | None:
        return self._last_failure_time

    async def execute(self, work: Callable[[], Awaitable[T]]) -> T:
        """
        Run work under circuit breaker protection.

        Args:
            work: Zero-argument coroutine function performing the call

        Returns:
            Whatever work returns

        Raises:
            CircuitOpenError: If the circuit is open or a trial is in flight
            Exception: Anything raised by work, after it has been recorded
        """
        async with self._lock:
            admission = self._before_call()

        try:
            result = await work()
        except asyncio.CancelledError:
            async with self._lock:
                self._release(admission)
            raise
        except Exception:
            async with self._lock:
                self._record_failure(admission)
            raise

        async with self._lock:
            self._record_success(admission)
        return result

    def _before_call(self) -> Admission:
        """Admit or reject a call. Caller holds the lock."""
        if self._state == CircuitState.OPEN:
            if self._cooldown_elapsed():
                self._transition(CircuitState.HALF_OPEN)
                self._trial_in_flight = False
                logger.info(
                    f"Circuit breaker '{self.breaker_id}' transitioned to HALF_OPEN"
                )
            else:
                raise CircuitOpenError(
                    self.breaker_id, self.get_time_until_reset() or 0.0
                )

        if self._state == CircuitState.HALF_OPEN:
            if self._trial_in_flight:
                raise CircuitOpenError(self.breaker_id, 0.0)
            self._trial_in_flight = True
            return Admission(self._generation, is_trial=True)

        return Admission(self._generation)

    def _cooldown_elapsed(self) -> bool:
        if self._last_failure_time is None:
            return True
        return self._clock() - self._last_failure_time >= self.config.reset_timeout

    def _is_stale(self, admission: Admission) -> bool:
        """Outcomes from an earlier generation leave the state alone."""
        return admission.generation != self._generation

    def _release(self, admission: Admission) -> None:
        """A cancelled trial frees the half-open slot without counting."""
        if admission.is_trial and not self._is_stale(admission):
            self._trial_in_flight = False

    def _record_success(self, admission: Admission) -> None:
        """Record a successful call."""
        if self._is_stale(admission):
            return
        if admission.is_trial:
            self._close()
        else:
            self._consecutive_failures = 0

    def _record_failure(self, admission: Admission) -> None:
        """Record a failed call."""
        if self._is_stale(admission):
            return

        self._consecutive_failures += 1
        self._last_failure_time = self._clock()

        if admission.is_trial:
            # A failed trial reopens the circuit
            self._trial_in_flight = False
            self._open()
        elif self._consecutive_failures >= self.config.failure_threshold:
            self._open()

    def _transition(self, state: CircuitState) -> None:
        self._state = state
        self._generation += 1

    def _open(self) -> None:
        """Transition to OPEN state."""
        self._transition(CircuitState.OPEN)
        logger.warning(
            f"Circuit breaker '{self.breaker_id}' OPENED after "
            f"{self._consecutive_failures} consecutive failures"
        )

    def _close(self) -> None:
        """Transition to CLOSED state."""
        self._transition(CircuitState.CLOSED)
        self._consecutive_failures = 0
        self._trial_in_flight = False
        logger.info(f"Circuit breaker '{self.breaker_id}' CLOSED (recovered)")

    def reset(self) -> None:
        """Manually reset the circuit breaker."""
        self._transition(CircuitState.CLOSED)
        self._consecutive_failures = 0
        self._last_failure_time = None
        self._trial_in_flight = False
        logger.info(f"Circuit breaker '{self.breaker_id}' manually reset")

    def get_time_until_reset(self) -> float | None:
        """Get seconds until an open circuit admits a trial call."""
        if self._state != CircuitState.OPEN or not self._last_failure_time:
            return None

        reset_at = self._last_failure_time + self.config.reset_timeout
        remaining = (reset_at - self._clock()).total_seconds()
        return max(0.0, remaining)

    def get_status(self) -> dict[str, Any]:
        """Get current status as dictionary."""
        return {
            "breaker_id": self.breaker_id,
            "state": self._state.value,
            "generation": self._generation,
            "consecutive_failures": self._consecutive_failures,
            "failure_threshold": self.config.failure_threshold,
            "last_failure": (
                self._last_failure_time.isoformat() if self._last_failure_time else None
            ),
            "time_until_reset": self.get_time_until_reset(),
        }
