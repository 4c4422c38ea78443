"""
RequestDispatcher - The single entry point every operation passes through.

Pipeline per request:
1. RequestValidator checks and normalizes the raw params
2. The handler for the operation is resolved
3. The handler runs inside the shared CircuitBreaker
4. Failures are logged once here, with the operation name, and re-raised
"""

from typing import Any, Mapping

from loguru import logger

from flowdocs.handlers import HANDLERS, Handler, Payload
from flowdocs.services.cache import CacheManager
from flowdocs.services.circuit_breaker import CircuitBreaker, CircuitBreakerConfig
from flowdocs.services.errors import (
    CircuitOpenError,
    UnknownOperationError,
    ValidationError,
)
from flowdocs.services.validator import RequestValidator
from flowdocs.settings import Settings

HANDLER_BREAKER_ID = "handlers"


class RequestDispatcher:
    """
    Composes validation, circuit breaking and cached lookups.

    Usage:
        dispatcher = create_dispatcher(global_settings)

        payload = await dispatcher.dispatch("get_hook", {"hookName": "useNodes"})
        # {"content": [{"type": "text", "text": "# useNodes()\\n\\n..."}]}

    The cache and the breaker are shared by every operation, so a failing
    handler spends the same failure budget as any other.
    """

    def __init__(
        self,
        cache: CacheManager,
        breaker: CircuitBreaker,
        validator: RequestValidator | None = None,
        handlers: Mapping[str, Handler] = HANDLERS,
    ):
        self.cache = cache
        self.breaker = breaker
        self.validator = validator or RequestValidator()
        self._handlers = handlers

    @property
    def operations(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    async def dispatch(
        self, operation: str, raw_params: Mapping[str, Any] | None = None
    ) -> Payload:
        """
        Run one operation through the pipeline.

        Args:
            operation: Operation name, e.g. "get_component"
            raw_params: Arguments as received from the client

        Returns:
            The handler's payload, unchanged

        Raises:
            ValidationError: Params rejected, the breaker is not consulted
            UnknownOperationError: No handler registered for the operation
            CircuitOpenError: Breaker is open, the handler did not run
            Exception: Anything the handler raised, after the breaker counted it
        """
        try:
            params = self.validator.validate(operation, raw_params)
        except ValidationError as e:
            logger.error(f"Validation failed for {operation}: {e}")
            raise

        handler = self._handlers.get(operation)
        if handler is None:
            logger.error(f"Unknown operation requested: {operation}")
            raise UnknownOperationError(operation)

        try:
            return await self.breaker.execute(lambda: handler(params, self.cache))
        except CircuitOpenError as e:
            logger.error(f"Circuit breaker rejected {operation}: {e}")
            raise
        except Exception as e:
            logger.error(f"Error in {operation}: {type(e).__name__}: {e}")
            raise


def create_dispatcher(settings: Settings) -> RequestDispatcher:
    """Build the production dispatcher: one cache, one breaker."""
    cache = CacheManager(
        max_size=settings.cache_max_size,
        debug=settings.log_level == "debug",
    )
    breaker = CircuitBreaker(
        HANDLER_BREAKER_ID,
        CircuitBreakerConfig(
            failure_threshold=settings.breaker_failure_threshold,
            reset_timeout=settings.breaker_reset_timeout,
        ),
    )
    return RequestDispatcher(cache=cache, breaker=breaker)
