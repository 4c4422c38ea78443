"""
Request pipeline infrastructure.

Provides:
- CacheManager: In-memory cache with per-entry TTL
- CircuitBreaker: Stops calling a failing handler boundary for a cooldown
- RequestValidator: Per-operation parameter schemas

The dispatcher lives in flowdocs.services.dispatcher; it depends on the
handlers, which depend on this package, so it is not re-exported here.
"""

from flowdocs.services.errors import (
    ServiceError,
    ValidationError,
    UnknownOperationError,
    CircuitOpenError,
    HandlerError,
    ResourceNotFoundError,
    PromptNotFoundError,
)
from flowdocs.services.cache import CacheManager, CacheEntry, CacheStats
from flowdocs.services.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitState,
)
from flowdocs.services.validator import RequestValidator, VALIDATION_RULES

__all__ = [
    # Errors
    "ServiceError",
    "ValidationError",
    "UnknownOperationError",
    "CircuitOpenError",
    "HandlerError",
    "ResourceNotFoundError",
    "PromptNotFoundError",
    # Cache
    "CacheManager",
    "CacheEntry",
    "CacheStats",
    # Circuit Breaker
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitState",
    # Validator
    "RequestValidator",
    "VALIDATION_RULES",
]
