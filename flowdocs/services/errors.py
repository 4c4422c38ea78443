"""
Service layer exceptions.
"""


class ServiceError(Exception):
    """Base exception for request pipeline errors."""

    def __init__(self, message: str, operation: str | None = None):
        self.operation = operation
        super().__init__(message)


class ValidationError(ServiceError):
    """Request parameters failed validation."""

    pass


class UnknownOperationError(ServiceError):
    """No handler is registered for the requested operation."""

    def __init__(self, operation: str):
        super().__init__(f"Unknown operation: {operation}", operation=operation)


class CircuitOpenError(ServiceError):
    """Circuit breaker is open, request blocked."""

    def __init__(self, breaker_id: str, reset_after_seconds: float):
        self.breaker_id = breaker_id
        self.reset_after_seconds = reset_after_seconds
        super().__init__(
            f"Circuit breaker open for '{breaker_id}', "
            f"retry after {reset_after_seconds:.1f}s"
        )


class HandlerError(ServiceError):
    """A lookup handler failed unexpectedly."""

    pass


class ResourceNotFoundError(HandlerError):
    """Requested resource URI matches no resource or template."""

    def __init__(self, uri: str):
        self.uri = uri
        super().__init__(f"Resource not found: {uri}", operation="read_resource")


class PromptNotFoundError(HandlerError):
    """Requested prompt name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Prompt not found: {name}", operation="get_prompt")
