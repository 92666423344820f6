"""Service-layer error kinds, mapped to HTTP status codes by the error middleware."""


class ServiceError(Exception):
    """Base class for predictable service-layer failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(ServiceError):
    """A referenced user or service request does not exist."""

    status_code = 404


class ServiceValidationError(ServiceError):
    """Input violates a business rule (bad id, blank field, unknown enum name)."""


class ServiceOperationError(ServiceError):
    """The operation cannot be carried out against the current data."""
