"""Error kinds raised by the user and token services."""


class UserServiceError(Exception):
    """Base class for every outcome the HTTP layer maps to a status code."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(UserServiceError):
    """Malformed, missing or oversized input."""


class ConflictError(UserServiceError):
    """Username (or id) already taken."""


class NotFoundError(UserServiceError):
    """No user with the given id or username."""


class UnauthorizedError(UserServiceError):
    """Password does not match the stored hash."""


class ConfigurationError(UserServiceError):
    """Token signing settings are missing or invalid. Operator actionable; never a client error."""
