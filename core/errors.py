"""
Error taxonomy shared by the services and the API layer.

Every error carries the HTTP status it maps to and a message that is safe
to show to the caller. Internal details stay in the logs.
"""


class KeygateError(Exception):
    """Base class for errors surfaced as {success: false, message}."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationInputError(KeygateError):
    status_code = 400
    message = "Invalid request body"


class NotFoundError(KeygateError):
    status_code = 401
    message = "Not found"


class InvalidKey(NotFoundError):
    message = "API key is not valid"


class InvalidCredentials(NotFoundError):
    message = "Invalid email or password"


class ConflictError(KeygateError):
    status_code = 500
    message = "Record already exists"


class GenerationConflict(ConflictError):
    message = "Failed to store the API key, please retry"


class EmailAlreadyRegistered(ConflictError):
    message = "Email already registered"


class EmailAlreadyLinked(ConflictError):
    message = "Email already saved for another user"


class StoreError(KeygateError):
    status_code = 500
    message = "Database error"


class UnknownKeyId(NotFoundError):
    status_code = 404
    message = "API key not found"
