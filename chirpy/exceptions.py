"""Application errors and their HTTP status codes.

Services raise these; the API layer turns each into ``{"error": message}``
with the matching status code.
"""


class ChirpyError(Exception):
    """Base class for all application specific errors."""

    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedRequest(ChirpyError):
    """Request payload could not be decoded into the expected fields."""

    status_code = 400
    default_message = "Invalid request payload"


class TooLong(ChirpyError):
    """Chirp body exceeds the maximum length."""

    status_code = 400
    default_message = "Chirp is too long"


class InvalidID(ChirpyError):
    """Identifier is not a valid UUID."""

    status_code = 400
    default_message = "Invalid ID"


class InvalidCredentials(ChirpyError):
    """Unknown email or wrong password; deliberately indistinguishable."""

    status_code = 401
    default_message = "Incorrect email or password"


class Forbidden(ChirpyError):
    status_code = 403
    default_message = "This endpoint is only available in development mode"


class NotFound(ChirpyError):
    status_code = 404
    default_message = "Not found"


class DuplicateEmail(ChirpyError):
    """Email is already registered."""

    status_code = 409
    default_message = "Email already registered"


class InternalError(ChirpyError):
    """Persistence or hashing failure; details stay in the server log."""

    status_code = 500
    default_message = "Internal server error"
