"""Structural checks on incoming payloads, applied before anything is stored."""

from uuid import UUID

from chirpy.exceptions import InvalidID, TooLong

MAX_CHIRP_LENGTH = 140


def validate_chirp_body(body: str) -> None:
    """Reject raw (pre-moderation) chirp text longer than MAX_CHIRP_LENGTH characters."""
    if len(body) > MAX_CHIRP_LENGTH:
        raise TooLong()


def _parse_uuid(raw: str, message: str) -> UUID:
    try:
        return UUID(raw)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidID(message) from e


def parse_user_id(raw: str) -> UUID:
    """Parse an author id."""
    return _parse_uuid(raw, "Invalid user ID")


def parse_chirp_id(raw: str) -> UUID:
    """Parse a chirp id taken from the request path."""
    return _parse_uuid(raw, "Invalid chirp ID")
