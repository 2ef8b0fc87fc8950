"""Tests for payload validation."""

import uuid

import pytest

from chirpy.exceptions import InvalidID, TooLong
from chirpy.services.validation import (
    MAX_CHIRP_LENGTH,
    parse_chirp_id,
    parse_user_id,
    validate_chirp_body,
)


@pytest.mark.parametrize("length", [0, 1, 139, MAX_CHIRP_LENGTH])
def test_body_within_limit(length):
    validate_chirp_body("x" * length)


@pytest.mark.parametrize("length", [MAX_CHIRP_LENGTH + 1, 500])
def test_body_too_long(length):
    with pytest.raises(TooLong) as exc_info:
        validate_chirp_body("x" * length)
    assert exc_info.value.status_code == 400


def test_length_counts_characters_not_bytes():
    validate_chirp_body("🐦" * MAX_CHIRP_LENGTH)


def test_length_measured_before_moderation():
    """Masking can only shorten text, but the raw length is what counts."""
    with pytest.raises(TooLong):
        validate_chirp_body("kerfuffle " * 15)


def test_parse_user_id():
    user_id = uuid.uuid4()
    assert parse_user_id(str(user_id)) == user_id


@pytest.mark.parametrize("raw", ["", "not-a-uuid", "1234", "g" * 32])
def test_parse_user_id_invalid(raw):
    with pytest.raises(InvalidID) as exc_info:
        parse_user_id(raw)
    assert exc_info.value.message == "Invalid user ID"


def test_parse_chirp_id_invalid():
    with pytest.raises(InvalidID) as exc_info:
        parse_chirp_id("nope")
    assert exc_info.value.message == "Invalid chirp ID"
