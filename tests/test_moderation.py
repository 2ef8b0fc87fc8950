"""Tests for chirp moderation."""

import pytest

from chirpy.services.moderation import MASK, moderate


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Kerfuffle is fun", "**** is fun"),
        ("this is a kerfuffle", "this is a ****"),
        ("my sharbert is melting", "my **** is melting"),
        ("FORNAX and Sharbert", "**** and ****"),
        ("Nothing To See Here", "Nothing To See Here"),
    ],
)
def test_masks_banned_words(text, expected):
    assert moderate(text) == expected


def test_empty_text_unchanged():
    assert moderate("") == ""


def test_punctuation_is_part_of_the_word():
    """Only exact word matches are masked."""
    assert moderate("Sharbert! kerfuffles fornax.") == "Sharbert! kerfuffles fornax."


def test_only_spaces_separate_words():
    """Tabs and newlines are not word boundaries; space runs are preserved."""
    assert moderate("kerfuffle\tfornax") == "kerfuffle\tfornax"
    assert moderate("a  kerfuffle   b") == "a  ****   b"
    assert moderate(" fornax ") == " **** "


@pytest.mark.parametrize(
    "text",
    ["", "plain text", "kerfuffle", "a **** b", "Sharbert  fornax\tkerfuffle", MASK],
)
def test_idempotent(text):
    once = moderate(text)
    assert moderate(once) == once
