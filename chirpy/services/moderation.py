"""Chirp text moderation."""

BANNED_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


def moderate(text: str) -> str:
    """Mask banned words in a chirp.

    Only the literal space character separates words, so a banned word next to
    punctuation, a tab or a newline is left alone, and runs of spaces survive
    the round trip unchanged. Matching ignores case; other words keep theirs.
    """
    if not text:
        return text
    words = text.split(" ")
    return " ".join(MASK if word.lower() in BANNED_WORDS else word for word in words)
