"""Password hashing and verification."""

from passlib.context import CryptContext

from chirpy.config import get_settings

settings = get_settings()

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72

# Password hashing context; over-long passwords are refused instead of truncated
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__default_rounds=settings.bcrypt_rounds,
    bcrypt__truncate_error=True,
)

# Verified against when a login names an unknown email, so that unknown-email and
# wrong-password attempts take the same time
DUMMY_HASH = pwd_context.hash("dummy_password_for_timing_attack_prevention")


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh random salt.

    Raises ValueError for passwords bcrypt cannot take whole (NUL bytes, more
    than 72 bytes).
    """
    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"password is longer than {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against its hash.

    A malformed or missing hash counts as a mismatch rather than an error, as
    does a password no stored hash could have been made from.
    """
    if not hashed_password:
        return False
    if len(plain_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def verify_password_timing_safe(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password, doing the same amount of work when there is no hash."""
    if hashed_password is None:
        verify_password(plain_password, DUMMY_HASH)
        return False
    return verify_password(plain_password, hashed_password)
