"""Password hashing and random value helpers for sanitized data."""

import base64
import hashlib
import secrets

PBKDF2_ALGORITHM = "pbkdf2_sha256"
PBKDF2_ITERATIONS = 260000


def hash_password(
    password: str, salt: str | None = None, iterations: int = PBKDF2_ITERATIONS
) -> str:
    """Hash a password for storage in a sanitized user table.

    Args:
        password: Plain text password
        salt: Salt to use, random when omitted
        iterations: PBKDF2 iteration count

    Returns:
        str: Hash in "pbkdf2_sha256$<iterations>$<salt>$<digest>" format
    """
    if not password:
        raise ValueError("Password cannot be empty")

    salt = salt or secrets.token_hex(8)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
    )
    encoded = base64.b64encode(digest).decode("ascii").strip()
    return f"{PBKDF2_ALGORITHM}${iterations}${salt}${encoded}"


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain text password against a hash from hash_password."""
    try:
        algorithm, iterations, salt, _ = hashed.split("$", 3)
    except ValueError:
        return False
    if algorithm != PBKDF2_ALGORITHM:
        return False
    expected = hash_password(password, salt=salt, iterations=int(iterations))
    return secrets.compare_digest(expected, hashed)


def generate_random_int(upper: int = 10000) -> int:
    """Generate a random non-negative integer below upper."""
    return secrets.randbelow(upper)
