"""Security primitives for password workflows."""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets

HASH_SCHEME = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 260000


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS, salt: str | None = None) -> str:
    """Return a salted PBKDF2 hash encoded as ``scheme$iterations$salt$digest``."""
    if not password:
        raise ValueError("password must not be empty")
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return f"{HASH_SCHEME}${iterations}${salt}${_b64(digest)}"


def is_password_hash(value: str | None) -> bool:
    return bool(value) and value.startswith(f"{HASH_SCHEME}$") and value.count("$") == 3


def verify_password(password: str, hashed_password: str) -> bool:
    """Constant-time comparison for hashed password values."""
    if not is_password_hash(hashed_password):
        return False
    _, iterations, salt, _ = hashed_password.split("$")
    candidate = hash_password(password, iterations=int(iterations), salt=salt)
    return hmac.compare_digest(candidate, hashed_password)
