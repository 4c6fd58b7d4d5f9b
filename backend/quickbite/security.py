"""
QuickBite Backend: Password Hashing & Token Signing
====================================================

What:  bcrypt password hashing and HS256 bearer tokens (PyJWT).
Who:   Used by AuthService. Kept free of I/O so it can be unit-tested directly.

bcrypt notes:
    - Only the first 72 bytes of a password take part in the hash. Longer
      inputs are truncated here explicitly (recent bcrypt releases raise
      on them instead of truncating).
    - Hashing and checking are CPU-bound (~50-100ms at cost 10). AuthService
      runs them in Starlette's threadpool so the event loop keeps serving.

Token payload:
    {"id": <user id>, "email": <email>, "iat": <issued>, "exp": <issued + ttl>}
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Union

import bcrypt
import jwt

from quickbite.exceptions import AuthError

BCRYPT_MAX_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plaintext: str, rounds: int = 10) -> str:
    """Return a bcrypt hash ("$2b$<rounds>$...") for `plaintext`."""
    return bcrypt.hashpw(_password_bytes(plaintext), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(plaintext: str, password_hash: str) -> bool:
    """
    Compare `plaintext` against a stored bcrypt hash.

    A malformed stored hash counts as a mismatch rather than an error.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(plaintext), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    user_id: Union[int, str],
    email: str,
    *,
    secret: str,
    ttl_seconds: int = 7200,
    algorithm: str = "HS256",
) -> str:
    issued_at = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=ttl_seconds),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_access_token(token: str, *, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    Verify a token's signature and expiry and return its payload.

    Raises:
        AuthError: expired, tampered with, or not a token at all
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.ExpiredSignatureError as e:
        raise AuthError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthError("Invalid token") from e
