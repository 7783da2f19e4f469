"""
Password hashing and session tokens.

Hashes are "pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>", salted per
user and peppered with SECRET_KEY.
"""
from __future__ import annotations

import hashlib
import hmac
import secrets

from app.core.config import settings

_ALGORITHM = "pbkdf2_sha256"
_ITERATIONS = 260_000


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    material = (password + settings.SECRET_KEY).encode("utf-8")
    return hashlib.pbkdf2_hmac("sha256", material, salt, iterations)


def hash_password(password: str) -> str:
    salt = secrets.token_bytes(16)
    digest = _derive(password, salt, _ITERATIONS)
    return f"{_ALGORITHM}${_ITERATIONS}${salt.hex()}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
    except ValueError:
        return False
    if algorithm != _ALGORITHM:
        return False
    digest = _derive(password, bytes.fromhex(salt_hex), int(iterations))
    return hmac.compare_digest(digest.hex(), digest_hex)


def new_session_token() -> str:
    return secrets.token_urlsafe(32)
