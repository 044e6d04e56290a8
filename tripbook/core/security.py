"""
Password hashing with scrypt.

Stored format is "<hex digest>.<hex salt>", the same layout the Node
crypto.scrypt based login used, so existing user files keep working.
"""

import hashlib
import hmac
import secrets

SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
KEY_LENGTH = 64
SALT_BYTES = 16


def _scrypt(password: str, salt: str) -> bytes:
    return hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_LENGTH,
    )


def hash_password(password: str) -> str:
    salt = secrets.token_hex(SALT_BYTES)
    return f"{_scrypt(password, salt).hex()}.{salt}"


def verify_password(plain_password: str, stored: str) -> bool:
    """Check a password against a stored hash. Malformed hashes never match."""
    digest, sep, salt = stored.partition(".")
    if not sep or not digest or not salt:
        return False
    try:
        expected = bytes.fromhex(digest)
    except ValueError:
        return False
    return hmac.compare_digest(expected, _scrypt(plain_password, salt))


def new_session_id() -> str:
    return secrets.token_urlsafe(32)
