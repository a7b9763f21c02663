"""Security helpers (password hashing, admin credential and token checks)."""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def verify_password(password: str, stored_hash: str | None) -> bool:
    stored = stored_hash or ""
    if stored.startswith(_PREFIX):
        stored = stored[len(_PREFIX) :]
    if not stored:
        return False
    try:
        return _ph.verify(stored, password)
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False


def check_admin_credentials(settings, username: str | None, password: str | None) -> bool:
    """Exact username match plus either the configured hash or the plaintext password."""
    if not secrets.compare_digest((username or "").encode(), settings.admin_username.encode()):
        return False
    if settings.admin_password_hash:
        return verify_password(password or "", settings.admin_password_hash)
    return secrets.compare_digest((password or "").encode(), settings.admin_password.encode())


def bearer_token(authorization: str | None) -> str:
    scheme, _, value = (authorization or "").partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return value.strip()


def token_matches(settings, token: str | None) -> bool:
    if not token:
        return False
    return secrets.compare_digest(token.encode(), settings.admin_token.encode())
