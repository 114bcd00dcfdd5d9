# libms/security.py
"""Password hashing helpers.

Accounts created by the web application store an unsalted MD5 hex digest;
newer accounts store bcrypt hashes. Verification accepts either form.
"""
import hashlib
import hmac
import re
from typing import Optional

import bcrypt

PASSWORD_PATTERN = re.compile(r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,20}$')

BCRYPT_PREFIXES = ('$2a$', '$2b$', '$2y$')

# bcrypt only looks at the first 72 bytes and refuses anything longer
BCRYPT_MAX_BYTES = 72


def legacy_hash(password: str) -> str:
    """MD5 hex digest, the format the web application writes"""
    return hashlib.md5(password.encode('utf-8')).hexdigest()


def hash_password(password: str) -> str:
    """Hash a password with bcrypt.

    Raises ValueError for passwords longer than 72 bytes.
    """
    encoded = password.encode('utf-8')
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password is {len(encoded)} bytes, bcrypt accepts at most {BCRYPT_MAX_BYTES}")
    return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode('utf-8')


def is_bcrypt_hash(stored: Optional[str]) -> bool:
    return bool(stored) and stored.startswith(BCRYPT_PREFIXES)


def verify_password(password: str, stored: Optional[str]) -> bool:
    """Check a plain-text password against a stored bcrypt or MD5 hash"""
    if not stored:
        return False
    if is_bcrypt_hash(stored):
        encoded = password.encode('utf-8')
        if len(encoded) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, stored.encode('utf-8'))
        except ValueError:
            # Malformed stored hash
            return False
    return hmac.compare_digest(legacy_hash(password), stored)


def is_strong_password(password: str) -> bool:
    """8-20 characters with a lower-case letter, an upper-case letter, a digit and one of @$!%*?&"""
    return PASSWORD_PATTERN.fullmatch(password) is not None


def passwords_match(new_password: str, confirm_password: str) -> bool:
    return hmac.compare_digest(new_password.encode('utf-8'), confirm_password.encode('utf-8'))


def hash_like(stored: Optional[str], password: str) -> str:
    """Hash a new password with the same scheme as the hash it replaces"""
    if is_bcrypt_hash(stored):
        return hash_password(password)
    return legacy_hash(password)
