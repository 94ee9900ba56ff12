# minishop/security.py
import hashlib
import hmac
import secrets
from typing import Optional, Tuple

from .config import settings

SALT_BYTES = 16


def hash_password(password: str, salt: Optional[str] = None, iterations: Optional[int] = None) -> Tuple[str, str, int]:
    """
    Derive a PBKDF2-SHA256 hash for `password`.

    Returns (hash_hex, salt_hex, iterations). A fresh random salt is drawn
    when none is given.
    """
    if salt is None:
        salt = secrets.token_hex(SALT_BYTES)
    if iterations is None:
        iterations = settings.hash_iterations
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), bytes.fromhex(salt), iterations)
    return digest.hex(), salt, iterations


def verify_password(password: str, password_hash: str, salt: str, iterations: int) -> bool:
    calculated, _, _ = hash_password(password, salt=salt, iterations=iterations)
    return hmac.compare_digest(calculated, password_hash)
