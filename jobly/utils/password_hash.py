# password_hash.py
import logging

from argon2 import PasswordHasher
from argon2.exceptions import VerificationError, VerifyMismatchError


logger = logging.getLogger(__name__)

_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return _hasher.verify(hashed_password, password)
    except VerifyMismatchError:
        return False
    except VerificationError as exc:
        logger.error("argon2 verification error: %s", exc)
        raise
