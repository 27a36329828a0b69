"""
Security Service

Password hashing (bcrypt), bearer token issuance (JWT) and the ownership
checks shared by the user, artist and playlist services.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict
import logging

import bcrypt
import jwt

from config import app_config
from constants import Role, ErrorMessages
from exceptions import AuthenticationError, AccessDeniedError
from models import User

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode('utf-8')[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a plain-text password.

    Args:
        password: Plain-text password

    Returns:
        bcrypt hash as text (``$2b$...``)
    """
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt()).decode('utf-8')


def verify_password(password: str, password_hash: str | None) -> bool:
    """
    Check a plain-text password against a stored hash.

    Accounts without a hash (e.g. artists created without a password) never match.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode('utf-8'))
    except ValueError:
        logger.error("Invalid hashed password format.")
        return False


def create_access_token(user: User) -> str:
    """
    Issue a signed bearer token for a user.

    The subject is the user's email; ``uid`` and ``role`` are informational claims.

    Args:
        user: Persisted user (must have an id)

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user.email,
        "uid": user.id,
        "role": Role(user.role).value,
        "iat": now,
        "exp": now + timedelta(minutes=app_config.JWT_EXPIRATION_MINUTES),
    }
    return jwt.encode(payload, app_config.JWT_SECRET, algorithm=app_config.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Validate a bearer token and return its claims.

    Raises:
        AuthenticationError: If the token is expired, tampered with or malformed
    """
    try:
        claims = jwt.decode(token, app_config.JWT_SECRET, algorithms=[app_config.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise AuthenticationError("Authentication token has expired") from e
    except jwt.InvalidTokenError as e:
        raise AuthenticationError(ErrorMessages.NOT_AUTHENTICATED) from e

    if not claims.get("sub"):
        raise AuthenticationError(ErrorMessages.NOT_AUTHENTICATED)
    return claims


def has_role(user: User, *roles: Role) -> bool:
    return Role(user.role) in roles


def ensure_owner_or_admin(actor: User, owner_id: int) -> None:
    """
    Allow the action only for the resource owner or an administrator.

    Raises:
        AccessDeniedError: If ``actor`` is neither
    """
    if actor.id != owner_id and not has_role(actor, Role.ADMIN):
        logger.warning(f"User {actor.id} denied access to resource owned by {owner_id}")
        raise AccessDeniedError(ErrorMessages.ACCESS_DENIED)
