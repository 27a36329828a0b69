"""
Runtime Configuration

All settings are read from GROOVY_* environment variables once, at import time.

Includes:
- Database and data directory locations
- Upload storage root
- Token signing settings
- Optional admin bootstrap credentials
- Server bind address and CORS origins
"""
import os
import secrets
import logging
from pathlib import Path

from constants import ServerConfig

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = 'false') -> bool:
    """Interpret an environment variable as a boolean flag ('true', '1', 'yes')."""
    return os.environ.get(name, default).lower() in ('true', '1', 'yes')


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={value!r}, using {default}")
        return default


def get_jwt_secret() -> str:
    """
    Get the token signing secret.

    Returns:
        GROOVY_JWT_SECRET if set, otherwise a random per-process secret
        (tokens will not survive a restart)
    """
    secret = os.environ.get('GROOVY_JWT_SECRET')
    if secret:
        return secret
    logger.warning("GROOVY_JWT_SECRET not set - using a random secret, tokens will not survive restarts")
    return secrets.token_urlsafe(48)


DATA_DIR = Path(os.environ.get('GROOVY_DATA_DIR', str(Path.home() / '.groovy'))).expanduser()
DATABASE_URL = os.environ.get('GROOVY_DATABASE_URL', f"sqlite:///{DATA_DIR / 'groovy.db'}")
UPLOAD_DIR = Path(os.environ.get('GROOVY_UPLOAD_DIR', 'uploads')).expanduser()
LOG_DIR = Path(os.environ.get('GROOVY_LOG_DIR', str(DATA_DIR / 'logs'))).expanduser()

JWT_SECRET = get_jwt_secret()
JWT_ALGORITHM = 'HS256'
JWT_EXPIRATION_MINUTES = _env_int('GROOVY_JWT_EXPIRATION_MINUTES', 24 * 60)

ALLOW_ADMIN_REGISTRATION = _env_flag('GROOVY_ALLOW_ADMIN_REGISTRATION')
ADMIN_EMAIL = os.environ.get('GROOVY_ADMIN_EMAIL')
ADMIN_PASSWORD = os.environ.get('GROOVY_ADMIN_PASSWORD')

HOST = os.environ.get('GROOVY_HOST', ServerConfig.HOST)
PORT = _env_int('GROOVY_PORT', ServerConfig.PORT)
CORS_ORIGINS = [o.strip() for o in os.environ.get('GROOVY_CORS_ORIGINS', '*').split(',') if o.strip()]
