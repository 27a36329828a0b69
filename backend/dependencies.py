"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances and
resolving the authenticated caller, following the Dependency Inversion
Principle. Tests override ``get_db`` and ``get_storage_service`` to run
against an in-memory database and a temporary upload directory.
"""

from typing import Callable, Optional
import logging

from sqlalchemy.orm import Session
from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import app_config
from constants import Role, HTTPStatus, ErrorMessages
from database import get_db
from exceptions import AuthenticationError
from models import User
from repositories.user_repository import UserRepository
from services.interfaces import IStorageService
from services.storage_service import FileSystemStorageService
from services.security import decode_access_token, has_role
from services.auth_service import AuthService
from services.user_service import UserService
from services.artist_service import ArtistService
from services.album_service import AlbumService
from services.song_service import SongService
from services.playlist_service import PlaylistService
from services.favorite_service import FavoriteService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="JWT obtained from /api/auth/login")


def get_storage_service() -> IStorageService:
    """
    Factory function for creating the file store.

    Returns:
        IStorageService: Filesystem store rooted at GROOVY_UPLOAD_DIR
    """
    return FileSystemStorageService(app_config.UPLOAD_DIR)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_user_service(
    db: Session = Depends(get_db),
    storage: IStorageService = Depends(get_storage_service)
) -> UserService:
    return UserService(db, storage)


def get_artist_service(db: Session = Depends(get_db)) -> ArtistService:
    return ArtistService(db)


def get_album_service(db: Session = Depends(get_db)) -> AlbumService:
    return AlbumService(db)


def get_song_service(
    db: Session = Depends(get_db),
    storage: IStorageService = Depends(get_storage_service)
) -> SongService:
    """
    Factory function for creating SongService instances.

    Args:
        db: Database session (injected)
        storage: File store (injected)

    Returns:
        SongService bound to the request's session
    """
    return SongService(db, storage)


def get_playlist_service(db: Session = Depends(get_db)) -> PlaylistService:
    return PlaylistService(db)


def get_favorite_service(db: Session = Depends(get_db)) -> FavoriteService:
    return FavoriteService(db)


def _unauthorized(message: str = ErrorMessages.NOT_AUTHENTICATED) -> HTTPException:
    return HTTPException(
        status_code=HTTPStatus.UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"}
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired, or
            names an account that no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized()

    try:
        claims = decode_access_token(credentials.credentials)
    except AuthenticationError as e:
        logger.debug(f"Rejected bearer token: {e.message}")
        raise _unauthorized(e.message)

    user = UserRepository(db).get_by_email(claims["sub"])
    if user is None:
        logger.warning(f"Token subject {claims['sub']!r} no longer exists")
        raise _unauthorized()
    return user


def require_roles(*roles: Role) -> Callable[..., User]:
    """
    Build a dependency that admits only callers holding one of ``roles``.

    Example:
        @router.delete("/{id}")
        def delete_user(id: int, admin: User = Depends(require_roles(Role.ADMIN))):
            ...
    """
    def dependency(user: User = Depends(get_current_user)) -> User:
        if not has_role(user, *roles):
            logger.warning(f"User {user.id} with role {user.role} denied, requires one of {[r.value for r in roles]}")
            raise HTTPException(status_code=HTTPStatus.FORBIDDEN, detail=ErrorMessages.ACCESS_DENIED)
        return user

    return dependency
