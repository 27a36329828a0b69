"""
User Service

Handles business logic for account management: listing, creation,
updates with password/role preservation, and deletion.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from constants import Role, ErrorMessages
from dtos.request import UserRequest
from dtos.response import UserResponse
from exceptions import ResourceNotFoundError, ValidationError, AccessDeniedError
from mappers import UserMapper
from models import Artist, User
from repositories.user_repository import UserRepository
from services.interfaces import IStorageService
from services.security import hash_password, has_role, ensure_owner_or_admin
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, db: Session, storage: IStorageService):
        self.db = db
        self.storage = storage
        self.user_repo = UserRepository(db)

    def _get_or_404(self, user_id: int) -> User:
        user = self.user_repo.get_by_id(user_id)
        if not user:
            raise ResourceNotFoundError("User", "id", user_id)
        return user

    def get_all_users(self) -> List[UserResponse]:
        return UserMapper.to_dto_list(self.user_repo.get_all())

    def get_user_by_id(self, user_id: int, actor: User) -> UserResponse:
        """
        Get a single account. Users may only read their own account unless they are admins.

        Raises:
            AccessDeniedError: If ``actor`` is neither the user nor an admin
            ResourceNotFoundError: If no such user exists
        """
        ensure_owner_or_admin(actor, user_id)
        return UserMapper.to_dto(self._get_or_404(user_id))

    @log_operation("create_user")
    def create_user(self, request: UserRequest) -> UserResponse:
        """
        Create an account on behalf of an administrator.

        Raises:
            ValidationError: If the email is already in use
        """
        if self.user_repo.exists_by_email(request.email):
            raise ValidationError(ErrorMessages.EMAIL_IN_USE, {"email": ErrorMessages.EMAIL_IN_USE})

        if request.role == Role.ARTIST:
            user: User = Artist(name=request.name, email=request.email, role=Role.ARTIST.value)
        else:
            user = UserMapper.to_entity(request)
        if request.password:
            user.password = hash_password(request.password)

        self.user_repo.create(user)
        self.db.commit()
        logger.info(f"Created user {user.id} with role {user.role}")
        return UserMapper.to_dto(user)

    @log_operation("update_user")
    def update_user(self, user_id: int, request: UserRequest, actor: User) -> UserResponse:
        """
        Update an account.

        An empty or missing password keeps the current one; a missing role keeps
        the current role. Only administrators may change roles.

        Raises:
            AccessDeniedError: If ``actor`` may not edit this account or its role
            ResourceNotFoundError: If no such user exists
            ValidationError: If the new email is already in use
        """
        ensure_owner_or_admin(actor, user_id)
        user = self._get_or_404(user_id)

        if request.email != user.email and self.user_repo.exists_by_email(request.email):
            raise ValidationError(ErrorMessages.EMAIL_IN_USE, {"email": ErrorMessages.EMAIL_IN_USE})

        if request.role is not None and request.role.value != user.role and not has_role(actor, Role.ADMIN):
            raise AccessDeniedError("Only administrators can change roles")

        UserMapper.update_entity_from_dto(request, user)
        if request.password:
            user.password = hash_password(request.password)

        self.user_repo.update(user)
        self.db.commit()
        return UserMapper.to_dto(user)

    @log_operation("delete_user")
    def delete_user(self, user_id: int) -> None:
        """
        Delete an account together with its playlists and favorites.

        Deleting an artist also removes their albums and songs, along with the
        cover art and audio files those reference in storage.

        Raises:
            ResourceNotFoundError: If no such user exists
        """
        user = self._get_or_404(user_id)

        if isinstance(user, Artist):
            for filename in self._catalog_files(user):
                self.storage.delete(filename)

        self.user_repo.delete(user)
        self.db.commit()
        logger.info(f"Deleted user {user_id}")

    @staticmethod
    def _catalog_files(artist: Artist) -> List[str]:
        files = []
        for album in artist.albums:
            if album.cover_image:
                files.append(album.cover_image)
            files.extend(song.file_path for song in album.songs if song.file_path)
        return files
