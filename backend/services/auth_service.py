"""
Auth Service

Handles registration and login: password hashing, token issuance and
mapping the account to its public DTO.
"""

from sqlalchemy.orm import Session
import logging

from config import app_config
from constants import Role, ErrorMessages
from dtos.request import UserRequest, LoginRequest
from dtos.response import AuthResponse
from exceptions import ValidationError, AuthenticationError, AccessDeniedError
from mappers import UserMapper
from models import Artist, User
from repositories.user_repository import UserRepository
from services.security import hash_password, verify_password, create_access_token
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class AuthService:
    """Service for account registration and authentication."""

    def __init__(self, db: Session):
        """
        Initialize AuthService.

        Args:
            db: Database session
        """
        self.db = db
        self.user_repo = UserRepository(db)

    @log_operation("register")
    def register(self, request: UserRequest) -> AuthResponse:
        """
        Create an account and log it in.

        The role defaults to USER. Registering as ARTIST creates an artist
        profile; registering as ADMIN is refused unless explicitly enabled.

        Args:
            request: Registration details

        Returns:
            AuthResponse with a fresh token

        Raises:
            ValidationError: If the email is taken or no password was given
            AccessDeniedError: If ADMIN self-registration is disabled
        """
        if self.user_repo.exists_by_email(request.email):
            raise ValidationError(ErrorMessages.EMAIL_IN_USE, {"email": ErrorMessages.EMAIL_IN_USE})

        if not request.password:
            raise ValidationError("Password is required", {"password": "Password is required"})

        role = request.role or Role.USER
        if role == Role.ADMIN and not app_config.ALLOW_ADMIN_REGISTRATION:
            raise AccessDeniedError("Registering as ADMIN is not allowed")

        if role == Role.ARTIST:
            user: User = Artist(name=request.name, email=request.email)
        else:
            user = UserMapper.to_entity(request)
        user.role = role.value
        user.password = hash_password(request.password)

        self.user_repo.create(user)
        self.db.commit()
        logger.info(f"Registered {role.value} account {user.id} ({user.email})")

        return AuthResponse(
            token=create_access_token(user),
            user=UserMapper.to_dto(user)
        )

    def authenticate(self, request: LoginRequest) -> AuthResponse:
        """
        Verify credentials and issue a token.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = self.user_repo.get_by_email(request.email.strip())
        if not user or not verify_password(request.password, user.password):
            logger.warning(f"Failed login attempt for {request.email!r}")
            raise AuthenticationError(ErrorMessages.INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return AuthResponse(
            token=create_access_token(user),
            user=UserMapper.to_dto(user)
        )
