"""
Artist Service

Handles business logic for artist profiles and their catalogs.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from constants import ErrorMessages
from dtos.request import ArtistRequest
from dtos.response import ArtistResponse
from exceptions import ResourceNotFoundError, ValidationError, InvalidOperationError
from mappers import ArtistMapper
from models import Artist, User
from repositories.artist_repository import ArtistRepository
from repositories.user_repository import UserRepository
from services.security import hash_password, ensure_owner_or_admin
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class ArtistService:
    """Service for artist-related business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.artist_repo = ArtistRepository(db)
        self.user_repo = UserRepository(db)

    def _get_or_404(self, artist_id: int) -> Artist:
        artist = self.artist_repo.get_by_id(artist_id)
        if not artist:
            raise ResourceNotFoundError("Artist", "id", artist_id)
        return artist

    def get_all_artists(self) -> List[ArtistResponse]:
        """Get every artist with albums and songs."""
        return ArtistMapper.to_dto_list(self.artist_repo.get_all_with_catalog())

    def get_artist_by_id(self, artist_id: int) -> ArtistResponse:
        return ArtistMapper.to_dto(self._get_or_404(artist_id))

    def search_artists_by_name(self, name: Optional[str]) -> List[ArtistResponse]:
        """
        Case-insensitive name search. A blank query returns every artist.

        Args:
            name: Fragment of the artist name
        """
        if not name or not name.strip():
            return self.get_all_artists()
        return ArtistMapper.to_dto_list(self.artist_repo.search_by_name(name.strip()))

    @log_operation("create_artist")
    def create_artist(self, request: ArtistRequest) -> ArtistResponse:
        """
        Create an artist profile. The role is always ARTIST.

        Raises:
            ValidationError: If the email is already in use
        """
        if self.user_repo.exists_by_email(request.email):
            raise ValidationError(ErrorMessages.EMAIL_IN_USE, {"email": ErrorMessages.EMAIL_IN_USE})

        artist = ArtistMapper.to_entity(request)
        if request.password:
            artist.password = hash_password(request.password)

        self.artist_repo.create(artist)
        self.db.commit()
        logger.info(f"Created artist {artist.id} ({artist.name})")
        return ArtistMapper.to_dto(artist)

    @log_operation("update_artist")
    def update_artist(self, artist_id: int, request: ArtistRequest, actor: User) -> ArtistResponse:
        """
        Update an artist profile. Artists may only edit their own profile.

        Raises:
            AccessDeniedError: If ``actor`` is another artist
            ResourceNotFoundError: If no such artist exists
            ValidationError: If the new email is already in use
        """
        ensure_owner_or_admin(actor, artist_id)
        artist = self._get_or_404(artist_id)

        if request.email != artist.email and self.user_repo.exists_by_email(request.email):
            raise ValidationError(ErrorMessages.EMAIL_IN_USE, {"email": ErrorMessages.EMAIL_IN_USE})

        ArtistMapper.update_entity_from_dto(request, artist)
        if request.password:
            artist.password = hash_password(request.password)

        self.artist_repo.update(artist)
        self.db.commit()
        return ArtistMapper.to_dto(artist)

    @log_operation("delete_artist")
    def delete_artist(self, artist_id: int) -> None:
        """
        Delete an artist without albums.

        Raises:
            ResourceNotFoundError: If no such artist exists
            InvalidOperationError: If the artist still has albums
        """
        artist = self._get_or_404(artist_id)
        if artist.albums:
            raise InvalidOperationError(ErrorMessages.ARTIST_HAS_ALBUMS)

        self.artist_repo.delete(artist)
        self.db.commit()
        logger.info(f"Deleted artist {artist_id}")
