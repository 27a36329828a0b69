"""
Favorite Service

Handles the caller's favorite songs.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from dtos.response import SongResponse
from exceptions import ResourceNotFoundError
from mappers import SongMapper
from models import Song, User, UserFavorite
from repositories.favorite_repository import FavoriteRepository
from repositories.song_repository import SongRepository
from repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class FavoriteService:
    """Service for user favorites."""

    def __init__(self, db: Session):
        self.db = db
        self.favorite_repo = FavoriteRepository(db)
        self.song_repo = SongRepository(db)
        self.user_repo = UserRepository(db)

    def _get_user_or_404(self, user_id: int) -> User:
        user = self.user_repo.get_by_id(user_id)
        if not user:
            raise ResourceNotFoundError("User", "id", user_id)
        return user

    def _get_song_or_404(self, song_id: int) -> Song:
        song = self.song_repo.get_by_id(song_id)
        if not song:
            raise ResourceNotFoundError("Song", "id", song_id)
        return song

    def get_user_favorites(self, user_id: int) -> List[SongResponse]:
        """
        Get a user's favorite songs, oldest favorite first.

        Raises:
            ResourceNotFoundError: If the user does not exist
        """
        self._get_user_or_404(user_id)
        favorites = self.favorite_repo.get_by_user_id(user_id)
        return SongMapper.to_dto_list([favorite.song for favorite in favorites])

    def add_favorite(self, user_id: int, song_id: int) -> bool:
        """
        Mark a song as favorite.

        Returns:
            True if added, False if it was already a favorite

        Raises:
            ResourceNotFoundError: If the user or song does not exist
        """
        user = self._get_user_or_404(user_id)
        song = self._get_song_or_404(song_id)

        if self.favorite_repo.exists_by_user_and_song(user_id, song_id):
            return False

        self.favorite_repo.create(UserFavorite(user=user, song=song))
        self.db.commit()
        logger.info(f"User {user_id} added song {song_id} to favorites")
        return True

    def remove_favorite(self, user_id: int, song_id: int) -> bool:
        """
        Unmark a favorite song.

        Returns:
            True if removed, False if it was not a favorite

        Raises:
            ResourceNotFoundError: If the user or song does not exist
        """
        self._get_user_or_404(user_id)
        self._get_song_or_404(song_id)

        removed = self.favorite_repo.delete_by_user_and_song(user_id, song_id)
        if removed:
            self.db.commit()
            logger.info(f"User {user_id} removed song {song_id} from favorites")
        return removed

    def is_favorite(self, user_id: int, song_id: int) -> bool:
        return self.favorite_repo.exists_by_user_and_song(user_id, song_id)
