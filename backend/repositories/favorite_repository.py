"""
Favorite repository for user/song favorite links.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from models import UserFavorite
from .base_repository import BaseRepository


class FavoriteRepository(BaseRepository[UserFavorite]):
    """Repository for UserFavorite model operations."""

    def __init__(self, db: Session):
        super().__init__(db, UserFavorite)

    def get_by_user_id(self, user_id: int) -> List[UserFavorite]:
        """
        Get a user's favorites with their songs eagerly loaded.

        Args:
            user_id: User ID

        Returns:
            List of favorites, oldest first
        """
        return self.db.query(self.model).options(
            joinedload(self.model.song)
        ).filter(
            self.model.user_id == user_id
        ).order_by(self.model.created_at, self.model.id).all()

    def get_by_user_and_song(self, user_id: int, song_id: int) -> Optional[UserFavorite]:
        return self.db.query(self.model).filter(
            self.model.user_id == user_id,
            self.model.song_id == song_id
        ).first()

    def exists_by_user_and_song(self, user_id: int, song_id: int) -> bool:
        """Check whether the user has favorited the song."""
        return self.get_by_user_and_song(user_id, song_id) is not None

    def delete_by_user_and_song(self, user_id: int, song_id: int) -> bool:
        """
        Remove a single favorite link.

        Returns:
            True if a link was deleted, False if none existed
        """
        favorite = self.get_by_user_and_song(user_id, song_id)
        if favorite:
            self.delete(favorite)
            return True
        return False

    def delete_by_song_id(self, song_id: int) -> int:
        """
        Remove every favorite pointing at a song.

        Args:
            song_id: Song ID

        Returns:
            Number of favorites deleted
        """
        favorites = self.db.query(self.model).filter(self.model.song_id == song_id).all()
        for favorite in favorites:
            self.delete(favorite)
        return len(favorites)
