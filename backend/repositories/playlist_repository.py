"""
Playlist repository for playlist-specific data access operations.
"""

from typing import List
from sqlalchemy.orm import Session

from models import Playlist
from .base_repository import BaseRepository


class PlaylistRepository(BaseRepository[Playlist]):
    """Repository for Playlist model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Playlist)

    def get_by_user_id(self, user_id: int) -> List[Playlist]:
        """
        Get all playlists owned by a user.

        Args:
            user_id: Owner's user ID

        Returns:
            List of playlists
        """
        return self.db.query(self.model).filter(
            self.model.user_id == user_id
        ).order_by(self.model.id).all()

    def search_by_name(self, name: str) -> List[Playlist]:
        """Case-insensitive substring search on playlist name."""
        return self.db.query(self.model).filter(
            self.model.name.ilike(f"%{name}%")
        ).order_by(self.model.id).all()
