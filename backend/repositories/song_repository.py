"""
Song repository for song-specific data access operations.
"""

from typing import List
from sqlalchemy.orm import Session

from models import Song
from .base_repository import BaseRepository


class SongRepository(BaseRepository[Song]):
    """Repository for Song model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Song)

    def get_by_album_id(self, album_id: int) -> List[Song]:
        """
        Get all songs of an album.

        Args:
            album_id: Album ID

        Returns:
            List of songs in insertion order
        """
        return self.db.query(self.model).filter(
            self.model.album_id == album_id
        ).order_by(self.model.id).all()

    def search_by_title(self, title: str) -> List[Song]:
        """Case-insensitive substring search on song title."""
        return self.db.query(self.model).filter(
            self.model.title.ilike(f"%{title}%")
        ).order_by(self.model.id).all()
