"""
Album repository for album-specific data access operations.
"""

from typing import List
from sqlalchemy.orm import Session

from models import Album
from .base_repository import BaseRepository


class AlbumRepository(BaseRepository[Album]):
    """Repository for Album model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Album)

    def get_by_artist_id(self, artist_id: int) -> List[Album]:
        """
        Get all albums published by an artist.

        Args:
            artist_id: Artist ID

        Returns:
            List of albums (empty if the artist has none or does not exist)
        """
        return self.db.query(self.model).filter(
            self.model.artist_id == artist_id
        ).order_by(self.model.id).all()
