"""
Artist repository for artist-specific data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from models import Artist
from .base_repository import BaseRepository


class ArtistRepository(BaseRepository[Artist]):
    """Repository for Artist model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Artist)

    def get_by_id(self, id: int) -> Optional[Artist]:
        """
        Retrieve an artist by ID.

        Plain users sharing the table are never returned.

        Args:
            id: Artist ID

        Returns:
            Artist instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all_with_catalog(self) -> List[Artist]:
        """
        Get all artists with their albums and songs eagerly loaded.

        Returns:
            List of artists ordered by ID
        """
        return self.db.query(self.model).options(
            selectinload(self.model.albums),
            selectinload(self.model.songs)
        ).order_by(self.model.id).all()

    def search_by_name(self, name: str) -> List[Artist]:
        """
        Case-insensitive substring search on artist name.

        Args:
            name: Fragment of the artist name

        Returns:
            List of matching artists
        """
        return self.db.query(self.model).options(
            selectinload(self.model.albums),
            selectinload(self.model.songs)
        ).filter(
            self.model.name.ilike(f"%{name}%")
        ).order_by(self.model.id).all()
