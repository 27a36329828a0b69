"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .user_repository import UserRepository
from .artist_repository import ArtistRepository
from .album_repository import AlbumRepository
from .song_repository import SongRepository
from .playlist_repository import PlaylistRepository
from .favorite_repository import FavoriteRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "ArtistRepository",
    "AlbumRepository",
    "SongRepository",
    "PlaylistRepository",
    "FavoriteRepository",
]
