"""
Entity/DTO mappers.

Handles transformation between ORM models and DTOs. Mappers never resolve
foreign keys themselves: services look up the referenced artist, album or
owner and attach it to the entity.
"""

from .song_mapper import SongMapper
from .album_mapper import AlbumMapper
from .user_mapper import UserMapper
from .artist_mapper import ArtistMapper
from .playlist_mapper import PlaylistMapper

__all__ = ["SongMapper", "AlbumMapper", "UserMapper", "ArtistMapper", "PlaylistMapper"]
