"""
Catalog Response DTOs

DTOs for song, album and playlist responses. Derived names (album, artist,
owner) are flattened into the payload so clients need no extra lookups.
"""

from typing import List, Optional

from pydantic import Field

from dtos.base import CamelModel


class SongResponse(CamelModel):
    id: int = Field(description="Song ID")
    title: str = Field(description="Song title")
    duration: Optional[float] = Field(None, description="Duration in minutes")
    file_path: Optional[str] = Field(None, description="Stored audio filename")
    album_id: Optional[int] = Field(None, description="Album ID")
    album_name: Optional[str] = Field(None, description="Album title")
    artist_name: Optional[str] = Field(None, description="Name of the album's artist")


class AlbumResponse(CamelModel):
    id: int = Field(description="Album ID")
    name: str = Field(description="Album title")
    artist_id: Optional[int] = Field(None, description="Artist ID")
    artist_name: Optional[str] = Field(None, description="Artist name")
    cover_image: Optional[str] = Field(None, description="Stored cover image filename")
    songs: List[SongResponse] = Field(default_factory=list, description="Songs on this album")


class PlaylistResponse(CamelModel):
    id: int = Field(description="Playlist ID")
    name: str = Field(description="Playlist name")
    user_id: Optional[int] = Field(None, description="Owner's user ID")
    user_name: Optional[str] = Field(None, description="Owner's name")
    songs: List[SongResponse] = Field(default_factory=list, description="Songs in this playlist")
