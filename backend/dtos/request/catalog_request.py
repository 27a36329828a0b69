"""
Catalog Request DTOs

DTOs for album, song and playlist requests.
"""

from typing import Optional

from pydantic import Field, validator

from dtos.base import CamelModel


def _not_blank(value: str, message: str) -> str:
    if not value.strip():
        raise ValueError(message)
    return value.strip()


class AlbumRequest(CamelModel):
    """Request DTO for creating or updating an album."""

    name: str = Field(..., min_length=1, max_length=100, description="Album title")
    artist_id: int = Field(..., description="ID of an existing artist")
    cover_image: Optional[str] = Field(None, description="Stored filename of the cover image")

    @validator("name")
    def validate_name(cls, v):
        return _not_blank(v, "Album name is required")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "Thriller",
                "artistId": 1
            }
        }


class SongRequest(CamelModel):
    """
    Request DTO for creating or updating a song.

    Sent as the JSON ``song`` part of a multipart request alongside the
    optional audio file.
    """

    title: str = Field(..., min_length=1, max_length=100, description="Song title")
    duration: Optional[float] = Field(None, gt=0, description="Duration in minutes")
    album_id: int = Field(..., description="ID of an existing album")

    @validator("title")
    def validate_title(cls, v):
        return _not_blank(v, "Song title is required")


class PlaylistRequest(CamelModel):
    """
    Request DTO for creating or updating a playlist.

    ``user_id`` defaults to the caller on creation and is ignored on update.
    """

    name: str = Field(..., min_length=1, max_length=100, description="Playlist name")
    user_id: Optional[int] = Field(None, description="Owner's user ID")

    @validator("name")
    def validate_name(cls, v):
        return _not_blank(v, "Playlist name is required")
