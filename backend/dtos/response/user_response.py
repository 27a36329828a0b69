"""
User Response DTOs

DTOs for account-related API responses. Password hashes never leave the server.
"""

from typing import List, Optional

from pydantic import Field

from constants import Role
from dtos.base import CamelModel
from .catalog_response import AlbumResponse, SongResponse


class UserResponse(CamelModel):
    """Public view of an account."""

    id: int = Field(description="User ID")
    name: str = Field(description="User's full name")
    email: str = Field(description="User's email address")
    role: Role = Field(description="USER, ARTIST or ADMIN")


class ArtistResponse(UserResponse):
    """Artist account with its published catalog."""

    biography: Optional[str] = Field(None, description="Artist biography")
    profile_picture: Optional[str] = Field(None, description="Profile picture")
    albums: List[AlbumResponse] = Field(default_factory=list, description="Albums by this artist")
    songs: List[SongResponse] = Field(default_factory=list, description="Songs by this artist")


class AuthResponse(CamelModel):
    """Token issued on registration or login."""

    token: str = Field(description="JWT bearer token")
    user: UserResponse = Field(description="Authenticated user")
