"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.
"""

from .user_response import UserResponse, ArtistResponse, AuthResponse
from .catalog_response import SongResponse, AlbumResponse, PlaylistResponse
from .error_response import ErrorResponse, FieldError

__all__ = [
    "UserResponse",
    "ArtistResponse",
    "AuthResponse",
    "SongResponse",
    "AlbumResponse",
    "PlaylistResponse",
    "ErrorResponse",
    "FieldError",
]
