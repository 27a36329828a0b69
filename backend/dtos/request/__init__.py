"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.

Read-only attributes (ids, derived names, stored file paths) are not part of
any request DTO; unknown JSON keys are ignored.
"""

from .user_request import UserRequest, ArtistRequest, LoginRequest
from .catalog_request import AlbumRequest, SongRequest, PlaylistRequest

__all__ = [
    "UserRequest",
    "ArtistRequest",
    "LoginRequest",
    "AlbumRequest",
    "SongRequest",
    "PlaylistRequest",
]
