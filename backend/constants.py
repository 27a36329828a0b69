"""
Application-wide constants.

This module centralizes the magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
from enum import Enum


class Role(str, Enum):
    """
    Account roles used by the authorization checks.

    - USER: listener; manages own playlists and favorites
    - ARTIST: may publish albums and songs
    - ADMIN: full access to every resource
    """
    USER = 'USER'
    ADMIN = 'ADMIN'
    ARTIST = 'ARTIST'


class UserType:
    """Discriminator values for the single-table user hierarchy"""
    USER = 'User'
    ARTIST = 'Artist'


class HTTPStatus:
    """HTTP status codes used by the API"""
    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    PARTIAL_CONTENT = 206
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    RANGE_NOT_SATISFIABLE = 416
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


class ServerConfig:
    """Server defaults (overridable through config.app_config)"""
    HOST = '0.0.0.0'
    PORT = 8080
    API_TITLE = 'Groovy'
    API_DESCRIPTION = (
        'API for a music application that allows users to browse, search, and listen to music. '
        'Users can create playlists and manage their profiles. '
        'Artists can upload songs, create albums, and manage their content.'
    )
    API_VERSION = '1.0'


class StorageConfig:
    """Flat-file storage constants"""
    STREAM_CHUNK_SIZE = 64 * 1024  # 64KB chunks
    UNKNOWN_FILENAME = 'unknown_file'
    DEFAULT_COVER_EXTENSION = 'jpg'
    DEFAULT_AUDIO_MEDIA_TYPE = 'audio/mpeg'
    DEFAULT_MEDIA_TYPE = 'application/octet-stream'


# Extension -> media type for files served from storage
MEDIA_TYPES = {
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'png': 'image/png',
    'mp3': 'audio/mpeg',
    'wav': 'audio/wav',
    'ogg': 'audio/ogg',
    'flac': 'audio/flac',
}


class ErrorMessages:
    """User-facing error messages shared between services and handlers"""
    INVALID_CREDENTIALS = 'Invalid email or password'
    ACCESS_DENIED = "Access denied: You don't have permission to perform this action"
    NOT_AUTHENTICATED = 'Invalid or missing authentication token'
    EMAIL_IN_USE = 'Email is already in use'
    VALIDATION_FAILED = 'Validation failed'
    DUPLICATE_RECORD = 'A record with the same unique identifier already exists.'
    UNEXPECTED = 'An unexpected error occurred'
    ARTIST_HAS_ALBUMS = 'Cannot delete artist with albums. Remove all albums first.'
    ALBUM_HAS_SONGS = 'Cannot delete album with songs. Remove all songs first.'
    SONG_FILE_NOT_FOUND = 'Song file not found'
