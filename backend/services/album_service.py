"""
Album Service

Handles business logic for albums: artist resolution, updates, deletion
guards and cover uploads.
"""

from pathlib import PurePosixPath
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import UploadFile
import logging

from constants import ErrorMessages, StorageConfig
from dtos.request import AlbumRequest
from dtos.response import AlbumResponse
from exceptions import ResourceNotFoundError, InvalidOperationError
from mappers import AlbumMapper
from models import Album, Artist
from repositories.album_repository import AlbumRepository
from repositories.artist_repository import ArtistRepository
from services.interfaces import IStorageService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


def cover_extension(filename: Optional[str]) -> str:
    """
    Lower-cased extension of an uploaded cover, 'jpg' when there is none.

    """
    suffix = PurePosixPath(filename or '').suffix
    return suffix[1:].lower() if len(suffix) > 1 else StorageConfig.DEFAULT_COVER_EXTENSION


class AlbumService:
    """Service for album-related business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.album_repo = AlbumRepository(db)
        self.artist_repo = ArtistRepository(db)

    def _get_or_404(self, album_id: int) -> Album:
        album = self.album_repo.get_by_id(album_id)
        if not album:
            raise ResourceNotFoundError("Album", "id", album_id)
        return album

    def _get_artist_or_404(self, artist_id: int) -> Artist:
        artist = self.artist_repo.get_by_id(artist_id)
        if not artist:
            raise ResourceNotFoundError("Artist", "id", artist_id)
        return artist

    def get_all_albums(self) -> List[AlbumResponse]:
        return AlbumMapper.to_dto_list(self.album_repo.get_all())

    def get_album_by_id(self, album_id: int) -> AlbumResponse:
        return AlbumMapper.to_dto(self._get_or_404(album_id))

    def get_albums_by_artist_id(self, artist_id: int) -> List[AlbumResponse]:
        return AlbumMapper.to_dto_list(self.album_repo.get_by_artist_id(artist_id))

    @log_operation("create_album")
    def create_album(self, request: AlbumRequest) -> AlbumResponse:
        """
        Create an album for an existing artist.

        Raises:
            ResourceNotFoundError: If the artist does not exist
        """
        artist = self._get_artist_or_404(request.artist_id)
        album = AlbumMapper.to_entity(request)
        album.artist = artist

        self.album_repo.create(album)
        self.db.commit()
        logger.info(f"Created album {album.id} ({album.name}) for artist {artist.id}")
        return AlbumMapper.to_dto(album)

    @log_operation("update_album")
    def update_album(self, album_id: int, request: AlbumRequest) -> AlbumResponse:
        """
        Update an album. Moving it to another artist moves its songs too.

        Raises:
            ResourceNotFoundError: If the album or the new artist does not exist
        """
        album = self._get_or_404(album_id)

        if request.artist_id != album.artist_id:
            artist = self._get_artist_or_404(request.artist_id)
            album.artist = artist
            for song in album.songs:
                song.artist = artist

        AlbumMapper.update_entity_from_dto(request, album)
        self.album_repo.update(album)
        self.db.commit()
        return AlbumMapper.to_dto(album)

    @log_operation("delete_album")
    def delete_album(self, album_id: int) -> None:
        """
        Delete an album without songs.

        Raises:
            ResourceNotFoundError: If no such album exists
            InvalidOperationError: If the album still has songs
        """
        album = self._get_or_404(album_id)
        if album.songs:
            raise InvalidOperationError(ErrorMessages.ALBUM_HAS_SONGS)

        self.album_repo.delete(album)
        self.db.commit()
        logger.info(f"Deleted album {album_id}")

    @log_operation("upload_album_cover")
    def upload_cover(self, album_id: int, upload: UploadFile, storage: IStorageService) -> str:
        """
        Store a cover image as ``album{id}.{ext}`` and point the album at it.

        Args:
            album_id: Album ID
            upload: Image file (JPEG or PNG)
            storage: File store

        Returns:
            Stored filename

        Raises:
            ResourceNotFoundError: If no such album exists
            StorageError: If the upload is empty or cannot be written
        """
        album = self._get_or_404(album_id)
        filename = f"album{album_id}.{cover_extension(upload.filename)}"
        stored = storage.store(upload, filename=filename)

        album.cover_image = stored
        self.album_repo.update(album)
        self.db.commit()
        return stored
