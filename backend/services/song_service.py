"""
Song Service

Handles business logic for songs, including their audio files in the
file store.
"""

from pathlib import Path
from typing import List, Optional
from sqlalchemy.orm import Session
from fastapi import UploadFile
import logging

from constants import ErrorMessages
from dtos.request import SongRequest
from dtos.response import SongResponse
from exceptions import ResourceNotFoundError, StorageFileNotFoundError
from mappers import SongMapper
from models import Album, Song
from repositories.album_repository import AlbumRepository
from repositories.favorite_repository import FavoriteRepository
from repositories.song_repository import SongRepository
from services.interfaces import IStorageService
from services.storage_service import is_empty_upload
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class SongService:
    """Service for song-related business logic."""

    def __init__(self, db: Session, storage: IStorageService):
        """
        Initialize song service.

        Args:
            db: Database session
            storage: File store holding the audio files
        """
        self.db = db
        self.storage = storage
        self.song_repo = SongRepository(db)
        self.album_repo = AlbumRepository(db)
        self.favorite_repo = FavoriteRepository(db)

    def _get_or_404(self, song_id: int) -> Song:
        song = self.song_repo.get_by_id(song_id)
        if not song:
            raise ResourceNotFoundError("Song", "id", song_id)
        return song

    def _get_album_or_404(self, album_id: int) -> Album:
        album = self.album_repo.get_by_id(album_id)
        if not album:
            raise ResourceNotFoundError("Album", "id", album_id)
        return album

    def get_all_songs(self) -> List[SongResponse]:
        return SongMapper.to_dto_list(self.song_repo.get_all())

    def get_song_by_id(self, song_id: int) -> SongResponse:
        return SongMapper.to_dto(self._get_or_404(song_id))

    def get_songs_by_album_id(self, album_id: int) -> List[SongResponse]:
        return SongMapper.to_dto_list(self.song_repo.get_by_album_id(album_id))

    def search_songs_by_title(self, title: Optional[str]) -> List[SongResponse]:
        """Case-insensitive title search. A blank query returns every song."""
        if not title or not title.strip():
            return self.get_all_songs()
        return SongMapper.to_dto_list(self.song_repo.search_by_title(title.strip()))

    @log_operation("create_song")
    def create_song(
        self,
        request: SongRequest,
        audio_file: Optional[UploadFile] = None,
        custom_filename: Optional[str] = None
    ) -> SongResponse:
        """
        Create a song on an existing album, optionally with its audio file.

        Args:
            request: Song fields
            audio_file: Uploaded audio; ignored when missing or empty
            custom_filename: Exact stored name for the audio file

        Returns:
            Created song

        Raises:
            ResourceNotFoundError: If the album does not exist
            StorageError: If the audio file cannot be stored
        """
        album = self._get_album_or_404(request.album_id)

        song = SongMapper.to_entity(request)
        song.album = album
        song.artist = album.artist

        if not is_empty_upload(audio_file):
            filename = custom_filename.strip() if custom_filename and custom_filename.strip() else None
            song.file_path = self.storage.store(audio_file, filename=filename)

        self.song_repo.create(song)
        self.db.commit()
        logger.info(f"Created song {song.id} ({song.title}) on album {album.id}")
        return SongMapper.to_dto(song)

    @log_operation("update_song")
    def update_song(
        self,
        song_id: int,
        request: SongRequest,
        audio_file: Optional[UploadFile] = None
    ) -> SongResponse:
        """
        Update a song. A new audio file replaces the old one, which is deleted
        once the new one is stored.

        Raises:
            ResourceNotFoundError: If the song or the new album does not exist
            StorageError: If the new audio file cannot be stored
        """
        song = self._get_or_404(song_id)

        if request.album_id != song.album_id:
            album = self._get_album_or_404(request.album_id)
            song.album = album
            song.artist = album.artist

        SongMapper.update_entity_from_dto(request, song)

        old_file = None
        if not is_empty_upload(audio_file):
            old_file = song.file_path
            song.file_path = self.storage.store(audio_file)

        self.song_repo.update(song)
        self.db.commit()

        if old_file and old_file != song.file_path:
            self.storage.delete(old_file)

        return SongMapper.to_dto(song)

    @log_operation("delete_song")
    def delete_song(self, song_id: int) -> None:
        """
        Delete a song together with its favorites, playlist entries and audio file.

        Raises:
            ResourceNotFoundError: If no such song exists
        """
        song = self._get_or_404(song_id)

        removed = self.favorite_repo.delete_by_song_id(song_id)
        if removed:
            logger.debug(f"Removed song {song_id} from {removed} favorites")

        song.playlists.clear()

        if song.file_path:
            self.storage.delete(song.file_path)

        self.song_repo.delete(song)
        self.db.commit()
        logger.info(f"Deleted song {song_id}")

    def resolve_song_file(self, song_id: int) -> Path:
        """
        Locate the audio file of a song for streaming.

        Raises:
            ResourceNotFoundError: If no such song exists
            StorageFileNotFoundError: If the song has no stored audio
        """
        song = self._get_or_404(song_id)
        if not song.file_path:
            raise StorageFileNotFoundError(ErrorMessages.SONG_FILE_NOT_FOUND)
        return self.storage.resolve(song.file_path)
