"""
Playlist Service

Handles business logic for user playlists and their song lists.
"""

from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from constants import Role, ErrorMessages
from dtos.request import PlaylistRequest
from dtos.response import PlaylistResponse
from exceptions import ResourceNotFoundError, AccessDeniedError
from mappers import PlaylistMapper
from models import Playlist, Song, User
from repositories.playlist_repository import PlaylistRepository
from repositories.song_repository import SongRepository
from repositories.user_repository import UserRepository
from services.security import ensure_owner_or_admin, has_role
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class PlaylistService:
    """Service for playlist-related business logic."""

    def __init__(self, db: Session):
        self.db = db
        self.playlist_repo = PlaylistRepository(db)
        self.song_repo = SongRepository(db)
        self.user_repo = UserRepository(db)

    def _get_or_404(self, playlist_id: int) -> Playlist:
        playlist = self.playlist_repo.get_by_id(playlist_id)
        if not playlist:
            raise ResourceNotFoundError("Playlist", "id", playlist_id)
        return playlist

    def _get_song_or_404(self, song_id: int) -> Song:
        song = self.song_repo.get_by_id(song_id)
        if not song:
            raise ResourceNotFoundError("Song", "id", song_id)
        return song

    def get_all_playlists(self) -> List[PlaylistResponse]:
        return PlaylistMapper.to_dto_list(self.playlist_repo.get_all())

    def get_playlist_by_id(self, playlist_id: int) -> PlaylistResponse:
        return PlaylistMapper.to_dto(self._get_or_404(playlist_id))

    def get_playlists_by_user_id(self, user_id: int) -> List[PlaylistResponse]:
        return PlaylistMapper.to_dto_list(self.playlist_repo.get_by_user_id(user_id))

    def search_playlists_by_name(self, name: Optional[str]) -> List[PlaylistResponse]:
        """Case-insensitive name search. A blank query returns every playlist."""
        if not name or not name.strip():
            return self.get_all_playlists()
        return PlaylistMapper.to_dto_list(self.playlist_repo.search_by_name(name.strip()))

    @log_operation("create_playlist")
    def create_playlist(self, request: PlaylistRequest, actor: User) -> PlaylistResponse:
        """
        Create a playlist. The owner defaults to the caller; only administrators
        may create playlists for someone else.

        Raises:
            AccessDeniedError: If a non-admin targets another user
            ResourceNotFoundError: If the owner does not exist
        """
        owner_id = request.user_id if request.user_id is not None else actor.id
        if owner_id != actor.id and not has_role(actor, Role.ADMIN):
            raise AccessDeniedError(ErrorMessages.ACCESS_DENIED)

        owner = self.user_repo.get_by_id(owner_id)
        if not owner:
            raise ResourceNotFoundError("User", "id", owner_id)

        playlist = PlaylistMapper.to_entity(request)
        playlist.user = owner

        self.playlist_repo.create(playlist)
        self.db.commit()
        logger.info(f"Created playlist {playlist.id} ({playlist.name}) for user {owner.id}")
        return PlaylistMapper.to_dto(playlist)

    @log_operation("update_playlist")
    def update_playlist(self, playlist_id: int, request: PlaylistRequest, actor: User) -> PlaylistResponse:
        """
        Rename a playlist. Ownership never changes.

        Raises:
            ResourceNotFoundError: If no such playlist exists
            AccessDeniedError: If ``actor`` is neither the owner nor an admin
        """
        playlist = self._get_or_404(playlist_id)
        ensure_owner_or_admin(actor, playlist.user_id)

        PlaylistMapper.update_entity_from_dto(request, playlist)
        self.playlist_repo.update(playlist)
        self.db.commit()
        return PlaylistMapper.to_dto(playlist)

    @log_operation("delete_playlist")
    def delete_playlist(self, playlist_id: int, actor: User) -> None:
        playlist = self._get_or_404(playlist_id)
        ensure_owner_or_admin(actor, playlist.user_id)

        self.playlist_repo.delete(playlist)
        self.db.commit()
        logger.info(f"Deleted playlist {playlist_id}")

    @log_operation("add_song_to_playlist")
    def add_song(self, playlist_id: int, song_id: int, actor: User) -> PlaylistResponse:
        """
        Add a song to a playlist. Adding a song that is already present is a no-op.

        Raises:
            ResourceNotFoundError: If the playlist or song does not exist
            AccessDeniedError: If ``actor`` is neither the owner nor an admin
        """
        playlist = self._get_or_404(playlist_id)
        ensure_owner_or_admin(actor, playlist.user_id)
        song = self._get_song_or_404(song_id)

        if song not in playlist.songs:
            playlist.songs.append(song)
            self.playlist_repo.update(playlist)
            self.db.commit()
        else:
            logger.debug(f"Song {song_id} already in playlist {playlist_id}")

        return PlaylistMapper.to_dto(playlist)

    @log_operation("remove_song_from_playlist")
    def remove_song(self, playlist_id: int, song_id: int, actor: User) -> PlaylistResponse:
        """
        Remove a song from a playlist.

        Raises:
            ResourceNotFoundError: If the playlist or song does not exist
            AccessDeniedError: If ``actor`` is neither the owner nor an admin
        """
        playlist = self._get_or_404(playlist_id)
        ensure_owner_or_admin(actor, playlist.user_id)
        song = self._get_song_or_404(song_id)

        if song in playlist.songs:
            playlist.songs.remove(song)
            self.playlist_repo.update(playlist)
            self.db.commit()

        return PlaylistMapper.to_dto(playlist)
