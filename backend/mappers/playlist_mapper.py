from typing import List

from models import Playlist
from dtos.request import PlaylistRequest
from dtos.response import PlaylistResponse
from .song_mapper import SongMapper


class PlaylistMapper:
    """Converts between Playlist entities and playlist DTOs."""

    @staticmethod
    def to_dto(playlist: Playlist) -> PlaylistResponse:
        owner = playlist.user
        return PlaylistResponse(
            id=playlist.id,
            name=playlist.name,
            user_id=owner.id if owner is not None else playlist.user_id,
            user_name=owner.name if owner is not None else None,
            songs=SongMapper.to_dto_list(playlist.songs),
        )

    @staticmethod
    def to_dto_list(playlists: List[Playlist]) -> List[PlaylistResponse]:
        return [PlaylistMapper.to_dto(playlist) for playlist in playlists]

    @staticmethod
    def to_entity(dto: PlaylistRequest) -> Playlist:
        """Build a detached Playlist; the caller attaches the owner. Songs are added separately."""
        return Playlist(name=dto.name)

    @staticmethod
    def update_entity_from_dto(dto: PlaylistRequest, playlist: Playlist) -> Playlist:
        playlist.name = dto.name
        return playlist
