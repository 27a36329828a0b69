from typing import List

from models import Song
from dtos.request import SongRequest
from dtos.response import SongResponse


class SongMapper:
    """Converts between Song entities and song DTOs."""

    @staticmethod
    def to_dto(song: Song) -> SongResponse:
        album = song.album
        artist = album.artist if album is not None else song.artist
        return SongResponse(
            id=song.id,
            title=song.title,
            duration=song.duration,
            file_path=song.file_path,
            album_id=album.id if album is not None else song.album_id,
            album_name=album.name if album is not None else None,
            artist_name=artist.name if artist is not None else None,
        )

    @staticmethod
    def to_dto_list(songs: List[Song]) -> List[SongResponse]:
        return [SongMapper.to_dto(song) for song in songs]

    @staticmethod
    def to_entity(dto: SongRequest) -> Song:
        """Build a detached Song; the caller attaches the album and audio file."""
        return Song(title=dto.title, duration=dto.duration)

    @staticmethod
    def update_entity_from_dto(dto: SongRequest, song: Song) -> Song:
        song.title = dto.title
        if 'duration' in dto.model_fields_set:
            song.duration = dto.duration
        return song
