from typing import List

from models import Album
from dtos.request import AlbumRequest
from dtos.response import AlbumResponse
from .song_mapper import SongMapper


class AlbumMapper:
    """Converts between Album entities and album DTOs."""

    @staticmethod
    def to_dto(album: Album) -> AlbumResponse:
        artist = album.artist
        return AlbumResponse(
            id=album.id,
            name=album.name,
            artist_id=artist.id if artist is not None else album.artist_id,
            artist_name=artist.name if artist is not None else None,
            cover_image=album.cover_image,
            songs=SongMapper.to_dto_list(album.songs),
        )

    @staticmethod
    def to_dto_list(albums: List[Album]) -> List[AlbumResponse]:
        return [AlbumMapper.to_dto(album) for album in albums]

    @staticmethod
    def to_entity(dto: AlbumRequest) -> Album:
        """Build a detached Album; the caller attaches the artist."""
        return Album(name=dto.name, cover_image=dto.cover_image)

    @staticmethod
    def update_entity_from_dto(dto: AlbumRequest, album: Album) -> Album:
        album.name = dto.name
        # Omitting coverImage keeps the uploaded cover
        if 'cover_image' in dto.model_fields_set:
            album.cover_image = dto.cover_image
        return album
