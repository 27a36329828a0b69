from typing import List

from constants import Role
from models import Artist
from dtos.request import ArtistRequest
from dtos.response import ArtistResponse
from .album_mapper import AlbumMapper
from .song_mapper import SongMapper


class ArtistMapper:
    """Converts between Artist entities and artist DTOs, including the catalog."""

    @staticmethod
    def to_dto(artist: Artist) -> ArtistResponse:
        return ArtistResponse(
            id=artist.id,
            name=artist.name,
            email=artist.email,
            role=Role(artist.role),
            biography=artist.biography,
            profile_picture=artist.profile_picture,
            albums=AlbumMapper.to_dto_list(artist.albums),
            songs=SongMapper.to_dto_list(artist.songs),
        )

    @staticmethod
    def to_dto_list(artists: List[Artist]) -> List[ArtistResponse]:
        return [ArtistMapper.to_dto(artist) for artist in artists]

    @staticmethod
    def to_entity(dto: ArtistRequest) -> Artist:
        """Artists always carry the ARTIST role, whatever the request says."""
        return Artist(
            name=dto.name,
            email=dto.email,
            role=Role.ARTIST.value,
            biography=dto.biography,
            profile_picture=dto.profile_picture,
        )

    @staticmethod
    def update_entity_from_dto(dto: ArtistRequest, artist: Artist) -> Artist:
        artist.name = dto.name
        artist.email = dto.email
        if 'biography' in dto.model_fields_set:
            artist.biography = dto.biography
        if 'profile_picture' in dto.model_fields_set:
            artist.profile_picture = dto.profile_picture
        return artist
