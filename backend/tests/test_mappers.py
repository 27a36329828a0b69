"""
Tests for entity/DTO mappers.
"""

from constants import Role
from conftest import make_album, make_song
from dtos.request import UserRequest, ArtistRequest, AlbumRequest, SongRequest
from mappers import UserMapper, ArtistMapper, AlbumMapper, SongMapper, PlaylistMapper
from models import Artist, Playlist, User


class TestUserMapper:

    def test_to_dto_never_exposes_password(self, user):
        dto = UserMapper.to_dto(user)

        assert dto.role == Role.USER
        assert "password" not in dto.model_dump(by_alias=True)

    def test_to_entity_defaults_role(self):
        user = UserMapper.to_entity(UserRequest(name="Ana", email="ana@example.com"))

        assert user.role == "USER"
        assert user.password is None

    def test_update_keeps_role_when_missing(self):
        user = User(name="Ana", email="ana@example.com", role="ADMIN")

        UserMapper.update_entity_from_dto(UserRequest(name="Ana B", email="anab@example.com"), user)

        assert user.name == "Ana B"
        assert user.email == "anab@example.com"
        assert user.role == "ADMIN"


class TestArtistMapper:

    def test_to_entity_forces_artist_role(self):
        request = ArtistRequest(name="Band", email="band@example.com", role=Role.ADMIN, biography="Loud")

        artist = ArtistMapper.to_entity(request)

        assert artist.role == "ARTIST"
        assert artist.biography == "Loud"

    def test_update_only_applies_sent_fields(self):
        artist = Artist(name="Band", email="band@example.com", role="ARTIST", biography="Loud", profile_picture="band.png")

        ArtistMapper.update_entity_from_dto(
            ArtistRequest.model_validate({"name": "Band", "email": "band@example.com", "biography": "Quiet"}),
            artist
        )

        assert artist.biography == "Quiet"
        assert artist.profile_picture == "band.png"

    def test_to_dto_includes_catalog(self, db_session, artist):
        album = make_album(db_session, artist)
        make_song(db_session, album)

        dto = ArtistMapper.to_dto(artist)

        assert [a.name for a in dto.albums] == ["Test Album"]
        assert [s.title for s in dto.songs] == ["Test Song"]


class TestCatalogMappers:

    def test_song_dto_flattens_album_and_artist(self, song):
        data = SongMapper.to_dto(song).model_dump(by_alias=True)

        assert data["albumId"] == song.album.id
        assert data["albumName"] == "Test Album"
        assert data["artistName"] == "Test Artist"

    def test_album_update_keeps_cover_when_omitted(self, album):
        album.cover_image = "album1.jpg"

        AlbumMapper.update_entity_from_dto(AlbumRequest(name="Renamed", artist_id=album.artist_id), album)

        assert album.name == "Renamed"
        assert album.cover_image == "album1.jpg"

    def test_song_update_keeps_duration_when_omitted(self, song):
        SongMapper.update_entity_from_dto(
            SongRequest.model_validate({"title": "New Title", "albumId": song.album_id}),
            song
        )

        assert song.title == "New Title"
        assert song.duration == 3.5

    def test_song_entity_has_no_file_path(self):
        song = SongMapper.to_entity(SongRequest(title="Intro", duration=1.2, album_id=1))

        assert song.file_path is None
        assert song.album is None

    def test_playlist_dto(self, db_session, song, user):
        playlist = Playlist(name="Mix", user=user, songs=[song])
        db_session.add(playlist)
        db_session.commit()

        dto = PlaylistMapper.to_dto(playlist)

        assert dto.user_id == user.id
        assert dto.user_name == "Regular User"
        assert [s.id for s in dto.songs] == [song.id]
