"""
Integration tests for /api/albums, including cover uploads.
"""

from fastapi import status

from conftest import auth_headers, make_album, make_artist
from models import Song


class TestReadAlbums:

    def test_list_is_public(self, client, song):
        response = client.get("/api/albums")

        assert response.status_code == status.HTTP_200_OK
        album = response.json()[0]
        assert album["artistName"] == "Test Artist"
        assert album["songs"][0]["title"] == "Test Song"

    def test_get_unknown_album(self, client):
        response = client.get("/api/albums/42")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Album not found with id: 42"

    def test_albums_by_artist(self, client, db_session, album):
        other = make_artist(db_session, email="other@example.com")
        make_album(db_session, other, name="Other Album")

        response = client.get(f"/api/albums/artist/{album.artist_id}")

        assert [a["id"] for a in response.json()] == [album.id]


class TestWriteAlbums:

    def test_create_album(self, client, artist):
        response = client.post("/api/albums", headers=auth_headers(artist), json={
            "name": "Debut",
            "artistId": artist.id
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["artistId"] == artist.id
        assert response.json()["songs"] == []

    def test_create_album_unknown_artist(self, client, admin):
        response = client.post("/api/albums", headers=auth_headers(admin), json={
            "name": "Orphan",
            "artistId": 999
        })

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_album_requires_catalog_role(self, client, user, artist):
        response = client.post("/api/albums", headers=auth_headers(user), json={
            "name": "Debut",
            "artistId": artist.id
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_album_missing_artist_id(self, client, admin):
        response = client.post("/api/albums", headers=auth_headers(admin), json={"name": "No Artist"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "artistId"

    def test_move_album_to_other_artist_moves_songs(self, client, db_session, admin, album, song):
        other = make_artist(db_session, name="New Owner", email="owner@example.com")

        response = client.put(f"/api/albums/{album.id}", headers=auth_headers(admin), json={
            "name": album.name,
            "artistId": other.id
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["artistName"] == "New Owner"
        db_session.expire_all()
        assert db_session.get(Song, song.id).artist_id == other.id

    def test_update_keeps_cover_when_omitted(self, client, db_session, admin, album):
        album.cover_image = "album1.jpg"
        db_session.commit()

        response = client.put(f"/api/albums/{album.id}", headers=auth_headers(admin), json={
            "name": "Remastered",
            "artistId": album.artist_id
        })

        assert response.json()["coverImage"] == "album1.jpg"

    def test_delete_album_with_songs(self, client, admin, song):
        response = client.delete(f"/api/albums/{song.album_id}", headers=auth_headers(admin))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Cannot delete album with songs. Remove all songs first."

    def test_delete_empty_album(self, client, admin, album):
        response = client.delete(f"/api/albums/{album.id}", headers=auth_headers(admin))

        assert response.status_code == status.HTTP_204_NO_CONTENT


class TestAlbumCover:

    def test_upload_cover(self, client, storage, artist, album):
        response = client.post(
            f"/api/albums/{album.id}/cover",
            headers=auth_headers(artist),
            files={"file": ("Front.PNG", b"\x89PNG fake image", "image/png")}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == f"album{album.id}.png"
        assert storage.load(f"album{album.id}.png") == b"\x89PNG fake image"
        assert client.get(f"/api/albums/{album.id}").json()["coverImage"] == f"album{album.id}.png"

    def test_upload_cover_without_extension_defaults_to_jpg(self, client, artist, album):
        response = client.post(
            f"/api/albums/{album.id}/cover",
            headers=auth_headers(artist),
            files={"file": ("cover", b"jpeg bytes", "image/jpeg")}
        )

        assert response.json() == f"album{album.id}.jpg"

    def test_upload_empty_cover(self, client, artist, album):
        response = client.post(
            f"/api/albums/{album.id}/cover",
            headers=auth_headers(artist),
            files={"file": ("cover.jpg", b"", "image/jpeg")}
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["message"] == "Failed to store empty file"

    def test_upload_cover_unknown_album(self, client, artist):
        response = client.post(
            "/api/albums/999/cover",
            headers=auth_headers(artist),
            files={"file": ("cover.jpg", b"data", "image/jpeg")}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
