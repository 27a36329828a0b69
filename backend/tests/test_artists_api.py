"""
Integration tests for /api/artists.
"""

from fastapi import status

from conftest import auth_headers, make_artist


class TestReadArtists:

    def test_list_is_public_and_includes_catalog(self, client, song):
        response = client.get("/api/artists")

        assert response.status_code == status.HTTP_200_OK
        artist = response.json()[0]
        assert artist["role"] == "ARTIST"
        assert artist["albums"][0]["name"] == "Test Album"
        assert artist["songs"][0]["title"] == "Test Song"

    def test_list_excludes_plain_users(self, client, user, artist):
        response = client.get("/api/artists")

        assert [a["id"] for a in response.json()] == [artist.id]

    def test_get_by_id(self, client, artist):
        response = client.get(f"/api/artists/{artist.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Test Artist"

    def test_get_plain_user_as_artist(self, client, user):
        response = client.get(f"/api/artists/{user.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_search(self, client, db_session):
        make_artist(db_session, name="Daft Punk", email="dp@example.com")
        make_artist(db_session, name="Queen", email="q@example.com")

        response = client.get("/api/artists/search", params={"name": "daft"})

        assert [a["name"] for a in response.json()] == ["Daft Punk"]

    def test_search_without_name_lists_all(self, client, db_session):
        make_artist(db_session, name="Daft Punk", email="dp@example.com")
        make_artist(db_session, name="Queen", email="q@example.com")

        response = client.get("/api/artists/search")

        assert len(response.json()) == 2


class TestWriteArtists:

    def test_admin_creates_artist(self, client, admin):
        response = client.post("/api/artists", headers=auth_headers(admin), json={
            "name": "New Band",
            "email": "newband@example.com",
            "role": "USER",
            "biography": "Formed in a garage"
        })

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["role"] == "ARTIST"
        assert data["biography"] == "Formed in a garage"
        assert data["albums"] == []

    def test_create_requires_admin(self, client, artist):
        response = client.post("/api/artists", headers=auth_headers(artist), json={
            "name": "New Band",
            "email": "newband@example.com"
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_duplicate_email(self, client, admin, artist):
        response = client.post("/api/artists", headers=auth_headers(admin), json={
            "name": "Copy Band",
            "email": artist.email
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_biography_too_long(self, client, admin):
        response = client.post("/api/artists", headers=auth_headers(admin), json={
            "name": "Verbose",
            "email": "verbose@example.com",
            "biography": "x" * 1001
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "biography"

    def test_artist_updates_own_profile(self, client, artist):
        response = client.put(f"/api/artists/{artist.id}", headers=auth_headers(artist), json={
            "name": "Renamed Artist",
            "email": artist.email,
            "profilePicture": "me.png"
        })

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["profilePicture"] == "me.png"

    def test_artist_cannot_update_other_artist(self, client, db_session, artist):
        other = make_artist(db_session, name="Other", email="other@example.com")

        response = client.put(f"/api/artists/{other.id}", headers=auth_headers(artist), json={
            "name": "Hijacked",
            "email": other.email
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_user_cannot_update_artist(self, client, user, artist):
        response = client.put(f"/api/artists/{artist.id}", headers=auth_headers(user), json={
            "name": "Hijacked",
            "email": artist.email
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_delete_artist_with_albums(self, client, admin, album):
        response = client.delete(f"/api/artists/{album.artist_id}", headers=auth_headers(admin))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Cannot delete artist with albums. Remove all albums first."

    def test_delete_artist(self, client, admin, artist):
        response = client.delete(f"/api/artists/{artist.id}", headers=auth_headers(admin))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/artists/{artist.id}").status_code == status.HTTP_404_NOT_FOUND
