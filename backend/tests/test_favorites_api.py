"""
Integration tests for /api/favorites.
"""

from fastapi import status

from conftest import auth_headers, make_song, make_user


class TestFavorites:

    def test_requires_authentication(self, client, song):
        assert client.post(f"/api/favorites/{song.id}").status_code == status.HTTP_401_UNAUTHORIZED

    def test_add_and_list(self, client, user, song):
        headers = auth_headers(user)

        assert client.post(f"/api/favorites/{song.id}", headers=headers).json() is True
        assert client.post(f"/api/favorites/{song.id}", headers=headers).json() is False

        favorites = client.get("/api/favorites", headers=headers).json()
        assert [s["id"] for s in favorites] == [song.id]
        assert favorites[0]["albumName"] == "Test Album"

    def test_status(self, client, user, song):
        headers = auth_headers(user)

        assert client.get(f"/api/favorites/status/{song.id}", headers=headers).json() is False
        client.post(f"/api/favorites/{song.id}", headers=headers)
        assert client.get(f"/api/favorites/status/{song.id}", headers=headers).json() is True

    def test_remove(self, client, user, song):
        headers = auth_headers(user)
        client.post(f"/api/favorites/{song.id}", headers=headers)

        assert client.delete(f"/api/favorites/{song.id}", headers=headers).json() is True
        assert client.delete(f"/api/favorites/{song.id}", headers=headers).json() is False
        assert client.get("/api/favorites", headers=headers).json() == []

    def test_favorites_are_per_user(self, client, db_session, user, album):
        other = make_user(db_session, email="other@example.com")
        mine = make_song(db_session, album, title="Mine")
        theirs = make_song(db_session, album, title="Theirs")
        client.post(f"/api/favorites/{mine.id}", headers=auth_headers(user))
        client.post(f"/api/favorites/{theirs.id}", headers=auth_headers(other))

        favorites = client.get("/api/favorites", headers=auth_headers(user)).json()

        assert [s["title"] for s in favorites] == ["Mine"]

    def test_unknown_song(self, client, user):
        headers = auth_headers(user)

        assert client.post("/api/favorites/999", headers=headers).status_code == status.HTTP_404_NOT_FOUND
        assert client.delete("/api/favorites/999", headers=headers).status_code == status.HTTP_404_NOT_FOUND
