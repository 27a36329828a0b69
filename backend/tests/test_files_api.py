"""
Integration tests for /api/files and the operational endpoints.
"""

from fastapi import status


class TestServeFile:

    def test_full_file(self, client, storage):
        (storage.root / "album1.jpg").write_bytes(b"jpeg-bytes")

        response = client.get("/api/files/album1.jpg")

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b"jpeg-bytes"
        assert response.headers["content-type"] == "image/jpeg"
        assert response.headers["accept-ranges"] == "bytes"
        assert response.headers["content-length"] == "10"

    def test_unknown_extension(self, client, storage):
        (storage.root / "notes.bin").write_bytes(b"\x00\x01")

        response = client.get("/api/files/notes.bin")

        assert response.headers["content-type"] == "application/octet-stream"

    def test_range(self, client, storage):
        (storage.root / "song.mp3").write_bytes(bytes(range(100)))

        response = client.get("/api/files/song.mp3", headers={"Range": "bytes=10-19"})

        assert response.status_code == status.HTTP_206_PARTIAL_CONTENT
        assert response.content == bytes(range(10, 20))
        assert response.headers["content-range"] == "bytes 10-19/100"
        assert response.headers["content-length"] == "10"
        assert response.headers["content-type"] == "audio/mpeg"

    def test_open_ended_range_is_clamped(self, client, storage):
        (storage.root / "song.mp3").write_bytes(bytes(range(100)))

        response = client.get("/api/files/song.mp3", headers={"Range": "bytes=90-500"})

        assert response.status_code == status.HTTP_206_PARTIAL_CONTENT
        assert response.headers["content-range"] == "bytes 90-99/100"
        assert len(response.content) == 10

    def test_suffix_range(self, client, storage):
        (storage.root / "song.mp3").write_bytes(bytes(range(100)))

        response = client.get("/api/files/song.mp3", headers={"Range": "bytes=-5"})

        assert response.content == bytes(range(95, 100))

    def test_unsatisfiable_range(self, client, storage):
        (storage.root / "song.mp3").write_bytes(bytes(range(100)))

        response = client.get("/api/files/song.mp3", headers={"Range": "bytes=200-"})

        assert response.status_code == status.HTTP_416_REQUESTED_RANGE_NOT_SATISFIABLE
        assert response.headers["content-range"] == "bytes */100"

    def test_missing_file(self, client):
        response = client.get("/api/files/nothing.mp3")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "Could not read file: nothing.mp3"

    def test_path_escape(self, client, storage, tmp_path):
        (tmp_path / "secret.txt").write_text("secret")

        response = client.get("/api/files/..%2Fsecret.txt")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_null_byte_in_name(self, client):
        response = client.get("/api/files/a%00b.mp3")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"].startswith("Could not read file")


class TestOperationalEndpoints:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "UP"
        assert "timestamp" in response.json()

    def test_ping(self, client):
        response = client.get("/api/swagger-test/ping")

        assert response.json()["status"] == "success"
        assert response.json()["message"] == "API is up and running"

    def test_openapi_has_bearer_scheme(self, client):
        schema = client.get("/openapi.json").json()

        assert schema["info"]["title"] == "Groovy"
        assert "HTTPBearer" in schema["components"]["securitySchemes"]

    def test_unknown_route_uses_error_shape(self, client):
        response = client.get("/api/does-not-exist")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["path"] == "/api/does-not-exist"
        assert response.json()["status"] == 404
