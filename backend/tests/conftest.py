import os
import sys
import tempfile
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the app's data, logs and uploads out of the user's home directory
_test_data_dir = tempfile.mkdtemp(prefix="groovy-tests-")
os.environ.setdefault("GROOVY_DATA_DIR", _test_data_dir)
os.environ.setdefault("GROOVY_UPLOAD_DIR", str(Path(_test_data_dir) / "uploads"))
os.environ.setdefault("GROOVY_JWT_SECRET", "test-secret-with-enough-length-for-hs256")

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from constants import Role
from database import get_db
from dependencies import get_storage_service
from models import Base, User, Artist, Album, Song
from services.security import hash_password, create_access_token
from services.storage_service import FileSystemStorageService

DEFAULT_PASSWORD = "secret123"


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def storage(tmp_path):
    """Filesystem store rooted in a per-test temporary directory"""
    service = FileSystemStorageService(tmp_path / "uploads")
    service.init()
    return service


@pytest.fixture
def client(db_session, storage):
    """TestClient sharing the test session and store with the fixtures"""
    from main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage_service] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, name="Regular User", email="user@example.com", role=Role.USER, password=DEFAULT_PASSWORD):
    user = User(name=name, email=email, role=role.value, password=hash_password(password))
    db.add(user)
    db.commit()
    return user


def make_artist(db, name="Test Artist", email="artist@example.com", password=DEFAULT_PASSWORD):
    artist = Artist(name=name, email=email, role=Role.ARTIST.value, password=hash_password(password))
    db.add(artist)
    db.commit()
    return artist


def make_album(db, artist, name="Test Album"):
    album = Album(name=name, artist=artist)
    db.add(album)
    db.commit()
    return album


def make_song(db, album, title="Test Song", duration=3.5, file_path=None):
    song = Song(title=title, duration=duration, album=album, artist=album.artist, file_path=file_path)
    db.add(song)
    db.commit()
    return song


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def user(db_session):
    return make_user(db_session)


@pytest.fixture
def admin(db_session):
    return make_user(db_session, name="Admin User", email="admin@example.com", role=Role.ADMIN)


@pytest.fixture
def artist(db_session):
    return make_artist(db_session)


@pytest.fixture
def album(db_session, artist):
    return make_album(db_session, artist)


@pytest.fixture
def song(db_session, album):
    return make_song(db_session, album)
