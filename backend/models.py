from sqlalchemy import Column, String, Integer, Float, Text, DateTime, ForeignKey, Table, CheckConstraint, UniqueConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
from database import Base
from constants import Role, UserType


# Many-to-many link between playlists and songs
playlist_songs = Table(
    'playlist_songs',
    Base.metadata,
    Column('playlist_id', Integer, ForeignKey('playlists.id', ondelete='CASCADE'), primary_key=True),
    Column('song_id', Integer, ForeignKey('songs.id', ondelete='CASCADE'), primary_key=True),
)


class User(Base):
    """
    An account that can log in.

    Users and artists share the ``users`` table (single-table inheritance);
    ``user_type`` discriminates between the two. ``role`` drives authorization
    and is independent of the discriminator, so an ADMIN is still a plain User.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=True)  # bcrypt hash; NULL means the account cannot log in
    role = Column(String(20), nullable=False, default=Role.USER.value)
    user_type = Column(String(20), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    playlists = relationship("Playlist", back_populates="user", cascade="all, delete-orphan")
    favorites = relationship("UserFavorite", back_populates="user", cascade="all, delete-orphan")

    __mapper_args__ = {
        'polymorphic_on': user_type,
        'polymorphic_identity': UserType.USER,
    }

    __table_args__ = (
        CheckConstraint("name != ''"),
        CheckConstraint("role IN ('USER', 'ADMIN', 'ARTIST')", name='ck_users_role'),
    )


class Artist(User):
    """An account that publishes albums and songs"""

    biography = Column(Text)
    profile_picture = Column(String)

    albums = relationship(
        "Album",
        back_populates="artist",
        cascade="all, delete-orphan",
        order_by="Album.id",
    )
    songs = relationship("Song", back_populates="artist", order_by="Song.id")

    __mapper_args__ = {
        'polymorphic_identity': UserType.ARTIST,
    }


class Album(Base):
    __tablename__ = 'albums'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    cover_image = Column(String, nullable=True)  # Filename in upload storage
    artist_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    artist = relationship("Artist", back_populates="albums")
    songs = relationship("Song", back_populates="album", cascade="all, delete-orphan", order_by="Song.id")

    __table_args__ = (
        Index('idx_albums_artist', 'artist_id'),
    )


class Song(Base):
    """
    A track belonging to an album.

    ``duration`` is expressed in minutes (e.g. 4.53). ``artist_id`` mirrors the
    album's artist so an artist's catalog can be listed without joining albums.
    """
    __tablename__ = 'songs'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    duration = Column(Float, nullable=True)
    file_path = Column(String, nullable=True)  # Filename in upload storage
    album_id = Column(Integer, ForeignKey('albums.id'), nullable=False)
    artist_id = Column(Integer, ForeignKey('users.id'), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    album = relationship("Album", back_populates="songs")
    artist = relationship("Artist", back_populates="songs")
    playlists = relationship("Playlist", secondary=playlist_songs, back_populates="songs")
    favorites = relationship("UserFavorite", back_populates="song", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("duration IS NULL OR duration > 0"),
        Index('idx_songs_album', 'album_id'),
    )


class Playlist(Base):
    __tablename__ = 'playlists'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="playlists")
    songs = relationship("Song", secondary=playlist_songs, back_populates="playlists")

    __table_args__ = (
        Index('idx_playlists_user', 'user_id'),
    )


class UserFavorite(Base):
    __tablename__ = 'user_favorites'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    song_id = Column(Integer, ForeignKey('songs.id'), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="favorites")
    song = relationship("Song", back_populates="favorites")

    __table_args__ = (
        UniqueConstraint('user_id', 'song_id', name='uq_user_favorite'),
    )
