"""
Songs API

Song CRUD with multipart audio uploads, plus audio streaming with HTTP
Range support for seeking in browser players.
"""

from typing import List, Optional, Union
from fastapi import APIRouter, Depends, File, Form, Header, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
import logging

from constants import Role, HTTPStatus, StorageConfig
from dependencies import get_song_service, require_roles
from dtos.request import SongRequest
from dtos.response import SongResponse
from models import User
from services.song_service import SongService
from utils.error_handlers import handle_api_errors
from utils.http_range import create_file_response

logger = logging.getLogger(__name__)

router = APIRouter()

catalog_editor = require_roles(Role.ADMIN, Role.ARTIST)


def parse_song_part(song: Union[str, UploadFile]) -> SongRequest:
    """
    Validate the JSON ``song`` part of a multipart request.

    Browsers sending ``FormData`` with a ``Blob`` deliver the part as a file,
    plain form fields arrive as a string.

    Raises:
        RequestValidationError: If the part is not valid JSON or fails validation
    """
    payload = song if isinstance(song, str) else song.file.read()
    try:
        return SongRequest.model_validate_json(payload)
    except PydanticValidationError as e:
        errors = [{**error, "loc": ("body", *error["loc"])} for error in e.errors(include_url=False)]
        raise RequestValidationError(errors)


@router.get("/songs", response_model=List[SongResponse])
@handle_api_errors("Get songs")
def get_all_songs(service: SongService = Depends(get_song_service)):
    return service.get_all_songs()


@router.get("/songs/album/{album_id}", response_model=List[SongResponse])
@handle_api_errors("Get songs by album")
def get_songs_by_album(album_id: int, service: SongService = Depends(get_song_service)):
    return service.get_songs_by_album_id(album_id)


@router.get("/songs/search", response_model=List[SongResponse])
@handle_api_errors("Search songs")
def search_songs(title: Optional[str] = None, service: SongService = Depends(get_song_service)):
    """Case-insensitive title search. An empty query lists every song."""
    return service.search_songs_by_title(title)


@router.get("/songs/{id}", response_model=SongResponse)
@handle_api_errors("Get song")
def get_song(id: int, service: SongService = Depends(get_song_service)):
    return service.get_song_by_id(id)


@router.get("/songs/{id}/stream")
@handle_api_errors("Stream song")
def stream_song(
    id: int,
    range_header: Optional[str] = Header(None, alias="Range"),
    service: SongService = Depends(get_song_service)
):
    """
    Stream a song's audio as ``audio/mpeg``.

    Falls back to the full file when no Range header is present.

    Raises:
        HTTPException: 404 if the song or its audio file does not exist
    """
    path = service.resolve_song_file(song_id=id)
    return create_file_response(path, range_header, StorageConfig.DEFAULT_AUDIO_MEDIA_TYPE)


@router.post("/songs", response_model=SongResponse)
@handle_api_errors("Create song")
def create_song(
    song: Union[str, UploadFile] = Form(..., description="SongRequest as JSON"),
    audio_file: Optional[UploadFile] = File(None, alias="audioFile"),
    custom_filename: Optional[str] = Form(None, alias="customFilename"),
    user: User = Depends(catalog_editor),
    service: SongService = Depends(get_song_service)
):
    """
    Create a song, optionally uploading its audio.

    ``customFilename`` stores the audio under that exact name instead of a
    UUID-prefixed one.

    Raises:
        HTTPException: 404 if the album does not exist
    """
    request = parse_song_part(song)
    return service.create_song(request, audio_file=audio_file, custom_filename=custom_filename)


@router.put("/songs/{id}", response_model=SongResponse)
@handle_api_errors("Update song")
def update_song(
    id: int,
    song: Union[str, UploadFile] = Form(..., description="SongRequest as JSON"),
    audio_file: Optional[UploadFile] = File(None, alias="audioFile"),
    user: User = Depends(catalog_editor),
    service: SongService = Depends(get_song_service)
):
    """Update a song. A new audio file replaces and deletes the old one."""
    request = parse_song_part(song)
    return service.update_song(song_id=id, request=request, audio_file=audio_file)


@router.delete("/songs/{id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete song")
def delete_song(
    id: int,
    user: User = Depends(catalog_editor),
    service: SongService = Depends(get_song_service)
):
    """Delete a song with its favorites, playlist entries and audio file."""
    service.delete_song(song_id=id)
