"""
Albums API

Album CRUD and cover art uploads. Reads are public; changes require the
ADMIN or ARTIST role.
"""

from typing import List
from fastapi import APIRouter, Depends, File, UploadFile
import logging

from constants import Role, HTTPStatus
from dependencies import get_album_service, get_storage_service, require_roles
from dtos.request import AlbumRequest
from dtos.response import AlbumResponse
from models import User
from services.album_service import AlbumService
from services.interfaces import IStorageService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()

catalog_editor = require_roles(Role.ADMIN, Role.ARTIST)


@router.get("/albums", response_model=List[AlbumResponse])
@handle_api_errors("Get albums")
def get_all_albums(service: AlbumService = Depends(get_album_service)):
    return service.get_all_albums()


@router.get("/albums/artist/{artist_id}", response_model=List[AlbumResponse])
@handle_api_errors("Get albums by artist")
def get_albums_by_artist(artist_id: int, service: AlbumService = Depends(get_album_service)):
    """List an artist's albums. An unknown artist yields an empty list."""
    return service.get_albums_by_artist_id(artist_id)


@router.get("/albums/{id}", response_model=AlbumResponse)
@handle_api_errors("Get album")
def get_album(id: int, service: AlbumService = Depends(get_album_service)):
    return service.get_album_by_id(id)


@router.post("/albums", response_model=AlbumResponse)
@handle_api_errors("Create album")
def create_album(
    request: AlbumRequest,
    user: User = Depends(catalog_editor),
    service: AlbumService = Depends(get_album_service)
):
    """
    Create an album for an existing artist.

    Raises:
        HTTPException: 404 if the artist does not exist
    """
    return service.create_album(request)


@router.put("/albums/{id}", response_model=AlbumResponse)
@handle_api_errors("Update album")
def update_album(
    id: int,
    request: AlbumRequest,
    user: User = Depends(catalog_editor),
    service: AlbumService = Depends(get_album_service)
):
    return service.update_album(album_id=id, request=request)


@router.delete("/albums/{id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete album")
def delete_album(
    id: int,
    user: User = Depends(catalog_editor),
    service: AlbumService = Depends(get_album_service)
):
    """
    Delete an album.

    Raises:
        HTTPException: 400 while the album still has songs
    """
    service.delete_album(album_id=id)


@router.post("/albums/{id}/cover", response_model=str)
@handle_api_errors("Upload album cover")
def upload_album_cover(
    id: int,
    file: UploadFile = File(..., description="Cover image (JPEG or PNG)"),
    user: User = Depends(catalog_editor),
    service: AlbumService = Depends(get_album_service),
    storage: IStorageService = Depends(get_storage_service)
):
    """
    Upload a cover image, stored as ``album{id}.{ext}``.

    Returns:
        The stored filename, also saved as the album's coverImage
    """
    return service.upload_cover(album_id=id, upload=file, storage=storage)
