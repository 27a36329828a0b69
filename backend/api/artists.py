"""
Artists API

Artist profiles with their catalog. Reads are public; creating and deleting
artists is reserved for administrators, and artists may edit their own profile.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query
import logging

from constants import Role, HTTPStatus
from dependencies import get_artist_service, require_roles
from dtos.request import ArtistRequest
from dtos.response import ArtistResponse
from models import User
from services.artist_service import ArtistService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/artists", response_model=List[ArtistResponse])
@handle_api_errors("Get artists")
def get_all_artists(service: ArtistService = Depends(get_artist_service)):
    return service.get_all_artists()


@router.get("/artists/search", response_model=List[ArtistResponse])
@handle_api_errors("Search artists")
def search_artists(
    name: Optional[str] = Query(None, description="Case-insensitive fragment of the artist name"),
    service: ArtistService = Depends(get_artist_service)
):
    """Search artists by name. An empty query lists every artist."""
    return service.search_artists_by_name(name)


@router.get("/artists/{id}", response_model=ArtistResponse)
@handle_api_errors("Get artist")
def get_artist(id: int, service: ArtistService = Depends(get_artist_service)):
    return service.get_artist_by_id(id)


@router.post("/artists", response_model=ArtistResponse)
@handle_api_errors("Create artist")
def create_artist(
    request: ArtistRequest,
    admin: User = Depends(require_roles(Role.ADMIN)),
    service: ArtistService = Depends(get_artist_service)
):
    """Create an artist profile (ADMIN only). The role is always ARTIST."""
    return service.create_artist(request)


@router.put("/artists/{id}", response_model=ArtistResponse)
@handle_api_errors("Update artist")
def update_artist(
    id: int,
    request: ArtistRequest,
    user: User = Depends(require_roles(Role.ADMIN, Role.ARTIST)),
    service: ArtistService = Depends(get_artist_service)
):
    """
    Update an artist profile.

    Raises:
        HTTPException: 403 if an artist edits someone else's profile
    """
    return service.update_artist(artist_id=id, request=request, actor=user)


@router.delete("/artists/{id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete artist")
def delete_artist(
    id: int,
    admin: User = Depends(require_roles(Role.ADMIN)),
    service: ArtistService = Depends(get_artist_service)
):
    """
    Delete an artist (ADMIN only).

    Raises:
        HTTPException: 400 while the artist still has albums
    """
    service.delete_artist(artist_id=id)
