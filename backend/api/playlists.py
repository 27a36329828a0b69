"""
Playlists API

Playlists are visible to every signed-in user; only their owner or an
administrator may change them.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends
import logging

from constants import HTTPStatus
from dependencies import get_current_user, get_playlist_service
from dtos.request import PlaylistRequest
from dtos.response import PlaylistResponse
from models import User
from services.playlist_service import PlaylistService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/playlists", response_model=List[PlaylistResponse])
@handle_api_errors("Get playlists")
def get_all_playlists(service: PlaylistService = Depends(get_playlist_service)):
    return service.get_all_playlists()


@router.get("/playlists/user/{user_id}", response_model=List[PlaylistResponse])
@handle_api_errors("Get playlists by user")
def get_playlists_by_user(user_id: int, service: PlaylistService = Depends(get_playlist_service)):
    return service.get_playlists_by_user_id(user_id)


@router.get("/playlists/search", response_model=List[PlaylistResponse])
@handle_api_errors("Search playlists")
def search_playlists(name: Optional[str] = None, service: PlaylistService = Depends(get_playlist_service)):
    return service.search_playlists_by_name(name)


@router.get("/playlists/{id}", response_model=PlaylistResponse)
@handle_api_errors("Get playlist")
def get_playlist(id: int, service: PlaylistService = Depends(get_playlist_service)):
    return service.get_playlist_by_id(id)


@router.post("/playlists", response_model=PlaylistResponse)
@handle_api_errors("Create playlist")
def create_playlist(
    request: PlaylistRequest,
    user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service)
):
    """
    Create a playlist. The owner defaults to the caller.

    Raises:
        HTTPException: 403 if a non-admin creates a playlist for someone else,
            404 if the owner does not exist
    """
    return service.create_playlist(request, actor=user)


@router.put("/playlists/{id}", response_model=PlaylistResponse)
@handle_api_errors("Update playlist")
def update_playlist(
    id: int,
    request: PlaylistRequest,
    user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service)
):
    return service.update_playlist(playlist_id=id, request=request, actor=user)


@router.delete("/playlists/{id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete playlist")
def delete_playlist(
    id: int,
    user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service)
):
    service.delete_playlist(playlist_id=id, actor=user)


@router.post("/playlists/{playlist_id}/songs/{song_id}", response_model=PlaylistResponse)
@handle_api_errors("Add song to playlist")
def add_song_to_playlist(
    playlist_id: int,
    song_id: int,
    user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service)
):
    """Add a song to a playlist. Adding it twice is a no-op."""
    return service.add_song(playlist_id=playlist_id, song_id=song_id, actor=user)


@router.delete("/playlists/{playlist_id}/songs/{song_id}", response_model=PlaylistResponse)
@handle_api_errors("Remove song from playlist")
def remove_song_from_playlist(
    playlist_id: int,
    song_id: int,
    user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service)
):
    return service.remove_song(playlist_id=playlist_id, song_id=song_id, actor=user)
