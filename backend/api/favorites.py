"""
Favorites API

The caller's favorite songs. Every endpoint acts on the signed-in user.
"""

from typing import List
from fastapi import APIRouter, Depends
import logging

from dependencies import get_current_user, get_favorite_service
from dtos.response import SongResponse
from models import User
from services.favorite_service import FavoriteService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/favorites", response_model=List[SongResponse])
@handle_api_errors("Get favorites")
def get_favorites(
    user: User = Depends(get_current_user),
    service: FavoriteService = Depends(get_favorite_service)
):
    return service.get_user_favorites(user.id)


@router.post("/favorites/{song_id}", response_model=bool)
@handle_api_errors("Add favorite")
def add_favorite(
    song_id: int,
    user: User = Depends(get_current_user),
    service: FavoriteService = Depends(get_favorite_service)
):
    """
    Mark a song as favorite.

    Returns:
        true if added, false if it already was a favorite
    """
    return service.add_favorite(user.id, song_id)


@router.delete("/favorites/{song_id}", response_model=bool)
@handle_api_errors("Remove favorite")
def remove_favorite(
    song_id: int,
    user: User = Depends(get_current_user),
    service: FavoriteService = Depends(get_favorite_service)
):
    """
    Unmark a favorite song.

    Returns:
        true if removed, false if it was not a favorite
    """
    return service.remove_favorite(user.id, song_id)


@router.get("/favorites/status/{song_id}", response_model=bool)
@handle_api_errors("Get favorite status")
def get_favorite_status(
    song_id: int,
    user: User = Depends(get_current_user),
    service: FavoriteService = Depends(get_favorite_service)
):
    return service.is_favorite(user.id, song_id)
