"""
Users API

Account management. Regular users may read and edit their own account;
listing, creating and deleting accounts is reserved for administrators.
"""

from typing import List
from fastapi import APIRouter, Depends
import logging

from constants import Role, HTTPStatus
from dependencies import get_current_user, get_user_service, require_roles
from dtos.request import UserRequest
from dtos.response import UserResponse
from mappers import UserMapper
from models import User
from services.user_service import UserService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users", response_model=List[UserResponse])
@handle_api_errors("Get users")
def get_all_users(
    admin: User = Depends(require_roles(Role.ADMIN)),
    service: UserService = Depends(get_user_service)
):
    """List every account (ADMIN only)."""
    return service.get_all_users()


@router.get("/users/me", response_model=UserResponse)
@handle_api_errors("Get current user")
def get_current_user_info(user: User = Depends(get_current_user)):
    """Return the account the bearer token belongs to."""
    return UserMapper.to_dto(user)


@router.get("/users/{id}", response_model=UserResponse)
@handle_api_errors("Get user")
def get_user(
    id: int,
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """
    Get a single account (self or ADMIN).

    Raises:
        HTTPException: 403 for someone else's account, 404 if unknown
    """
    return service.get_user_by_id(user_id=id, actor=user)


@router.put("/users/{id}", response_model=UserResponse)
@handle_api_errors("Update user")
def update_user(
    id: int,
    request: UserRequest,
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """
    Update an account (self or ADMIN).

    A missing or empty password keeps the current one. Only administrators
    may change roles.
    """
    return service.update_user(user_id=id, request=request, actor=user)


@router.delete("/users/{id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete user")
def delete_user(
    id: int,
    admin: User = Depends(require_roles(Role.ADMIN)),
    service: UserService = Depends(get_user_service)
):
    """Delete an account with its playlists and favorites (ADMIN only)."""
    service.delete_user(user_id=id)


@router.post("/users", response_model=UserResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create user")
def create_user(
    request: UserRequest,
    admin: User = Depends(require_roles(Role.ADMIN)),
    service: UserService = Depends(get_user_service)
):
    """
    Create an account on someone's behalf (ADMIN only).

    Raises:
        HTTPException: 400 if the email is already in use
    """
    return service.create_user(request)
