"""
Authentication API

Registration and login. Both endpoints are public and answer with a bearer
token plus the account it belongs to.
"""

from fastapi import APIRouter, Depends
import logging

from dependencies import get_auth_service
from dtos.request import UserRequest, LoginRequest
from dtos.response import AuthResponse
from services.auth_service import AuthService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/auth/register", response_model=AuthResponse)
@handle_api_errors("Register")
def register(request: UserRequest, service: AuthService = Depends(get_auth_service)):
    """
    Create an account and log it in.

    The role defaults to USER. Registering as ARTIST creates an artist profile.

    Raises:
        HTTPException: 400 if the email is taken or the password is missing,
            403 if ADMIN self-registration is disabled
    """
    return service.register(request)


@router.post("/auth/login", response_model=AuthResponse)
@handle_api_errors("Login")
def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """
    Exchange email and password for a bearer token.

    Raises:
        HTTPException: 401 if the credentials are wrong
    """
    return service.authenticate(request)
