"""
User Request DTOs

DTOs for registration, login and account management requests.
"""

import re
from typing import Optional

from pydantic import Field, validator

from constants import Role
from dtos.base import CamelModel

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class UserRequest(CamelModel):
    """
    Request DTO for creating or updating an account.

    ``role`` defaults to USER when omitted. ``password`` is optional on update;
    leaving it out (or sending an empty string) keeps the current password.
    """

    name: str = Field(..., min_length=2, max_length=100, description="User's full name")
    email: str = Field(..., description="User's email address")
    role: Optional[Role] = Field(None, description="USER, ARTIST or ADMIN")
    password: Optional[str] = Field(None, description="Password (min 6 characters)")

    @validator("name")
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name is required")
        return v.strip()

    @validator("email")
    def validate_email(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Email is required")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Email should be valid")
        return v

    @validator("password")
    def validate_password(cls, v):
        """Empty means 'unchanged'; anything else must be at least 6 characters."""
        if v and len(v) < 6:
            raise ValueError("Password must be at least 6 characters")
        return v

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john.doe@example.com",
                "password": "securePassword123"
            }
        }


class ArtistRequest(UserRequest):
    """Request DTO for artist accounts, extending UserRequest with profile fields."""

    biography: Optional[str] = Field(None, max_length=1000, description="Artist biography")
    profile_picture: Optional[str] = Field(None, description="URL or stored filename of the profile picture")


class LoginRequest(CamelModel):
    """Credentials for obtaining a bearer token."""

    email: str = Field(..., min_length=1, description="Account email")
    password: str = Field(..., min_length=1, description="Account password")
