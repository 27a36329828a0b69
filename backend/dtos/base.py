"""
Shared DTO base class.

The API speaks camelCase JSON (``artistId``, ``coverImage``) while Python code
uses snake_case attributes. Both spellings are accepted on input.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    class Config:
        """Pydantic configuration."""
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
