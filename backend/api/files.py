"""
Files API

Serves stored cover art and audio by filename, with HTTP Range support.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Header
import logging

from dependencies import get_storage_service
from services.interfaces import IStorageService
from utils.error_handlers import handle_api_errors
from utils.http_range import create_file_response, media_type_for

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/files/{filename:path}")
@handle_api_errors("Serve file")
def serve_file(
    filename: str,
    range_header: Optional[str] = Header(None, alias="Range"),
    storage: IStorageService = Depends(get_storage_service)
):
    """
    Serve a stored file.

    The media type is derived from the extension. With a Range header the
    requested slice is returned as 206; unusable ranges get 416.

    Raises:
        HTTPException: 404 if the file does not exist or lies outside the store
    """
    path = storage.resolve(filename)
    return create_file_response(path, range_header, media_type_for(filename))
