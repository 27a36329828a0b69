"""
HTTP Range support for serving stored files.

Enables browser-native seeking in audio players without downloading the
full file. Only a single ``bytes`` range is supported.
"""

from pathlib import Path
from typing import Tuple

from fastapi import Response
from fastapi.responses import FileResponse, StreamingResponse

from constants import HTTPStatus, MEDIA_TYPES, StorageConfig


class InvalidRangeError(ValueError):
    """Raised when a Range header is malformed or cannot be satisfied"""


def media_type_for(filename: str, default: str = StorageConfig.DEFAULT_MEDIA_TYPE) -> str:
    """
    Determine the media type of a stored file from its extension.

    Args:
        filename: Stored filename
        default: Media type for unknown extensions

    Returns:
        Media type string (e.g. 'audio/mpeg')
    """
    suffix = Path(filename).suffix.lower().lstrip('.')
    return MEDIA_TYPES.get(suffix, default)


def parse_range_header(range_header: str, file_size: int) -> Tuple[int, int]:
    """
    Parse a ``Range`` header into an inclusive byte interval.

    Accepted forms: ``bytes=start-end``, ``bytes=start-`` and the suffix form
    ``bytes=-N`` (last N bytes). ``end`` is clamped to the last byte.

    Args:
        range_header: Raw header value
        file_size: Size of the file in bytes

    Returns:
        (start, end) inclusive offsets

    Raises:
        InvalidRangeError: If the header is malformed or unsatisfiable
    """
    unit, sep, range_spec = range_header.strip().partition("=")
    if not sep or unit.strip().lower() != "bytes":
        raise InvalidRangeError(f"Unsupported range unit: {range_header!r}")

    range_spec = range_spec.strip()
    if "," in range_spec:
        raise InvalidRangeError("Multiple ranges are not supported")

    start_str, dash, end_str = range_spec.partition("-")
    start_str, end_str = start_str.strip(), end_str.strip()
    if not dash or (start_str and not start_str.isdigit()) or (end_str and not end_str.isdigit()):
        raise InvalidRangeError(f"Malformed range: {range_header!r}")

    if file_size <= 0:
        raise InvalidRangeError("Cannot satisfy a range on an empty file")

    if not start_str:
        # Suffix range: the last N bytes
        if not end_str or int(end_str) == 0:
            raise InvalidRangeError(f"Malformed range: {range_header!r}")
        start = max(0, file_size - int(end_str))
        end = file_size - 1
    else:
        start = int(start_str)
        end = int(end_str) if end_str else file_size - 1
        end = min(end, file_size - 1)

    if start >= file_size or start > end:
        raise InvalidRangeError(f"Range {start}-{end} not satisfiable for size {file_size}")

    return start, end


def create_range_response(file_path: Path, start: int, end: int, media_type: str) -> StreamingResponse:
    """
    Create a 206 streaming response for an already validated byte interval.

    Args:
        file_path: File on disk
        start: First byte offset (inclusive)
        end: Last byte offset (inclusive)
        media_type: Content type of the file
    """
    file_size = file_path.stat().st_size
    content_length = end - start + 1

    def iter_file():
        """Generator to stream file chunks."""
        with open(file_path, 'rb') as f:
            f.seek(start)
            remaining = content_length

            while remaining > 0:
                read_size = min(StorageConfig.STREAM_CHUNK_SIZE, remaining)
                data = f.read(read_size)
                if not data:
                    break
                remaining -= len(data)
                yield data

    return StreamingResponse(
        iter_file(),
        status_code=HTTPStatus.PARTIAL_CONTENT,
        media_type=media_type,
        headers={
            "Content-Range": f"bytes {start}-{end}/{file_size}",
            "Content-Length": str(content_length),
            "Accept-Ranges": "bytes",
        }
    )


def create_file_response(file_path: Path, range_header: str | None, media_type: str) -> Response:
    """
    Serve a file in full, or the requested slice when a Range header is present.

    Returns 416 with ``Content-Range: bytes */size`` for unusable ranges.
    """
    if not range_header:
        return FileResponse(
            str(file_path),
            media_type=media_type,
            headers={"Accept-Ranges": "bytes"}
        )

    file_size = file_path.stat().st_size
    try:
        start, end = parse_range_header(range_header, file_size)
    except InvalidRangeError:
        return Response(
            status_code=HTTPStatus.RANGE_NOT_SATISFIABLE,
            headers={"Content-Range": f"bytes */{file_size}", "Accept-Ranges": "bytes"}
        )

    return create_range_response(file_path, start, end, media_type)
