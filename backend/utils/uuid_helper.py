"""
UUID helpers for the file store.

Uploaded files are saved as ``<uuid4>_<original name>`` so that two uploads
with the same name never overwrite each other.
"""
import uuid


def generate_uuid() -> str:
    """
    Generate a new UUID string.

    Returns:
        str: A new UUID4 string
    """
    return str(uuid.uuid4())


def unique_filename(original: str) -> str:
    """
    Prefix a filename with a fresh UUID.

    Args:
        original: Cleaned original filename

    Returns:
        str: e.g. '3f2b...-..._song.mp3'
    """
    return f"{generate_uuid()}_{original}"
