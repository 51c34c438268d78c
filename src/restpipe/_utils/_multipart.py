import mimetypes
import secrets
from typing import Dict, Tuple

from .constants import DEFAULT_MIME_TYPE, MULTIPART_BOUNDARY_PREFIX, MULTIPART_FILE_FIELD


def generate_boundary() -> str:
    """Random boundary token, e.g. ``Boundary+1A2B3C4D5E6F7081``."""
    return f"{MULTIPART_BOUNDARY_PREFIX}{secrets.token_hex(8).upper()}"


def multipart_content_type(boundary: str) -> str:
    return f"multipart/form-data; boundary={boundary}"


def infer_content_type(filename: str, mime_type: str) -> str:
    """Content type of the file section.

    The declared mime type wins; otherwise it is guessed from the filename.
    """
    if mime_type:
        return mime_type
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or DEFAULT_MIME_TYPE


def multipart_files(
    filename: str, data: bytes, mime_type: str
) -> Dict[str, Tuple[str, bytes, str]]:
    return {
        MULTIPART_FILE_FIELD: (filename, data, infer_content_type(filename, mime_type))
    }
