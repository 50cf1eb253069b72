"""Client-side checks run before an image is sent to the API."""

import base64
from typing import BinaryIO, Iterable, Optional, Tuple, Union

from .config import web_settings


class UploadTooLargeError(ValueError):
    pass


def format_file_size(size_bytes: int) -> str:
    if size_bytes <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size_bytes)
    i = 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {units[i]}"


def validate_image_file(
    content_type: Optional[str],
    size_bytes: int,
    allowed_types: Optional[Iterable[str]] = None,
    max_size: Optional[int] = None,
) -> Tuple[bool, Optional[str]]:
    """Return ``(valid, error)`` for a file the user picked."""
    allowed = [t.lower() for t in (allowed_types or web_settings.ALLOWED_IMAGE_TYPES)]
    max_size = max_size or web_settings.MAX_UPLOAD_SIZE

    if (content_type or "").lower() not in allowed:
        return False, f"Invalid file type: {content_type}. Supported types: JPEG, PNG, GIF, WebP"

    if size_bytes > max_size:
        return False, f"File too large: {format_file_size(size_bytes)}. Maximum size: {format_file_size(max_size)}"

    return True, None


def convert_file_to_base64(source: Union[bytes, BinaryIO], max_size: Optional[int] = None) -> str:
    """Read ``source`` (bytes or a binary stream) and return it base64-encoded.

    Raises UploadTooLargeError when more than ``max_size`` bytes are available.
    """
    max_size = max_size or web_settings.MAX_UPLOAD_SIZE
    if isinstance(source, (bytes, bytearray)):
        data = bytes(source)
    else:
        # One byte past the limit is enough to know it is too large
        data = source.read(max_size + 1)
    if len(data) > max_size:
        raise UploadTooLargeError(f"File exceeds the maximum size of {format_file_size(max_size)}")
    return base64.b64encode(data).decode("ascii")
