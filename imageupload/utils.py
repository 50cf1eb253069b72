import base64
import binascii
import os
import re
from datetime import datetime, timezone
from typing import Optional, Tuple

_DATA_URL_RE = re.compile(r"^data:(?P<type>[\w.+-]+/[\w.+-]+)?(;[\w=-]+)*;base64,", re.IGNORECASE)


# =========================
# Time
# =========================
def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


# =========================
# Base64 payloads
# =========================
def split_data_url(payload: str) -> Tuple[Optional[str], str]:
    """Split an optional ``data:<type>;base64,`` prefix off a payload.

    Returns the content type from the prefix (or None) and the bare base64 text.
    """
    match = _DATA_URL_RE.match(payload)
    if not match:
        return None, payload.strip()
    return match.group("type"), payload[match.end():].strip()


def estimate_decoded_size(b64_text: str) -> int:
    """Number of bytes ``b64_text`` decodes to, computed without decoding."""
    compact = "".join(b64_text.split())
    if not compact:
        return 0
    padding = len(compact) - len(compact.rstrip("="))
    return (len(compact) * 3) // 4 - padding


def decode_base64_strict(b64_text: str) -> Optional[bytes]:
    """Decode base64 text, returning None when it is not valid base64."""
    compact = "".join(b64_text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError):
        return None


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def file_extension(filename: Optional[str], default: str = "") -> str:
    if not filename:
        return default
    return os.path.splitext(filename)[1] or default
