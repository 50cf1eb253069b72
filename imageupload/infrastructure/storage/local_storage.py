import os
import logging
from typing import Optional

from ...application.ports.storage_repo import StorageRepository

logger = logging.getLogger(__name__)


class LocalStorageRepository(StorageRepository):
    """Local filesystem storage. Saves files under ``upload_dir/<subdir>``."""

    def __init__(self, upload_dir: str) -> None:
        self.upload_dir = upload_dir

    def save_bytes(self, subdir: str, filename: str, data: bytes) -> str:
        dest_dir = os.path.join(self.upload_dir, subdir) if subdir else self.upload_dir
        os.makedirs(dest_dir, exist_ok=True)
        path = os.path.join(dest_dir, filename)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def read_bytes(self, path: str) -> Optional[bytes]:
        if not os.path.exists(path):
            return None
        with open(path, "rb") as f:
            return f.read()

    def delete(self, path: str) -> bool:
        try:
            os.remove(path)
            return True
        except FileNotFoundError:
            logger.info(f"File already absent, nothing to delete: {path}")
            return False
