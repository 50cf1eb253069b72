from typing import Optional, Protocol


class StorageRepository(Protocol):
    def save_bytes(self, subdir: str, filename: str, data: bytes) -> str:
        ...

    def read_bytes(self, path: str) -> Optional[bytes]:
        ...

    def delete(self, path: str) -> bool:
        """Remove the file at ``path``; False when it was already gone."""
        ...
