"""
Blob storage for uploaded document files.

Files live under ``<STORAGE_DIR>/<bucket>/<path>`` and are served read-only
from the public storage URL.
"""
import logging
from pathlib import Path
from typing import Iterable

from portal.config import settings
from portal.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)


class BlobStorage:
    """Directory-backed storage bucket."""

    def __init__(self, root: Path, bucket: str, public_url: str = "/storage"):
        self.root = Path(root) / bucket
        self.bucket = bucket
        self.public_base = public_url.rstrip("/")

    def _resolve(self, path: str) -> Path:
        target = (self.root / path).resolve()
        if self.root.resolve() not in target.parents:
            raise StorageError(f"Invalid storage path: {path}")
        return target

    def upload(self, path: str, content: bytes) -> str:
        """Write a new object. Existing objects are never overwritten."""
        target = self._resolve(path)
        if target.exists():
            raise StorageError(f"Upload failed: {path} already exists")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        except OSError as e:
            raise StorageError(f"Upload failed: {e}") from e
        logger.info(f"Stored {path} ({len(content)} bytes)")
        return path

    def download(self, path: str) -> bytes:
        target = self._resolve(path)
        if not target.exists():
            raise NotFoundError(f"Download failed: {path} not found")
        try:
            return target.read_bytes()
        except OSError as e:
            raise StorageError(f"Download failed: {e}") from e

    def public_url(self, path: str) -> str:
        return f"{self.public_base}/{self.bucket}/{path}"

    def remove(self, paths: Iterable[str]) -> None:
        for path in paths:
            target = self._resolve(path)
            try:
                target.unlink()
            except FileNotFoundError:
                logger.warning(f"Blob already removed: {path}")
            except OSError as e:
                raise StorageError(f"Remove failed for {path}: {e}") from e


def get_storage() -> BlobStorage:
    """
    Dependency for getting the documents bucket.
    Use with FastAPI's Depends().
    """
    return BlobStorage(Path(settings.STORAGE_DIR), settings.STORAGE_BUCKET, settings.PUBLIC_STORAGE_URL)
