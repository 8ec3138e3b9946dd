"""
TourGuide Backend — Media Store
=================================

What:  Flat-file storage for uploaded photos, audio clips and videos.
Why:   Points of interest reference media by filename only; the bytes live
       on disk under one directory per category.
How:   Writes bytes with aiofiles under a uuid4-generated name that keeps the
       original extension, resolves names back to paths for serving, and
       deletes files on request.
Who:   Called by the media routes.

Directory Structure:
    uploads/
    ├── photos/
    │   └── 3f0c9a8e-....jpg
    ├── audio/
    │   └── 9b1d2c4f-....mp3
    └── videos/
        └── 77aa01e2-....mp4

Content checks:
    The store accepts any bytes. The coarse content-type-family check
    (image/*, audio/*, video/*) and the empty-upload check happen at the API
    boundary in app/routes/media.py.
"""

import logging
import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import aiofiles

from app.config import settings
from app.exceptions import FileStorageError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaKind:
    """
    One upload kind and everything the API needs to know about it.

    kind:            upload path segment and multipart field name ("photo")
    category:        storage subdirectory and serving path segment ("photos")
    content_prefix:  required Content-Type family for uploads ("image/")
    default_media:   media type used when serving a file whose extension
                     is not recognised
    """
    kind: str
    category: str
    content_prefix: str
    default_media: str


MEDIA_KINDS: Dict[str, MediaKind] = {
    "photo": MediaKind("photo", "photos", "image/", "image/jpeg"),
    "audio": MediaKind("audio", "audio", "audio/", "audio/mpeg"),
    "video": MediaKind("video", "videos", "video/", "video/mp4"),
}

# category → kind, for the GET/DELETE routes which are addressed by category
CATEGORIES: Dict[str, MediaKind] = {k.category: k for k in MEDIA_KINDS.values()}


class MediaStore:
    """
    Manages the upload root and its three fixed category directories.

    Filenames handed back by save() are opaque tokens: uuid4 hex plus the
    original extension. They never contain user-controlled path segments,
    so concurrent uploads cannot collide or escape the category directory.
    """

    def __init__(self, upload_dir: Optional[str] = None):
        """
        Args:
            upload_dir: Override the default upload root (used in tests).
                        If None, uses settings.upload_dir.
        """
        self.root = Path(upload_dir or settings.upload_dir).resolve()
        self.ensure_directories()

    def ensure_directories(self) -> None:
        """Create the upload root and the photos/audio/videos subdirectories."""
        try:
            for category in CATEGORIES:
                (self.root / category).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create media directories under %s: %s", self.root, e)
            raise FileStorageError(
                message="Media storage is not available.",
                context={"root": str(self.root), "os_error": str(e)},
            )

    def _category_dir(self, category: str) -> Path:
        if category not in CATEGORIES:
            raise ValidationError(
                message=f"Unknown media category '{category}'. Allowed: {', '.join(sorted(CATEGORIES))}",
                field="category",
                context={"category": category},
            )
        return self.root / category

    @staticmethod
    def _generate_filename(original_filename: Optional[str]) -> str:
        """
        Build a collision-resistant name that keeps the original extension.

        "Eiffel Tower.JPG" → "<uuid4>.jpg"; a name without a dot gets no
        extension at all.
        """
        extension = Path(original_filename or "").suffix.lower()
        return f"{uuid.uuid4()}{extension}"

    async def save(self, category: str, content: bytes, original_filename: Optional[str]) -> str:
        """
        Write uploaded bytes under a generated name.

        Returns:
            The generated filename (not the path).

        Raises:
            ValidationError: unknown category
            FileStorageError: the write failed (disk full, permissions, ...)
        """
        directory = self._category_dir(category)
        filename = self._generate_filename(original_filename)
        target = directory / filename

        try:
            async with aiofiles.open(target, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store media file at %s: %s", target, e)
            raise FileStorageError(
                message="Failed to save uploaded file. Please try again.",
                context={"path": str(target), "os_error": str(e)},
            )

        logger.info("Media stored: %s/%s (%d bytes)", category, filename, len(content))
        return filename

    def resolve(self, category: str, filename: str) -> Path:
        """
        Map a stored filename back to its absolute path.

        The caller is responsible for checking that the file exists.

        Raises:
            ValidationError: unknown category, or a filename that would
                             escape the category directory ("../x", "a/b")
        """
        directory = self._category_dir(category)
        candidate = (directory / filename).resolve()
        if candidate.parent != directory or not filename or filename in (".", ".."):
            raise ValidationError(
                message="Invalid media filename",
                field="filename",
                context={"filename": filename},
            )
        return candidate

    async def delete(self, category: str, filename: str) -> bool:
        """
        Remove a stored file.

        Returns:
            True if a file was removed, False if there was nothing to remove.
        """
        path = self.resolve(category, filename)
        if not path.exists():
            logger.debug("Media delete: file already gone: %s/%s", category, filename)
            return False
        try:
            os.remove(path)
        except OSError as e:
            logger.error("Failed to delete media file %s: %s", path, e)
            raise FileStorageError(
                message="Failed to delete file.",
                context={"path": str(path), "os_error": str(e)},
            )
        logger.info("Media deleted: %s/%s", category, filename)
        return True


# ── Singleton Instance ────────────────────────────────────────────────────
_media_store: Optional[MediaStore] = None


def get_media_store() -> MediaStore:
    """
    FastAPI dependency returning the process-wide MediaStore.

    Created lazily so importing the app does not touch the filesystem;
    tests override this dependency with a store rooted in a temp dir.
    """
    global _media_store
    if _media_store is None:
        _media_store = MediaStore()
    return _media_store
