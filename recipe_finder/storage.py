"""
Durable key/value storage for Foodie Find.

The app persists exactly two entries: the raw API key string and the JSON-serialized
favorites list. Both are plain text and human-inspectable; there is no versioning or
migration logic.

Two implementations share one small interface:
- FileStore: one UTF-8 file per key inside a data directory (used by the app)
- MemoryStore: a dict, used in tests
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Interface for string key/value persistence."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""

    def delete(self, key: str) -> None:
        """Remove `key`. Deleting an absent key is a no-op."""


class MemoryStore:
    """In-process store. Contents are lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileStore:
    """
    Directory-backed store: `<directory>/<key>` holds the value for `key`.

    Writes go to a temporary file in the same directory and are moved into place with
    os.replace, so a crash mid-write never leaves a truncated value behind.
    The directory is created on first write.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / key

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            value = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        logger.debug("Loaded %s (%d bytes)", path, len(value))
        return value

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError:
            logger.error("Failed to write %s", path, exc_info=True)
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Saved %s (%d bytes)", path, len(value))

    def delete(self, key: str) -> None:
        path = self._path(key)
        path.unlink(missing_ok=True)
        logger.debug("Deleted %s", path)
