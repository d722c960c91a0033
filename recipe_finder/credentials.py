"""
Credential store: the user's Spoonacular API key.

At most one key is active. An absent key means the app runs in "unauthenticated mode":
searches and detail fetches are declined without touching the network.
The key is set and cleared explicitly by the user and is otherwise stable across
sessions.
"""

import logging
from typing import Optional

from .observable import Observable
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

# Storage key for the raw API key string
API_KEY_STORAGE_KEY = "spoonacular-api-key"


class CredentialStore(Observable):
    """Read/write access to the persisted API key."""

    def __init__(self, storage: KeyValueStore):
        super().__init__()
        self._storage = storage
        raw = storage.get(API_KEY_STORAGE_KEY)
        self._value: Optional[str] = raw.strip() if raw and raw.strip() else None
        logger.debug("Credential store loaded (key set: %s)", self._value is not None)

    def get(self) -> Optional[str]:
        """Return the active API key, or None when unset."""
        return self._value

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def save(self, raw: str) -> None:
        """
        Save a new API key.

        Whitespace is trimmed. Saving an empty string clears the key, the same as clear().

        Args:
            raw: Key text as typed by the user
        """
        value = (raw or "").strip()
        if not value:
            self.clear()
            return
        if value == self._value:
            return
        self._storage.set(API_KEY_STORAGE_KEY, value)
        self._value = value
        logger.info("API key saved")
        self._notify()

    def clear(self) -> None:
        """Remove the API key; the app returns to unauthenticated mode."""
        if self._value is None:
            return
        self._storage.delete(API_KEY_STORAGE_KEY)
        self._value = None
        logger.info("API key cleared")
        self._notify()
