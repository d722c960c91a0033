"""
Tests for the API key credential store.

This module tests:
- Trimming and persisting a saved key
- Saving blank text clears the key
- Loading a persisted key
- Change notifications
"""

from unittest.mock import Mock

from recipe_finder.credentials import API_KEY_STORAGE_KEY, CredentialStore
from recipe_finder.storage import FileStore, MemoryStore


class TestCredentialStore:
    """Test cases for CredentialStore."""

    def test_starts_unset(self):
        """Test that a fresh store has no key."""
        store = CredentialStore(MemoryStore())
        assert store.get() is None
        assert not store.is_set

    def test_save_trims_and_persists(self):
        """Test that a saved key is trimmed and written to storage."""
        storage = MemoryStore()
        store = CredentialStore(storage)
        store.save("  abc123 \n")
        assert store.get() == "abc123"
        assert store.is_set
        assert storage.get(API_KEY_STORAGE_KEY) == "abc123"

    def test_save_blank_clears(self):
        """Test that saving whitespace behaves like clear()."""
        storage = MemoryStore({API_KEY_STORAGE_KEY: "abc"})
        store = CredentialStore(storage)
        store.save("   ")
        assert store.get() is None
        assert storage.get(API_KEY_STORAGE_KEY) is None

    def test_clear(self):
        """Test that clearing removes the key from storage."""
        storage = MemoryStore({API_KEY_STORAGE_KEY: "abc"})
        store = CredentialStore(storage)
        store.clear()
        assert not store.is_set
        assert storage.get(API_KEY_STORAGE_KEY) is None

    def test_loads_persisted_key(self, tmp_path):
        """Test that a key saved by one instance is seen by the next."""
        CredentialStore(FileStore(tmp_path)).save("persisted-key")
        assert CredentialStore(FileStore(tmp_path)).get() == "persisted-key"

    def test_blank_persisted_value_is_unset(self):
        """Test that a blank saved value counts as no key."""
        store = CredentialStore(MemoryStore({API_KEY_STORAGE_KEY: "  "}))
        assert not store.is_set

    def test_notifies_on_change(self):
        """Test that listeners hear about saves and clears."""
        store = CredentialStore(MemoryStore())
        listener = Mock()
        store.subscribe(listener)

        store.save("abc")
        store.save("abc")  # unchanged
        store.clear()
        store.clear()  # already clear

        assert listener.call_count == 2

    def test_unsubscribe(self):
        store = CredentialStore(MemoryStore())
        listener = Mock()
        unsubscribe = store.subscribe(listener)
        unsubscribe()
        store.save("abc")
        listener.assert_not_called()
