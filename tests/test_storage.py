"""
Tests for the key/value stores.
"""

import pytest

from recipe_finder.storage import FileStore, MemoryStore


class TestMemoryStore:

    def test_get_set_delete(self):
        """Test the basic get, set and delete cycle."""
        store = MemoryStore({"a": "1"})
        assert store.get("a") == "1"
        store.set("a", "2")
        assert store.get("a") == "2"
        store.delete("a")
        assert store.get("a") is None

    def test_delete_missing_is_noop(self):
        """Test that deleting a missing key does nothing."""
        MemoryStore().delete("missing")

    def test_initial_dict_is_copied(self):
        """Test that the initial mapping is copied, not shared."""
        initial = {"a": "1"}
        store = MemoryStore(initial)
        store.set("a", "2")
        assert initial["a"] == "1"


class TestFileStore:
    """Test cases for the directory-backed store."""

    def test_missing_key_returns_none(self, tmp_path):
        """Test that an unknown key reads as None."""
        assert FileStore(tmp_path).get("recipe-favorites") is None

    def test_set_creates_directory_and_file(self, tmp_path):
        """Test that the data directory is created on first write."""
        directory = tmp_path / "data"
        store = FileStore(directory)
        store.set("spoonacular-api-key", "abc")
        assert (directory / "spoonacular-api-key").read_text(encoding="utf-8") == "abc"

    def test_values_survive_new_instance(self, tmp_path):
        """Test that a fresh store over the same directory sees earlier writes."""
        FileStore(tmp_path).set("recipe-favorites", '[{"id": 1}]')
        assert FileStore(tmp_path).get("recipe-favorites") == '[{"id": 1}]'

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        """Test that overwriting leaves no temporary files behind."""
        store = FileStore(tmp_path)
        store.set("key", "one")
        store.set("key", "two")
        assert store.get("key") == "two"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["key"]

    def test_unicode_values(self, tmp_path):
        """Test that non-ASCII values round trip through the file."""
        store = FileStore(tmp_path)
        store.set("key", "Crème brûlée 🍮")
        assert store.get("key") == "Crème brûlée 🍮"

    def test_delete(self, tmp_path):
        store = FileStore(tmp_path)
        store.set("key", "value")
        store.delete("key")
        assert store.get("key") is None
        store.delete("key")

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", ".hidden"])
    def test_invalid_keys_rejected(self, tmp_path, key):
        """Test that keys that are not safe file names are rejected."""
        with pytest.raises(ValueError):
            FileStore(tmp_path).get(key)
