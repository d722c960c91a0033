"""
Tests for the favourites store.

This module tests:
- Toggle round trips restore the exact collection
- Persistence: a reload yields the same mapping and order
- Tolerant loading of damaged saved data
- Removal by id, narrowing of detail records, and the table export
"""

import json
from unittest.mock import Mock

from recipe_finder.favorites import FAVORITES_STORAGE_KEY, FavoritesStore
from recipe_finder.models import RecipeDetail, RecipeSummary
from recipe_finder.storage import FileStore, MemoryStore


def _recipe(recipe_id: int, **kwargs) -> RecipeSummary:
    return RecipeSummary(id=recipe_id, title=f"Recipe {recipe_id}", **kwargs)


class TestFavoritesStore:
    """Test cases for add/remove/toggle."""

    def test_toggle_adds_then_removes(self):
        """Test that toggle adds a missing recipe and removes a present one."""
        store = FavoritesStore(MemoryStore())
        assert store.toggle(_recipe(1)) is True
        assert store.is_favorite(1)
        assert store.toggle(_recipe(1)) is False
        assert not store.is_favorite(1)
        assert len(store) == 0

    def test_toggle_round_trip_restores_collection(self):
        """Test that toggling a favourite off and on again restores id set and order."""
        store = FavoritesStore(MemoryStore())
        for recipe_id in (1, 2, 3):
            store.add(_recipe(recipe_id))
        before = store.ids()

        store.toggle(_recipe(2))
        store.toggle(_recipe(2))

        assert store.ids() == before

    def test_toggle_round_trip_from_empty(self):
        """Test that a double toggle on an empty store leaves it empty."""
        store = FavoritesStore(MemoryStore())
        store.toggle(_recipe(5))
        store.toggle(_recipe(5))
        assert store.ids() == []

    def test_insertion_order(self):
        """Test that favourites keep insertion order."""
        store = FavoritesStore(MemoryStore())
        for recipe_id in (30, 10, 20):
            store.add(_recipe(recipe_id))
        assert store.ids() == [30, 10, 20]
        assert [r.id for r in store.recipes()] == [30, 10, 20]

    def test_add_existing_is_noop(self):
        """Test that adding a saved recipe again changes nothing."""
        store = FavoritesStore(MemoryStore())
        store.add(_recipe(1))
        store.add(_recipe(2))
        store.add(_recipe(1, servings=4))
        assert store.ids() == [1, 2]
        assert store.get(1).servings is None

    def test_remove_by_id(self):
        """Test that removing id 10 from {10, 20} leaves only 20."""
        store = FavoritesStore(MemoryStore())
        store.add(_recipe(10))
        store.add(_recipe(20))
        store.remove(10)
        assert store.ids() == [20]
        assert 10 not in store
        assert 20 in store

    def test_remove_missing_is_noop(self):
        """Test that removing an unknown id writes nothing."""
        storage = MemoryStore()
        store = FavoritesStore(storage)
        store.remove(99)
        assert storage.get(FAVORITES_STORAGE_KEY) is None

    def test_detail_is_narrowed_to_summary(self):
        """Test that favouriting from the detail view stores the summary shape."""
        storage = MemoryStore()
        store = FavoritesStore(storage)
        detail = RecipeDetail(id=4, title="Stew", instructions="Simmer.", servings=2)
        assert store.toggle(detail) is True

        saved = store.get(4)
        assert type(saved) is RecipeSummary
        assert saved.servings == 2
        assert "instructions" not in json.loads(storage.get(FAVORITES_STORAGE_KEY))[0]

    def test_notifies_on_change(self):
        """Test that listeners hear only about real changes."""
        store = FavoritesStore(MemoryStore())
        listener = Mock()
        store.subscribe(listener)
        store.add(_recipe(1))
        store.remove(1)
        store.remove(1)
        assert listener.call_count == 2


class TestFavoritesPersistence:
    """Test cases for saving and loading favourites."""

    def test_reload_yields_same_mapping_and_order(self, tmp_path):
        """Test that a reload yields the same records in the same order."""
        store = FavoritesStore(FileStore(tmp_path))
        store.add(_recipe(3, vegan=True))
        store.add(_recipe(1, ready_in_minutes=20))
        store.add(_recipe(2))

        reloaded = FavoritesStore(FileStore(tmp_path))
        assert reloaded.ids() == [3, 1, 2]
        assert [r.to_payload() for r in reloaded.recipes()] == [r.to_payload() for r in store.recipes()]

    def test_persisted_shape_is_camel_case_list(self):
        """Test that favourites are stored as a camelCase JSON list."""
        storage = MemoryStore()
        FavoritesStore(storage).add(_recipe(1, ready_in_minutes=15))
        assert json.loads(storage.get(FAVORITES_STORAGE_KEY)) == [
            {"id": 1, "title": "Recipe 1", "readyInMinutes": 15}
        ]

    def test_corrupt_json_starts_empty(self):
        """Test that unreadable saved data starts an empty store."""
        store = FavoritesStore(MemoryStore({FAVORITES_STORAGE_KEY: "{not json"}))
        assert len(store) == 0

    def test_non_list_starts_empty(self):
        store = FavoritesStore(MemoryStore({FAVORITES_STORAGE_KEY: '{"id": 1}'}))
        assert len(store) == 0

    def test_invalid_entries_and_duplicates_skipped(self):
        """Test that bad entries and repeated ids are skipped on load."""
        raw = json.dumps([{"id": 1, "title": "A"}, {"title": "no id"}, {"id": 1, "title": "dupe"}, {"id": 2}])
        store = FavoritesStore(MemoryStore({FAVORITES_STORAGE_KEY: raw}))
        assert store.ids() == [1, 2]
        assert store.get(1).title == "A"


class TestFavoritesTable:

    def test_to_dataframe(self):
        """Test the columns and values of the favourites table."""
        store = FavoritesStore(MemoryStore())
        store.add(_recipe(1, ready_in_minutes=30, servings=2, vegan=True, vegetarian=True))
        store.add(_recipe(2, source_url="https://example.com/r/2"))

        df = store.to_dataframe()
        assert list(df.columns) == ["ID", "Title", "Ready in (min)", "Servings", "Diet", "Source"]
        assert list(df["ID"]) == [1, 2]
        assert df.iloc[0]["Diet"] == "Vegetarian, Vegan"
        assert df.iloc[1]["Source"] == "https://example.com/r/2"

    def test_to_dataframe_empty(self):
        df = FavoritesStore(MemoryStore()).to_dataframe()
        assert df.empty
        assert "Title" in df.columns
