"""
Favorites store: the user's persisted collection of saved recipes.

The collection is held twice:
- a mapping from recipe id to the RecipeSummary last seen, for O(1) lookup
- an ordered list of ids, preserving insertion order for display

Both are updated together in every mutation, so their id sets are always identical.
Every mutation immediately writes the ordered list (as JSON) to storage; the list is
read once at construction.

# NOTE: Favouriting from the detail view stores the narrowed summary, not the full
    detail record, so the persisted entries all share one shape.
"""

import json
import logging
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd
from pydantic import ValidationError

from .models import RecipeDetail, RecipeSummary
from .observable import Observable
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

# Storage key for the JSON-serialized favorites list
FAVORITES_STORAGE_KEY = "recipe-favorites"

FavoriteInput = Union[RecipeSummary, RecipeDetail]


class FavoritesStore(Observable):
    """Keyed, ordered, persisted collection of favourite recipes."""

    def __init__(self, storage: KeyValueStore):
        super().__init__()
        self._storage = storage
        self._by_id: Dict[int, RecipeSummary] = {}
        self._order: List[int] = []
        # (id, position) of the latest removal, so an immediate re-add restores the slot
        self._last_removed: Optional[Tuple[int, int]] = None
        self._load()

    def _load(self) -> None:
        raw = self._storage.get(FAVORITES_STORAGE_KEY)
        if not raw:
            return
        try:
            items = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Could not parse saved favorites, starting empty: %s", e)
            return
        if not isinstance(items, list):
            logger.warning("Saved favorites are not a list, starting empty")
            return

        for item in items:
            try:
                recipe = RecipeSummary.model_validate(item)
            except ValidationError as e:
                logger.warning("Skipping unreadable favorite entry: %s", e)
                continue
            if recipe.id in self._by_id:
                continue
            self._by_id[recipe.id] = recipe
            self._order.append(recipe.id)
        logger.debug("Loaded %d favorites", len(self._order))

    def _persist(self) -> None:
        payload = [self._by_id[recipe_id].to_payload() for recipe_id in self._order]
        self._storage.set(FAVORITES_STORAGE_KEY, json.dumps(payload, ensure_ascii=False))
        logger.debug("Saved %d favorites", len(payload))

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, recipe_id: object) -> bool:
        return recipe_id in self._by_id

    def is_favorite(self, recipe_id: int) -> bool:
        return recipe_id in self._by_id

    def get(self, recipe_id: int) -> Optional[RecipeSummary]:
        return self._by_id.get(recipe_id)

    def ids(self) -> List[int]:
        """Favourite ids in insertion order."""
        return list(self._order)

    def recipes(self) -> List[RecipeSummary]:
        """Favourite recipes in insertion order."""
        return [self._by_id[recipe_id] for recipe_id in self._order]

    def add(self, recipe: FavoriteInput) -> None:
        """Add a recipe; a recipe that is already a favourite is left where it is."""
        summary = _as_summary(recipe)
        if summary.id in self._by_id:
            return
        self._by_id[summary.id] = summary
        position = len(self._order)
        if self._last_removed and self._last_removed[0] == summary.id:
            position = min(self._last_removed[1], len(self._order))
        self._order.insert(position, summary.id)
        self._last_removed = None
        self._persist()
        self._notify()

    def remove(self, recipe_id: int) -> None:
        """Remove a recipe by id. Removing a non-favourite is a no-op."""
        if recipe_id not in self._by_id:
            return
        del self._by_id[recipe_id]
        position = self._order.index(recipe_id)
        del self._order[position]
        self._last_removed = (recipe_id, position)
        self._persist()
        self._notify()

    def toggle(self, recipe: FavoriteInput) -> bool:
        """
        Add the recipe if absent, remove it if present.

        Args:
            recipe: Summary or detail record (detail records are narrowed to a summary)

        Returns:
            True if the recipe is a favourite after the call, False otherwise
        """
        if recipe.id in self._by_id:
            self.remove(recipe.id)
            return False
        self.add(recipe)
        return True

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabular view of the favourites for the table display and CSV export.

        Returns:
            DataFrame with one row per favourite, in insertion order
        """
        rows = []
        for recipe in self.recipes():
            rows.append({
                "ID": recipe.id,
                "Title": recipe.title,
                "Ready in (min)": recipe.ready_in_minutes,
                "Servings": recipe.servings,
                "Diet": ", ".join(recipe.diet_badges()),
                "Source": recipe.source_url or "",
            })
        columns = ["ID", "Title", "Ready in (min)", "Servings", "Diet", "Source"]
        return pd.DataFrame(rows, columns=columns)


def _as_summary(recipe: FavoriteInput) -> RecipeSummary:
    if isinstance(recipe, RecipeDetail):
        return recipe.to_summary()
    return recipe
