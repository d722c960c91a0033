"""
Application coordinator: the single owner of cross-cutting UI state.

Presentation components never talk to the API client or the stores directly. They call
coordinator operations (submit a query, apply filters, open a recipe, toggle a
favourite) and re-render from coordinator state.

State:
- active_view: SEARCH or FAVORITES (which results tab is shown)
- search_mode: BY_TEXT or BY_INGREDIENT (orthogonal to active_view)
- search: the current SearchSession (query, mode, results); reset on each submission
- query drafts per mode, so switching tabs never loses what was typed in the other
- selected / detail_open: the recipe shown in the detail overlay

The credential store, favorites store and API client are injected at construction.
The coordinator owns the FilterEditor and is its apply callback.

# NOTE: Each search and each detail fetch gets a sequence number. Results are applied
    only if the number is still the latest one issued for that kind of request; a
    response that settles after a newer request was issued is dropped.
"""

import itertools
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union

from .client import SpoonacularClient
from .config import SpoonacularConfig
from .credentials import CredentialStore
from .favorites import FavoritesStore
from .filters import FilterEditor
from .models import FilterState, RecipeDetail, RecipeSummary
from .observable import Observable

logger = logging.getLogger(__name__)


class ActiveView(str, Enum):
    SEARCH = "search"
    FAVORITES = "favorites"


class SearchMode(str, Enum):
    BY_TEXT = "recipe"
    BY_INGREDIENT = "ingredient"

    @property
    def label(self) -> str:
        return "Recipe" if self is SearchMode.BY_TEXT else "Ingredient"


@dataclass
class SearchSession:
    """Transient view of the current search. Not persisted."""
    query: str = ""
    mode: SearchMode = SearchMode.BY_TEXT
    results: List[RecipeSummary] = field(default_factory=list)
    total_results: int = 0


class AppCoordinator(Observable):
    """
    Wires user intent to the API client and the stores.

    Args:
        credentials: Persisted API key
        favorites: Persisted favourites collection
        client: Spoonacular API client
        page_size: Results requested per search (defaults to SpoonacularConfig)
    """

    def __init__(
        self,
        credentials: CredentialStore,
        favorites: FavoritesStore,
        client: SpoonacularClient,
        page_size: Optional[int] = None,
    ):
        super().__init__()
        self.credentials = credentials
        self.favorites = favorites
        self.client = client
        self.page_size = page_size or SpoonacularConfig.get_page_size()
        self.filters = FilterEditor(on_apply=self.apply_filters)

        self.active_view = ActiveView.SEARCH
        self.search_mode = SearchMode.BY_TEXT
        self.search = SearchSession()
        self.query_drafts: Dict[SearchMode, str] = {mode: "" for mode in SearchMode}
        self.selected: Optional[RecipeDetail] = None
        self.detail_open = False

        self._sequence = itertools.count(1)
        self._latest_search = 0
        self._latest_detail = 0

        # Store and client changes are re-broadcast to our own subscribers
        self.credentials.subscribe(self._notify)
        self.favorites.subscribe(self._notify)
        self.client.subscribe(self._notify)

    # Derived state

    @property
    def credential_required(self) -> bool:
        return not self.credentials.is_set

    @property
    def is_loading(self) -> bool:
        return self.client.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.client.error

    @property
    def can_view_search(self) -> bool:
        return bool(self.search.query)

    @property
    def can_view_favorites(self) -> bool:
        return len(self.favorites) > 0

    @property
    def selected_is_favorite(self) -> bool:
        """Favourite flag for the open detail, read from the store on every call."""
        return self.selected is not None and self.favorites.is_favorite(self.selected.id)

    def is_favorite(self, recipe_id: int) -> bool:
        return self.favorites.is_favorite(recipe_id)

    def heading(self) -> str:
        """Title for the results section, e.g. 'Recipe Results: "pasta"'."""
        if self.active_view is ActiveView.SEARCH and self.search.query:
            return f'{self.search.mode.label} Results: "{self.search.query}"'
        return "My Favorite Recipes"

    # Mode / view / drafts

    def set_search_mode(self, mode: SearchMode) -> None:
        """Switch between text and ingredient search. Queries and filters are kept."""
        mode = SearchMode(mode)
        if mode is self.search_mode:
            return
        self.search_mode = mode
        self._notify()

    def set_active_view(self, view: ActiveView) -> None:
        view = ActiveView(view)
        if view is self.active_view:
            return
        self.active_view = view
        self._notify()

    def query_draft(self, mode: Optional[SearchMode] = None) -> str:
        return self.query_drafts[SearchMode(mode or self.search_mode)]

    def set_query_draft(self, text: str, mode: Optional[SearchMode] = None) -> None:
        self.query_drafts[SearchMode(mode or self.search_mode)] = text

    def clear_query_draft(self, mode: Optional[SearchMode] = None) -> None:
        """Empty the typed query for one mode. Results on screen are left alone."""
        self.set_query_draft("", mode)

    # Search

    def submit_search(self, text: str, mode: Optional[SearchMode] = None) -> bool:
        """
        Run a search for `text` in the given (or current) mode.

        Empty or whitespace-only text, or a missing API key, is a no-op: no request is
        issued and no state changes.

        Args:
            text: Query as typed
            mode: Search mode to use (defaults to the current search_mode)

        Returns:
            True if results were applied, False for a no-op or a superseded response
        """
        query = (text or "").strip()
        if not query:
            return False
        if self.credential_required:
            logger.info("Search declined: API key required")
            return False

        mode = SearchMode(mode or self.search_mode)
        self.query_drafts[mode] = query
        self.active_view = ActiveView.SEARCH
        self.search = SearchSession(query=query, mode=mode)
        ticket = self._latest_search = next(self._sequence)
        self._notify()

        api_key = self.credentials.get()
        if mode is SearchMode.BY_INGREDIENT:
            result = self.client.search_by_ingredients(api_key, query, self.page_size)
        else:
            result = self.client.search_by_text(api_key, query, self.filters.applied, self.page_size)

        if ticket != self._latest_search:
            logger.debug("Dropping results of superseded search %d for %r", ticket, query)
            return False

        self.search = SearchSession(
            query=query,
            mode=mode,
            results=list(result.results),
            total_results=result.total_results,
        )
        logger.info("Search %r (%s) returned %d recipes", query, mode.value, len(result.results))
        self._notify()
        return True

    def apply_filters(self, filters: FilterState) -> None:
        """
        Called by the filter editor whenever filters are applied.

        If a text-mode search is active it is re-issued with the new filters.
        Filters have no effect on ingredient searches.
        """
        self._notify()
        if self.search.query and self.search.mode is SearchMode.BY_TEXT:
            self.submit_search(self.search.query, SearchMode.BY_TEXT)

    # Detail

    def select_recipe(self, recipe: Union[RecipeSummary, int]) -> bool:
        """
        Fetch full detail for a recipe and open the detail view.

        Without an API key, or when the fetch fails, nothing changes here; a failure is
        visible only through the client's error field.

        Args:
            recipe: A summary record or a bare recipe id

        Returns:
            True if the detail view was opened
        """
        recipe_id = recipe if isinstance(recipe, int) else recipe.id
        if self.credential_required:
            logger.info("Detail fetch declined: API key required")
            return False

        ticket = self._latest_detail = next(self._sequence)
        detail = self.client.fetch_detail(self.credentials.get(), recipe_id)

        if ticket != self._latest_detail:
            logger.debug("Dropping superseded detail response for recipe %d", recipe_id)
            return False
        if detail is None:
            return False

        self.selected = detail
        self.detail_open = True
        self._notify()
        return True

    def close_detail(self) -> None:
        if not self.detail_open:
            return
        self.detail_open = False
        self._notify()

    # Favourites

    def toggle_favorite(self, recipe: RecipeSummary) -> bool:
        """Toggle favourite status from any view. Returns the new status."""
        return self.favorites.toggle(recipe)

    def remove_favorite(self, recipe_id: int) -> None:
        self.favorites.remove(recipe_id)
