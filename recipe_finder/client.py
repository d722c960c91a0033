"""
Spoonacular API client.

This module is the **single point of contact** with the external recipe API. No other
part of the app makes HTTP calls.

Three operations are exposed, all plain GETs with the API key as a query parameter:
- search_by_text(): GET /recipes/complexSearch
- search_by_ingredients(): GET /recipes/findByIngredients
- fetch_detail(): GET /recipes/{id}/information

Key principles:
- Errors never propagate to callers. MissingCredentialError, RecipeHttpError and
  RecipeTransportError are raised internally and converted at this boundary into the
  shared `status.error` message plus an empty payload (empty SearchResult or None).
- One shared ApiStatus (loading flag + last error) covers all three operations. Each
  call clears the error and sets loading when it starts.
- Every call takes a ticket from a monotonic counter. Only the call holding the latest
  ticket may update the shared status when it settles; an older call that settles
  later is ignored for status purposes, so a superseded request can never overwrite
  the outcome of a newer one.
- An empty result set is not an error.

# NOTE: The API key is never logged. Request logging uses the parameters before the
    key is added.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests
from pydantic import ValidationError

from .config import SpoonacularConfig
from .errors import MissingCredentialError, RecipeApiError, RecipeHttpError, RecipeTransportError
from .models import FilterState, RecipeDetail, RecipeSummary, SearchResult
from .observable import Observable
from .sanitize import instruction_steps, plain_text

logger = logging.getLogger(__name__)

T = TypeVar("T")

COMPLEX_SEARCH_PATH = "/recipes/complexSearch"
FIND_BY_INGREDIENTS_PATH = "/recipes/findByIngredients"
DETAIL_PATH = "/recipes/{recipe_id}/information"


@dataclass
class ApiStatus:
    """
    Shared in-flight state of the client.

    Attributes:
        is_loading: True while the most recently issued call is outstanding
        error: Message of the last failure, or None
        latest_ticket: Ticket number of the most recently issued call
    """
    is_loading: bool = False
    error: Optional[str] = None
    latest_ticket: int = 0


def build_search_params(
    query: str,
    filters: Optional[FilterState] = None,
    page_size: int = 12,
    sort: Optional[str] = None,
    sort_direction: Optional[str] = None,
    offset: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Build complexSearch query parameters (without the API key).

    Only constraints that are actually set are included: no diet means no `diet`
    parameter, an empty intolerance set means no `intolerances` parameter, and
    no time limit means no `maxReadyTime` parameter.

    Args:
        query: Recipe name / free text
        filters: Applied FilterState (None means no filters)
        page_size: Number of results requested (`number`)
        sort: Optional Spoonacular sort key (e.g. "popularity")
        sort_direction: Optional "asc" / "desc"
        offset: Optional result offset for paging

    Returns:
        Dictionary of query parameters
    """
    filters = filters or FilterState.empty()
    params: Dict[str, Any] = {"query": query}

    if filters.diet.value:
        params["diet"] = filters.diet.value
    if filters.intolerances:
        # Comma-separated, as expected by the API
        params["intolerances"] = ",".join(i.value for i in filters.sorted_intolerances())
    if filters.max_ready_time is not None:
        params["maxReadyTime"] = filters.max_ready_time
    if sort:
        params["sort"] = sort
    if sort_direction:
        params["sortDirection"] = sort_direction
    if offset:
        params["offset"] = offset

    # Ask for readyInMinutes / servings / diet flags so result cards can show them
    params["addRecipeInformation"] = "true"
    params["number"] = page_size
    return params


def build_ingredient_params(ingredients: str, page_size: int = 12) -> Dict[str, Any]:
    """findByIngredients parameters. The ingredient text is passed through verbatim."""
    return {"ingredients": ingredients, "number": page_size}


def parse_recipes(items: List[Any]) -> List[RecipeSummary]:
    """
    Validate result records one at a time.

    A record that cannot be read (no usable id, wrong type) is logged and skipped so
    the rest of the page still shows.
    """
    recipes = []
    for item in items:
        try:
            recipes.append(RecipeSummary.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping unreadable recipe record: %s", e)
    return recipes


def parse_search_result(payload: Any) -> SearchResult:
    """Parse a complexSearch response ({results, totalResults})."""
    if not isinstance(payload, dict):
        raise ValueError("expected a JSON object with 'results'")
    items = payload.get("results") or []
    if not isinstance(items, list):
        raise ValueError("expected 'results' to be a list")
    results = parse_recipes(items)
    total = payload.get("totalResults")
    if not isinstance(total, int):
        total = len(results)
    return SearchResult(results=results, total_results=total)


def parse_ingredient_result(payload: Any) -> SearchResult:
    """Parse a findByIngredients response (a bare JSON list)."""
    if not isinstance(payload, list):
        raise ValueError("expected a JSON list of recipes")
    results = parse_recipes(payload)
    return SearchResult(results=results, total_results=len(results))


def parse_detail(payload: Any) -> RecipeDetail:
    """
    Parse a recipe information response and sanitise its rich text.

    `instructions` and `summary` arrive as HTML. They are reduced to plain text here,
    and the instructions are also split into steps, so no API-supplied markup ever
    reaches the UI.
    """
    if not isinstance(payload, dict):
        raise ValueError("expected a JSON object")
    detail = RecipeDetail.model_validate(payload)
    raw_instructions = detail.instructions
    detail.instruction_steps = instruction_steps(raw_instructions)
    detail.instructions = plain_text(raw_instructions) or None
    detail.summary = plain_text(detail.summary) or None
    return detail


class SpoonacularClient(Observable):
    """
    requests-backed client for the Spoonacular recipe API.

    Args:
        base_url: API host (defaults to SpoonacularConfig.get_base_url())
        timeout: Per-request timeout in seconds (defaults to SpoonacularConfig.get_timeout())
        session: Optional requests.Session (injected in tests)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        super().__init__()
        self.base_url = (base_url or SpoonacularConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else SpoonacularConfig.get_timeout()
        self.session = session or requests.Session()
        self.status = ApiStatus()
        self._tickets = itertools.count(1)

    @property
    def is_loading(self) -> bool:
        return self.status.is_loading

    @property
    def error(self) -> Optional[str]:
        return self.status.error

    def search_by_text(
        self,
        api_key: Optional[str],
        query: str,
        filters: Optional[FilterState] = None,
        page_size: int = 12,
        sort: Optional[str] = None,
        sort_direction: Optional[str] = None,
        offset: Optional[int] = None,
    ) -> SearchResult:
        """
        Search recipes by name / free text with optional diet, intolerance and time filters.

        Args:
            api_key: Spoonacular API key (None fails immediately, without a request)
            query: Text to search for
            filters: Applied FilterState
            page_size: Number of results requested

        Returns:
            SearchResult; an empty SearchResult on any error (see `status.error`)
        """
        params = build_search_params(query, filters, page_size, sort, sort_direction, offset)
        return self._execute(api_key, COMPLEX_SEARCH_PATH, params, parse_search_result, SearchResult.empty)

    def search_by_ingredients(
        self,
        api_key: Optional[str],
        ingredients: str,
        page_size: int = 12,
    ) -> SearchResult:
        """
        Find recipes that use the given ingredients.

        Args:
            api_key: Spoonacular API key
            ingredients: Free-form, comma-separated ingredient list (e.g. "chicken, rice")
            page_size: Number of results requested

        Returns:
            SearchResult whose records carry used/missed ingredient counts; empty on error
        """
        params = build_ingredient_params(ingredients, page_size)
        return self._execute(api_key, FIND_BY_INGREDIENTS_PATH, params, parse_ingredient_result, SearchResult.empty)

    def fetch_detail(self, api_key: Optional[str], recipe_id: int) -> Optional[RecipeDetail]:
        """
        Fetch full information for one recipe.

        Returns:
            RecipeDetail with sanitised instructions, or None on error
        """
        path = DETAIL_PATH.format(recipe_id=int(recipe_id))
        return self._execute(api_key, path, {}, parse_detail, lambda: None)

    def _execute(
        self,
        api_key: Optional[str],
        path: str,
        params: Dict[str, Any],
        parse: Callable[[Any], T],
        empty: Callable[[], T],
    ) -> T:
        ticket = self._begin()
        error: Optional[str] = None
        try:
            if not api_key:
                raise MissingCredentialError()
            payload = self._get_json(path, params, api_key)
            try:
                result = parse(payload)
            except (ValidationError, ValueError) as e:
                raise RecipeTransportError(f"Unexpected response from recipe API: {e}") from e
        except MissingCredentialError as e:
            logger.info("Skipping %s: no API key set", path)
            error = str(e)
            result = empty()
        except RecipeApiError as e:
            error = str(e)
            result = empty()
        self._finish(ticket, error)
        return result

    def _begin(self) -> int:
        ticket = next(self._tickets)
        self.status.latest_ticket = ticket
        self.status.is_loading = True
        self.status.error = None
        self._notify()
        return ticket

    def _finish(self, ticket: int, error: Optional[str]) -> bool:
        if ticket != self.status.latest_ticket:
            logger.debug(
                "Discarding status of superseded request %d (latest is %d)",
                ticket, self.status.latest_ticket,
            )
            return False
        self.status.is_loading = False
        self.status.error = error
        self._notify()
        return True

    def _get_json(self, path: str, params: Dict[str, Any], api_key: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.info("Recipe API request: GET %s params=%r", path, params)
        try:
            response = self.session.get(
                url,
                params={**params, "apiKey": api_key},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            logger.warning("Recipe API returned HTTP %s for %s", status_code, path)
            raise RecipeHttpError(status_code) from e
        except requests.exceptions.RequestException as e:
            logger.error("Recipe API request to %s failed: %s", path, e)
            raise RecipeTransportError(str(e)) from e
        except ValueError as e:
            # Body was not JSON
            logger.error("Recipe API returned invalid JSON for %s: %s", path, e)
            raise RecipeTransportError(str(e)) from e

