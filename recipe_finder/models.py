"""
Recipe, ingredient and filter models for Foodie Find.

This module defines the canonical record shapes used throughout the app. Records come
straight from the Spoonacular API, so the models are deliberately lenient:

- Field names are snake_case in Python and camelCase on the wire (aliases), so
  `model_dump(by_alias=True)` reproduces the API shape for persistence.
- Every display field is optional. Which fields are populated depends on the endpoint
  that produced the record (complexSearch, findByIngredients, information).
- Unknown fields are kept (`extra="allow"`) so nothing is lost when a record is
  favourited and written to disk.

# NOTE: `id` is the only identity. Two records with the same id are the same recipe,
    regardless of how many display fields each carries.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .sanitize import escape_markdown


def _none_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


class ApiRecord(BaseModel):
    """Base for records parsed from API payloads."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize back to the camelCase API shape, dropping unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Ingredient(ApiRecord):
    """
    A single ingredient line of a recipe.

    Belongs to exactly one recipe; has no lifecycle of its own.
    """
    id: Optional[int] = Field(None, description="Spoonacular ingredient id")
    amount: Optional[float] = Field(None, description="Quantity in `unit`")
    unit: Optional[str] = Field(None, description="Unit as written in the recipe")
    unit_long: Optional[str] = Field(None, alias="unitLong")
    unit_short: Optional[str] = Field(None, alias="unitShort")
    aisle: Optional[str] = Field(None, description="Supermarket aisle the ingredient comes from")
    name: Optional[str] = Field(None, description="Normalized display name")
    original: Optional[str] = Field(None, description="Original display string, e.g. '2 cups flour'")
    original_name: Optional[str] = Field(None, alias="originalName")
    meta: List[str] = Field(default_factory=list)
    extended_name: Optional[str] = Field(None, alias="extendedName")
    image: Optional[str] = Field(None, description="Image file name or URL")

    @field_validator("meta", mode="before")
    @classmethod
    def meta_none_as_empty(cls, value: Any) -> Any:
        return _none_as_empty_list(value)

    def display_line(self) -> str:
        """
        Build the 'amount unit name' line shown in the ingredients tab.

        Falls back to the original string when no structured name is present. Text from
        the API is Markdown-escaped, so the line is safe to pass to st.markdown.
        """
        name = escape_markdown(self.name or self.original_name or self.original or "")
        parts = []
        if self.amount is not None:
            parts.append(_format_amount(self.amount))
        if self.unit:
            parts.append(escape_markdown(self.unit))
        quantity = " ".join(parts)
        if quantity and name:
            return f"**{quantity}** {name}"
        return name or quantity


def _format_amount(amount: float) -> str:
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}".rstrip("0").rstrip(".")


class RecipeSummary(ApiRecord):
    """
    Recipe as it appears in a result grid or the favorites list.

    Attributes:
        id: Unique recipe identifier (the only identity field)
        title / image: Display fields
        ready_in_minutes / servings: Optional timing and serving info
        vegetarian ... very_healthy: Optional dietary flags
        used_ingredient_count / missed_ingredient_count: Only populated by
            ingredient-based search
    """
    id: int
    title: str = ""
    image: Optional[str] = None
    image_type: Optional[str] = Field(None, alias="imageType")
    likes: Optional[int] = None
    ready_in_minutes: Optional[int] = Field(None, alias="readyInMinutes")
    servings: Optional[int] = None
    source_url: Optional[str] = Field(None, alias="sourceUrl")

    vegetarian: Optional[bool] = None
    vegan: Optional[bool] = None
    gluten_free: Optional[bool] = Field(None, alias="glutenFree")
    dairy_free: Optional[bool] = Field(None, alias="dairyFree")
    very_healthy: Optional[bool] = Field(None, alias="veryHealthy")

    used_ingredient_count: Optional[int] = Field(None, alias="usedIngredientCount")
    missed_ingredient_count: Optional[int] = Field(None, alias="missedIngredientCount")
    used_ingredients: Optional[List[Ingredient]] = Field(None, alias="usedIngredients")
    missed_ingredients: Optional[List[Ingredient]] = Field(None, alias="missedIngredients")
    unused_ingredients: Optional[List[Ingredient]] = Field(None, alias="unusedIngredients")

    @field_validator("title", mode="before")
    @classmethod
    def title_none_as_empty(cls, value: Any) -> Any:
        # The API sends "title": null for some records
        return "" if value is None else value

    def diet_badges(self) -> List[str]:
        """Labels for the dietary flags that are set, in display order."""
        flags = [
            (self.vegetarian, "Vegetarian"),
            (self.vegan, "Vegan"),
            (self.gluten_free, "Gluten-Free"),
            (self.dairy_free, "Dairy-Free"),
            (self.very_healthy, "Healthy"),
        ]
        return [label for is_set, label in flags if is_set]


class RecipeDetail(RecipeSummary):
    """
    Full recipe information, fetched lazily one recipe at a time.

    `instructions` and `summary` arrive as HTML from the API. They are sanitised on
    ingest by the client (see recipe_finder.sanitize), so by the time a RecipeDetail
    reaches the UI they hold plain text.
    """
    cheap: Optional[bool] = None
    very_popular: Optional[bool] = Field(None, alias="veryPopular")
    sustainable: Optional[bool] = None
    low_fodmap: Optional[bool] = Field(None, alias="lowFodmap")
    weight_watcher_smart_points: Optional[float] = Field(None, alias="weightWatcherSmartPoints")
    gaps: Optional[str] = None
    preparation_minutes: Optional[int] = Field(None, alias="preparationMinutes")
    cooking_minutes: Optional[int] = Field(None, alias="cookingMinutes")
    aggregate_likes: Optional[int] = Field(None, alias="aggregateLikes")
    health_score: Optional[float] = Field(None, alias="healthScore")
    credits_text: Optional[str] = Field(None, alias="creditsText")
    source_name: Optional[str] = Field(None, alias="sourceName")
    price_per_serving: Optional[float] = Field(None, alias="pricePerServing")
    extended_ingredients: List[Ingredient] = Field(default_factory=list, alias="extendedIngredients")
    summary: Optional[str] = None
    instructions: Optional[str] = None
    instruction_steps: List[str] = Field(default_factory=list, alias="instructionSteps")
    analyzed_instructions: List[Any] = Field(default_factory=list, alias="analyzedInstructions")
    diets: List[str] = Field(default_factory=list)

    @field_validator("extended_ingredients", "instruction_steps", "analyzed_instructions", "diets", mode="before")
    @classmethod
    def lists_none_as_empty(cls, value: Any) -> Any:
        return _none_as_empty_list(value)

    def to_summary(self) -> RecipeSummary:
        """Narrow to the summary shape stored in favorites."""
        data = self.model_dump(by_alias=True, exclude_none=True, include=set(RecipeSummary.model_fields))
        return RecipeSummary.model_validate(data)


class SearchResult(BaseModel):
    """Outcome of a search call: the page of results plus the API's total match count."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    results: List[RecipeSummary] = Field(default_factory=list)
    total_results: int = Field(0, alias="totalResults")

    @classmethod
    def empty(cls) -> "SearchResult":
        return cls(results=[], total_results=0)


class Diet(str, Enum):
    """Single-choice diet constraint. NONE means no diet filter."""
    NONE = ""
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GLUTEN_FREE = "gluten free"
    KETOGENIC = "ketogenic"
    PESCETARIAN = "pescetarian"
    PALEO = "paleo"

    @property
    def label(self) -> str:
        return _DIET_LABELS[self]


_DIET_LABELS = {
    Diet.NONE: "Any",
    Diet.VEGETARIAN: "Vegetarian",
    Diet.VEGAN: "Vegan",
    Diet.GLUTEN_FREE: "Gluten Free",
    Diet.KETOGENIC: "Ketogenic",
    Diet.PESCETARIAN: "Pescetarian",
    Diet.PALEO: "Paleo",
}


class Intolerance(str, Enum):
    """Allergen / exclusion tag. Zero or more may be active at once."""
    DAIRY = "dairy"
    EGG = "egg"
    GLUTEN = "gluten"
    GRAIN = "grain"
    PEANUT = "peanut"
    SEAFOOD = "seafood"
    SESAME = "sesame"
    SHELLFISH = "shellfish"
    SOY = "soy"
    SULFITE = "sulfite"
    TREE_NUT = "tree nut"
    WHEAT = "wheat"

    @property
    def label(self) -> str:
        return self.value.title()


# Fixed "ready in" thresholds, in minutes. None means no limit.
READY_TIME_OPTIONS: Tuple[int, ...] = (15, 30, 60)


def ready_time_label(minutes: Optional[int]) -> str:
    """Label for a ready-time option as shown in the filter editor."""
    if minutes is None:
        return "Any time"
    return f"{minutes} minutes or less"


def _intolerance_order(value: Intolerance) -> int:
    return list(Intolerance).index(value)


@dataclass(frozen=True)
class FilterState:
    """
    Active diet / intolerance / time constraints for text search.

    A pure value type: it is never mutated in place. The `with_*` / `without_*` helpers
    return new instances.

    Attributes:
        diet: Single Diet choice (Diet.NONE for none)
        intolerances: Set of Intolerance tags; order is irrelevant
        max_ready_time: One of READY_TIME_OPTIONS, or None for no limit
    """
    diet: Diet = Diet.NONE
    intolerances: FrozenSet[Intolerance] = field(default_factory=frozenset)
    max_ready_time: Optional[int] = None

    def __post_init__(self):
        """Coerce raw values and reject anything outside the fixed enumerations."""
        object.__setattr__(self, "diet", Diet(self.diet or ""))
        object.__setattr__(
            self, "intolerances", frozenset(Intolerance(i) for i in self.intolerances)
        )
        if self.max_ready_time is not None and self.max_ready_time not in READY_TIME_OPTIONS:
            raise ValueError(
                f"max_ready_time must be one of {READY_TIME_OPTIONS} or None, got {self.max_ready_time!r}"
            )

    @classmethod
    def empty(cls) -> "FilterState":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.active_count == 0

    @property
    def active_count(self) -> int:
        """Number of active constraints, as shown on the Filters button."""
        return (
            (1 if self.diet is not Diet.NONE else 0)
            + len(self.intolerances)
            + (1 if self.max_ready_time is not None else 0)
        )

    def sorted_intolerances(self) -> List[Intolerance]:
        """Intolerances in enumeration order, for stable requests and badges."""
        return sorted(self.intolerances, key=_intolerance_order)

    def with_diet(self, diet: Diet) -> "FilterState":
        return FilterState(diet=diet, intolerances=self.intolerances, max_ready_time=self.max_ready_time)

    def with_intolerance_toggled(self, value: Intolerance) -> "FilterState":
        value = Intolerance(value)
        if value in self.intolerances:
            intolerances = self.intolerances - {value}
        else:
            intolerances = self.intolerances | {value}
        return FilterState(diet=self.diet, intolerances=intolerances, max_ready_time=self.max_ready_time)

    def without_intolerance(self, value: Intolerance) -> "FilterState":
        return FilterState(
            diet=self.diet,
            intolerances=self.intolerances - {Intolerance(value)},
            max_ready_time=self.max_ready_time,
        )

    def with_max_ready_time(self, minutes: Optional[int]) -> "FilterState":
        return FilterState(diet=self.diet, intolerances=self.intolerances, max_ready_time=minutes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary (intolerances as a sorted list)."""
        return {
            "diet": self.diet.value,
            "intolerances": [i.value for i in self.sorted_intolerances()],
            "max_ready_time": self.max_ready_time,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FilterState":
        """
        Create a FilterState from a dictionary.

        Unknown diets, intolerances or time thresholds are dropped rather than rejected,
        so stale or hand-edited input degrades to "no constraint".

        Args:
            data: Dictionary with 'diet', 'intolerances' and/or 'max_ready_time' keys

        Returns:
            FilterState instance with validated values
        """
        if not data:
            return cls()

        diet_values = {d.value for d in Diet}
        diet = data.get("diet") or ""
        if diet not in diet_values:
            diet = ""

        intolerance_values = {i.value for i in Intolerance}
        intolerances: Iterable[str] = data.get("intolerances") or []
        intolerances = [i for i in intolerances if i in intolerance_values]

        max_ready_time = data.get("max_ready_time")
        if max_ready_time not in READY_TIME_OPTIONS:
            max_ready_time = None

        return cls(diet=diet, intolerances=frozenset(intolerances), max_ready_time=max_ready_time)
