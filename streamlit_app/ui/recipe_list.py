"""
Recipe grid and recipe cards.

The grid has four states with strict precedence: loading, then error, then empty,
then the populated grid.
"""

import html
from typing import Callable, List, Optional, Sequence

import streamlit as st

from recipe_finder.models import RecipeSummary

from .feedback import show_empty_state, show_error, show_loading_skeleton
from .layout import card, pill_tags

RecipeAction = Callable[[RecipeSummary], None]

DEFAULT_COLUMNS = 3
COMPACT_COLUMNS = 1


def card_meta(recipe: RecipeSummary) -> List[str]:
    """Short facts shown under a card title, skipping anything the API left out."""
    meta = []
    if recipe.ready_in_minutes:
        meta.append(f"⏱️ {recipe.ready_in_minutes} min")
    if recipe.servings:
        meta.append(f"🍽️ {recipe.servings} servings")
    if recipe.used_ingredient_count is not None:
        meta.append(f"✅ {recipe.used_ingredient_count} used")
    if recipe.missed_ingredient_count is not None:
        meta.append(f"🛒 {recipe.missed_ingredient_count} missing")
    return meta


def render_recipe_card(
    recipe: RecipeSummary,
    is_favorite: bool,
    on_select: RecipeAction,
    on_toggle_favorite: RecipeAction,
    key: str,
) -> None:
    """
    Render one recipe card with View and Save/Saved actions.

    Args:
        recipe: Recipe to show
        is_favorite: Whether the recipe is currently a favourite
        on_select: Called with the recipe when View is clicked
        on_toggle_favorite: Called with the recipe when Save/Saved is clicked
        key: Unique widget key prefix
    """
    with card():
        if recipe.image:
            st.image(recipe.image, use_container_width=True)
        st.markdown(f'<div class="ff-card-title">{html.escape(recipe.title)}</div>', unsafe_allow_html=True)
        meta = card_meta(recipe)
        if meta:
            st.markdown(f'<div class="ff-card-meta">{" · ".join(meta)}</div>', unsafe_allow_html=True)
        pill_tags(recipe.diet_badges())

        col_view, col_save = st.columns(2)
        with col_view:
            st.button(
                "View Recipe",
                key=f"{key}_view_{recipe.id}",
                on_click=on_select,
                args=(recipe,),
                use_container_width=True,
            )
        with col_save:
            st.button(
                "❤️ Saved" if is_favorite else "🤍 Save",
                key=f"{key}_fav_{recipe.id}",
                on_click=on_toggle_favorite,
                args=(recipe,),
                use_container_width=True,
            )


def render_recipe_list(
    recipes: Sequence[RecipeSummary],
    is_favorite: Callable[[int], bool],
    on_select: RecipeAction,
    on_toggle_favorite: RecipeAction,
    key: str,
    is_loading: bool = False,
    error: Optional[str] = None,
    empty_title: str = "No recipes found",
    empty_subtitle: Optional[str] = "Try a different search term or loosen your filters.",
    columns: int = DEFAULT_COLUMNS,
) -> None:
    """
    Render a grid of recipe cards.

    Args:
        recipes: Recipes to show, in order
        is_favorite: Lookup for the Save/Saved state of each card
        on_select: View handler
        on_toggle_favorite: Save/Saved handler
        key: Unique widget key prefix for this grid
        is_loading: Show the loading skeleton instead of anything else
        error: Error message; shown instead of results when set
        empty_title / empty_subtitle: Text for the empty state
        columns: Grid columns
    """
    if is_loading:
        show_loading_skeleton(columns=columns)
        return
    if error:
        show_error("Something went wrong", hint=error)
        return
    if not recipes:
        show_empty_state(empty_title, empty_subtitle)
        return

    cols = st.columns(columns)
    for index, recipe in enumerate(recipes):
        with cols[index % columns]:
            render_recipe_card(recipe, is_favorite(recipe.id), on_select, on_toggle_favorite, key=key)
