"""
Favourites panel: the saved recipes as a compact list, plus a table view with CSV export.

Picking a recipe closes the panel and opens its detail.
"""

from typing import Callable

import streamlit as st

from recipe_finder.favorites import FavoritesStore
from recipe_finder.models import RecipeSummary
from recipe_finder.sanitize import escape_markdown

from .feedback import show_empty_state
from .recipe_list import card_meta

EMPTY_TITLE = "You haven't saved any recipes yet"
EMPTY_SUBTITLE = "Tap Save on any recipe to keep it here."


def render_favorites_list(
    favorites: FavoritesStore,
    on_select: Callable[[RecipeSummary], None],
    on_remove: Callable[[int], None],
    key: str = "favorites",
) -> None:
    """
    Render saved recipes in insertion order.

    Args:
        favorites: The favourites store
        on_select: Called with a recipe when it is opened (the caller closes the panel)
        on_remove: Called with a recipe id to un-save it
        key: Unique widget key prefix
    """
    recipes = favorites.recipes()
    if not recipes:
        show_empty_state(EMPTY_TITLE, EMPTY_SUBTITLE)
        return

    st.caption(f"{len(recipes)} saved recipe{'s' if len(recipes) != 1 else ''}")
    for recipe in recipes:
        col_image, col_text, col_actions = st.columns([1, 3, 1])
        with col_image:
            if recipe.image:
                st.image(recipe.image, use_container_width=True)
        with col_text:
            st.markdown(f"**{escape_markdown(recipe.title)}**")
            meta = card_meta(recipe)
            if meta:
                st.caption(" · ".join(meta))
        with col_actions:
            if st.button("Open", key=f"{key}_open_{recipe.id}", use_container_width=True):
                on_select(recipe)
            st.button(
                "Remove",
                key=f"{key}_remove_{recipe.id}",
                on_click=on_remove,
                args=(recipe.id,),
                use_container_width=True,
            )

    with st.expander("📋 Table view"):
        df = favorites.to_dataframe()
        st.dataframe(df, use_container_width=True, hide_index=True)
        st.download_button(
            "⬇️ Download CSV",
            data=df.to_csv(index=False).encode("utf-8"),
            file_name="favorite_recipes.csv",
            mime="text/csv",
            key=f"{key}_csv",
        )
