"""
Recipe detail view: image, key facts, favourite toggle, ingredients and instructions.

All API text arrives already stripped of HTML (see recipe_finder.sanitize) and is
Markdown-escaped here before rendering. Nothing from the API is rendered with
unsafe_allow_html.
"""

from typing import Callable, List

import streamlit as st

from recipe_finder.models import RecipeDetail
from recipe_finder.sanitize import escape_markdown

from .layout import pill_tags

NO_INSTRUCTIONS = "No instructions available. Please check the original recipe link."


def detail_facts(recipe: RecipeDetail) -> List[str]:
    facts = []
    if recipe.ready_in_minutes:
        facts.append(f"⏱️ Ready in {recipe.ready_in_minutes} min")
    if recipe.servings:
        facts.append(f"🍽️ {recipe.servings} servings")
    if recipe.health_score is not None:
        facts.append(f"💚 Health score {recipe.health_score:.0f}")
    if recipe.source_name:
        facts.append(f"📖 {escape_markdown(recipe.source_name)}")
    return facts


def render_recipe_detail(
    recipe: RecipeDetail,
    is_favorite: bool,
    on_toggle_favorite: Callable[[RecipeDetail], None],
    key: str = "detail",
) -> None:
    """
    Render the full recipe.

    Args:
        recipe: Detail record (instructions already sanitised)
        is_favorite: Current favourite status, read from the favourites store
        on_toggle_favorite: Save/Saved handler
        key: Unique widget key prefix
    """
    if recipe.image:
        st.image(recipe.image, use_container_width=True)

    facts = detail_facts(recipe)
    if facts:
        st.markdown(" · ".join(facts))
    pill_tags(recipe.diet_badges())

    col_fav, col_source = st.columns(2)
    with col_fav:
        st.button(
            "❤️ Saved" if is_favorite else "🤍 Save to favorites",
            key=f"{key}_fav_{recipe.id}",
            on_click=on_toggle_favorite,
            args=(recipe,),
            use_container_width=True,
        )
    with col_source:
        if recipe.source_url:
            st.link_button("View Original ↗", recipe.source_url, use_container_width=True)

    if recipe.summary:
        with st.expander("About this recipe"):
            st.markdown(escape_markdown(recipe.summary))

    tab_ingredients, tab_instructions = st.tabs(["Ingredients", "Instructions"])
    with tab_ingredients:
        lines = [ingredient.display_line() for ingredient in recipe.extended_ingredients]
        lines = [line for line in lines if line]
        if lines:
            st.markdown("\n".join(f"- {line}" for line in lines))
        else:
            st.caption("No ingredient list available.")

    with tab_instructions:
        if recipe.instruction_steps:
            st.markdown(
                "\n".join(f"{number}. {escape_markdown(step)}" for number, step in enumerate(recipe.instruction_steps, 1))
            )
        elif recipe.instructions:
            st.markdown(escape_markdown(recipe.instructions))
        else:
            st.info(NO_INSTRUCTIONS)
