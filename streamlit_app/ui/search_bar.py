"""
Search bar: one query form per search mode.

Submitting does not search right away. The trimmed query is queued in session state
and the results section runs it, so the loading skeleton can show in the results grid
while the request is in flight.
"""

from typing import Optional, Tuple

import streamlit as st

from recipe_finder.coordinator import AppCoordinator, SearchMode

PENDING_SEARCH_KEY = "pending_search"

_PLACEHOLDERS = {
    SearchMode.BY_TEXT: "Search recipes, e.g. pasta, curry, pancakes…",
    SearchMode.BY_INGREDIENT: "Ingredients you have, e.g. chicken, rice, spinach",
}


def _input_key(mode: SearchMode) -> str:
    return f"query_input_{mode.value}"


def _clear_query(coordinator: AppCoordinator, mode: SearchMode) -> None:
    st.session_state[_input_key(mode)] = ""
    coordinator.clear_query_draft(mode)


def render_search_bar(coordinator: AppCoordinator, mode: SearchMode) -> None:
    """
    Render the query form for `mode`.

    The text box keeps its own value per mode, seeded from the coordinator's draft, so
    switching between recipe and ingredient search never loses what was typed.

    Args:
        coordinator: App coordinator
        mode: Search mode this form submits in
    """
    key = _input_key(mode)
    if key not in st.session_state:
        st.session_state[key] = coordinator.query_draft(mode)

    with st.form(key=f"search_form_{mode.value}", border=False):
        col_input, col_clear, col_button = st.columns([10, 1, 2])
        with col_input:
            text = st.text_input(
                "Search",
                key=key,
                placeholder=_PLACEHOLDERS[mode],
                label_visibility="collapsed",
            )
        with col_clear:
            st.form_submit_button(
                "✕",
                help="Clear search",
                on_click=_clear_query,
                args=(coordinator, mode),
                use_container_width=True,
            )
        with col_button:
            submitted = st.form_submit_button("🔍 Search", use_container_width=True, type="primary")

    if mode is SearchMode.BY_INGREDIENT:
        st.caption("Separate ingredients with commas.")

    coordinator.set_query_draft(text, mode)
    if submitted and text.strip():
        st.session_state[PENDING_SEARCH_KEY] = (text, mode)


def pop_pending_search() -> Optional[Tuple[str, SearchMode]]:
    """Take the queued (query, mode) submission, if any."""
    return st.session_state.pop(PENDING_SEARCH_KEY, None)
