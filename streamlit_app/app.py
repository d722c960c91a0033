"""
Foodie Find - Streamlit Frontend Main Entry Point.

Single-page recipe discovery app on top of the Spoonacular API:
- search recipes by name (with diet / intolerance / time filters) or by ingredients
- open a recipe for its ingredients and step-by-step instructions
- save favourites, which persist on this machine together with the API key

Run with:
    streamlit run streamlit_app/app.py

All state lives in the session's AppCoordinator (see utils.state). This script only
renders that state and forwards user intent to coordinator operations.
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import recipe_finder
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
from recipe_finder.config import configure_logging

import streamlit as st

from recipe_finder.coordinator import ActiveView, SearchMode
from recipe_finder.models import RecipeSummary
from recipe_finder.sanitize import escape_markdown
from utils.state import (
    COMPACT_LAYOUT_KEY,
    api_key_panel_open,
    close_api_key_panel,
    close_favorites_panel,
    favorites_panel_open,
    get_coordinator,
    init_layout_setting,
    layout_width,
    open_api_key_panel,
    open_favorites_panel,
)
from ui.styles import load_global_styles
from ui.layout import card, page_header, render_footer, section
from ui.feedback import show_empty_state, show_error, working_spinner
from ui.modal import select_presenter
from ui.search_bar import pop_pending_search, render_search_bar
from ui.filter_bar import render_filter_bar
from ui.recipe_list import COMPACT_COLUMNS, DEFAULT_COLUMNS, render_recipe_list
from ui.recipe_detail import render_recipe_detail
from ui.favorites_list import EMPTY_SUBTITLE, EMPTY_TITLE, render_favorites_list
from ui.api_key_input import render_api_key_input

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Foodie Find",
    page_icon="🍳",
    layout="wide",
    initial_sidebar_state="expanded",
)

load_global_styles()
init_layout_setting()

coordinator = get_coordinator()
presenter = select_presenter(layout_width())
grid_columns = COMPACT_COLUMNS if presenter.compact else DEFAULT_COLUMNS


def _open_recipe(recipe: RecipeSummary) -> None:
    coordinator.select_recipe(recipe)


def _open_from_panel(recipe: RecipeSummary) -> None:
    close_favorites_panel()
    with working_spinner("Loading recipe…"):
        coordinator.select_recipe(recipe)
    st.rerun()


def _render_detail() -> None:
    # Read on every (fragment) rerun so the Save/Saved state stays current
    if coordinator.selected is None:
        return
    render_recipe_detail(
        coordinator.selected,
        coordinator.selected_is_favorite,
        coordinator.toggle_favorite,
    )


def _render_favorites_panel() -> None:
    render_favorites_list(
        coordinator.favorites,
        on_select=_open_from_panel,
        on_remove=coordinator.remove_favorite,
        key="favorites_panel",
    )


def _header_actions() -> None:
    count = len(coordinator.favorites)
    st.button(
        f"❤️ Favorites ({count})" if count else "❤️ Favorites",
        key="header_favorites_btn",
        on_click=open_favorites_panel,
        use_container_width=True,
    )
    st.button(
        "🔑 API Key",
        key="header_api_key_btn",
        on_click=open_api_key_panel,
        use_container_width=True,
    )


# ---------------------------------------------------------------------------
# Sidebar: layout
# ---------------------------------------------------------------------------
with st.sidebar:
    st.markdown("### 🍳 Foodie Find")
    st.caption("Find something good to cook tonight.")

    st.toggle(
        "📱 Compact layout",
        key=COMPACT_LAYOUT_KEY,
        help="Single-column results, with recipes and favourites shown inline instead of in a dialog.",
    )

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
page_header(
    "🍳 Foodie Find",
    "Discover recipes by name, or by what's already in your fridge.",
    right=_header_actions,
)

# ---------------------------------------------------------------------------
# Overlays: one per run, the recipe detail takes precedence
# ---------------------------------------------------------------------------
if coordinator.detail_open and coordinator.selected is not None:
    presenter.present(
        coordinator.selected.title or "Recipe",
        render_body=_render_detail,
        on_dismiss=coordinator.close_detail,
        key="detail",
    )
elif favorites_panel_open():
    presenter.present(
        "❤️ My Favorites",
        render_body=_render_favorites_panel,
        on_dismiss=close_favorites_panel,
        key="favorites_panel",
    )

# ---------------------------------------------------------------------------
# API key panel: always shown while no key is set, otherwise opened from the header
# ---------------------------------------------------------------------------
if coordinator.credential_required:
    open_api_key_panel()

if api_key_panel_open():
    with card("🔑 Spoonacular API Key"):
        render_api_key_input(coordinator.credentials)
        if not coordinator.credential_required:
            st.button("Done", key="api_key_panel_done", on_click=close_api_key_panel)

# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
if "search_mode" not in st.session_state:
    st.session_state["search_mode"] = coordinator.search_mode

mode = st.radio(
    "Search by",
    options=list(SearchMode),
    format_func=lambda m: f"{m.label} search",
    horizontal=True,
    key="search_mode",
    label_visibility="collapsed",
)
coordinator.set_search_mode(mode)

render_search_bar(coordinator, mode)
if mode is SearchMode.BY_TEXT:
    render_filter_bar(coordinator.filters)

if coordinator.credential_required:
    st.warning("🔑 An API key is required to search. Add your Spoonacular key above.")

pending = pop_pending_search()
if pending is not None and not coordinator.credential_required:
    query, pending_mode = pending
    placeholder = st.empty()
    with placeholder.container():
        section(escape_markdown(f'{pending_mode.label} Results: "{query.strip()}"'))
        render_recipe_list(
            [], coordinator.is_favorite, _open_recipe, coordinator.toggle_favorite,
            key="loading", is_loading=True, columns=grid_columns,
        )
    with working_spinner("Searching recipes…"):
        coordinator.submit_search(query, pending_mode)
    placeholder.empty()

st.markdown("---")

# ---------------------------------------------------------------------------
# Results: search results or favourites
# ---------------------------------------------------------------------------
col_results, col_favorites, _ = st.columns([1, 1, 3])
with col_results:
    st.button(
        "🔍 Search Results",
        key="view_search_btn",
        type="primary" if coordinator.active_view is ActiveView.SEARCH else "secondary",
        disabled=not coordinator.can_view_search,
        on_click=coordinator.set_active_view,
        args=(ActiveView.SEARCH,),
        use_container_width=True,
    )
with col_favorites:
    st.button(
        "❤️ Favorites",
        key="view_favorites_btn",
        type="primary" if coordinator.active_view is ActiveView.FAVORITES else "secondary",
        disabled=not coordinator.can_view_favorites,
        on_click=coordinator.set_active_view,
        args=(ActiveView.FAVORITES,),
        use_container_width=True,
    )

if coordinator.active_view is ActiveView.SEARCH:
    if not coordinator.search.query:
        show_empty_state(
            "Search for recipes to get started",
            "Type a dish name, or switch to ingredient search and list what you have.",
        )
    else:
        section(escape_markdown(coordinator.heading()))
        search = coordinator.search
        if search.results and not coordinator.is_loading and not coordinator.error:
            st.caption(f"Showing {len(search.results)} of {search.total_results} recipes")
        render_recipe_list(
            search.results,
            coordinator.is_favorite,
            _open_recipe,
            coordinator.toggle_favorite,
            key="results",
            is_loading=coordinator.is_loading,
            error=coordinator.error,
            columns=grid_columns,
        )
else:
    section(escape_markdown(coordinator.heading()))
    if coordinator.error:
        show_error("Something went wrong", hint=coordinator.error)
    render_recipe_list(
        coordinator.favorites.recipes(),
        coordinator.is_favorite,
        _open_recipe,
        coordinator.toggle_favorite,
        key="favorites",
        empty_title=EMPTY_TITLE,
        empty_subtitle=EMPTY_SUBTITLE,
        columns=grid_columns,
    )

render_footer()
