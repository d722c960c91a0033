"""
Session State Management Module.

This module wraps Streamlit's session_state to hold the per-browser-session objects
of the app:
- the AppCoordinator (with its credential store, favourites store and API client)
- the layout setting that decides between dialog and inline overlays
- the flags that open the favourites panel and the API key panel

The coordinator is built once per session. Both stores persist through a FileStore
under StorageConfig.get_data_dir(), so the API key and favourites survive a page
refresh and a restart of the app.

# NOTE: Sessions do not see each other's changes to the stores until they are
    rebuilt (page refresh). The app is meant for a single local user.
"""

import logging
from pathlib import Path
from typing import Optional

import requests
import streamlit as st

from recipe_finder.client import SpoonacularClient
from recipe_finder.config import StorageConfig
from recipe_finder.coordinator import AppCoordinator
from recipe_finder.credentials import CredentialStore
from recipe_finder.favorites import FavoritesStore
from recipe_finder.storage import FileStore

logger = logging.getLogger(__name__)

# Session state keys
COORDINATOR_KEY = "coordinator"
COMPACT_LAYOUT_KEY = "compact_layout"
FAVORITES_PANEL_KEY = "favorites_panel_open"
API_KEY_PANEL_KEY = "api_key_panel_open"

# Nominal layout widths for the two layout settings (px)
COMPACT_WIDTH = 480
FULL_WIDTH = 1200

_MOBILE_UA_MARKERS = ("Mobi", "Android", "iPhone", "iPod")


def build_coordinator(
    data_dir: Optional[Path] = None,
    session: Optional[requests.Session] = None,
) -> AppCoordinator:
    """
    Wire the stores and the API client into a coordinator.

    Args:
        data_dir: Directory for persisted state (defaults to StorageConfig.get_data_dir())
        session: Optional requests.Session for the API client

    Returns:
        A ready AppCoordinator
    """
    directory = Path(data_dir) if data_dir is not None else StorageConfig.get_data_dir()
    storage = FileStore(directory)
    logger.info("Using data directory %s", directory)
    return AppCoordinator(
        credentials=CredentialStore(storage),
        favorites=FavoritesStore(storage),
        client=SpoonacularClient(session=session),
    )


def get_coordinator() -> AppCoordinator:
    """Return this session's coordinator, building it on first use."""
    if COORDINATOR_KEY not in st.session_state:
        st.session_state[COORDINATOR_KEY] = build_coordinator()
    return st.session_state[COORDINATOR_KEY]


def looks_like_mobile(user_agent: Optional[str]) -> bool:
    """Best-effort guess from the User-Agent header that the browser is a phone."""
    if not user_agent:
        return False
    return any(marker in user_agent for marker in _MOBILE_UA_MARKERS)


def init_layout_setting() -> None:
    """Seed the compact-layout setting from the request headers, once per session."""
    if COMPACT_LAYOUT_KEY in st.session_state:
        return
    user_agent = st.context.headers.get("User-Agent")
    st.session_state[COMPACT_LAYOUT_KEY] = looks_like_mobile(user_agent)


def layout_width() -> int:
    """Nominal layout width for the current compact-layout setting."""
    return COMPACT_WIDTH if st.session_state.get(COMPACT_LAYOUT_KEY, False) else FULL_WIDTH


def open_favorites_panel() -> None:
    st.session_state[FAVORITES_PANEL_KEY] = True


def close_favorites_panel() -> None:
    st.session_state[FAVORITES_PANEL_KEY] = False


def favorites_panel_open() -> bool:
    return bool(st.session_state.get(FAVORITES_PANEL_KEY, False))


def open_api_key_panel() -> None:
    st.session_state[API_KEY_PANEL_KEY] = True


def close_api_key_panel() -> None:
    st.session_state[API_KEY_PANEL_KEY] = False


def api_key_panel_open() -> bool:
    return bool(st.session_state.get(API_KEY_PANEL_KEY, False))
