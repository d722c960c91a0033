"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors, empty states, and loading
placeholders across all sections of the app in a consistent manner.
"""

from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: Optional[str] = None,
    on_action: Optional[Callable[[], None]] = None,
    key: Optional[str] = None,
) -> None:
    """
    Display a standardized empty state with optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Label for the action button
        on_action: Click handler for the action button (button shown only when set)
        key: Widget key for the action button
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if on_action is not None and action_label:
        st.button(action_label, on_click=on_action, key=key, type="primary")


def show_loading_skeleton(count: int = 6, columns: int = 3) -> None:
    """
    Render placeholder cards in the results grid while a search is in flight.

    Args:
        count: Number of placeholder cards
        columns: Grid columns
    """
    cols = st.columns(columns)
    for index in range(count):
        with cols[index % columns]:
            st.markdown(
                '<div class="ff-skeleton"></div><div class="ff-skeleton ff-skeleton--line"></div>',
                unsafe_allow_html=True,
            )


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Searching recipes…"):
            # Do work here
            pass

    Args:
        label: Spinner label text (default: "Working…")
    """
    with st.spinner(label):
        yield
