"""
Overlay presentation: centred dialog on wide layouts, inline panel on compact ones.

Both the recipe detail and the favourites panel are shown through a ModalPresenter,
so the components never care which container they end up in.

- DialogPresenter: Streamlit's st.dialog. The dialog is dismissed client-side (X button,
  Escape, outside click) with no callback, so it is one-shot: on_dismiss runs right after
  it is opened, and the next full rerun will not reopen it. Widgets inside the dialog
  rerun only the dialog body.
- InlinePresenter: a bordered panel at the top of the page that stays until its Close
  button is pressed.

# NOTE: Streamlit cannot report the viewport width, so the width passed to
    select_presenter() comes from the layout setting in utils.state.
"""

from typing import Callable, Optional, Protocol

import streamlit as st

from recipe_finder.config import LayoutConfig
from recipe_finder.sanitize import escape_markdown

RenderBody = Callable[[], None]
Dismiss = Callable[[], None]


class ModalPresenter(Protocol):
    """Shows one overlay per script run."""

    compact: bool

    def present(self, title: str, render_body: RenderBody, on_dismiss: Dismiss, key: str) -> None:
        ...


class DialogPresenter:
    compact = False

    def present(self, title: str, render_body: RenderBody, on_dismiss: Dismiss, key: str) -> None:
        @st.dialog(title, width="large")
        def _dialog():
            render_body()
            if st.button("Close", key=f"{key}_dialog_close"):
                st.rerun()

        _dialog()
        on_dismiss()


class InlinePresenter:
    compact = True

    def present(self, title: str, render_body: RenderBody, on_dismiss: Dismiss, key: str) -> None:
        with st.container(border=True):
            col_title, col_close = st.columns([4, 1])
            with col_title:
                st.markdown(f"### {escape_markdown(title)}")
            with col_close:
                st.button("✕ Close", key=f"{key}_inline_close", on_click=on_dismiss, use_container_width=True)
            render_body()


def is_compact(width: int, breakpoint: Optional[int] = None) -> bool:
    """True when a layout `width` pixels wide should use compact presentation."""
    if breakpoint is None:
        breakpoint = LayoutConfig.get_compact_breakpoint()
    return width < breakpoint


def select_presenter(width: int, breakpoint: Optional[int] = None) -> ModalPresenter:
    """
    Pick the overlay container for a layout width.

    Args:
        width: Layout width in pixels
        breakpoint: Widths below this are compact (defaults to LayoutConfig)

    Returns:
        InlinePresenter for compact layouts, DialogPresenter otherwise
    """
    if is_compact(width, breakpoint):
        return InlinePresenter()
    return DialogPresenter()
