"""
Layout primitives for consistent page structure.

Provides reusable components for the page header, sections, cards, diet pills
and the footer. Every string that reaches raw HTML is escaped first.
"""

import html
from contextlib import contextmanager
from typing import Callable, Iterable, Optional

import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None, right: Optional[Callable[[], None]] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
        right: Optional callable that renders right-side content (e.g., buttons, badges)
    """
    if right is not None:
        col_title, col_right = st.columns([3, 1])
        with col_title:
            _header_text(title, subtitle)
        with col_right:
            right()
    else:
        _header_text(title, subtitle)


def _header_text(title: str, subtitle: Optional[str]) -> None:
    st.markdown(f"# {title}")
    if subtitle:
        st.markdown(
            f'<div class="ff-page-header"><div class="subtitle">{html.escape(subtitle)}</div></div>',
            unsafe_allow_html=True,
        )


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title (rendered as markdown; escape user text before passing it)
        caption: Optional caption/help text below title
    """
    st.markdown(f"### {title}")
    if caption:
        st.markdown(f'<div class="ff-section-caption">{html.escape(caption)}</div>', unsafe_allow_html=True)


@contextmanager
def card(title: Optional[str] = None):
    """
    Context manager for a bordered card container.

    Usage:
        with card("Card Title"):
            st.write("Card content")

    Args:
        title: Optional card title
    """
    with st.container(border=True):
        if title:
            st.markdown(f"**{title}**")
        yield


def pill_tags(labels: Iterable[str]) -> None:
    """Render a row of small pill tags (e.g. diet badges). Renders nothing for no labels."""
    pills = "".join(f'<span class="ff-pill">{html.escape(label)}</span>' for label in labels)
    if pills:
        st.markdown(pills, unsafe_allow_html=True)


def render_footer() -> None:
    """Render the attribution footer."""
    st.markdown(
        '<div class="ff-footer">Recipe data powered by Spoonacular API</div>',
        unsafe_allow_html=True,
    )
