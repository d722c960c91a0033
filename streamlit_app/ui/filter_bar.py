"""
Filter bar for text search: diet, intolerances and maximum ready time.

Widget changes only edit the FilterEditor's draft. Apply and Clear, and the ✕ on an
active-filter badge, are applying actions: they go through the editor, which calls
back into the coordinator to re-run the current text search.

# NOTE: Widget keys carry a generation number that is bumped after every applying
    action, so the widgets are rebuilt from the editor's draft instead of keeping
    their old values.
"""

import streamlit as st

from recipe_finder.filters import FilterBadge, FilterEditor
from recipe_finder.models import READY_TIME_OPTIONS, Diet, FilterState, Intolerance, ready_time_label

GENERATION_KEY = "filters_generation"
_INTOLERANCE_COLUMNS = 4


def _generation() -> int:
    return st.session_state.get(GENERATION_KEY, 0)


def _bump_generation() -> None:
    st.session_state[GENERATION_KEY] = _generation() + 1


def _apply(editor: FilterEditor) -> None:
    editor.apply()
    _bump_generation()


def _clear(editor: FilterEditor) -> None:
    editor.clear()
    _bump_generation()


def _remove_badge(editor: FilterEditor, badge: FilterBadge) -> None:
    editor.remove_badge(badge)
    _bump_generation()


def render_filter_bar(editor: FilterEditor) -> None:
    """
    Render the filter controls and the active-filter badges.

    Args:
        editor: The coordinator's FilterEditor
    """
    gen = _generation()
    draft = editor.draft
    active = editor.applied.active_count
    label = f"⚙️ Filters ({active} active)" if active else "⚙️ Filters"

    with st.expander(label, expanded=False):
        diets = list(Diet)
        diet = st.radio(
            "Diet",
            options=diets,
            index=diets.index(draft.diet),
            format_func=lambda d: d.label,
            horizontal=True,
            key=f"filter_diet_{gen}",
        )

        st.markdown("**Intolerances**")
        selected = set()
        cols = st.columns(_INTOLERANCE_COLUMNS)
        for index, intolerance in enumerate(Intolerance):
            with cols[index % _INTOLERANCE_COLUMNS]:
                checked = st.checkbox(
                    intolerance.label,
                    value=intolerance in draft.intolerances,
                    key=f"filter_intolerance_{intolerance.value}_{gen}",
                )
            if checked:
                selected.add(intolerance)

        time_options = [None, *READY_TIME_OPTIONS]
        max_ready_time = st.radio(
            "Ready in",
            options=time_options,
            index=time_options.index(draft.max_ready_time),
            format_func=ready_time_label,
            horizontal=True,
            key=f"filter_time_{gen}",
        )

        editor.replace_draft(FilterState(diet=diet, intolerances=frozenset(selected), max_ready_time=max_ready_time))

        col_apply, col_clear, _ = st.columns([1, 1, 3])
        with col_apply:
            st.button(
                "Apply Filters",
                key=f"filter_apply_{gen}",
                type="primary",
                on_click=_apply,
                args=(editor,),
                use_container_width=True,
            )
        with col_clear:
            st.button(
                "Clear",
                key=f"filter_clear_{gen}",
                on_click=_clear,
                args=(editor,),
                use_container_width=True,
            )
        if editor.has_pending_changes:
            st.caption("You have unapplied filter changes.")

    render_filter_badges(editor)


def render_filter_badges(editor: FilterEditor) -> None:
    """Active-filter summary; each badge removes its constraint when clicked."""
    badges = editor.badges()
    if not badges:
        return
    gen = _generation()
    cols = st.columns(min(len(badges), 6))
    for index, badge in enumerate(badges):
        with cols[index % len(cols)]:
            st.button(
                f"{badge.label} ✕",
                key=f"filter_badge_{badge.kind}_{badge.value}_{gen}",
                on_click=_remove_badge,
                args=(editor, badge),
                help="Remove this filter",
            )
