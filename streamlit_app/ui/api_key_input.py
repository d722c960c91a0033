"""
API key form: enter, show/hide, save and clear the Spoonacular API key.
"""

import streamlit as st

from recipe_finder.credentials import CredentialStore

SHOW_KEY = "api_key_visible"
INPUT_KEY = "api_key_input"


def _toggle_visibility() -> None:
    st.session_state[SHOW_KEY] = not st.session_state.get(SHOW_KEY, False)


def _save(credentials: CredentialStore) -> None:
    credentials.save(st.session_state.get(INPUT_KEY, ""))
    st.session_state[INPUT_KEY] = credentials.get() or ""


def _clear(credentials: CredentialStore) -> None:
    credentials.clear()
    st.session_state[INPUT_KEY] = ""


def render_api_key_input(credentials: CredentialStore) -> None:
    """
    Render the key form bound to the credential store.

    Save trims the input; saving blank text clears the key.

    Args:
        credentials: The credential store
    """
    if INPUT_KEY not in st.session_state:
        st.session_state[INPUT_KEY] = credentials.get() or ""
    visible = st.session_state.get(SHOW_KEY, False)

    col_input, col_toggle = st.columns([4, 1])
    with col_input:
        st.text_input(
            "Spoonacular API key",
            key=INPUT_KEY,
            type="default" if visible else "password",
            placeholder="Paste your API key",
        )
    with col_toggle:
        st.markdown("&nbsp;", unsafe_allow_html=True)
        st.button("🙈 Hide" if visible else "👁️ Show", key="api_key_toggle", on_click=_toggle_visibility)

    col_save, col_clear, _ = st.columns([1, 1, 2])
    with col_save:
        st.button("Save Key", key="api_key_save", type="primary", on_click=_save, args=(credentials,))
    with col_clear:
        st.button(
            "Clear Key",
            key="api_key_clear",
            on_click=_clear,
            args=(credentials,),
            disabled=not credentials.is_set,
        )

    if credentials.is_set:
        st.success("API key is set and ready to use!")
    else:
        st.caption(
            "Get a free key at [spoonacular.com/food-api](https://spoonacular.com/food-api). "
            "It is stored on this machine only."
        )
