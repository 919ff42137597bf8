"""Router backed by Streamlit session state, mirrored to the `path` query param."""

from __future__ import annotations

import streamlit as st

_STATE_KEY = "route_path"


class StreamlitRouter:
    def __init__(self, default_path: str = "/") -> None:
        if _STATE_KEY not in st.session_state:
            st.session_state[_STATE_KEY] = st.query_params.get("path") or default_path

    @property
    def current_path(self) -> str:
        return st.session_state[_STATE_KEY]

    def navigate(self, path: str) -> None:
        st.session_state[_STATE_KEY] = path
        st.query_params["path"] = path
