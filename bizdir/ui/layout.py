"""Streamlit rendering of the page shell: navbar, footer and profile modal."""

from __future__ import annotations

from datetime import date
from typing import Callable

import streamlit as st

from bizdir.orchestration.layout_orchestrator import LayoutOrchestrator
from bizdir.services.session import SessionContext, UserProfile

APP_TITLE = "Business Directory"
HOME_PATH = "/"
LOGIN_PATH = "/auth/login"


def render_navbar(orchestrator: LayoutOrchestrator, session: SessionContext) -> None:
    brand, browse, account = st.columns([4, 1, 1])
    with brand:
        if st.button(f"🏢 {APP_TITLE}", key="nav_home"):
            orchestrator.navigate(HOME_PATH)
            st.rerun()
    with browse:
        if st.button("Browse", key="nav_browse", width="stretch"):
            orchestrator.browse_click()
            st.rerun()
    with account:
        user = session.user
        if session.is_logged_in and user is not None:
            if st.button(f"👤 {user.name}", key="nav_profile", width="stretch"):
                orchestrator.profile_click()
                st.rerun()
        elif st.button("Sign in", key="nav_login", width="stretch"):
            orchestrator.navigate(LOGIN_PATH)
            st.rerun()
    st.divider()


def render_footer() -> None:
    st.divider()
    st.caption(f"© {date.today().year} {APP_TITLE}")


def render_profile_modal(orchestrator: LayoutOrchestrator, user: UserProfile) -> None:
    with st.container(border=True):
        st.subheader(f"{user.initials} · {user.name}")
        if user.email:
            st.caption(user.email)
        close, logout = st.columns(2)
        with close:
            if st.button("Close", key="profile_close", width="stretch"):
                orchestrator.modal_close()
                st.rerun()
        with logout:
            if st.button("Log out", key="profile_logout", type="primary", width="stretch"):
                orchestrator.logout()
                st.rerun()


def render_shell(
    orchestrator: LayoutOrchestrator,
    session: SessionContext,
    content: Callable[[], None],
) -> None:
    """Render chrome around `content` according to the orchestrator's visibility rules."""
    orchestrator.mount()
    orchestrator.sync_route()
    chrome = orchestrator.chrome()
    user = session.user

    if chrome.show_nav:
        render_navbar(orchestrator, session)
    if chrome.show_profile_modal and user:
        render_profile_modal(orchestrator, user)

    content()

    if chrome.show_footer:
        render_footer()
