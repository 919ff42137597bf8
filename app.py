"""
Business Directory: Streamlit UI entry point.
"""

import streamlit as st

# Load .env first so the configured API base URL is used
from bizdir.utils.config import load_config, log_level
load_config()

from bizdir.domains.business.formatter import convert_to_display_format
from bizdir.domains.business.models import Err
from bizdir.infrastructure.api.business_client import BusinessClient
from bizdir.orchestration.layout_orchestrator import BROWSE_PATH, LayoutOrchestrator
from bizdir.services.session import InMemorySession, UserProfile
from bizdir.ui.animation import AosRefresher
from bizdir.ui.business_display import render_api_error, render_business_profile
from bizdir.ui.layout import APP_TITLE, HOME_PATH, render_shell
from bizdir.ui.routing import StreamlitRouter
from bizdir.utils.logger import setup_logger, get_logger

setup_logger("business_directory", level=log_level())
log = get_logger()

BUSINESS_PATH_PREFIX = "/business/"

st.set_page_config(page_title=APP_TITLE, layout="wide")


# Stateless after construction, so one client serves every session
@st.cache_resource
def get_business_client():
    return BusinessClient()


business_client = get_business_client()
router = StreamlitRouter(default_path=HOME_PATH)

if "session" not in st.session_state:
    st.session_state.session = InMemorySession()
session = st.session_state.session

if "layout" not in st.session_state:
    st.session_state.layout = LayoutOrchestrator(session, router, animation=AosRefresher())
layout = st.session_state.layout


def render_home() -> None:
    st.title(APP_TITLE)
    st.write("Discover local businesses and the people behind them.")
    if st.button("Browse businesses", type="primary"):
        layout.browse_click()
        st.rerun()


def render_browse() -> None:
    st.title("Browse")
    business_id = st.text_input("Business ID", placeholder="e.g. 1717171717")
    if st.button("Open profile", disabled=not business_id.strip()):
        layout.navigate(BUSINESS_PATH_PREFIX + business_id.strip())
        st.rerun()


def render_business(business_id: str) -> None:
    with st.spinner("Loading business…"):
        result = business_client.get_business_by_id(business_id)
    if isinstance(result, Err):
        render_api_error(result.error)
        if st.button("Back to browse"):
            layout.browse_click()
            st.rerun()
        return
    render_business_profile(convert_to_display_format(result.value))


def render_login() -> None:
    # Development sign-in; identity is provided by an external service in production.
    st.title("Sign in")
    with st.form("login"):
        name = st.text_input("Name")
        email = st.text_input("Email")
        submitted = st.form_submit_button("Sign in", type="primary")
    if submitted and name.strip():
        session.login(UserProfile(name=name.strip(), email=email.strip()))
        layout.navigate(HOME_PATH)
        st.rerun()
    if st.button("Back"):
        layout.navigate(HOME_PATH)
        st.rerun()


def render_content() -> None:
    path = router.current_path
    if path == BROWSE_PATH:
        render_browse()
    elif path.startswith(BUSINESS_PATH_PREFIX):
        render_business(path[len(BUSINESS_PATH_PREFIX):])
    elif path.startswith("/auth/"):
        render_login()
    else:
        render_home()


render_shell(layout, session, render_content)
