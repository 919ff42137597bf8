"""Streamlit rendering of a business profile and of API errors."""

from __future__ import annotations

import streamlit as st

from bizdir.domains.business.formatter import (
    PLACEHOLDER_IMAGE_URL,
    PLATFORM_LABELS,
    BusinessDisplay,
    format_social_url,
)
from bizdir.domains.business.models import ApiError, ErrorKind
from bizdir.utils.logger import get_logger

logger = get_logger()


def error_notice(error: ApiError) -> tuple[str, str]:
    """Return (title, detail) shown to the user for a failed business fetch."""
    if error.kind is ErrorKind.NOT_FOUND:
        return "Business not found", "The business you are looking for does not exist or was removed."
    if error.kind is ErrorKind.NETWORK:
        return "Connection problem", "Could not reach the server. Check your connection and try again."
    if error.kind is ErrorKind.SERVER:
        return f"Server error ({error.status})", error.message
    return "Something went wrong", error.message


def render_api_error(error: ApiError) -> None:
    title, detail = error_notice(error)
    if error.is_not_found:
        st.warning(f"**{title}**: {detail}")
    else:
        st.error(f"**{title}**: {detail}")


def _render_images(images: list[str]) -> None:
    primary = images[0] if images else PLACEHOLDER_IMAGE_URL
    if primary.startswith("http"):
        st.image(primary, width="stretch")
    extra = [u for u in images[1:] if u.startswith("http")]
    if extra:
        st.image(extra, width=160)


def render_business_profile(display: BusinessDisplay) -> None:
    st.header(display.name or "Unnamed business")
    if display.category:
        st.caption(display.category)

    _render_images(display.images)

    left, right = st.columns([2, 1])
    with left:
        st.subheader("About")
        st.markdown(display.description or "_No description provided._")
    with right:
        st.markdown(f"**Location:** {display.location}")
        st.markdown(f"**Address:** {display.full_address}")
        st.markdown(f"**Company size:** {display.company_size}")
        if display.founded_year:
            st.markdown(f"**Founded:** {display.founded_year}")
        if display.available_platforms:
            st.markdown("**Find us online**")
            for link in display.available_platforms:
                label = PLATFORM_LABELS.get(link.platform, link.platform)
                st.markdown(f"- [{label}]({format_social_url(link.url)})")
    logger.debug("Rendered business profile %s", display.id)
