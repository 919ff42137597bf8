"""
Display helpers for business profiles. Pure functions; no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple

from bizdir.domains.business.models import (
    SENTINEL,
    BusinessData,
    BusinessLocation,
    SocialMedia,
)

PLACEHOLDER_IMAGE_URL = "/api/placeholder/800/600"

PLATFORM_LABELS: dict[str, str] = {
    "instagram": "Instagram",
    "youTube": "YouTube",
    "linkedIn": "LinkedIn",
    "website": "Website",
}

# (upper bound inclusive, label)
_SIZE_BANDS: tuple[tuple[int, str], ...] = (
    (10, "1-10 employees"),
    (50, "11-50 employees"),
    (200, "51-200 employees"),
    (500, "201-500 employees"),
)


class SocialPlatformLink(NamedTuple):
    platform: str
    url: str


@dataclass(frozen=True)
class BusinessDisplay:
    """Display-ready view of a business. `id` is a display key, not a persistent one."""

    id: str
    name: str
    description: str
    category: str
    location: str
    full_address: str
    company_size: str
    founded_year: int
    images: list[str] = field(default_factory=list)
    social_media: SocialMedia = field(default_factory=SocialMedia)
    available_platforms: list[SocialPlatformLink] = field(default_factory=list)


def _present(part: str | None) -> bool:
    return bool(part) and part != SENTINEL


def _join_or_fallback(parts: list[str | None], display_name: str, fallback: str) -> str:
    joined = ", ".join(p for p in parts if _present(p))
    return joined or display_name or fallback


def format_location(location: BusinessLocation) -> str:
    """City, state and country joined by ", "; falls back to the display name."""
    return _join_or_fallback(
        [location.city, location.state, location.country],
        location.display_name,
        "Location not specified",
    )


def get_full_address(location: BusinessLocation) -> str:
    """Street through country joined by ", "; falls back to the display name."""
    return _join_or_fallback(
        [location.street, location.city, location.state, location.postcode, location.country],
        location.display_name,
        "Address not available",
    )


def get_company_size_label(size: int) -> str:
    for upper, label in _SIZE_BANDS:
        if size <= upper:
            return label
    return "500+ employees"


def get_business_image_url(business: BusinessData, index: int = 0) -> str:
    """Image at `index` in display order, or the placeholder when missing."""
    urls = business.business_image_urls or []
    if 0 <= index < len(urls) and urls[index]:
        return urls[index]
    return PLACEHOLDER_IMAGE_URL


def get_available_social_platforms(
    social_media: SocialMedia | Mapping[str, Any],
) -> list[SocialPlatformLink]:
    """
    Platforms with a non-blank value, in declaration order
    (instagram, youTube, linkedIn, website).

    Args:
        social_media: SocialMedia, or a mapping keyed by platform wire names.
    """
    if not isinstance(social_media, SocialMedia):
        social_media = SocialMedia.from_dict(social_media)
    return [
        SocialPlatformLink(platform, url)
        for platform, url in social_media.items()
        if url and url.strip()
    ]


def format_social_url(url: str | None) -> str:
    if not url:
        return ""
    return url if url.startswith("http") else f"https://{url}"


def convert_to_display_format(business: BusinessData) -> BusinessDisplay:
    """
    Assemble the display view. The id becomes the identifier's timestamp as a
    string; creation_time is dropped, so the result must not be used as a key
    outside presentation.
    """
    return BusinessDisplay(
        id=str(business.id.timestamp),
        name=business.business_name,
        description=business.description,
        category=business.category,
        location=format_location(business.location),
        full_address=get_full_address(business.location),
        company_size=get_company_size_label(business.company_size),
        founded_year=business.founded_year,
        images=list(business.business_image_urls or []),
        social_media=business.social_media,
        available_platforms=get_available_social_platforms(business.social_media),
    )
