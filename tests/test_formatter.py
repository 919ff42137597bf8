"""
Tests for business display formatting helpers.
"""

from __future__ import annotations

import pytest

from bizdir.domains.business.formatter import (
    PLACEHOLDER_IMAGE_URL,
    SocialPlatformLink,
    convert_to_display_format,
    format_location,
    format_social_url,
    get_available_social_platforms,
    get_business_image_url,
    get_company_size_label,
    get_full_address,
)
from bizdir.domains.business.models import (
    BusinessData,
    BusinessLocation,
    Identifier,
    SocialMedia,
)


def _business(**overrides) -> BusinessData:
    fields = dict(
        id=Identifier(1717171717, "2024-05-31T16:08:37Z"),
        user_id=Identifier(1700000000, "2023-11-14T22:13:20Z"),
        business_name="Acme Coffee",
        category="Cafe",
        description="Small-batch roasters.",
        company_size=12,
        founded_year=2015,
        business_image_urls=["https://img.example/a.jpg", "https://img.example/b.jpg"],
        location=BusinessLocation(
            display_name="Acme HQ", street="1 Main St", city="Austin",
            state="TX", postcode="73301", country="USA",
        ),
        social_media=SocialMedia(instagram="acme", website="acme.com"),
    )
    fields.update(overrides)
    return BusinessData(**fields)


def test_format_location_joins_city_state_country() -> None:
    loc = BusinessLocation(city="Austin", state="TX", country="USA", display_name="x")
    assert format_location(loc) == "Austin, TX, USA"


def test_format_location_skips_sentinel_and_empty() -> None:
    loc = BusinessLocation(city="Austin", state="-", country="")
    assert format_location(loc) == "Austin"


def test_format_location_falls_back_to_display_name() -> None:
    loc = BusinessLocation(city="", state="", country="", display_name="Acme HQ")
    assert format_location(loc) == "Acme HQ"


def test_format_location_final_fallback() -> None:
    loc = BusinessLocation(city="-", state="-", country="-")
    assert format_location(loc) == "Location not specified"


def test_full_address_order() -> None:
    loc = BusinessLocation(
        street="1 Main St", city="Austin", state="TX", postcode="73301", country="USA",
    )
    assert get_full_address(loc) == "1 Main St, Austin, TX, 73301, USA"


def test_full_address_fallbacks() -> None:
    assert get_full_address(BusinessLocation(street="-", display_name="Acme HQ")) == "Acme HQ"
    assert get_full_address(BusinessLocation()) == "Address not available"


@pytest.mark.parametrize(
    "size,label",
    [
        (0, "1-10 employees"),
        (10, "1-10 employees"),
        (11, "11-50 employees"),
        (50, "11-50 employees"),
        (51, "51-200 employees"),
        (200, "51-200 employees"),
        (201, "201-500 employees"),
        (500, "201-500 employees"),
        (501, "500+ employees"),
        (10000, "500+ employees"),
    ],
)
def test_company_size_bands(size: int, label: str) -> None:
    assert get_company_size_label(size) == label


def test_business_image_url() -> None:
    b = _business()
    assert get_business_image_url(b) == "https://img.example/a.jpg"
    assert get_business_image_url(b, 1) == "https://img.example/b.jpg"
    assert get_business_image_url(b, 2) == PLACEHOLDER_IMAGE_URL
    assert get_business_image_url(b, -1) == PLACEHOLDER_IMAGE_URL
    assert get_business_image_url(_business(business_image_urls=[])) == PLACEHOLDER_IMAGE_URL
    assert get_business_image_url(_business(business_image_urls=[""])) == PLACEHOLDER_IMAGE_URL


def test_available_platforms_from_mapping() -> None:
    out = get_available_social_platforms({"instagram": "", "website": "acme.com"})
    assert out == [SocialPlatformLink("website", "acme.com")]


def test_available_platforms_follow_declaration_order() -> None:
    out = get_available_social_platforms(
        {"website": "acme.com", "linkedIn": "in/acme", "youTube": "  ", "instagram": "acme"}
    )
    assert [p.platform for p in out] == ["instagram", "linkedIn", "website"]


def test_available_platforms_from_social_media() -> None:
    out = get_available_social_platforms(SocialMedia(youtube="yt/acme"))
    assert out == [SocialPlatformLink("youTube", "yt/acme")]


def test_format_social_url() -> None:
    assert format_social_url("acme.com") == "https://acme.com"
    assert format_social_url("https://acme.com") == "https://acme.com"
    assert format_social_url("http://acme.com") == "http://acme.com"
    assert format_social_url("") == ""
    assert format_social_url(None) == ""


def test_convert_to_display_format() -> None:
    display = convert_to_display_format(_business())

    assert display.id == "1717171717"
    assert display.name == "Acme Coffee"
    assert display.category == "Cafe"
    assert display.location == "Austin, TX, USA"
    assert display.full_address == "1 Main St, Austin, TX, 73301, USA"
    assert display.company_size == "11-50 employees"
    assert display.founded_year == 2015
    assert display.images == ["https://img.example/a.jpg", "https://img.example/b.jpg"]
    assert [p.platform for p in display.available_platforms] == ["instagram", "website"]


def test_display_id_drops_creation_time() -> None:
    a = convert_to_display_format(_business(id=Identifier(5, "2024-01-01T00:00:00Z")))
    b = convert_to_display_format(_business(id=Identifier(5, "2025-01-01T00:00:00Z")))
    assert a.id == b.id == "5"
