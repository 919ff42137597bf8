"""
Tests for the in-memory session provider.
"""

from __future__ import annotations

import pytest

from bizdir.services.session import InMemorySession, UserProfile


def test_logged_out_by_default() -> None:
    s = InMemorySession()
    assert s.is_logged_in is False
    assert s.user is None


def test_login_logout() -> None:
    s = InMemorySession()
    s.login(UserProfile(name="Ada Lovelace", email="ada@example.com"))
    assert s.is_logged_in is True
    assert s.user is not None and s.user.name == "Ada Lovelace"

    s.logout()
    assert s.is_logged_in is False
    assert s.user is None
    s.logout()
    assert s.user is None


def test_update_user_merges_fields_and_extra() -> None:
    s = InMemorySession(UserProfile(name="Ada", email="ada@example.com"))
    s.update_user({"name": "Ada Lovelace", "company": "Analytical Engines"})
    s.update_user({"avatar_url": "https://img.example/ada.png"})

    assert s.user is not None
    assert s.user.name == "Ada Lovelace"
    assert s.user.email == "ada@example.com"
    assert s.user.avatar_url == "https://img.example/ada.png"
    assert s.user.extra == {"company": "Analytical Engines"}


def test_update_user_requires_session() -> None:
    with pytest.raises(ValueError, match="no active session"):
        InMemorySession().update_user({"name": "x"})


def test_initials() -> None:
    assert UserProfile(name="Ada Lovelace").initials == "AL"
    assert UserProfile(name="cher").initials == "C"
    assert UserProfile(name="").initials == "?"
