"""
Session capability consumed by the layout: read-only auth state plus logout and
user updates. The in-memory provider backs the Streamlit app and tests; it
does not implement any authentication protocol.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from bizdir.utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class UserProfile:
    name: str
    email: str = ""
    avatar_url: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def initials(self) -> str:
        parts = [p for p in self.name.split() if p]
        return "".join(p[0].upper() for p in parts[:2]) or "?"


class SessionContext(Protocol):
    @property
    def is_logged_in(self) -> bool: ...

    @property
    def user(self) -> UserProfile | None: ...

    def logout(self) -> None: ...

    def update_user(self, patch: Mapping[str, Any]) -> None: ...


_PROFILE_FIELDS = {f.name for f in dataclasses.fields(UserProfile)} - {"extra"}


class InMemorySession:
    """Session held in process memory. user is set iff logged in."""

    def __init__(self, user: UserProfile | None = None) -> None:
        self._user = user

    @property
    def is_logged_in(self) -> bool:
        return self._user is not None

    @property
    def user(self) -> UserProfile | None:
        return self._user

    def login(self, user: UserProfile) -> None:
        self._user = user
        logger.info("Session started for %s", user.email or user.name)

    def logout(self) -> None:
        if self._user is not None:
            logger.info("Session ended for %s", self._user.email or self._user.name)
        self._user = None

    def update_user(self, patch: Mapping[str, Any]) -> None:
        """
        Merge `patch` into the current user. Unknown keys go to `extra`.

        Raises:
            ValueError: If nobody is logged in.
        """
        if self._user is None:
            raise ValueError("Cannot update user: no active session")
        known = {k: v for k, v in patch.items() if k in _PROFILE_FIELDS}
        extra = {k: v for k, v in patch.items() if k not in _PROFILE_FIELDS and k != "extra"}
        extra = {**self._user.extra, **dict(patch.get("extra") or {}), **extra}
        self._user = dataclasses.replace(self._user, extra=extra, **known)
