"""
Business profile types as returned by the directory API, plus the typed
result and error values produced by the API client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Iterator, Mapping, TypeVar, Union

T = TypeVar("T")

SENTINEL = "-"


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ("" if value is None else str(value))


def _int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class Identifier:
    """Creation-ordered id: numeric timestamp plus its ISO creation time."""

    timestamp: int
    creation_time: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Identifier":
        data = data or {}
        return cls(
            timestamp=_int(data.get("timestamp")),
            creation_time=_str(data.get("creationTime")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"timestamp": self.timestamp, "creationTime": self.creation_time}


@dataclass(frozen=True)
class BusinessLocation:
    display_name: str = ""
    street: str = ""
    city: str = ""
    state: str = ""
    postcode: str = ""
    country: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "BusinessLocation":
        data = data or {}
        return cls(
            display_name=_str(data.get("displayName")),
            street=_str(data.get("street")),
            city=_str(data.get("city")),
            state=_str(data.get("state")),
            postcode=_str(data.get("postcode")),
            country=_str(data.get("country")),
            latitude=_float(data.get("latitude")),
            longitude=_float(data.get("longitude")),
        )


# Wire name -> attribute name, in declaration order.
SOCIAL_PLATFORMS: tuple[tuple[str, str], ...] = (
    ("instagram", "instagram"),
    ("youTube", "youtube"),
    ("linkedIn", "linkedin"),
    ("website", "website"),
)


@dataclass(frozen=True)
class SocialMedia:
    instagram: str | None = None
    youtube: str | None = None
    linkedin: str | None = None
    website: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SocialMedia":
        data = data or {}
        kwargs = {}
        for wire, attr in SOCIAL_PLATFORMS:
            value = data.get(wire, data.get(attr))
            kwargs[attr] = None if value is None else _str(value)
        return cls(**kwargs)

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Yield (platform, value) pairs using wire names, in declaration order."""
        for wire, attr in SOCIAL_PLATFORMS:
            yield wire, getattr(self, attr)

    def to_dict(self) -> dict[str, str | None]:
        return dict(self.items())


@dataclass(frozen=True)
class BusinessData:
    id: Identifier
    user_id: Identifier
    business_name: str = ""
    category: str = ""
    description: str = ""
    company_size: int = 0
    founded_year: int = 0
    business_image_urls: list[str] = field(default_factory=list)
    location: BusinessLocation = field(default_factory=BusinessLocation)
    social_media: SocialMedia = field(default_factory=SocialMedia)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BusinessData":
        """
        Build from the API's JSON document. Structural parsing only: missing
        keys take empty defaults and values are not validated.

        Raises:
            TypeError: If data is not a JSON object.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        urls = data.get("businessImageUrls") or []
        return cls(
            id=Identifier.from_dict(data.get("id")),
            user_id=Identifier.from_dict(data.get("userId")),
            business_name=_str(data.get("businessName")),
            category=_str(data.get("category")),
            description=_str(data.get("description")),
            company_size=_int(data.get("companySize")),
            founded_year=_int(data.get("foundedYear")),
            business_image_urls=[_str(u) for u in urls] if isinstance(urls, list) else [],
            location=BusinessLocation.from_dict(data.get("location")),
            social_media=SocialMedia.from_dict(data.get("socialMedia")),
        )


class ErrorKind(str, Enum):
    NETWORK = "network"
    NOT_FOUND = "not_found"
    SERVER = "server"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ApiError:
    """
    Classified API failure. status 0 means no HTTP response was used
    (network or unexpected failure); otherwise it is the HTTP status code.
    """

    message: str
    status: int
    kind: ErrorKind

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND


class BusinessApiError(RuntimeError):
    """Raised by Err.unwrap() and BusinessClient.fetch_business()."""

    def __init__(self, error: ApiError) -> None:
        super().__init__(error.message)
        self.error = error
        self.status = error.status


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ApiError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise BusinessApiError(self.error)


Result = Union[Ok[T], Err]
